import pytest

from bmprotate import bmp
from bmprotate.image import ImageBuffer


def make_image(width, height, bytes_per_pixel, seed=0):
  """Builds an image whose bytes count up from seed, wrapping at 256."""
  size = width * height * bytes_per_pixel
  pixels = bytearray((seed + i) % 256 for i in range(size))
  return ImageBuffer(pixels, width, height, bytes_per_pixel)


@pytest.fixture
def image_factory():
  return make_image


@pytest.fixture
def bmp_file(tmp_path):
  """Writes an image to a temporary BMP file and returns its path."""

  def _write(image, name="img.bmp"):
    path = tmp_path / name
    bmp.write(str(path), image)
    return path

  return _write
