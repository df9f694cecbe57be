import io

import pytest

from bmprotate import bmp
from bmprotate.errors import AllocationError, TruncatedInput, UnsupportedFormat
from bmprotate.image import ImageBuffer


@pytest.mark.parametrize(
  "width,height,bpp",
  [(1, 1, 1), (5, 3, 3), (3, 5, 3), (7, 2, 4), (6, 4, 2), (4, 4, 3), (2, 9, 1)],
)
def test_round_trip(image_factory, width, height, bpp):
  image = image_factory(width, height, bpp, seed=width + height)
  assert bmp.load(io.BytesIO(bmp.to_bytes(image))) == image


def test_file_round_trip(image_factory, bmp_file):
  image = image_factory(5, 3, 3)
  path = bmp_file(image)
  assert path.stat().st_size == 54 + 24 * 3
  assert bmp.read(str(path)) == image


def test_encoded_layout(image_factory):
  image = image_factory(4, 4, 3)
  d = bmp.to_bytes(image)
  assert len(d) == 102
  # The bottom in-memory row comes first on disk
  assert d[54 : 54 + 12] == image.row(3)
  assert d[-12:] == image.row(0)


def test_load_ignores_stale_header_sizes(image_factory):
  d = bytearray(bmp.to_bytes(image_factory(2, 2, 3)))
  d[2:6] = (12345).to_bytes(4, "little")
  d[34:38] = (999).to_bytes(4, "little")
  image = bmp.load(io.BytesIO(bytes(d)))
  assert bmp.to_bytes(image)[2:6] == (54 + 12 * 2).to_bytes(4, "little")


def test_load_truncated_pixels(image_factory):
  d = bmp.to_bytes(image_factory(5, 3, 3))
  with pytest.raises(TruncatedInput) as e:
    bmp.load(io.BytesIO(d[:-20]), name="cut.bmp")
  assert "cut.bmp" in str(e.value)


def test_load_truncated_header():
  with pytest.raises(TruncatedInput):
    bmp.load(io.BytesIO(b"BM" + bytes(20)))


def test_huge_claim_is_truncated_not_allocated():
  d = bytearray(bmp.to_bytes(ImageBuffer.allocate(1, 1, 4)))
  d[18:22] = (0xFFFF).to_bytes(4, "little")
  d[22:26] = (0xFFFF).to_bytes(4, "little")
  with pytest.raises(TruncatedInput):
    bmp.load(io.BytesIO(bytes(d)))


def test_read_1bpp_file_unsupported(tmp_path):
  d = bytearray(bmp.to_bytes(ImageBuffer.allocate(8, 1, 1)))
  d[28:30] = (1).to_bytes(2, "little")
  path = tmp_path / "mono.bmp"
  path.write_bytes(bytes(d))
  with pytest.raises(UnsupportedFormat) as e:
    bmp.read(str(path))
  assert str(path) in str(e.value)


def test_read_missing_file(tmp_path):
  with pytest.raises(OSError):
    bmp.read(str(tmp_path / "missing.bmp"))


def test_write_unwritable_target(tmp_path, image_factory):
  with pytest.raises(OSError):
    bmp.write(str(tmp_path / "no" / "such" / "dir.bmp"), image_factory(1, 1, 3))


def test_write_removes_partial_output(tmp_path):
  # A width that does not fit the 32-bit header field fails mid-write
  image = ImageBuffer(bytearray(), 1 << 32, 0, 1)
  path = tmp_path / "partial.bmp"
  with pytest.raises(AllocationError):
    bmp.write(str(path), image)
  assert not path.exists()


def test_degenerate_sizes(image_factory):
  for width, height in ((1, 1), (1, 6), (6, 1)):
    image = image_factory(width, height, 3)
    assert bmp.load(io.BytesIO(bmp.to_bytes(image))) == image

