import pytest

from bmprotate import rotate
from bmprotate.image import ImageBuffer

ONCE_4X4 = [12, 13, 1, 0, 8, 9, 5, 4, 7, 6, 10, 11, 3, 2, 14, 15]
TWICE_4X4 = [3, 2, 13, 12, 7, 6, 9, 8, 4, 5, 10, 11, 0, 1, 14, 15]

F = 0xFF
CHECKERBOARD = [0, F, 0, F, F, 0, F, 0, 0, F, 0, F, F, 0, F, 0]
CHECKERBOARD_ONCE = [F, 0, F, 0, 0, F, 0, F, 0, F, 0, F, F, 0, F, 0]
CHECKERBOARD_TWICE = [F, 0, 0, F, 0, F, F, 0, F, 0, 0, F, 0, F, F, 0]


def _image(values, width, height, bpp=1):
  return ImageBuffer(bytearray(values), width, height, bpp)


def test_4x4_regression():
  image = _image(range(16), 4, 4)
  rotate.rotate_right(image)
  assert list(image.pixels) == ONCE_4X4


def test_twice_does_not_restore_4x4():
  image = _image(range(16), 4, 4)
  rotate.rotate_right(rotate.rotate_right(image))
  assert list(image.pixels) == TWICE_4X4
  assert list(image.pixels) != list(range(16))


def test_checkerboard_regression():
  image = _image(CHECKERBOARD, 4, 4)
  rotate.rotate_right(image)
  assert list(image.pixels) == CHECKERBOARD_ONCE
  rotate.rotate_right(image)
  assert list(image.pixels) == CHECKERBOARD_TWICE


def test_multibyte_pixels_and_byte_granular_swap():
  # 3x2, 2 bytes per pixel. The vertical pass swaps 3 bytes, splitting a pixel.
  image = _image(range(12), 3, 2, bpp=2)
  rotate.rotate_right(image)
  assert list(image.pixels) == [6, 7, 8, 3, 0, 1, 4, 5, 2, 9, 10, 11]


def test_final_pass_starts_at_row_50():
  # The final pass ignores the image height; rows 50 and 51 of a 52-row
  # image get mirrored a second time while row 49 does not.
  height = 52
  values = []
  for i in range(height):
    values += [i, 100 + i]
  image = _image(values, 2, height)
  rotate.rotate_right(image)
  assert image.row(0) == bytes([51, 0])
  assert image.row(25) == bytes([26, 25])
  assert image.row(26) == bytes([100 + 25, 100 + 26])
  assert image.row(49) == bytes([100 + 2, 100 + 49])
  assert image.row(50) == bytes([100 + 50, 100 + 1])
  assert image.row(51) == bytes([100 + 51, 100 + 0])


def test_final_pass_start_row_override():
  image = _image(range(16), 4, 4)
  rotate.rotate_right(image, start_row=2)
  # Rows 2 and 3 of the 4x4 result are mirrored once more
  assert list(image.pixels) == ONCE_4X4[:8] + [11, 10, 6, 7, 15, 14, 2, 3]


def test_short_images_skip_final_pass():
  image = _image(range(16), 4, 4)
  rotate.rotate_right(image, start_row=50)
  other = _image(range(16), 4, 4)
  rotate.rotate_right(other, start_row=4)
  assert image == other


@pytest.mark.parametrize(
  "width,height,bpp", [(1, 1, 1), (1, 1, 3), (1, 7, 3), (7, 1, 4), (1, 60, 2)]
)
def test_degenerate_sizes_do_not_crash(width, height, bpp):
  image = ImageBuffer(
    bytearray(i % 256 for i in range(width * height * bpp)), width, height, bpp
  )
  rotate.rotate_right(image)
  assert len(image.pixels) == width * height * bpp


def test_single_row_unchanged():
  image = _image(range(21), 7, 1, bpp=3)
  rotate.rotate_right(image)
  assert list(image.pixels) == list(range(21))


def test_mirror_rows_single_row():
  image = _image(range(9), 3, 1, bpp=3)
  rotate.mirror_rows(image, [0])
  assert list(image.pixels) == [6, 7, 8, 3, 4, 5, 0, 1, 2]


def test_swap_rows_prefix_leaves_middle_row():
  image = _image(range(9), 3, 3)
  rotate.swap_rows_prefix(image, 2)
  assert list(image.pixels) == [6, 7, 2, 3, 4, 5, 0, 1, 8]
