# SPDX-FileCopyrightText: (C) 2025 Rivos Inc.
# SPDX-FileCopyrightText: Copyright 2024 Google LLC
#   Licensed under the Apache License, Version 2.0 (the "License");
#   you may not use this file except in compliance with the License.
#   You may obtain a copy of the License at
#
#       http://www.apache.org/licenses/LICENSE-2.0
#
#   Unless required by applicable law or agreed to in writing, software
#   distributed under the License is distributed on an "AS IS" BASIS,
#   WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#   See the License for the specific language governing permissions and
#   limitations under the License.
# SPDX-License-Identifier: Apache-2.0

# Bitmap file header and BITMAPINFOHEADER codec.

from .errors import AllocationError, TruncatedInput, UnsupportedFormat

SIGNATURE = b"BM"
FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40
DATA_OFFSET = FILE_HEADER_SIZE + INFO_HEADER_SIZE

# Field offsets from the start of the file
DATA_OFFSET_OFFSET = 0x0A
WIDTH_OFFSET = 0x12
HEIGHT_OFFSET = 0x16
BITS_PER_PIXEL_OFFSET = 0x1C
COMPRESSION_OFFSET = 0x1E

NO_COMPRESSION = 0
# 100 dpi * 39.37 inch/meter
PIXELS_PER_METER = 3937
ALL_COLORS = 0
MAX_U32 = 0xFFFFFFFF


def padded_row_size(width, bytes_per_pixel):
  """Bytes per stored row. Pads on the pixel count, not the byte count."""
  return (width + 3) // 4 * 4 * bytes_per_pixel


def u32(d, offset):
  return int.from_bytes(d[offset : offset + 4], byteorder="little")


def i16(d, offset):
  return int.from_bytes(d[offset : offset + 2], byteorder="little", signed=True)


def _read_at(f, offset, size, name):
  f.seek(offset)
  d = f.read(size)
  if len(d) != size:
    raise TruncatedInput(
      name, "expected %d header bytes, got %d" % (size, len(d)), offset
    )
  return d


class BitmapHeader(object):
  """The 14-byte file header."""

  SIZE = FILE_HEADER_SIZE

  def __init__(self, file_size, data_offset, reserved=0, signature=SIGNATURE):
    self.signature = signature
    self.file_size = file_size
    self.reserved = reserved
    self.data_offset = data_offset

  @classmethod
  def from_bytes(cls, d):
    return cls(
      signature=bytes(d[0:2]),
      file_size=u32(d, 2),
      reserved=u32(d, 6),
      data_offset=u32(d, 10),
    )

  def to_bytes(self):
    return b"".join(
      (
        self.signature,
        self.file_size.to_bytes(4, "little"),
        self.reserved.to_bytes(4, "little"),
        self.data_offset.to_bytes(4, "little"),
      )
    )


class BitmapInfoHeader(object):
  """The 40-byte BITMAPINFOHEADER."""

  SIZE = INFO_HEADER_SIZE

  def __init__(
    self,
    width,
    height,
    bits_per_pixel,
    image_size,
    header_size=INFO_HEADER_SIZE,
    planes=1,
    compression=NO_COMPRESSION,
    resolution_x=PIXELS_PER_METER,
    resolution_y=PIXELS_PER_METER,
    colors_used=ALL_COLORS,
    important_colors=ALL_COLORS,
  ):
    self.header_size = header_size
    self.width = width
    self.height = height
    self.planes = planes
    self.bits_per_pixel = bits_per_pixel
    self.compression = compression
    self.image_size = image_size
    self.resolution_x = resolution_x
    self.resolution_y = resolution_y
    self.colors_used = colors_used
    self.important_colors = important_colors

  @classmethod
  def from_bytes(cls, d):
    """Parses the info header; d starts at the header, not the file."""
    return cls(
      header_size=u32(d, 0),
      width=u32(d, 4),
      height=u32(d, 8),
      planes=i16(d, 12),
      bits_per_pixel=i16(d, 14),
      compression=u32(d, 16),
      image_size=u32(d, 20),
      resolution_x=u32(d, 24),
      resolution_y=u32(d, 28),
      colors_used=u32(d, 32),
      important_colors=u32(d, 36),
    )

  def to_bytes(self):
    return b"".join(
      (
        self.header_size.to_bytes(4, "little"),
        self.width.to_bytes(4, "little"),
        self.height.to_bytes(4, "little"),
        self.planes.to_bytes(2, "little", signed=True),
        self.bits_per_pixel.to_bytes(2, "little", signed=True),
        self.compression.to_bytes(4, "little"),
        self.image_size.to_bytes(4, "little"),
        self.resolution_x.to_bytes(4, "little"),
        self.resolution_y.to_bytes(4, "little"),
        self.colors_used.to_bytes(4, "little"),
        self.important_colors.to_bytes(4, "little"),
      )
    )


def check_bits_per_pixel(bits_per_pixel, name=None):
  """Returns the bytes per pixel, rejecting sub-byte and odd depths."""
  if bits_per_pixel <= 0 or bits_per_pixel % 8:
    raise UnsupportedFormat(
      name, "unsupported bit depth (%d)" % bits_per_pixel, BITS_PER_PIXEL_OFFSET
    )
  return bits_per_pixel // 8


def decode_header(f, name=None):
  """Reads the fields needed to locate the pixel data.
  Returns (data_offset, width, height, bits_per_pixel).
  f    -- seekable binary file object
  name -- file name for error messages
  """
  if _read_at(f, 0, 2, name) != SIGNATURE:
    raise UnsupportedFormat(name, "not a BMP file", 0)
  data_offset = u32(_read_at(f, DATA_OFFSET_OFFSET, 4, name), 0)
  width = u32(_read_at(f, WIDTH_OFFSET, 4, name), 0)
  height = u32(_read_at(f, HEIGHT_OFFSET, 4, name), 0)
  bits_per_pixel = i16(_read_at(f, BITS_PER_PIXEL_OFFSET, 2, name), 0)
  check_bits_per_pixel(bits_per_pixel, name)
  compression = u32(_read_at(f, COMPRESSION_OFFSET, 4, name), 0)
  if compression != NO_COMPRESSION:
    raise UnsupportedFormat(
      name, "compression (%d) not supported" % compression, COMPRESSION_OFFSET
    )
  return data_offset, width, height, bits_per_pixel


def read_headers(f, name=None):
  """Parses both headers in full. Returns (BitmapHeader, BitmapInfoHeader)."""
  d = _read_at(f, 0, DATA_OFFSET, name)
  header = BitmapHeader.from_bytes(d)
  if header.signature != SIGNATURE:
    raise UnsupportedFormat(name, "not a BMP file", 0)
  return header, BitmapInfoHeader.from_bytes(d[FILE_HEADER_SIZE:])


def check_geometry(width, height, bytes_per_pixel, name=None):
  """Raises AllocationError unless the geometry fits the u32 header fields.
  Returns the padded image size.
  """
  image_size = padded_row_size(width, bytes_per_pixel) * height
  if (
    width > MAX_U32
    or height > MAX_U32
    or bytes_per_pixel * 8 > 0x7FFF
    or image_size + DATA_OFFSET > MAX_U32
  ):
    raise AllocationError(
      name,
      "%dx%dx%d needs a %d byte file"
      % (width, height, bytes_per_pixel, image_size + DATA_OFFSET),
    )
  return image_size


def make_headers(width, height, bytes_per_pixel, name=None):
  """Builds the headers for a buffer; sizes are derived, never carried over."""
  image_size = check_geometry(width, height, bytes_per_pixel, name)
  header = BitmapHeader(
    file_size=image_size + DATA_OFFSET, data_offset=DATA_OFFSET
  )
  info = BitmapInfoHeader(
    width=width,
    height=height,
    bits_per_pixel=bytes_per_pixel * 8,
    image_size=image_size,
  )
  return header, info


def encode_header(f, width, height, bytes_per_pixel):
  header, info = make_headers(width, height, bytes_per_pixel)
  f.write(header.to_bytes())
  f.write(info.to_bytes())
