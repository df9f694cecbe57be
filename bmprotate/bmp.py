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

import io
import os

from . import header, rows
from .errors import TruncatedInput
from .image import ImageBuffer


def load(f, name=None):
  """Decodes a BMP from a seekable binary file object into an ImageBuffer."""
  name = name or getattr(f, "name", None)
  data_offset, width, height, bits_per_pixel = header.decode_header(f, name)
  bytes_per_pixel = bits_per_pixel // 8

  # Reject short files before allocating for whatever size the header claims
  if height and width:
    disk_stride = header.padded_row_size(width, bytes_per_pixel)
    end = data_offset + (height - 1) * disk_stride + width * bytes_per_pixel
    size = f.seek(0, os.SEEK_END)
    if size < end:
      raise TruncatedInput(
        name, "pixel data needs %d bytes, file has %d" % (end, size), size
      )

  image = ImageBuffer.allocate(width, height, bytes_per_pixel, name)
  rows.read_rows(
    f, data_offset, width, height, bytes_per_pixel, name, image.pixels
  )
  return image


def dump(image, f):
  """Encodes an ImageBuffer as a BMP into a binary file object."""
  header.encode_header(f, image.width, image.height, image.bytes_per_pixel)
  rows.write_rows(
    f, image.pixels, image.width, image.height, image.bytes_per_pixel
  )


def read(path):
  with open(path, "rb") as f:
    return load(f, path)


def write(path, image):
  """Writes a BMP file; a partially written file is removed on failure."""
  with open(path, "wb") as f:
    try:
      dump(image, f)
    except BaseException:
      f.close()
      os.remove(path)
      raise


def to_bytes(image):
  with io.BytesIO() as f:
    dump(image, f)
    return f.getvalue()
