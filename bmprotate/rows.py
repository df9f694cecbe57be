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

from .errors import TruncatedInput
from .header import padded_row_size


def read_rows(
  f, data_offset, width, height, bytes_per_pixel, name=None, pixels=None
):
  """Reads the bottom-up padded rows into a top-down unpadded bytearray.
  f      -- seekable binary file object positioned anywhere
  pixels -- optional preallocated destination of the exact size
  Returns the pixel bytearray.
  """
  stride = width * bytes_per_pixel
  disk_stride = padded_row_size(width, bytes_per_pixel)
  if pixels is None:
    pixels = bytearray(stride * height)
  for i in range(height):
    offset = data_offset + i * disk_stride
    f.seek(offset)
    row = f.read(stride)
    if len(row) != stride:
      raise TruncatedInput(
        name,
        "row %d: expected %d pixel bytes, got %d" % (i, stride, len(row)),
        offset,
      )
    start = (height - 1 - i) * stride
    pixels[start : start + stride] = row
  return pixels


def write_rows(f, pixels, width, height, bytes_per_pixel):
  """Writes a top-down unpadded buffer as bottom-up padded rows."""
  stride = width * bytes_per_pixel
  padding = b"\0" * (padded_row_size(width, bytes_per_pixel) - stride)
  for i in range(height):
    start = (height - 1 - i) * stride
    f.write(pixels[start : start + stride])
    f.write(padding)
