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

from .errors import AllocationError
from .header import check_geometry


class ImageBuffer(object):
  """Decoded pixel data, top row first, with no row padding.
  Row i occupies pixels[i*stride:(i+1)*stride], stride = width*bytes_per_pixel.
  """

  def __init__(self, pixels, width, height, bytes_per_pixel):
    if len(pixels) != width * height * bytes_per_pixel:
      raise ValueError(
        "%d pixel bytes do not match %dx%dx%d"
        % (len(pixels), width, height, bytes_per_pixel)
      )
    self.pixels = pixels
    self.width = width
    self.height = height
    self.bytes_per_pixel = bytes_per_pixel

  @classmethod
  def allocate(cls, width, height, bytes_per_pixel, name=None):
    """Returns a zero-filled buffer of a geometry a BMP file can hold."""
    check_geometry(width, height, bytes_per_pixel, name)
    size = width * height * bytes_per_pixel
    try:
      pixels = bytearray(size)
    except MemoryError:
      raise AllocationError(name, "out of memory for %d bytes" % size)
    return cls(pixels, width, height, bytes_per_pixel)

  @property
  def stride(self):
    return self.width * self.bytes_per_pixel

  def offset(self, row, col, byte=0):
    """Index of a pixel byte in the flat buffer."""
    if not (
      0 <= row < self.height
      and 0 <= col < self.width
      and 0 <= byte < self.bytes_per_pixel
    ):
      raise IndexError((row, col, byte))
    return row * self.stride + col * self.bytes_per_pixel + byte

  def row(self, i):
    if not 0 <= i < self.height:
      raise IndexError(i)
    return bytes(self.pixels[i * self.stride : (i + 1) * self.stride])

  def rows(self):
    """Yields each row from top to bottom."""
    for i in range(self.height):
      yield self.row(i)

  def pixel(self, row, col):
    start = self.offset(row, col)
    return bytes(self.pixels[start : start + self.bytes_per_pixel])

  def set_pixel(self, row, col, value):
    if len(value) != self.bytes_per_pixel:
      raise ValueError("pixel must be %d bytes" % self.bytes_per_pixel)
    start = self.offset(row, col)
    self.pixels[start : start + self.bytes_per_pixel] = value

  def copy(self):
    return ImageBuffer(
      bytearray(self.pixels), self.width, self.height, self.bytes_per_pixel
    )

  def __eq__(self, other):
    if not isinstance(other, ImageBuffer):
      return NotImplemented
    return (
      self.width == other.width
      and self.height == other.height
      and self.bytes_per_pixel == other.bytes_per_pixel
      and self.pixels == other.pixels
    )

  def __ne__(self, other):
    eq = self.__eq__(other)
    return eq if eq is NotImplemented else not eq

  def __repr__(self):
    return "ImageBuffer(%dx%d, %d bytes per pixel)" % (
      self.width,
      self.height,
      self.bytes_per_pixel,
    )
