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

import argparse
import io
import itertools
import os
import sys

import png

from . import bmp
from .errors import BmpError, UnsupportedFormat


def png_rows(image):
  """Yields RGB (or greyscale) rows for png.Writer, top row first."""
  w = image.width
  bpp = image.bytes_per_pixel
  for data in image.rows():
    if bpp == 1:
      yield list(data)
    elif bpp == 2:
      # Somewhat optimized conversion from {1'bx, 5'bR, 5'bG, 5'bB},
      # combined with scaling up to 8-bit (since pypng's scaling is slow)
      yield list(
        itertools.chain.from_iterable(
          map(
            lambda a, b: (
              (b & 0b1111100) * 255 // 0b1111100,
              (((b << 8) | a) & 0b1111100000) * 255 // 0b1111100000,
              (a & 0b11111) * 255 // 0b11111,
            ),
            data[0 : w * 2 : 2],
            data[1 : w * 2 : 2],
          )
        )
      )
    else:
      # B G R [X]; with compression==0 the 4th byte is ignored
      row = [0] * (w * 3)
      row[0::3] = data[2::bpp]
      row[1::3] = data[1::bpp]
      row[2::3] = data[0::bpp]
      yield row


def to_png(image):
  """Returns a Bytes() object of a PNG file"""
  if image.bytes_per_pixel not in (1, 2, 3, 4):
    raise UnsupportedFormat(
      None, "no PNG mapping for %d bytes per pixel" % image.bytes_per_pixel
    )
  if not image.width or not image.height:
    raise UnsupportedFormat(None, "cannot encode an empty image as PNG")
  output = png.Writer(
    width=image.width,
    height=image.height,
    greyscale=image.bytes_per_pixel == 1,
    alpha=False,
    bitdepth=8,
    compression=9,
  )
  with io.BytesIO() as f:
    output.write(f, png_rows(image))
    return f.getvalue()


def write(path, data):
  """Writes a PNG file; a partially written file is removed on failure."""
  with open(path, "wb") as f:
    try:
      f.write(data)
    except BaseException:
      f.close()
      os.remove(path)
      raise


def main(argv):
  parser = argparse.ArgumentParser(
    prog="bmprotate topng",
    description="""Converts a bitmap file to PNG""",
  )
  parser.add_argument("input", help="bitmap file to read")
  parser.add_argument(
    "output",
    nargs="?",
    help="PNG file to write, or - for stdout (default: INPUT.png)",
  )
  args = parser.parse_args(argv[1:])
  output = args.output or os.path.splitext(args.input)[0] + ".png"

  try:
    data = to_png(bmp.read(args.input))
    if output == "-":
      sys.stdout.buffer.write(data)
    else:
      write(output, data)
  except (BmpError, OSError) as e:
    print(f"Error: {e}", file=sys.stderr)
    return 1
  return 0


if __name__ == "__main__":
  sys.exit(main(sys.argv))
