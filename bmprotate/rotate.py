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
import os
import sys

from . import bmp
from .errors import BmpError

# Pass 3 starts at this row no matter how tall the image is.
DEFAULT_START_ROW = 50


def mirror_rows(image, rows):
  """Swaps pixel j with pixel width-1-j, for j < width/2, in each row."""
  px = image.pixels
  bpp = image.bytes_per_pixel
  stride = image.stride
  for i in rows:
    for j in range(image.width // 2):
      left = i * stride + j * bpp
      right = i * stride + (image.width - 1 - j) * bpp
      px[left : left + bpp], px[right : right + bpp] = (
        px[right : right + bpp],
        px[left : left + bpp],
      )


def swap_rows_prefix(image, nbytes):
  """Swaps the first nbytes of row i with those of row height-1-i, for the
  top half of the rows. nbytes need not be pixel aligned.
  """
  px = image.pixels
  stride = image.stride
  for i in range(image.height // 2):
    top = i * stride
    bottom = (image.height - 1 - i) * stride
    px[top : top + nbytes], px[bottom : bottom + nbytes] = (
      px[bottom : bottom + nbytes],
      px[top : top + nbytes],
    )


def rotate_right(image, start_row=DEFAULT_START_ROW, v=0):
  """Rotates the image clockwise in place with three mirror passes:
  1. mirror the top half of the rows left-right
  2. swap the left half of the bytes of the top and bottom rows
  3. mirror the rows from start_row down left-right
  This is only a true rotation for the geometry start_row was chosen for.
  """
  if v >= 1:
    sys.stderr.write("%d, %d\n" % (image.height, image.width))
  top = range(image.height // 2)
  if v >= 1:
    sys.stderr.write("pass 1: mirroring the top %d rows\n" % len(top))
  mirror_rows(image, top)
  if v >= 1:
    sys.stderr.write(
      "pass 2: swapping %d leading bytes of %d row pairs\n"
      % (image.stride // 2, len(top))
    )
  swap_rows_prefix(image, image.stride // 2)
  bottom = range(max(start_row, 0), image.height)
  if v >= 1:
    sys.stderr.write(
      "pass 3: mirroring %d rows from row %d\n" % (len(bottom), bottom.start)
    )
  mirror_rows(image, bottom)
  return image


def default_output(path):
  return os.path.splitext(path)[0] + "-rotated.bmp"


def main(argv):
  parser = argparse.ArgumentParser(
    prog="bmprotate rotate",
    description="""Rotates a bitmap file to the right""",
  )
  parser.add_argument(
    "-q",
    "--quiet",
    action="count",
    default=0,
    help="make the console output quieter",
  )
  parser.add_argument(
    "-v",
    "--verbose",
    action="count",
    default=0,
    help="make the console output more verbose",
  )
  parser.add_argument(
    "-s",
    "--start-row",
    type=int,
    default=DEFAULT_START_ROW,
    metavar="ROW",
    help="first row of the final mirror pass (default: %(default)s)",
  )
  parser.add_argument("input", help="bitmap file to read")
  parser.add_argument(
    "output",
    nargs="?",
    help="bitmap file to write (default: INPUT-rotated.bmp)",
  )
  args = parser.parse_args(argv[1:])
  verbosity = args.verbose - args.quiet
  output = args.output or default_output(args.input)

  try:
    image = bmp.read(args.input)
    if verbosity >= 1:
      sys.stderr.write(
        "Read %s: %dx%d, %d bytes per pixel\n"
        % (args.input, image.width, image.height, image.bytes_per_pixel)
      )
    rotate_right(image, start_row=args.start_row, v=verbosity)
    if verbosity >= 0:
      sys.stderr.write("Writing to %s\n" % output)
    bmp.write(output, image)
  except (BmpError, OSError) as e:
    print(f"Error: {e}", file=sys.stderr)
    return 1
  return 0


if __name__ == "__main__":
  sys.exit(main(sys.argv))
