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
import sys

from . import header
from .errors import BmpError


def describe(path):
  """Returns lines describing both headers of a BMP file."""
  with open(path, "rb") as f:
    hdr, info = header.read_headers(f, path)
  return [
    "signature:        %r" % hdr.signature,
    "file size:        %d" % hdr.file_size,
    "reserved:         %d" % hdr.reserved,
    "data offset:      %d" % hdr.data_offset,
    "info header size: %d" % info.header_size,
    "size:             %dx%d" % (info.width, info.height),
    "color planes:     %d" % info.planes,
    "bits per pixel:   %d" % info.bits_per_pixel,
    "compression:      %d" % info.compression,
    "image size:       %d" % info.image_size,
    "resolution:       %dx%d px/m" % (info.resolution_x, info.resolution_y),
    "colors used:      %d" % info.colors_used,
    "important colors: %d" % info.important_colors,
  ]


def main(argv):
  parser = argparse.ArgumentParser(
    prog="bmprotate info",
    description="""Prints the header fields of a bitmap file""",
  )
  parser.add_argument("bmp", nargs="+", help="bitmap file(s) to inspect")
  args = parser.parse_args(argv[1:])

  status = 0
  for path in args.bmp:
    try:
      lines = describe(path)
    except (BmpError, OSError) as e:
      print(f"Error: {e}", file=sys.stderr)
      status = 1
      continue
    if len(args.bmp) > 1:
      print(f"{path}:")
    print("\n".join(lines))
  return status


if __name__ == "__main__":
  sys.exit(main(sys.argv))
