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


class BmpError(Exception):
  """An exception that contains information about a bitmap file."""

  def __init__(self, name, text, offset=None):
    """Generates an exception.
    name   -- file name (or description of the stream) to reference
    text   -- a description of what went wrong
    offset -- byte offset in the file where the problem was found, if any
    """
    where = name or "<stream>"
    if offset is not None:
      where += ": offset 0x%X" % offset
    Exception.__init__(self, "%s: %s" % (where, text))
    self.name = name
    self.offset = offset


class UnsupportedFormat(BmpError):
  pass


class TruncatedInput(BmpError):
  pass


class AllocationError(BmpError):
  pass
