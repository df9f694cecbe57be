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

import importlib
import os
import sys


def has_main(path):
  with open(path, "r") as f:
    return "def main(" in f.read()


def commands():
  """Returns the modules that can run as a command, i.e. define main(argv)."""
  p = os.path.dirname(__file__)
  return sorted(
    m[:-3]
    for m in os.listdir(p)
    if m.endswith(".py")
    and not m.startswith("_")
    and has_main(os.path.join(p, m))
  )


def main(argv=sys.argv):
  cmds = commands()
  if len(argv) <= 1 or argv[1] not in cmds:
    print(f"USAGE: {argv[0]} COMMAND ...", file=sys.stderr)
    print("Recognized commands:", file=sys.stderr)
    for cmd in cmds:
      print(f"  {cmd}", file=sys.stderr)
    return 2
  args = [f"{argv[0]} {argv[1]}"] + argv[2:]
  return importlib.import_module(f".{argv[1]}", __package__).main(args)


if __name__ == "__main__":
  sys.exit(main(sys.argv))
