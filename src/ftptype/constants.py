# Copyright 2021-2025, Francis Clairicia-Rose-Claire-Josephine
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
"""ftptype's constants module."""

from __future__ import annotations

__all__ = [
    "COMMAND_LINE_SEPARATOR",
    "DEFAULT_ENCODING",
    "DEFAULT_SERIALIZER_LIMIT",
    "TYPE_COMMAND",
]

from typing import Final

# Command keyword, RFC 959 section 4.1.2
TYPE_COMMAND: Final[str] = "TYPE"

# Control channel end-of-line (Telnet <CRLF>)
COMMAND_LINE_SEPARATOR: Final[str] = "\r\n"

# The control channel follows the NVT-ASCII rules
DEFAULT_ENCODING: Final[str] = "ascii"

# Buffer size limit when waiting for the end of a command line
DEFAULT_SERIALIZER_LIMIT: Final[int] = 4 * 1024  # 4 KiB
