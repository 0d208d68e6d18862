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
"""Control channel collaborator interface module.

The transport itself (sockets, reply parsing, timeouts) is not part of this library:
an application plugs its own control connection through :class:`CommandChannel`.
"""

from __future__ import annotations

__all__ = [
    "CommandChannel",
    "Reply",
]

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class Reply:
    """
    A server reply, already parsed by the control channel.
    """

    code: int
    """Three-digit reply code."""

    message: str = ""
    """Human-readable text following the code."""

    def __post_init__(self) -> None:
        if not isinstance(self.code, int) or isinstance(self.code, bool):
            raise TypeError(f"Expected an integer reply code, got {self.code!r}")
        if not (100 <= self.code <= 599):
            raise ValueError(f"Invalid reply code: {self.code}")

    @property
    def is_preliminary(self) -> bool:
        """1yz: the action is being started. Read-only attribute."""
        return self.code // 100 == 1

    @property
    def is_positive_completion(self) -> bool:
        """2yz: the action has been successfully completed. Read-only attribute."""
        return self.code // 100 == 2

    @property
    def is_intermediate(self) -> bool:
        """3yz: the command has been accepted, more information is needed. Read-only attribute."""
        return self.code // 100 == 3

    @property
    def is_transient_negative(self) -> bool:
        """4yz: the command was not accepted, the error condition is temporary. Read-only attribute."""
        return self.code // 100 == 4

    @property
    def is_permanent_negative(self) -> bool:
        """5yz: the command was not accepted. Read-only attribute."""
        return self.code // 100 == 5


@runtime_checkable
class CommandChannel(Protocol):
    """
    Sends commands on the control channel and waits for their reply.
    """

    def send_command(self, line: str, /) -> Reply:
        """
        Sends `line` and returns the server reply.

        Parameters:
            line: The command line, without end-of-line sequence.

        Returns:
            the reply to the command.
        """
        ...
