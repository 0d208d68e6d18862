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
"""Exceptions definition module.

Every exception raised by ftptype is defined here.
"""

from __future__ import annotations

__all__ = [
    "DeserializeError",
    "LimitOverrunError",
    "MalformedCommandArgument",
    "PacketConversionError",
    "StreamProtocolParseError",
    "TypeNegotiationError",
]

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .channel import Reply
    from .representation import RepresentationType


class DeserializeError(Exception):
    """The bytes received on the control channel are not a valid command line."""

    def __init__(self, message: str, remaining_data: bytes, error_info: Any = None) -> None:
        """
        Parameters:
            message: Error message.
            remaining_data: Bytes received after the faulty line, not parsed yet.
            error_info: Additional error data.
        """

        super().__init__(message)

        self.remaining_data: bytes = remaining_data
        """Bytes received after the faulty line, not parsed yet."""

        self.error_info: Any = error_info
        """Additional error data."""


class LimitOverrunError(DeserializeError):
    """A command line is longer than the serializer limit."""

    def __init__(self, message: str, remaining_data: bytes, *, line_complete: bool) -> None:
        """
        Parameters:
            message: Error message.
            remaining_data: Bytes received after the faulty line, not parsed yet.
            line_complete: :data:`True` if the end of the faulty line has been received.
        """

        super().__init__(message, remaining_data)

        self.line_complete: bool = line_complete
        """
        :data:`True` if the end of the faulty line has been received.

        Otherwise, the rest of the line is still on the way and `remaining_data` only holds
        the start of a possibly split end-of-line sequence.
        """


class PacketConversionError(Exception):
    """The command line is well-framed but is not a valid ``TYPE`` command."""

    def __init__(self, message: str, error_info: Any = None) -> None:
        """
        Parameters:
            message: Error message.
            error_info: Additional error data.
        """

        super().__init__(message)

        self.error_info: Any = error_info
        """Additional error data."""


class StreamProtocolParseError(Exception):
    """Raised by :meth:`.CommandStreamProtocol.build_packet_from_chunks` when a received command is rejected."""

    def __init__(self, remaining_data: bytes, error: DeserializeError | PacketConversionError) -> None:
        super().__init__(f"Error while parsing data: {error}")

        self.remaining_data: bytes = remaining_data
        """Bytes received after the faulty line, to feed to the next parser."""

        self.error: DeserializeError | PacketConversionError = error
        """The underlying error."""


class MalformedCommandArgument(ValueError):
    """
    The representation type cannot be sent on the control channel as is.

    Sending the same value again will always fail.
    """

    def __init__(self, message: str, representation: RepresentationType) -> None:
        """
        Parameters:
            message: Error message.
            representation: The rejected value.
        """

        super().__init__(message)

        self.representation: RepresentationType = representation
        """The rejected value."""


class TypeNegotiationError(Exception):
    """The server refused the ``TYPE`` command."""

    def __init__(self, reply: Reply, representation: RepresentationType) -> None:
        """
        Parameters:
            reply: The server reply.
            representation: The representation type which has been asked for.
        """

        argument = " ".join(filter(None, representation.as_pair()))
        super().__init__(f"Server refused TYPE {argument}: {reply.code} {reply.message}".rstrip())

        self.reply: Reply = reply
        """The server reply."""

        self.representation: RepresentationType = representation
        """The representation type which has been asked for."""
