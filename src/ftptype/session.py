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
"""Representation type session state module."""

from __future__ import annotations

__all__ = ["TransferTypeSession"]

import logging

from .channel import CommandChannel, Reply
from .command import format_type_argument
from .exceptions import TypeNegotiationError
from .protocol import CommandStreamProtocol
from .representation import RepresentationType


def _check_representation_type(representation: object) -> None:
    if not isinstance(representation, RepresentationType):
        raise TypeError(f"Expected a RepresentationType instance, got {representation!r}")


class TransferTypeSession:
    """
    Holds the representation type currently in effect on a control connection.

    The session starts in ASCII Non-print, the protocol default. When only the first parameter of ``TYPE``
    is changed, the format goes back to its default value instead of keeping the previous one:

        >>> session = TransferTypeSession(initial=RepresentationType.ascii_telnet())
        >>> session.change_type("A")
        Ascii(text_format=<TextFormat.NON_PRINT: 'N'>)

    Instances are not thread-safe.
    """

    __slots__ = ("__current", "__protocol", "__logger", "__weakref__")

    def __init__(
        self,
        *,
        initial: RepresentationType | None = None,
        protocol: CommandStreamProtocol | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """
        Parameters:
            initial: The representation type already in effect. Defaults to ASCII Non-print.
            protocol: The protocol object which renders the command lines. A default one is created if not given.
            logger: If given, the logger instance to use.
        """
        if initial is None:
            initial = RepresentationType.ascii_non_print()
        else:
            _check_representation_type(initial)
        if protocol is None:
            protocol = CommandStreamProtocol()
        elif not isinstance(protocol, CommandStreamProtocol):
            raise TypeError(f"Expected a CommandStreamProtocol instance, got {protocol!r}")
        self.__current: RepresentationType = initial
        self.__protocol: CommandStreamProtocol = protocol
        self.__logger: logging.Logger = logger or logging.getLogger(__name__)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} current={self.__current!r}>"

    def select(self, representation: RepresentationType) -> RepresentationType:
        """
        Sets both parameters explicitly.

        Returns:
            `representation`.
        """
        _check_representation_type(representation)
        self.__current = representation
        return representation

    def change_type(self, type: str) -> RepresentationType:
        """
        Changes the type without specifying the format, which reverts to the default of the new type.

        Parameters:
            type: The type code.

        Raises:
            ValueError: `type` is ``"L"``, which requires a byte size.

        Returns:
            the new current representation type.

        See Also:
            :meth:`.RepresentationType.default_for`
        """
        return self.select(RepresentationType.default_for(type))

    def reset(self) -> RepresentationType:
        """
        Goes back to ASCII Non-print, e.g. after a ``REIN`` command.

        Returns:
            the new current representation type.
        """
        return self.select(RepresentationType.ascii_non_print())

    def negotiate(self, channel: CommandChannel, representation: RepresentationType) -> Reply:
        """
        Sends the ``TYPE`` command and, if the server accepts it, makes `representation` current.

        The current representation type is left untouched when anything fails.

        Parameters:
            channel: The control channel.
            representation: The wanted representation type.

        Raises:
            MalformedCommandArgument: `representation` cannot be sent on the control channel. Nothing has been sent.
            TypeNegotiationError: The server replied with something else than a 2yz code.

        Returns:
            the server reply.
        """
        _check_representation_type(representation)
        logger = self.__logger
        line = self.__protocol.make_command(representation)

        logger.debug("Sending %r", line)
        reply = channel.send_command(line)
        if not isinstance(reply, Reply):
            raise TypeError(f"Expected a Reply instance from the command channel, got {reply!r}")

        if not reply.is_positive_completion:
            logger.warning("Server refused TYPE %s: %d %s", format_type_argument(representation), reply.code, reply.message)
            raise TypeNegotiationError(reply, representation)

        self.__current = representation
        logger.debug("Representation type is now %r", representation)
        return reply

    def negotiate_type_change(self, channel: CommandChannel, type: str) -> Reply:
        """
        Like :meth:`change_type`, but through the server.

        The default format is sent explicitly (``TYPE A N`` rather than ``TYPE A``),
        so both peers agree on it whatever was in effect before.

        Raises:
            ValueError: `type` is ``"L"``, which requires a byte size.
            MalformedCommandArgument: `type` cannot be sent on the control channel.
            TypeNegotiationError: The server replied with something else than a 2yz code.
        """
        return self.negotiate(channel, RepresentationType.default_for(type))

    @property
    def current(self) -> RepresentationType:
        """
        The representation type in effect. Read-only attribute.
        """
        return self.__current

    @property
    def protocol(self) -> CommandStreamProtocol:
        """
        The protocol object which renders the command lines. Read-only attribute.
        """
        return self.__protocol

    @property
    def logger(self) -> logging.Logger:
        """
        The logger instance used by the session. Read-only attribute.
        """
        return self.__logger
