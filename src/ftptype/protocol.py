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
"""Control channel protocol object module."""

from __future__ import annotations

__all__ = [
    "CommandStreamProtocol",
]

from collections.abc import Generator

from .converter import AbstractPacketConverter, TypeCommandConverter
from .exceptions import DeserializeError, PacketConversionError, StreamProtocolParseError
from .representation import RepresentationType
from .serializers.line import CommandLineSerializer


class CommandStreamProtocol:
    """
    Turns representation types into ``TYPE`` command lines for the control channel byte stream, and back.

    Example:
        >>> protocol = CommandStreamProtocol()
        >>> protocol.make_command(RepresentationType.ascii_telnet())
        'TYPE A T'
        >>> protocol.make_command_line(RepresentationType.ascii_telnet())
        b'TYPE A T\\r\\n'

    The serializer keeps the reading state of one connection: use one protocol object per connection
    for :meth:`build_packet_from_chunks`.
    """

    __slots__ = ("__serializer", "__converter", "__weakref__")

    def __init__(
        self,
        serializer: CommandLineSerializer | None = None,
        converter: AbstractPacketConverter[RepresentationType, str] | None = None,
    ) -> None:
        """
        Parameters:
            serializer: The line serializer to use. A default :class:`.CommandLineSerializer` is created if not given.
            converter: The converter to use. Defaults to :class:`.TypeCommandConverter`.
        """

        if serializer is None:
            serializer = CommandLineSerializer()
        elif not isinstance(serializer, CommandLineSerializer):
            raise TypeError(f"Expected a CommandLineSerializer instance, got {serializer!r}")
        if converter is None:
            converter = TypeCommandConverter()
        elif not isinstance(converter, AbstractPacketConverter):
            raise TypeError(f"Expected a converter instance, got {converter!r}")
        self.__serializer: CommandLineSerializer = serializer
        self.__converter: AbstractPacketConverter[RepresentationType, str] = converter

    def make_command(self, representation: RepresentationType) -> str:
        """
        Renders the ``TYPE`` command for `representation`, without end-of-line sequence.

        Raises:
            MalformedCommandArgument: `representation` cannot be sent on the control channel.
        """

        return self.__converter.convert_to_dto_packet(representation)

    def make_command_line(self, representation: RepresentationType) -> bytes:
        """
        Encodes the ``TYPE`` command for `representation`, end-of-line sequence included.

        Raises:
            MalformedCommandArgument: `representation` cannot be sent on the control channel.
            UnicodeError: The command line cannot be encoded with the serializer encoding.
        """

        return self.__serializer.serialize(self.make_command(representation))

    def build_packet_from_chunks(self) -> Generator[None, bytes, tuple[RepresentationType, bytes]]:
        """
        Parses one received ``TYPE`` command line.

        Raises:
            StreamProtocolParseError: The line could not be decoded, is too long or is not a valid ``TYPE`` command.
                The ``remaining_data`` attribute must be fed to the next parser.

        Yields:
            :data:`None` until the whole line has been received.

        Returns:
            a tuple with the representation type and the unused trailing data.
        """

        try:
            line, remaining_data = yield from self.__serializer.incremental_deserialize()
        except DeserializeError as exc:
            raise StreamProtocolParseError(exc.remaining_data, exc) from exc

        try:
            representation = self.__converter.create_from_dto_packet(line)
        except PacketConversionError as exc:
            raise StreamProtocolParseError(remaining_data, exc) from exc

        return representation, remaining_data

    @property
    def serializer(self) -> CommandLineSerializer:
        """
        The line serializer. Read-only attribute.
        """
        return self.__serializer

    @property
    def converter(self) -> AbstractPacketConverter[RepresentationType, str]:
        """
        The converter. Read-only attribute.
        """
        return self.__converter
