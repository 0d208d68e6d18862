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
"""Conversion between representation types and command lines."""

from __future__ import annotations

__all__ = [
    "AbstractPacketConverter",
    "TypeCommandConverter",
]

from abc import ABCMeta, abstractmethod
from typing import Generic, TypeVar, final

from .command import format_type_command, parse_type_command
from .representation import RepresentationType

_T_Packet = TypeVar("_T_Packet")
_T_DTOPacket = TypeVar("_T_DTOPacket")


class AbstractPacketConverter(Generic[_T_Packet, _T_DTOPacket], metaclass=ABCMeta):
    """
    Translates a business object to the decoded line exchanged on the control channel, and back.
    """

    __slots__ = ("__weakref__",)

    @abstractmethod
    def create_from_dto_packet(self, packet: _T_DTOPacket, /) -> _T_Packet:
        """
        Builds the business object from a received line.

        Raises:
            PacketConversionError: `packet` is invalid.
        """
        raise NotImplementedError

    @abstractmethod
    def convert_to_dto_packet(self, obj: _T_Packet, /) -> _T_DTOPacket:
        """
        Builds the line to send for `obj`.
        """
        raise NotImplementedError


@final
class TypeCommandConverter(AbstractPacketConverter[RepresentationType, str]):
    """
    Converts :class:`.RepresentationType` objects to ``TYPE`` command lines and vice versa.
    """

    __slots__ = ()

    def create_from_dto_packet(self, packet: str, /) -> RepresentationType:
        """
        Parses a ``TYPE`` command line.

        Raises:
            PacketConversionError: Invalid command line.

        See Also:
            :func:`ftptype.command.parse_type_command`
        """
        return parse_type_command(packet)

    def convert_to_dto_packet(self, obj: RepresentationType, /) -> str:
        """
        Renders the ``TYPE`` command line, without end-of-line sequence.

        Raises:
            MalformedCommandArgument: `obj` cannot be sent on the control channel.

        See Also:
            :func:`ftptype.command.format_type_command`
        """
        return format_type_command(obj)
