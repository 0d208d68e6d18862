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
r"""FTP representation type module.

The argument of the ``TYPE`` command selects how the bytes sent on the data channel are interpreted
(RFC 959, sections 3.1.1 and 4.1.2)::

              \    /
    A - ASCII |    | N - Non-print
              |----| T - Telnet format effectors
    E - EBCDIC|    | C - Carriage Control (ASA)
              /    \
    I - Image

    L <byte size> - Local byte Byte size

The default representation type is ASCII Non-print. If the Format parameter is changed, and later just the first
argument is changed, Format then returns to the Non-print default.

Objects defined here are plain immutable values: they do not validate what would be invalid on the wire
(see :func:`ftptype.command.validate_representation`) and they do not remember any session state
(see :class:`ftptype.session.TransferTypeSession`).
"""

from __future__ import annotations

__all__ = [
    "AnyRepresentationType",
    "Ascii",
    "Custom",
    "Ebcdic",
    "Image",
    "Local",
    "RepresentationType",
    "TextFormat",
]

import enum
from abc import ABCMeta, abstractmethod
from dataclasses import dataclass
from typing import TypeAlias, final


@enum.unique
class TextFormat(str, enum.Enum):
    """
    Second parameter of the ASCII and EBCDIC types.
    """

    NON_PRINT = "N"
    """The file contains no vertical format information. This is the default."""

    TELNET = "T"
    """The file contains Telnet vertical format controls (<CR>, <LF>, <NL>, <VT>, <FF>)."""

    CARRIAGE_CONTROL = "C"
    """The first character of each line is an ASA (FORTRAN) vertical format control character."""


class RepresentationType(metaclass=ABCMeta):
    """
    The two parameters of the ``TYPE`` command.

    Instances are created with the named constructors below (or directly from one of the variant classes)
    and are never modified afterwards.

    Example:
        >>> RepresentationType.ascii_telnet().as_pair()
        ('A', 'T')
        >>> RepresentationType.local(36).as_pair()
        ('L', '36')
    """

    __slots__ = ("__weakref__",)

    @property
    @abstractmethod
    def type(self) -> str:
        """
        The representation type code. Read-only attribute.
        """
        raise NotImplementedError

    @property
    @abstractmethod
    def format(self) -> str:
        """
        The second parameter, or an empty string if there is none. Read-only attribute.
        """
        raise NotImplementedError

    def get_type(self) -> str:
        """Returns :attr:`type`."""
        return self.type

    def get_format(self) -> str:
        """Returns :attr:`format`."""
        return self.format

    def as_pair(self) -> tuple[str, str]:
        """
        Returns:
            the ``(type, format)`` pair.
        """
        return (self.type, self.format)

    @staticmethod
    def image() -> Image:
        """
        Image type: data are sent as contiguous bits packed into 8-bit transfer bytes.

        Recommended for any non-text transfer.
        """
        return Image()

    @staticmethod
    def local(size: int) -> Local:
        """
        Local type: data are transferred in logical bytes of `size` bits.

        The byte size is mandatory; there is no default value. It is not checked here.

        Parameters:
            size: The logical byte size, in bits.
        """
        return Local(size)

    @staticmethod
    def ascii_non_print() -> Ascii:
        """
        ASCII Non-print, the type in effect when no ``TYPE`` command has been issued.
        """
        return Ascii(TextFormat.NON_PRINT)

    @staticmethod
    def ascii_telnet() -> Ascii:
        return Ascii(TextFormat.TELNET)

    @staticmethod
    def ascii_carriage_control() -> Ascii:
        return Ascii(TextFormat.CARRIAGE_CONTROL)

    @staticmethod
    def ebcdic_non_print() -> Ebcdic:
        return Ebcdic(TextFormat.NON_PRINT)

    @staticmethod
    def ebcdic_telnet() -> Ebcdic:
        return Ebcdic(TextFormat.TELNET)

    @staticmethod
    def ebcdic_carriage_control() -> Ebcdic:
        return Ebcdic(TextFormat.CARRIAGE_CONTROL)

    @staticmethod
    def custom(type: str, format: str | None = None) -> Custom:
        """
        Escape hatch for server-specific type codes and protocol extensions.

        `type` and `format` are stored verbatim. ``custom(t)`` and ``custom(t, None)`` are the same value.

        Parameters:
            type: The type code.
            format: The second parameter, if any.
        """
        return Custom(type, format)

    @staticmethod
    def default_for(type: str) -> RepresentationType:
        """
        Returns the value to use when only the first parameter of ``TYPE`` is given.

        The format of the ASCII and EBCDIC types falls back to Non-print. Unknown codes are kept without format.

        Parameters:
            type: The type code.

        Raises:
            ValueError: `type` is ``"L"``: the Local byte size has no default value.
        """
        match type:
            case "A":
                return Ascii()
            case "E":
                return Ebcdic()
            case "I":
                return Image()
            case "L":
                raise ValueError("Local byte type requires an explicit byte size")
            case _:
                return Custom(type)


@final
@dataclass(frozen=True, slots=True)
class Ascii(RepresentationType):
    """ASCII type (``A``)."""

    text_format: TextFormat = TextFormat.NON_PRINT
    """The format parameter."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "text_format", TextFormat(self.text_format))

    @property
    def type(self) -> str:
        return "A"

    @property
    def format(self) -> str:
        return self.text_format.value


@final
@dataclass(frozen=True, slots=True)
class Ebcdic(RepresentationType):
    """EBCDIC type (``E``)."""

    text_format: TextFormat = TextFormat.NON_PRINT
    """The format parameter."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "text_format", TextFormat(self.text_format))

    @property
    def type(self) -> str:
        return "E"

    @property
    def format(self) -> str:
        return self.text_format.value


@final
@dataclass(frozen=True, slots=True)
class Image(RepresentationType):
    """Image type (``I``). It does not take a second parameter."""

    @property
    def type(self) -> str:
        return "I"

    @property
    def format(self) -> str:
        return ""


@final
@dataclass(frozen=True, slots=True)
class Local(RepresentationType):
    """Local byte type (``L``)."""

    size: int
    """The logical byte size, in bits."""

    def __post_init__(self) -> None:
        if not isinstance(self.size, int) or isinstance(self.size, bool):
            raise TypeError(f"Expected an integer byte size, got {self.size!r}")

    @property
    def type(self) -> str:
        return "L"

    @property
    def format(self) -> str:
        return str(self.size)


@final
@dataclass(frozen=True, slots=True, init=False)
class Custom(RepresentationType):
    """Any other type code, stored as given."""

    code: str
    """The type code."""

    argument: str = ""
    """The second parameter, or an empty string."""

    def __init__(self, code: str, argument: str | None = None) -> None:
        if not isinstance(code, str):
            raise TypeError(f"Expected a str type code, got {code!r}")
        if argument is None:
            argument = ""
        elif not isinstance(argument, str):
            raise TypeError(f"Expected a str format, got {argument!r}")
        object.__setattr__(self, "code", code)
        object.__setattr__(self, "argument", argument)

    @property
    def type(self) -> str:
        return self.code

    @property
    def format(self) -> str:
        return self.argument


AnyRepresentationType: TypeAlias = Ascii | Ebcdic | Image | Local | Custom
"""Every variant of :class:`RepresentationType`."""
