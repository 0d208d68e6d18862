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
"""``TYPE`` command line grammar module.

The command line is ``TYPE <type>[ <format>]``, the parameters being separated by exactly one space.
"""

from __future__ import annotations

__all__ = [
    "format_type_argument",
    "format_type_command",
    "parse_type_command",
    "validate_representation",
]

from typing import assert_never

from .constants import COMMAND_LINE_SEPARATOR, TYPE_COMMAND
from .exceptions import MalformedCommandArgument, PacketConversionError
from .representation import AnyRepresentationType, Ascii, Custom, Ebcdic, Image, Local, RepresentationType, TextFormat

_TEXT_FORMATS: frozenset[str] = frozenset(f.value for f in TextFormat)


def _is_valid_token(token: str) -> bool:
    # Printable ASCII without space.
    return token.isascii() and token.isprintable() and " " not in token


def _is_canonical_decimal(token: str) -> bool:
    return token.isascii() and token.isdecimal() and (token == "0" or not token.startswith("0"))


def _as_variant(representation: object) -> AnyRepresentationType:
    if not isinstance(representation, (Ascii, Ebcdic, Image, Local, Custom)):
        raise TypeError(f"Expected a RepresentationType instance, got {representation!r}")
    return representation


def format_type_argument(representation: RepresentationType) -> str:
    """
    Renders the argument of the ``TYPE`` command, without any check.

    Example:
        >>> format_type_argument(RepresentationType.ascii_non_print())
        'A N'
        >>> format_type_argument(RepresentationType.image())
        'I'

    Parameters:
        representation: The value to render.

    Raises:
        TypeError: `representation` is not a :class:`.RepresentationType`.

    Returns:
        the argument string.
    """
    variant = _as_variant(representation)
    match variant:
        case Ascii(text_format=text_format):
            return f"A {text_format.value}"
        case Ebcdic(text_format=text_format):
            return f"E {text_format.value}"
        case Image():
            return "I"
        case Local(size=size):
            return f"L {size:d}"
        case Custom(code=code, argument=""):
            return code
        case Custom(code=code, argument=argument):
            return f"{code} {argument}"
        case _:
            assert_never(variant)


def validate_representation(representation: RepresentationType) -> None:
    """
    Checks that `representation` can be sent on the control channel.

    Parameters:
        representation: The value to check.

    Raises:
        TypeError: `representation` is not a :class:`.RepresentationType`.
        MalformedCommandArgument: The type code is empty.
        MalformedCommandArgument: A parameter contains a space, a control character or a non-ASCII character.
        MalformedCommandArgument: The Local byte size is negative or cannot be written in decimal.
    """
    variant = _as_variant(representation)
    match variant:
        case Local(size=size) if size < 0:
            raise MalformedCommandArgument(f"Local byte size must not be negative, got {size}", variant)
        case Local(size=size):
            try:
                str(size)
            except ValueError as exc:
                # Above sys.get_int_max_str_digits()
                raise MalformedCommandArgument(f"Local byte size is too large ({size.bit_length()} bits)", variant) from exc
        case _:
            pass

    type_code, type_format = variant.as_pair()
    if not type_code:
        raise MalformedCommandArgument("Empty type code", variant)
    if not _is_valid_token(type_code):
        raise MalformedCommandArgument(f"Invalid character in type code {type_code!r}", variant)
    if type_format and not _is_valid_token(type_format):
        raise MalformedCommandArgument(f"Invalid character in format {type_format!r}", variant)


def format_type_command(representation: RepresentationType) -> str:
    """
    Renders the whole ``TYPE`` command, without the end-of-line sequence.

    Example:
        >>> format_type_command(RepresentationType.local(36))
        'TYPE L 36'

    Parameters:
        representation: The value to render.

    Raises:
        TypeError: `representation` is not a :class:`.RepresentationType`.
        MalformedCommandArgument: See :func:`validate_representation`.

    Returns:
        the command line.
    """
    validate_representation(representation)
    return f"{TYPE_COMMAND} {format_type_argument(representation)}"


def parse_type_command(line: str) -> RepresentationType:
    """
    Parses a ``TYPE`` command line.

    A trailing end-of-line sequence is ignored and the command keyword is case-insensitive.
    The parameters are kept verbatim so that the ``(type, format)`` pair is the one which has been sent;
    any well-formed pair the other variants do not cover gives a :class:`.Custom` instance.

    Example:
        >>> parse_type_command("TYPE A T\\r\\n")
        Ascii(text_format=<TextFormat.TELNET: 'T'>)
        >>> parse_type_command("type L 36")
        Local(size=36)

    Parameters:
        line: The command line.

    Raises:
        TypeError: `line` is not a :class:`str`.
        PacketConversionError: Invalid command line.

    Returns:
        the representation type.
    """
    if not isinstance(line, str):
        raise TypeError(f"Expected a str, got {line!r}")

    line = line.removesuffix(COMMAND_LINE_SEPARATOR)
    keyword, _, argument = line.partition(" ")
    if keyword.upper() != TYPE_COMMAND:
        raise PacketConversionError(f"Not a {TYPE_COMMAND} command", error_info={"line": line})
    if not argument:
        raise PacketConversionError("Missing representation type parameter", error_info={"line": line})

    parameters = argument.split(" ")
    if len(parameters) > 2:
        raise PacketConversionError("Too many parameters", error_info={"line": line})
    for parameter in parameters:
        if not parameter:
            raise PacketConversionError("Parameters must be separated by exactly one space", error_info={"line": line})
        if not _is_valid_token(parameter):
            raise PacketConversionError(f"Invalid character in parameter {parameter!r}", error_info={"line": line})

    match parameters:
        case ["A", type_format] if type_format in _TEXT_FORMATS:
            return Ascii(TextFormat(type_format))
        case ["E", type_format] if type_format in _TEXT_FORMATS:
            return Ebcdic(TextFormat(type_format))
        case ["I"]:
            return Image()
        case ["L", size] if _is_canonical_decimal(size):
            return Local(int(size))
        case [type_code]:
            return Custom(type_code)
        case [type_code, type_format]:
            return Custom(type_code, type_format)
        case _:  # pragma: no cover
            raise AssertionError(f"Unexpected parameters {parameters!r}")
