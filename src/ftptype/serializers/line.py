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
"""Control channel command line serializer module."""

from __future__ import annotations

__all__ = ["CommandLineSerializer"]

from collections.abc import Generator
from typing import final

from ..constants import COMMAND_LINE_SEPARATOR, DEFAULT_ENCODING, DEFAULT_SERIALIZER_LIMIT
from ..exceptions import DeserializeError, LimitOverrunError
from .tools import GeneratorStreamReader


@final
class CommandLineSerializer:
    """
    A :term:`serializer` for the lines exchanged on the FTP control channel.

    Each line ends with a Telnet end-of-line sequence (``"\\r\\n"``).

    When a received line is longer than the limit and its end has not been received yet,
    the serializer remembers it and the next :meth:`incremental_deserialize` call drops
    the rest of that line first. Therefore, an instance must not be shared between connections.
    """

    __slots__ = (
        "__separator",
        "__limit",
        "__encoding",
        "__unicode_errors",
        "__debug",
        "__discard_line",
        "__weakref__",
    )

    def __init__(
        self,
        *,
        encoding: str = DEFAULT_ENCODING,
        unicode_errors: str = "strict",
        limit: int = DEFAULT_SERIALIZER_LIMIT,
        debug: bool = False,
    ) -> None:
        """
        Parameters:
            encoding: String encoding. Defaults to ``"ascii"``.
            unicode_errors: Controls how encoding errors are handled.
            limit: Maximum line length, end-of-line sequence excluded.
            debug: If :data:`True`, add information to :exc:`.DeserializeError` via the ``error_info`` attribute.

        Raises:
            ValueError: `limit` must be a positive integer.
        """
        if limit <= 0:
            raise ValueError("limit must be a positive integer")
        self.__separator: bytes = COMMAND_LINE_SEPARATOR.encode("ascii")
        self.__limit: int = limit
        self.__encoding: str = encoding
        self.__unicode_errors: str = unicode_errors
        self.__debug: bool = bool(debug)
        self.__discard_line: bool = False

    def serialize(self, line: str) -> bytes:
        """
        Encodes `line` and appends the end-of-line sequence.

        Example:
            >>> s = CommandLineSerializer()
            >>> s.serialize("TYPE A N")
            b'TYPE A N\\r\\n'

        Raises:
            TypeError: `line` is not a :class:`str`.
            UnicodeError: Invalid string.
            ValueError: `line` is empty or contains a line break.
        """
        data = bytes(line, self.__encoding, self.__unicode_errors)
        if not data:
            raise ValueError("Empty command line")
        if b"\r" in data or b"\n" in data:
            raise ValueError("A command line must not contain line breaks")
        return data + self.__separator

    def incremental_deserialize(self) -> Generator[None, bytes, tuple[str, bytes]]:
        """
        Yields until the end-of-line sequence is found and return the decoded line.

        Raises:
            LimitOverrunError: Reached buffer size limit.
            DeserializeError: :class:`UnicodeError` raised when decoding the line.

        Returns:
            a tuple with the line, without end-of-line sequence, and the unused trailing data.
        """
        separator: bytes = self.__separator
        reader = GeneratorStreamReader()
        if self.__discard_line:
            yield from reader.skip_line(separator)
            self.__discard_line = False

        try:
            data = yield from reader.read_line(separator, limit=self.__limit)
        except LimitOverrunError as exc:
            self.__discard_line = not exc.line_complete
            raise
        remainder = reader.read_all()

        try:
            line = str(data, self.__encoding, self.__unicode_errors)
        except UnicodeError as exc:
            if self.__debug:
                raise DeserializeError(str(exc), remainder, error_info={"data": data}) from exc
            raise DeserializeError(str(exc), remainder) from exc
        return line, remainder

    @property
    def separator(self) -> bytes:
        """
        Byte sequence that indicates the end of a line. Read-only attribute.
        """
        return self.__separator

    @property
    def debug(self) -> bool:
        """
        The debug mode flag. Read-only attribute.
        """
        return self.__debug

    @property
    def buffer_limit(self) -> int:
        """
        Maximum line length. Read-only attribute.
        """
        return self.__limit

    @property
    def encoding(self) -> str:
        """
        String encoding. Read-only attribute.
        """
        return self.__encoding

    @property
    def unicode_errors(self) -> str:
        """
        Controls how encoding errors are handled. Read-only attribute.
        """
        return self.__unicode_errors
