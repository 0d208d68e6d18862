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
"""Serializer implementation tools module."""

from __future__ import annotations

__all__ = ["GeneratorStreamReader"]

from collections.abc import Generator

from ..exceptions import LimitOverrunError


def _separator_start(buffer: bytes, separator: bytes) -> bytes:
    # Longest end of buffer which is also a (strict) beginning of separator.
    for size in range(min(len(separator) - 1, len(buffer)), 0, -1):
        if buffer.endswith(separator[:size]):
            return buffer[-size:]
    return b""


class GeneratorStreamReader:
    """
    Reads lines from bytes chunks sent to a generator.

    The "blocking" operations are generators which :keyword:`yield` until they get enough data.
    """

    __slots__ = ("__buffer",)

    def __init__(self, initial_bytes: bytes = b"") -> None:
        self.__buffer: bytes = bytes(initial_bytes)

    def read_all(self) -> bytes:
        """
        Read and return all the bytes currently in the reader.
        """

        data, self.__buffer = self.__buffer, b""
        return data

    def read_line(self, separator: bytes, limit: int) -> Generator[None, bytes, bytes]:
        r"""
        Read data from the stream until `separator` is found.

        Example::

            line: bytes = yield from reader.read_line(b"\r\n", limit=4096)

        Parameters:
            separator: The end-of-line byte sequence.
            limit: The maximum line length, separator excluded.

        Raises:
            ValueError: Empty `separator` or `limit` is not a positive integer.
            LimitOverrunError: The line is longer than `limit`. The reader is emptied.

        Yields:
            until `separator` is found in the buffer.

        Returns:
            the line, without `separator`.
        """

        if limit <= 0:
            raise ValueError("limit must be a positive integer")
        seplen: int = len(separator)
        if seplen < 1:
            raise ValueError("Empty separator")

        buffer = self.__buffer
        offset: int = 0
        while (sepidx := buffer.find(separator, offset)) == -1:
            # The separator may be split between two chunks.
            offset = max(len(buffer) + 1 - seplen, 0)
            if offset > limit:
                self.__buffer = b""
                raise LimitOverrunError(
                    "Separator is not found, and chunk exceed the limit",
                    _separator_start(buffer, separator),
                    line_complete=False,
                )
            buffer += yield
            self.__buffer = buffer

        if sepidx > limit:
            self.__buffer = b""
            raise LimitOverrunError(
                "Separator is found, but chunk is longer than limit",
                buffer[sepidx + seplen :],
                line_complete=True,
            )

        self.__buffer = buffer[sepidx + seplen :]
        return buffer[:sepidx]

    def skip_line(self, separator: bytes) -> Generator[None, bytes, None]:
        r"""
        Drop data from the stream until `separator` is found, `separator` included.

        Only the bytes which may start a split `separator` are kept in memory while waiting.

        Parameters:
            separator: The end-of-line byte sequence.

        Raises:
            ValueError: Empty `separator`.

        Yields:
            until `separator` is found in the buffer.
        """

        seplen: int = len(separator)
        if seplen < 1:
            raise ValueError("Empty separator")

        buffer = self.__buffer
        while (sepidx := buffer.find(separator)) == -1:
            buffer = _separator_start(buffer, separator)
            buffer += yield
            self.__buffer = buffer

        self.__buffer = buffer[sepidx + seplen :]
