from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any

from ftptype.channel import CommandChannel, Reply
from ftptype.converter import AbstractPacketConverter

import pytest

if TYPE_CHECKING:
    from unittest.mock import MagicMock

    from pytest_mock import MockerFixture


@pytest.fixture
def mock_converter_factory(mocker: MockerFixture) -> Callable[[], Any]:
    return lambda: mocker.NonCallableMagicMock(spec=AbstractPacketConverter)


@pytest.fixture
def mock_converter(mock_converter_factory: Callable[[], Any]) -> Any:
    return mock_converter_factory()


@pytest.fixture
def mock_command_channel(mocker: MockerFixture) -> MagicMock:
    mock_command_channel = mocker.NonCallableMagicMock(spec=CommandChannel)
    mock_command_channel.send_command.return_value = Reply(200, "Type set.")
    return mock_command_channel


@pytest.fixture
def int_max_str_digits() -> Iterator[int]:
    # Default interpreter limit, even if PYTHONINTMAXSTRDIGITS is set.
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    try:
        yield 4300
    finally:
        sys.set_int_max_str_digits(previous)
