from __future__ import annotations

import dataclasses
import weakref
from collections.abc import Callable
from typing import Any

from ftptype.representation import Ascii, Custom, Ebcdic, Image, Local, RepresentationType, TextFormat

import pytest

NAMED_CONSTRUCTORS: list[tuple[Callable[[], RepresentationType], tuple[str, str]]] = [
    (RepresentationType.image, ("I", "")),
    (RepresentationType.ascii_non_print, ("A", "N")),
    (RepresentationType.ascii_telnet, ("A", "T")),
    (RepresentationType.ascii_carriage_control, ("A", "C")),
    (RepresentationType.ebcdic_non_print, ("E", "N")),
    (RepresentationType.ebcdic_telnet, ("E", "T")),
    (RepresentationType.ebcdic_carriage_control, ("E", "C")),
]


class TestTextFormat:
    def test____values____protocol_letters(self) -> None:
        # Arrange

        # Act & Assert
        assert TextFormat.NON_PRINT.value == "N"
        assert TextFormat.TELNET.value == "T"
        assert TextFormat.CARRIAGE_CONTROL.value == "C"
        assert len(TextFormat) == 3


class TestRepresentationType:
    @pytest.mark.parametrize(
        ["factory", "expected_pair"],
        NAMED_CONSTRUCTORS,
        ids=lambda p: getattr(p, "__name__", repr(p)),
    )
    def test____named_constructor____type_and_format(
        self,
        factory: Callable[[], RepresentationType],
        expected_pair: tuple[str, str],
    ) -> None:
        # Arrange

        # Act
        representation = factory()

        # Assert
        assert representation.type == expected_pair[0]
        assert representation.format == expected_pair[1]
        assert representation.get_type() == expected_pair[0]
        assert representation.get_format() == expected_pair[1]
        assert representation.as_pair() == expected_pair
        assert type(representation.type) is str
        assert type(representation.format) is str

    @pytest.mark.parametrize(
        ["factory", "expected_pair"],
        NAMED_CONSTRUCTORS,
        ids=lambda p: getattr(p, "__name__", repr(p)),
    )
    def test____named_constructor____value_equality(
        self,
        factory: Callable[[], RepresentationType],
        expected_pair: tuple[str, str],
    ) -> None:
        # Arrange

        # Act
        first = factory()
        second = factory()

        # Assert
        assert first == second
        assert hash(first) == hash(second)
        assert first.as_pair() == second.as_pair() == expected_pair

    @pytest.mark.parametrize(
        ["size", "expected_format"],
        [
            pytest.param(0, "0", id="zero"),
            pytest.param(8, "8", id="octet"),
            pytest.param(36, "36", id="pdp10"),
            pytest.param(100000, "100000", id="large"),
        ],
    )
    def test____local____decimal_byte_size(self, size: int, expected_format: str) -> None:
        # Arrange

        # Act
        representation = RepresentationType.local(size)

        # Assert
        assert isinstance(representation, Local)
        assert representation.size == size
        assert representation.as_pair() == ("L", expected_format)

    def test____local____negative_size_not_checked(self) -> None:
        # Arrange

        # Act
        representation = RepresentationType.local(-1)

        # Assert
        assert representation.as_pair() == ("L", "-1")

    @pytest.mark.parametrize("size", ["36", 36.0, True, None], ids=repr)
    def test____local____not_an_integer(self, size: Any) -> None:
        # Arrange

        # Act & Assert
        with pytest.raises(TypeError, match=r"^Expected an integer byte size, got .+$"):
            RepresentationType.local(size)

    def test____custom____without_format(self) -> None:
        # Arrange

        # Act
        representation = RepresentationType.custom("X")

        # Assert
        assert isinstance(representation, Custom)
        assert representation.as_pair() == ("X", "")

    def test____custom____none_format_is_empty(self) -> None:
        # Arrange

        # Act
        without_format = RepresentationType.custom("X")
        none_format = RepresentationType.custom("X", None)
        empty_format = RepresentationType.custom("X", "")

        # Assert
        assert without_format == none_format == empty_format
        assert none_format.format == ""

    @pytest.mark.parametrize(
        ["type_code", "type_format"],
        [
            pytest.param("X", "42", id="extension"),
            pytest.param("A", "N", id="known-pair"),
            pytest.param("a b", "c\r\n", id="unchecked"),
            pytest.param("", "", id="empty"),
        ],
    )
    def test____custom____stored_verbatim(self, type_code: str, type_format: str) -> None:
        # Arrange

        # Act
        representation = RepresentationType.custom(type_code, type_format)

        # Assert
        assert representation.as_pair() == (type_code, type_format)

    def test____custom____not_equal_to_named_variant(self) -> None:
        # Arrange

        # Act
        custom = RepresentationType.custom("A", "N")
        ascii_non_print = RepresentationType.ascii_non_print()

        # Assert
        assert custom != ascii_non_print
        assert custom.as_pair() == ascii_non_print.as_pair()

    @pytest.mark.parametrize(
        ["type_code", "type_format"],
        [
            pytest.param(b"X", None, id="bytes-type"),
            pytest.param(None, None, id="none-type"),
            pytest.param("X", 4, id="int-format"),
        ],
    )
    def test____custom____invalid_argument_type(self, type_code: Any, type_format: Any) -> None:
        # Arrange

        # Act & Assert
        with pytest.raises(TypeError):
            RepresentationType.custom(type_code, type_format)

    @pytest.mark.parametrize(
        ["type_code", "expected"],
        [
            pytest.param("A", Ascii(TextFormat.NON_PRINT), id="ascii"),
            pytest.param("E", Ebcdic(TextFormat.NON_PRINT), id="ebcdic"),
            pytest.param("I", Image(), id="image"),
            pytest.param("X", Custom("X"), id="custom"),
        ],
    )
    def test____default_for____first_parameter_only(self, type_code: str, expected: RepresentationType) -> None:
        # Arrange

        # Act
        representation = RepresentationType.default_for(type_code)

        # Assert
        assert representation == expected

    def test____default_for____local_requires_byte_size(self) -> None:
        # Arrange

        # Act & Assert
        with pytest.raises(ValueError, match=r"^Local byte type requires an explicit byte size$"):
            RepresentationType.default_for("L")

    def test____abstract____cannot_instantiate(self) -> None:
        # Arrange

        # Act & Assert
        with pytest.raises(TypeError):
            RepresentationType()  # type: ignore[abstract]


class TestVariants:
    @pytest.fixture(
        params=[
            pytest.param(lambda: Ascii(TextFormat.TELNET), id="ascii"),
            pytest.param(lambda: Ebcdic(TextFormat.CARRIAGE_CONTROL), id="ebcdic"),
            pytest.param(Image, id="image"),
            pytest.param(lambda: Local(36), id="local"),
            pytest.param(lambda: Custom("X", "Y"), id="custom"),
        ]
    )
    @staticmethod
    def representation(request: pytest.FixtureRequest) -> RepresentationType:
        return request.param()

    def test____frozen____cannot_set_field(self, representation: RepresentationType) -> None:
        # Arrange
        field_names = [f.name for f in dataclasses.fields(representation)]  # type: ignore[arg-type]

        # Act & Assert
        for name in field_names:
            with pytest.raises(dataclasses.FrozenInstanceError):
                setattr(representation, name, "something")

    def test____properties____read_only(self, representation: RepresentationType) -> None:
        # Arrange
        cls = type(representation)

        # Act & Assert
        for name in ("type", "format"):
            descriptor = getattr(cls, name)
            assert isinstance(descriptor, property)
            assert descriptor.fset is None

    def test____slots____no_dict(self, representation: RepresentationType) -> None:
        assert not hasattr(representation, "__dict__")

    def test____slots____weakref(self, representation: RepresentationType) -> None:
        assert weakref.ref(representation)() is representation

    def test____hash____usable_as_dict_key(self, representation: RepresentationType) -> None:
        # Arrange
        mapping = {representation: "value"}

        # Act & Assert
        assert mapping[representation] == "value"

    def test____ascii____format_coerced_to_enum(self) -> None:
        # Arrange

        # Act
        representation = Ascii("T")  # type: ignore[arg-type]

        # Assert
        assert representation.text_format is TextFormat.TELNET
        assert representation == RepresentationType.ascii_telnet()

    @pytest.mark.parametrize("variant", [Ascii, Ebcdic], ids=lambda cls: cls.__name__)
    def test____text_types____unknown_format(self, variant: type[Ascii] | type[Ebcdic]) -> None:
        # Arrange

        # Act & Assert
        with pytest.raises(ValueError):
            variant("Z")  # type: ignore[arg-type]

    @pytest.mark.parametrize("variant", [Ascii, Ebcdic], ids=lambda cls: cls.__name__)
    def test____text_types____non_print_by_default(self, variant: type[Ascii] | type[Ebcdic]) -> None:
        # Arrange

        # Act
        representation = variant()

        # Assert
        assert representation.format == "N"
