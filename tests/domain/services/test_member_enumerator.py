"""Tests for enumerating all members of an object."""

import logging
from typing import ClassVar

import pytest

from member_reflector import (
    BindingFlags,
    InvalidArgumentError,
    MemberKind,
    enumerate_members,
    enumerate_type_members,
    get_fields_and_properties,
    indexed_property,
)


class Example:
    count: int

    def __init__(self):
        self.count = 0
        self._name = ""

    @property
    def Name(self) -> str:
        return self._name

    @Name.setter
    def Name(self, value: str) -> None:
        self._name = value


class Table:
    def __init__(self):
        self._rows = ["first"]

    @indexed_property
    def Item(self, index: int) -> str:
        return self._rows[index]

    @Item.setter
    def Item(self, index: int, value: str) -> None:
        self._rows[index] = value


class Shape:
    sides: int = 0
    _cache_key: str = ""
    REGISTRY: ClassVar[list] = []

    @property
    def area(self) -> float:
        return 0.0

    @property
    def _internal(self) -> int:
        return 1


class Square(Shape):
    length: float = 1.0

    @property
    def area(self) -> float:
        return self.length**2


@pytest.mark.unit
class TestEnumerateMembers:
    """enumerate_members on instances."""

    def test_field_and_property_example(self):
        obj = Example()

        members = enumerate_members(obj)

        assert len(members) == 2
        name = next(m for m in members if m.name == "Name")
        name.set_value(obj, "x")
        assert name.get_value(obj, str) == "x"

    def test_indexed_property_example(self):
        table = Table()
        (item,) = enumerate_members(table)

        assert item.name == "Item"
        assert item.is_indexed is True

    def test_count_is_fields_plus_properties(self):
        members = enumerate_members(Shape())

        assert len(members) == 5
        assert sum(m.kind is MemberKind.PROPERTY for m in members) == 2
        assert sum(m.kind is MemberKind.FIELD for m in members) == 3

    def test_properties_precede_fields(self):
        kinds = [m.kind for m in enumerate_members(Square())]

        first_field = kinds.index(MemberKind.FIELD)
        assert all(kind is MemberKind.PROPERTY for kind in kinds[:first_field])
        assert all(kind is MemberKind.FIELD for kind in kinds[first_field:])

    def test_declaration_order_within_kind(self):
        names = [m.name for m in enumerate_members(Square())]

        assert names == ["area", "_internal", "length", "sides", "_cache_key", "REGISTRY"]

    def test_declaring_and_reflected_types(self):
        members = {m.name: m for m in enumerate_members(Square())}

        assert members["area"].declaring_type is Square
        assert members["_internal"].declaring_type is Shape
        assert members["sides"].declaring_type is Shape
        assert all(m.reflected_type is Square for m in members.values())

    def test_overridden_property_reads_derived_implementation(self):
        square = Square()
        square.length = 3.0
        area = next(m for m in enumerate_members(square) if m.name == "area")

        assert area.get_value(square, float) == 9.0

    def test_binding_flags_filter(self):
        names = [m.name for m in enumerate_members(Shape(), BindingFlags.PUBLIC | BindingFlags.INSTANCE)]

        assert names == ["area", "sides"]

    def test_returns_fresh_descriptors(self):
        shape = Shape()

        first = enumerate_members(shape)
        second = enumerate_members(shape)

        assert [m.name for m in first] == [m.name for m in second]
        assert all(a is not b for a, b in zip(first, second))

    def test_object_without_members(self):
        assert enumerate_members(object()) == []

    def test_none_is_rejected(self):
        with pytest.raises(InvalidArgumentError):
            enumerate_members(None)

    def test_none_error_is_value_error(self):
        with pytest.raises(ValueError):
            enumerate_members(None)

    def test_logs_member_count(self, caplog):
        caplog.set_level(logging.DEBUG, logger="member_reflector")

        enumerate_members(Shape())

        assert "Enumerated 5 members of Shape" in caplog.text

    def test_get_fields_and_properties_alias(self):
        shape = Shape()

        assert [m.name for m in get_fields_and_properties(shape)] == [
            m.name for m in enumerate_members(shape)
        ]


@pytest.mark.unit
class TestEnumerateTypeMembers:
    """enumerate_type_members on classes."""

    def test_class_members_match_instance_members(self):
        assert [m.name for m in enumerate_type_members(Square)] == [
            m.name for m in enumerate_members(Square())
        ]

    def test_instance_is_rejected(self):
        with pytest.raises(InvalidArgumentError):
            enumerate_type_members(Square())  # type: ignore[arg-type]
