"""Tests for the indexed property descriptor."""

import pytest

from member_reflector.domain.models import IndexedAccessor, count_index_parameters, indexed_property


class Grid:
    def __init__(self):
        self._cells = {(0, 0): "origin"}
        self._labels = ["a", "b"]

    @indexed_property
    def cell(self, row: int, column: int) -> str:
        """Cell text at a row and column."""
        return self._cells.get((row, column), "")

    @cell.setter
    def cell(self, row: int, column: int, value: str) -> None:
        self._cells[(row, column)] = value

    @indexed_property
    def label(self, index: int) -> str:
        return self._labels[index]


@pytest.mark.unit
class TestIndexedProperty:
    """Subscript access through IndexedAccessor."""

    def test_class_access_returns_descriptor(self):
        assert isinstance(Grid.cell, indexed_property)
        assert Grid.cell.name == "cell"
        assert Grid.cell.__doc__ == "Cell text at a row and column."

    def test_instance_access_returns_accessor(self):
        accessor = Grid().label

        assert isinstance(accessor, IndexedAccessor)
        assert repr(accessor) == "<IndexedAccessor Grid.label>"

    def test_single_index_get(self):
        assert Grid().label[1] == "b"

    def test_multi_index_get_and_set(self):
        grid = Grid()

        grid.cell[2, 3] = "value"

        assert grid.cell[2, 3] == "value"
        assert grid.cell[0, 0] == "origin"

    def test_set_without_setter(self):
        with pytest.raises(AttributeError, match="has no setter"):
            Grid().label[0] = "z"

    def test_plain_assignment_is_rejected(self):
        with pytest.raises(AttributeError, match="only be assigned through an index"):
            Grid().label = ["x"]

    def test_index_parameter_count(self):
        assert Grid.cell.index_parameter_count == 2
        assert Grid.label.index_parameter_count == 1


@pytest.mark.unit
class TestCountIndexParameters:
    """Required positional parameters after self."""

    def test_plain_getter(self):
        def getter(self) -> int:
            return 0

        assert count_index_parameters(getter) == 0

    def test_optional_parameters_are_not_index_parameters(self):
        def getter(self, index: int, default: int = 0, *rest: int, flag: bool = False) -> int:
            return index

        assert count_index_parameters(getter) == 1

    def test_missing_getter(self):
        assert count_index_parameters(None) == 0
