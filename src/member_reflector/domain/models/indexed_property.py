"""Property descriptor whose getter and setter take index arguments."""

import inspect
from collections.abc import Callable
from typing import Any


def count_index_parameters(getter: Callable[..., Any] | None) -> int:
    """Count the index parameters a property getter requires.

    Index parameters are the required positional parameters after ``self``.

    Args:
        getter: Property getter, or None for a write-only property

    Returns:
        Number of required index arguments (0 for a plain property)
    """
    if getter is None:
        return 0
    try:
        signature = inspect.signature(getter)
    except (TypeError, ValueError):
        # Builtins without signature metadata behave like plain getters
        return 0

    positional = [
        p
        for p in signature.parameters.values()
        if p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    ]
    return sum(1 for p in positional[1:] if p.default is inspect.Parameter.empty)


class indexed_property:  # noqa: N801 - named like the builtin property
    """A property that is read and written through an index.

    Example:
        >>> class Row:
        ...     def __init__(self):
        ...         self._cells = ["a", "b"]
        ...
        ...     @indexed_property
        ...     def cell(self, index: int) -> str:
        ...         return self._cells[index]
        ...
        ...     @cell.setter
        ...     def cell(self, index: int, value: str) -> None:
        ...         self._cells[index] = value
        >>> row = Row()
        >>> row.cell[1]
        'b'
    """

    def __init__(
        self,
        fget: Callable[..., Any],
        fset: Callable[..., None] | None = None,
        doc: str | None = None,
    ):
        self.fget = fget
        self.fset = fset
        self.__doc__ = doc if doc is not None else fget.__doc__
        self.name: str = fget.__name__

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def setter(self, fset: Callable[..., None]) -> "indexed_property":
        """Return a copy of this property with the given setter."""
        return type(self)(self.fget, fset, self.__doc__)

    @property
    def index_parameter_count(self) -> int:
        return count_index_parameters(self.fget)

    def __get__(self, obj: Any, objtype: type | None = None) -> Any:
        if obj is None:
            return self
        return IndexedAccessor(self, obj)

    def __set__(self, obj: Any, value: Any) -> None:
        raise AttributeError(f"indexed property '{self.name}' can only be assigned through an index")

    def get_item(self, obj: Any, key: Any) -> Any:
        return self.fget(obj, *self._index_args(key))

    def set_item(self, obj: Any, key: Any, value: Any) -> None:
        if self.fset is None:
            raise AttributeError(f"indexed property '{self.name}' has no setter")
        self.fset(obj, *self._index_args(key), value)

    def _index_args(self, key: Any) -> tuple[Any, ...]:
        # Tuple keys are spread over getters with several index parameters
        if isinstance(key, tuple) and self.index_parameter_count > 1:
            return key
        return (key,)


class IndexedAccessor:
    """Subscriptable view of an indexed property bound to one instance."""

    __slots__ = ("_prop", "_obj")

    def __init__(self, prop: indexed_property, obj: Any):
        self._prop = prop
        self._obj = obj

    def __getitem__(self, key: Any) -> Any:
        return self._prop.get_item(self._obj, key)

    def __setitem__(self, key: Any, value: Any) -> None:
        self._prop.set_item(self._obj, key, value)

    def __repr__(self) -> str:
        return f"<IndexedAccessor {type(self._obj).__name__}.{self._prop.name}>"
