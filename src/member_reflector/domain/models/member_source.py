#!/usr/bin/env python3

"""Raw field and property information produced by the type reflector."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from .member_kind import BindingFlags


class AttributeSource(Protocol):
    """Metadata lookup bound to a single member."""

    def get_custom_attributes(self, inherit: bool) -> list[Any]: ...

    def get_custom_attributes_of_type(self, attribute_type: type, inherit: bool) -> list[Any]: ...

    def is_defined(self, attribute_type: type, inherit: bool) -> bool: ...


@dataclass(frozen=True)
class FieldSource:
    """A field as discovered on a class."""

    name: str
    value_type: Any
    declaring_type: type
    reflected_type: type
    getter: Callable[[Any], Any]
    setter: Callable[[Any, Any], None]
    attributes: AttributeSource
    is_static: bool = False
    is_slot: bool = False

    @property
    def binding_flags(self) -> BindingFlags:
        return BindingFlags.for_member(self.name, self.is_static)


@dataclass(frozen=True)
class PropertySource:
    """A property as discovered on a class."""

    name: str
    value_type: Any
    declaring_type: type
    reflected_type: type
    getter: Callable[[Any], Any]
    setter: Callable[[Any, Any], None]
    attributes: AttributeSource
    index_parameter_count: int = 0  # Required getter arguments after self
    can_read: bool = True
    can_write: bool = True

    @property
    def binding_flags(self) -> BindingFlags:
        return BindingFlags.for_member(self.name, False)
