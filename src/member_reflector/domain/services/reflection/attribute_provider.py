#!/usr/bin/env python3

"""Metadata attribute lookup for a single field or property.

Attributes are read from ``typing.Annotated`` metadata (field annotations
and property getter return annotations) and from ``member_attributes``
decorators on property getters. With ``inherit=True`` the search continues
through same-named declarations on the base classes of the declaring type.
"""

from typing import Any

from ...models.attributes import allows_multiple, declared_attributes, is_inherited
from ...models.type_utils import unwrap_annotation
from .annotations import (
    PROPERTY_TYPES,
    getter_return_annotation,
    property_getter,
    resolve_annotations,
    slot_names,
)


def attributes_declared_on(owner: type, name: str) -> list[Any] | None:
    """Get the attributes a class body attaches to a member.

    Args:
        owner: Class to inspect (its bases are not searched)
        name: Member name

    Returns:
        List of attributes (possibly empty), or None if ``owner`` does not
        declare the member at all
    """
    candidate = vars(owner).get(name)
    if isinstance(candidate, PROPERTY_TYPES):
        getter = property_getter(candidate)
        _, metadata, _ = unwrap_annotation(getter_return_annotation(getter))
        return list(declared_attributes(getter)) + list(metadata)

    annotations = resolve_annotations(owner)
    if name in annotations:
        _, metadata, _ = unwrap_annotation(annotations[name])
        return list(metadata)

    if name in slot_names(owner):
        return []
    return None


class AttributeProvider:
    """Attribute source bound to one member of one declaring class."""

    def __init__(self, declaring_type: type, name: str):
        """Initialize the provider.

        Args:
            declaring_type: Class whose body declares the member
            name: Member name
        """
        self.declaring_type = declaring_type
        self.name = name

    def __repr__(self) -> str:
        return f"AttributeProvider({self.declaring_type.__qualname__}.{self.name})"

    def get_custom_attributes(self, inherit: bool) -> list[Any]:
        """Get all attributes of the member.

        Args:
            inherit: Also collect inheritable attributes from base declarations

        Returns:
            Own attributes in declaration order, followed by inherited ones
        """
        collected = list(attributes_declared_on(self.declaring_type, self.name) or [])
        if not inherit:
            return collected

        for base in self.declaring_type.__mro__[1:]:
            if base is object:
                continue
            inherited = attributes_declared_on(base, self.name)
            if inherited is None:
                continue
            for attribute in inherited:
                if not is_inherited(attribute):
                    continue
                if not allows_multiple(attribute) and any(
                    type(existing) is type(attribute) for existing in collected
                ):
                    continue
                collected.append(attribute)

        return collected

    def get_custom_attributes_of_type(self, attribute_type: type, inherit: bool) -> list[Any]:
        """Get the attributes assignable to ``attribute_type``."""
        return [a for a in self.get_custom_attributes(inherit) if isinstance(a, attribute_type)]

    def is_defined(self, attribute_type: type, inherit: bool) -> bool:
        """Check whether any attribute assignable to ``attribute_type`` is attached."""
        return len(self.get_custom_attributes_of_type(attribute_type, inherit)) > 0
