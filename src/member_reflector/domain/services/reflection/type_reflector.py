#!/usr/bin/env python3

"""Discovery of the fields and properties declared on a class.

This module is the reflection facility the member descriptors are built
on. It walks the class hierarchy from the most-derived class towards the
bases (``object`` excluded) and reports:

- Fields: class-body annotations (dataclass fields included) and
  ``__slots__`` entries. ``ClassVar`` annotations are static fields.
- Properties: ``property``, ``functools.cached_property`` and
  ``indexed_property`` objects found in a class dict.

A name declared in a more-derived class hides the same name further up.
"""

import dataclasses
from collections.abc import Callable, Iterator
from functools import cached_property
from typing import Any

from ....infrastructure.config import get_config
from ....infrastructure.logging import get_logger
from ...errors import MemberNotFoundError
from ...models.indexed_property import count_index_parameters
from ...models.member_kind import BindingFlags
from ...models.member_source import FieldSource, PropertySource
from ...models.type_utils import unwrap_annotation
from .annotations import (
    PROPERTY_TYPES,
    getter_return_annotation,
    is_dunder,
    property_getter,
    resolve_annotations,
    slot_names,
)
from .attribute_provider import AttributeProvider

logger = get_logger(__name__)

_ABSENT = object()


class TypeReflector:
    """Lists the fields and properties of a class.

    The reflector keeps no per-class state; every call inspects the class
    again.
    """

    def __init__(self, settings: dict[str, Any] | None = None):
        """Initialize the reflector.

        Args:
            settings: Configuration dictionary (defaults to ``get_config()``)
        """
        self.settings = settings if settings is not None else get_config()

    def declared_properties(
        self, cls: type, flags: BindingFlags = BindingFlags.ALL
    ) -> list[PropertySource]:
        """Get the properties of a class and its bases.

        Args:
            cls: Class to inspect; becomes the reflected type
            flags: Visibility and scope filter

        Returns:
            Property sources, most-derived class first
        """
        properties = []
        for owner, name, kind in self._declarations(cls):
            if kind != "property":
                continue
            source = self._property_source(cls, owner, name)
            if flags.selects(source.binding_flags):
                properties.append(source)

        logger.debug(f"Found {len(properties)} properties on {cls.__qualname__}")
        return properties

    def declared_fields(self, cls: type, flags: BindingFlags = BindingFlags.ALL) -> list[FieldSource]:
        """Get the fields of a class and its bases.

        Args:
            cls: Class to inspect; becomes the reflected type
            flags: Visibility and scope filter

        Returns:
            Field sources, most-derived class first
        """
        fields = []
        for owner, name, kind in self._declarations(cls):
            if kind == "property":
                continue
            source = self._field_source(cls, owner, name, is_slot=(kind == "slot"))
            if flags.selects(source.binding_flags):
                fields.append(source)

        logger.debug(f"Found {len(fields)} fields on {cls.__qualname__}")
        return fields

    def get_field(self, cls: type, name: str) -> FieldSource:
        """Get a single field by name.

        Raises:
            MemberNotFoundError: If no class in the hierarchy declares the field
        """
        for source in self.declared_fields(cls):
            if source.name == name:
                return source
        raise MemberNotFoundError(f"Field '{name}' not found on {cls.__qualname__}")

    def get_property(self, cls: type, name: str) -> PropertySource:
        """Get a single property by name.

        Raises:
            MemberNotFoundError: If no class in the hierarchy declares the property
        """
        for source in self.declared_properties(cls):
            if source.name == name:
                return source
        raise MemberNotFoundError(f"Property '{name}' not found on {cls.__qualname__}")

    def _declarations(self, cls: type) -> Iterator[tuple[type, str, str]]:
        """Yield (owner, name, kind) for every visible declaration.

        Kind is "property", "field" or "slot".
        """
        seen: set[str] = set()
        for owner in cls.__mro__:
            if owner is object:
                continue

            declared: list[tuple[str, str]] = []
            owner_dict = vars(owner)

            for name, value in owner_dict.items():
                if is_dunder(name) or not self._is_reported_property(value):
                    continue
                declared.append((name, "property"))

            property_names = {name for name, _ in declared}
            annotations = resolve_annotations(owner)
            slots = slot_names(owner)

            for name, annotation in annotations.items():
                if is_dunder(name) or name in property_names or _is_init_var(annotation):
                    continue
                declared.append((name, "slot" if name in slots else "field"))

            for name in slots:
                if name not in annotations:
                    declared.append((name, "slot"))

            for name, kind in declared:
                if name in seen:
                    continue
                seen.add(name)
                if kind == "slot" and not self.settings["INCLUDE_SLOTS"]:
                    continue
                yield owner, name, kind

    def _is_reported_property(self, value: Any) -> bool:
        if not isinstance(value, PROPERTY_TYPES):
            return False
        return self.settings["INCLUDE_CACHED_PROPERTIES"] or not isinstance(value, cached_property)

    def _field_source(self, cls: type, owner: type, name: str, is_slot: bool) -> FieldSource:
        annotation = resolve_annotations(owner).get(name, Any)
        value_type, _, is_static = unwrap_annotation(annotation)

        getter: Callable[[Any], Any]
        setter: Callable[[Any, Any], None]
        if is_static:
            getter, setter = _static_accessors(owner, name)
        elif is_slot:
            getter, setter = _slot_accessors(vars(owner)[name])
        else:
            getter, setter = _instance_accessors(owner, name)

        return FieldSource(
            name=name,
            value_type=value_type,
            declaring_type=owner,
            reflected_type=cls,
            getter=getter,
            setter=setter,
            attributes=AttributeProvider(owner, name),
            is_static=is_static,
            is_slot=is_slot,
        )

    def _property_source(self, cls: type, owner: type, name: str) -> PropertySource:
        prop = vars(owner)[name]
        getter_func = property_getter(prop)
        value_type, _, _ = unwrap_annotation(getter_return_annotation(getter_func))

        def get(target: Any) -> Any:
            return prop.__get__(target, type(target))

        if hasattr(prop, "__set__"):
            def set_(target: Any, value: Any) -> None:
                prop.__set__(target, value)
            can_write = getattr(prop, "fset", None) is not None
        else:
            # cached_property: assignment replaces the cached value
            attr_name = prop.attrname or name

            def set_(target: Any, value: Any) -> None:
                vars(target)[attr_name] = value
            can_write = True

        return PropertySource(
            name=name,
            value_type=value_type,
            declaring_type=owner,
            reflected_type=cls,
            getter=get,
            setter=set_,
            attributes=AttributeProvider(owner, name),
            index_parameter_count=count_index_parameters(getter_func),
            can_read=getter_func is not None,
            can_write=can_write,
        )


def _is_init_var(annotation: Any) -> bool:
    return isinstance(annotation, dataclasses.InitVar) or annotation is dataclasses.InitVar


def _is_data_descriptor(value: Any) -> bool:
    return hasattr(type(value), "__set__") or hasattr(type(value), "__delete__")


def _shadowing_attribute(target_type: type, owner: type, name: str) -> Any:
    """Get the class-level value ``name`` resolves to on ``target_type``.

    A descriptor declared under the same name by a class other than
    ``owner`` does not count; the owner's own class-level value (or
    ``_ABSENT``) is returned instead.
    """
    for klass in target_type.__mro__:
        klass_dict = vars(klass)
        if name in klass_dict:
            value = klass_dict[name]
            if klass is owner or not hasattr(value, "__get__"):
                return value
            break
    return vars(owner).get(name, _ABSENT)


def _static_accessors(owner: type, name: str) -> tuple[Callable[[Any], Any], Callable[[Any, Any], None]]:
    # Static fields live on the declaring class; the target is ignored
    def get(target: Any) -> Any:
        return getattr(owner, name, None)

    def set_(target: Any, value: Any) -> None:
        setattr(owner, name, value)

    return get, set_


def _slot_accessors(slot: Any) -> tuple[Callable[[Any], Any], Callable[[Any, Any], None]]:
    def get(target: Any) -> Any:
        try:
            return slot.__get__(target, type(target))
        except AttributeError:
            # Empty slot
            return None

    def set_(target: Any, value: Any) -> None:
        slot.__set__(target, value)

    return get, set_


def _instance_accessors(owner: type, name: str) -> tuple[Callable[[Any], Any], Callable[[Any, Any], None]]:
    def get(target: Any) -> Any:
        class_value = _shadowing_attribute(type(target), owner, name)
        if _is_data_descriptor(class_value):
            return class_value.__get__(target, type(target))

        instance_dict = getattr(target, "__dict__", None)
        if instance_dict is not None and name in instance_dict:
            return instance_dict[name]
        if class_value is _ABSENT:
            return None
        if hasattr(class_value, "__get__"):
            return class_value.__get__(target, type(target))
        return class_value

    def set_(target: Any, value: Any) -> None:
        for klass in type(target).__mro__:
            if name in vars(klass):
                if klass is not owner and _is_data_descriptor(vars(klass)[name]):
                    # A subclass descriptor hides the field; store past it
                    target.__dict__[name] = value
                    return
                break
        setattr(target, name, value)

    return get, set_
