"""Annotation and descriptor lookups on classes and property getters."""

import inspect
from functools import cached_property
from typing import Any

from ....infrastructure.logging import get_logger
from ...models.indexed_property import indexed_property

logger = get_logger(__name__)

PROPERTY_TYPES: tuple[type, ...] = (property, cached_property, indexed_property)


def is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def resolve_annotations(obj: Any) -> dict[str, Any]:
    """Get the annotations declared directly on a class or function.

    String annotations are evaluated; if any of them cannot be resolved the
    raw annotations are returned instead.

    Args:
        obj: Class or function

    Returns:
        Mapping of name to annotation, in declaration order
    """
    try:
        return dict(inspect.get_annotations(obj, eval_str=True))
    except (NameError, SyntaxError, TypeError) as e:
        logger.debug(f"Using unresolved annotations of {getattr(obj, '__qualname__', obj)}: {e}")
        return dict(inspect.get_annotations(obj))


def property_getter(prop: Any) -> Any:
    """Get the getter function behind a property-like descriptor."""
    if isinstance(prop, cached_property):
        return prop.func
    return getattr(prop, "fget", None)


def getter_return_annotation(getter: Any) -> Any:
    """Get the return annotation of a property getter, or Any if missing."""
    if getter is None:
        return Any
    return resolve_annotations(getter).get("return", Any)


def slot_names(cls: type) -> list[str]:
    """Get the data slot names declared directly on a class.

    Private slot names are returned in their mangled form, matching the
    descriptors stored in the class dict.
    """
    slots = vars(cls).get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)

    names = []
    for slot in slots:
        if slot in ("__dict__", "__weakref__"):
            continue
        if slot.startswith("__") and not slot.endswith("__"):
            slot = f"_{cls.__name__.lstrip('_')}{slot}"
        names.append(slot)
    return names
