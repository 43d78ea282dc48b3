"""Helpers for working with member value types.

Value types are whatever a class declares in its annotations, so they can
be plain classes, ``typing`` constructs, or unresolved strings.
"""

import types
from typing import Annotated, Any, ClassVar, TypeVar, Union, get_args, get_origin

# Zero values of the numeric builtins; every other type defaults to None
ZERO_VALUES: dict[type, Any] = {
    int: 0,
    float: 0.0,
    bool: False,
    complex: 0j,
}


def unwrap_annotation(annotation: Any) -> tuple[Any, tuple[Any, ...], bool]:
    """Strip ``ClassVar`` and ``Annotated`` wrappers from an annotation.

    Args:
        annotation: Raw annotation as declared on the class

    Returns:
        Tuple of (bare type, Annotated metadata, whether ClassVar was present)
    """
    metadata: tuple[Any, ...] = ()
    is_class_var = False
    current = annotation

    while True:
        origin = get_origin(current)
        if origin is Annotated:
            metadata += tuple(current.__metadata__)
            current = current.__origin__
        elif origin is ClassVar or current is ClassVar:
            is_class_var = True
            args = get_args(current)
            current = args[0] if args else Any
        else:
            break

    if isinstance(current, str) and _is_class_var_string(current):
        is_class_var = True

    return current, metadata, is_class_var


def zero_value(value_type: Any) -> Any:
    """Get the value an absent member reads as for a requested type."""
    bare, _, _ = unwrap_annotation(value_type)
    if isinstance(bare, type):
        return ZERO_VALUES.get(bare)
    return None


def conforms_to(value: Any, value_type: Any) -> bool:
    """Check whether a value is acceptable for a declared or requested type.

    ``Any``, unresolved string annotations and type variables accept
    everything. Unions accept a value matching any arm, generic aliases
    are checked against their origin class only.
    """
    bare, _, _ = unwrap_annotation(value_type)

    if bare is Any or isinstance(bare, (str, TypeVar)):
        return True
    if bare is None or bare is type(None):
        return value is None

    origin = get_origin(bare)
    if origin is Union or origin is types.UnionType:
        return any(conforms_to(value, arm) for arm in get_args(bare))
    if origin is not None:
        bare = origin

    if isinstance(bare, type):
        return isinstance(value, bare)
    # Protocols, NewType and other constructs isinstance cannot check
    return True


def type_name(value_type: Any) -> str:
    """Get a readable name for a value type."""
    if value_type is Any:
        return "Any"
    if isinstance(value_type, type) and get_origin(value_type) is None:
        if value_type.__module__ == "builtins":
            return value_type.__qualname__
        return f"{value_type.__module__}.{value_type.__qualname__}"
    return str(value_type).replace("typing.", "")


def _is_class_var_string(annotation: str) -> bool:
    stripped = annotation.strip()
    return stripped.startswith(("ClassVar", "typing.ClassVar", "t.ClassVar"))
