"""Metadata attributes attachable to fields and properties.

Any object can be used as a metadata attribute. Fields carry attributes in
``typing.Annotated`` metadata; properties carry them in the getter's
``Annotated`` return annotation or through the ``member_attributes``
decorator.

Subclassing ``MemberAttribute`` is only needed to change how an attribute
behaves during an inheritance search.
"""

from collections.abc import Callable
from functools import cached_property
from typing import Any, ClassVar, TypeVar

ATTRIBUTES_ATTR = "__member_attributes__"

T = TypeVar("T")


class MemberAttribute:
    """Optional base class for metadata attributes.

    Class attributes:
        inherited: Whether the attribute is found on a base declaration when
            searching with ``inherit=True``
        allow_multiple: Whether a base declaration may contribute another
            instance of this attribute type when the member already has one
    """

    inherited: ClassVar[bool] = True
    allow_multiple: ClassVar[bool] = False

    def __repr__(self) -> str:
        fields = ", ".join(f"{key}={value!r}" for key, value in vars(self).items())
        return f"{type(self).__name__}({fields})"


def is_inherited(attribute: Any) -> bool:
    """Check whether an attribute may be found on a base declaration."""
    return bool(getattr(type(attribute), "inherited", True))


def allows_multiple(attribute: Any) -> bool:
    """Check whether several instances of the attribute's type may be collected."""
    return bool(getattr(type(attribute), "allow_multiple", False))


def member_attributes(*attributes: Any) -> Callable[[T], T]:
    """Attach metadata attributes to a property getter.

    Works below ``@property`` (on the getter function) as well as above it
    (on the property object, in which case the getter is annotated). Applying
    the decorator more than once accumulates attributes in declaration order.

    Example:
        >>> class User:
        ...     @property
        ...     @member_attributes(Label("Display name"))
        ...     def name(self) -> str:
        ...         return self._name
    """

    def decorator(target: T) -> T:
        holder = _attribute_holder(target)
        existing = tuple(getattr(holder, ATTRIBUTES_ATTR, ()))
        # Decorators apply bottom-up; keep the top-most first.
        setattr(holder, ATTRIBUTES_ATTR, attributes + existing)
        return target

    return decorator


def declared_attributes(getter: Any) -> tuple[Any, ...]:
    """Get attributes attached to a getter with ``member_attributes``."""
    if getter is None:
        return ()
    return tuple(getattr(getter, ATTRIBUTES_ATTR, ()))


def _attribute_holder(target: Any) -> Any:
    if isinstance(target, property):
        if target.fget is None:
            raise TypeError("Cannot attach attributes to a property without a getter")
        return target.fget
    if isinstance(target, cached_property):
        return target.func
    fget = getattr(target, "fget", None)
    if fget is not None:
        return fget
    return target
