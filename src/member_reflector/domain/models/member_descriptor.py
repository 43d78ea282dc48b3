#!/usr/bin/env python3

"""Uniform descriptor for fields and properties.

A ``MemberDescriptor`` wraps either a ``FieldSource`` or a
``PropertySource`` so that calling code can enumerate, read, write and
inspect every datum of an object without caring how it is stored. The
origin is only kept in ``kind`` for diagnostics; behavior never branches
on it after construction.
"""

from typing import Any, TypeVar, overload

from ...infrastructure.logging import get_logger
from ..errors import IndexedMemberError, TypeMismatchError
from .attribute_query import get_custom_attribute
from .member_kind import BindingFlags, MemberKind
from .member_source import FieldSource, PropertySource
from .type_utils import conforms_to, type_name, zero_value

logger = get_logger(__name__)

T = TypeVar("T")


class MemberDescriptor:
    """A field or property of a type, accessed through one interface.

    Accessors and the attribute source are bound to the original member
    when the descriptor is created and the descriptor cannot be modified
    afterwards.

    Example:
        >>> descriptor = enumerate_members(user)[0]
        >>> descriptor.set_value(user, "x")
        >>> descriptor.get_value(user, str)
        'x'
    """

    __slots__ = (
        "_name",
        "_kind",
        "_value_type",
        "_declaring_type",
        "_reflected_type",
        "_is_indexed",
        "_is_static",
        "_can_read",
        "_can_write",
        "_get_value",
        "_set_value",
        "_attributes",
        "_enforce_value_types",
    )

    def __init__(
        self,
        source: FieldSource | PropertySource,
        *,
        enforce_value_types: bool = False,
    ):
        """Initialize the descriptor from a field or property source.

        Args:
            source: Field or property information from the type reflector
            enforce_value_types: Reject values that do not conform to
                ``value_type`` in ``set_value`` before calling the setter
        """
        if isinstance(source, FieldSource):
            kind = MemberKind.FIELD
            is_indexed = False
            is_static = source.is_static
            can_read = can_write = True
        elif isinstance(source, PropertySource):
            kind = MemberKind.PROPERTY
            is_indexed = source.index_parameter_count > 0
            is_static = False
            can_read = source.can_read
            can_write = source.can_write
        else:
            raise TypeError(
                f"Expected FieldSource or PropertySource, got {type(source).__name__}"
            )

        self._init_slot("_name", source.name)
        self._init_slot("_kind", kind)
        self._init_slot("_value_type", source.value_type)
        self._init_slot("_declaring_type", source.declaring_type)
        self._init_slot("_reflected_type", source.reflected_type)
        self._init_slot("_is_indexed", is_indexed)
        self._init_slot("_is_static", is_static)
        self._init_slot("_can_read", can_read)
        self._init_slot("_can_write", can_write)
        self._init_slot("_get_value", source.getter)
        self._init_slot("_set_value", source.setter)
        self._init_slot("_attributes", source.attributes)
        self._init_slot("_enforce_value_types", enforce_value_types)

    @classmethod
    def from_field(cls, source: FieldSource, **kwargs: Any) -> "MemberDescriptor":
        """Create a descriptor for a field."""
        if not isinstance(source, FieldSource):
            raise TypeError(f"Expected FieldSource, got {type(source).__name__}")
        return cls(source, **kwargs)

    @classmethod
    def from_property(cls, source: PropertySource, **kwargs: Any) -> "MemberDescriptor":
        """Create a descriptor for a property."""
        if not isinstance(source, PropertySource):
            raise TypeError(f"Expected PropertySource, got {type(source).__name__}")
        return cls(source, **kwargs)

    def _init_slot(self, slot: str, value: Any) -> None:
        object.__setattr__(self, slot, value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"<MemberDescriptor {self._kind.value} {type_name(self._value_type)} {self._name}>"

    # Metadata

    @property
    def name(self) -> str:
        """Name of the member as declared on its owning type."""
        return self._name

    @property
    def kind(self) -> MemberKind:
        """Whether the descriptor was built from a field or a property."""
        return self._kind

    @property
    def value_type(self) -> Any:
        """Declared type of the value the member holds."""
        return self._value_type

    @property
    def declaring_type(self) -> type:
        """Class whose body declares the member."""
        return self._declaring_type

    @property
    def reflected_type(self) -> type:
        """Class through which the member was discovered."""
        return self._reflected_type

    @property
    def is_indexed(self) -> bool:
        """True if the member is a property that requires index arguments."""
        return self._is_indexed

    @property
    def is_static(self) -> bool:
        return self._is_static

    @property
    def can_read(self) -> bool:
        """False for a property without a getter."""
        return self._can_read

    @property
    def can_write(self) -> bool:
        """False for a property without a setter."""
        return self._can_write

    @property
    def binding_flags(self) -> BindingFlags:
        return BindingFlags.for_member(self._name, self._is_static)

    # Value access

    @overload
    def get_value(self, target: Any) -> Any: ...

    @overload
    def get_value(self, target: Any, as_type: type[T]) -> T: ...

    def get_value(self, target: Any, as_type: Any = None) -> Any:
        """Get the value of this member from an object.

        Args:
            target: Object to read from (ignored by static fields)
            as_type: Optional type the caller expects

        Returns:
            The member value. An absent (None) value reads as the zero value
            of ``as_type``: 0, 0.0, False or 0j for numeric builtins, None
            otherwise.

        Raises:
            IndexedMemberError: If the member requires index arguments
            TypeMismatchError: If a present value does not conform to ``as_type``
        """
        if self._is_indexed:
            raise IndexedMemberError("Cannot get indexed values")

        value = self._get_value(target)
        if value is None:
            return zero_value(as_type) if as_type is not None else None

        if as_type is not None and not conforms_to(value, as_type):
            raise TypeMismatchError(
                f"Value of {self._name} is {type(value).__name__}, "
                f"not {type_name(as_type)}"
            )
        return value

    def set_value(self, target: Any, value: Any) -> None:
        """Set the value of this member on an object.

        Args:
            target: Object to write to (ignored by static fields)
            value: Value to store

        Raises:
            IndexedMemberError: If the member requires index arguments
            TypeMismatchError: If the accessor rejects the value with a
                TypeError, or value types are enforced and the value does
                not conform to ``value_type``
        """
        if self._is_indexed:
            raise IndexedMemberError("Cannot set indexed values")

        if self._enforce_value_types and not conforms_to(value, self._value_type):
            raise TypeMismatchError(
                f"Cannot assign {type(value).__name__} to {self._name} "
                f"of type {type_name(self._value_type)}"
            )

        try:
            self._set_value(target, value)
        except TypeMismatchError:
            raise
        except TypeError as e:
            raise TypeMismatchError(f"Cannot assign {type(value).__name__} to {self._name}: {e}") from e

        logger.debug(f"Set {self._declaring_type.__name__}.{self._name}")

    # Metadata attributes

    def get_custom_attribute(self, attribute_type: type[T], inherit: bool = False) -> T | None:
        """Get the first attribute assignable to ``attribute_type``, or None."""
        return get_custom_attribute(self, attribute_type, inherit)

    def get_custom_attributes(
        self, attribute_type: type | None = None, inherit: bool = False
    ) -> list[Any]:
        """Get the metadata attributes attached to this member.

        Args:
            attribute_type: Only return attributes assignable to this type;
                None returns every attribute
            inherit: Also search same-named declarations in base classes

        Returns:
            List of attributes, empty if none are defined
        """
        if attribute_type is None:
            return self._attributes.get_custom_attributes(inherit)
        return self._attributes.get_custom_attributes_of_type(attribute_type, inherit)

    def is_defined(self, attribute_type: type, inherit: bool = False) -> bool:
        """Check whether an attribute assignable to ``attribute_type`` is attached."""
        return self._attributes.is_defined(attribute_type, inherit)
