"""member-reflector - uniform access to the fields and properties of Python objects."""

from .domain.errors import (
    IndexedMemberError,
    InvalidArgumentError,
    MemberNotFoundError,
    MemberReflectionError,
    TypeMismatchError,
)
from .domain.models import (
    BindingFlags,
    MemberAttribute,
    MemberDescriptor,
    MemberKind,
    get_custom_attribute,
    indexed_property,
    member_attributes,
)
from .domain.services import (
    bind_members,
    enumerate_members,
    enumerate_type_members,
    get_fields_and_properties,
    member_values,
)
from .domain.services.reflection import TypeReflector
from .infrastructure.config import Config

__all__ = [
    "BindingFlags",
    "Config",
    "IndexedMemberError",
    "InvalidArgumentError",
    "MemberAttribute",
    "MemberDescriptor",
    "MemberKind",
    "MemberNotFoundError",
    "MemberReflectionError",
    "TypeMismatchError",
    "TypeReflector",
    "bind_members",
    "enumerate_members",
    "enumerate_type_members",
    "get_custom_attribute",
    "get_fields_and_properties",
    "indexed_property",
    "member_attributes",
    "member_values",
]
