#!/usr/bin/env python3

"""Member reflection domain models."""

from .attribute_query import SupportsCustomAttributes, get_custom_attribute
from .attributes import MemberAttribute, member_attributes
from .indexed_property import IndexedAccessor, count_index_parameters, indexed_property
from .member_descriptor import MemberDescriptor
from .member_kind import BindingFlags, MemberKind
from .member_source import AttributeSource, FieldSource, PropertySource

__all__ = [
    "AttributeSource",
    "BindingFlags",
    "FieldSource",
    "IndexedAccessor",
    "MemberAttribute",
    "MemberDescriptor",
    "MemberKind",
    "PropertySource",
    "SupportsCustomAttributes",
    "count_index_parameters",
    "get_custom_attribute",
    "indexed_property",
    "member_attributes",
]
