#!/usr/bin/env python3

"""Domain services layer."""

from . import reflection
from .binding import bind_members, member_values
from .member_enumerator import enumerate_members, enumerate_type_members, get_fields_and_properties

__all__ = [
    "bind_members",
    "enumerate_members",
    "enumerate_type_members",
    "get_fields_and_properties",
    "member_values",
    "reflection",
]
