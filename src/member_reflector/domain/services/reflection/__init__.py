#!/usr/bin/env python3

"""Reflection facility: field and property discovery on classes."""

from .attribute_provider import AttributeProvider, attributes_declared_on
from .type_reflector import TypeReflector

__all__ = [
    "AttributeProvider",
    "TypeReflector",
    "attributes_declared_on",
]
