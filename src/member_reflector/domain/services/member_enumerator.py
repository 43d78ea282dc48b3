#!/usr/bin/env python3

"""Enumeration of all fields and properties of an object."""

from typing import Any

from ...infrastructure.config import get_config
from ...infrastructure.logging import get_logger, log_timing
from ..errors import InvalidArgumentError
from ..models.member_descriptor import MemberDescriptor
from ..models.member_kind import BindingFlags
from .reflection import TypeReflector

logger = get_logger(__name__)


@log_timing
def enumerate_members(instance: Any, flags: BindingFlags = BindingFlags.ALL) -> list[MemberDescriptor]:
    """Get a descriptor for every field and property of an object.

    The runtime type of ``instance`` is inspected, including its base
    classes. All properties come first, then all fields.

    Args:
        instance: Object whose members to enumerate
        flags: Visibility and scope filter (default: everything)

    Returns:
        New member descriptors, properties before fields

    Raises:
        InvalidArgumentError: If ``instance`` is None
    """
    if instance is None:
        raise InvalidArgumentError("Cannot enumerate members of None")
    return _enumerate(type(instance), flags)


def enumerate_type_members(cls: type, flags: BindingFlags = BindingFlags.ALL) -> list[MemberDescriptor]:
    """Get a descriptor for every field and property of a class.

    Args:
        cls: Class whose members to enumerate
        flags: Visibility and scope filter (default: everything)

    Returns:
        New member descriptors, properties before fields

    Raises:
        InvalidArgumentError: If ``cls`` is not a class
    """
    if not isinstance(cls, type):
        raise InvalidArgumentError(f"Expected a class, got {type(cls).__name__}")
    return _enumerate(cls, flags)


def get_fields_and_properties(instance: Any) -> list[MemberDescriptor]:
    """Get descriptors for all fields and properties of an object."""
    return enumerate_members(instance)


def _enumerate(cls: type, flags: BindingFlags) -> list[MemberDescriptor]:
    settings = get_config()
    reflector = TypeReflector(settings)
    enforce = settings["ENFORCE_VALUE_TYPES"]

    members = [
        MemberDescriptor.from_property(source, enforce_value_types=enforce)
        for source in reflector.declared_properties(cls, flags)
    ]
    members.extend(
        MemberDescriptor.from_field(source, enforce_value_types=enforce)
        for source in reflector.declared_fields(cls, flags)
    )

    logger.debug(f"Enumerated {len(members)} members of {cls.__qualname__}")
    return members
