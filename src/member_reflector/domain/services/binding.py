"""Name-to-value snapshots of an object's members.

Used to bind the data of an object into another namespace (for example
the globals of an embedded script) without caring whether each datum is a
field or a property.
"""

from typing import Any

from ...infrastructure.logging import get_logger
from ..models.member_kind import BindingFlags
from .member_enumerator import enumerate_members

logger = get_logger(__name__)


def member_values(
    instance: Any,
    flags: BindingFlags = BindingFlags.ALL,
    include_indexed: bool = False,
) -> dict[str, Any]:
    """Read every member of an object into a dictionary.

    Args:
        instance: Object to read
        flags: Visibility and scope filter
        include_indexed: Attempt to read indexed properties too, which
            raises ``IndexedMemberError``

    Returns:
        Mapping of member name to value, properties first
    """
    values: dict[str, Any] = {}
    for member in enumerate_members(instance, flags):
        if member.is_indexed and not include_indexed:
            logger.debug(f"Skipping indexed member {member.name}")
            continue
        values[member.name] = member.get_value(instance)
    return values


PUBLIC_MEMBERS = BindingFlags.PUBLIC | BindingFlags.INSTANCE | BindingFlags.STATIC


def bind_members(
    namespace: dict[str, Any],
    instance: Any,
    flags: BindingFlags = PUBLIC_MEMBERS,
) -> dict[str, Any]:
    """Copy the members of an object into an existing namespace.

    Args:
        namespace: Dictionary to update, e.g. script globals
        instance: Object to read
        flags: Visibility and scope filter (default: public members)

    Returns:
        The updated namespace
    """
    namespace.update(member_values(instance, flags))
    return namespace
