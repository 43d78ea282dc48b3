"""Text rendering of member descriptors for the command line."""

from ..domain.models import MemberDescriptor
from ..domain.models.type_utils import type_name


def format_member(member: MemberDescriptor, show_attributes: bool = False) -> str:
    """Format a member as a single line.

    Example:
        ``property  str                 name  (User)``
    """
    markers = []
    if not member.can_write:
        markers.append("[read-only]")
    elif not member.can_read:
        markers.append("[write-only]")
    if member.is_static:
        markers.append("[static]")
    if member.is_indexed:
        markers.append("[indexed]")

    line = (
        f"{member.kind.value:<9} {type_name(member.value_type):<20} {member.name}"
        f"  ({member.declaring_type.__qualname__})"
    )
    if markers:
        line += " " + " ".join(markers)

    if show_attributes:
        attributes = member.get_custom_attributes(inherit=True)
        if attributes:
            line += "  " + ", ".join(repr(a) for a in attributes)
    return line
