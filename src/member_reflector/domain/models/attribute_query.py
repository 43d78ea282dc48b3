"""Single-result metadata attribute lookup."""

from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class SupportsCustomAttributes(Protocol):
    """Anything that can list its metadata attributes filtered by type."""

    def get_custom_attributes(
        self, attribute_type: type | None = None, inherit: bool = False
    ) -> list[Any]: ...


def get_custom_attribute(
    member: SupportsCustomAttributes, attribute_type: type[T], inherit: bool = False
) -> T | None:
    """Get the first attribute of a member assignable to ``attribute_type``.

    Args:
        member: Member descriptor (or any object listing attributes)
        attribute_type: Attribute class to look for; subclasses match
        inherit: Also search same-named declarations in base classes

    Returns:
        The first matching attribute, or None if the member has none
    """
    matches = member.get_custom_attributes(attribute_type, inherit)
    if matches:
        return matches[0]
    return None
