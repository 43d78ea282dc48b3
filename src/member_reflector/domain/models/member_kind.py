"""Member kind and binding flag enumerations."""

from enum import Enum, Flag


class MemberKind(Enum):
    """Origin of a member descriptor. Used for diagnostics only."""

    FIELD = "field"  # Annotated attribute, dataclass field or __slots__ entry
    PROPERTY = "property"  # property, cached_property or indexed_property


class BindingFlags(Flag):
    """Selects members by visibility and scope.

    A member matches when both its visibility bit (PUBLIC / NON_PUBLIC) and
    its scope bit (INSTANCE / STATIC) are present in the requested flags.
    """

    PUBLIC = 1
    NON_PUBLIC = 2
    INSTANCE = 4
    STATIC = 8
    ALL = PUBLIC | NON_PUBLIC | INSTANCE | STATIC

    @classmethod
    def for_member(cls, name: str, is_static: bool) -> "BindingFlags":
        """Get the flags describing a member with the given name and scope.

        Args:
            name: Member name; a leading underscore marks it non-public
            is_static: True for class-level (ClassVar) members

        Returns:
            Combined visibility and scope flags
        """
        visibility = cls.NON_PUBLIC if name.startswith("_") else cls.PUBLIC
        scope = cls.STATIC if is_static else cls.INSTANCE
        return visibility | scope

    def selects(self, member_flags: "BindingFlags") -> bool:
        """Check whether these requested flags select a member.

        Args:
            member_flags: Flags from ``for_member``

        Returns:
            True if both visibility and scope of the member are requested
        """
        visibility = member_flags & (BindingFlags.PUBLIC | BindingFlags.NON_PUBLIC)
        scope = member_flags & (BindingFlags.INSTANCE | BindingFlags.STATIC)
        return bool(self & visibility) and bool(self & scope)
