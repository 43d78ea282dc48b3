#!/usr/bin/env python3

"""Exceptions raised by the member reflection layer.

Each error also derives from the builtin exception a caller would catch
for the same situation, so ``except ValueError`` keeps working for
``InvalidArgumentError`` and so on.
"""


class MemberReflectionError(Exception):
    """Base class for all member reflection errors."""


class IndexedMemberError(MemberReflectionError, NotImplementedError):
    """Value access was attempted on a member that requires index arguments."""


class InvalidArgumentError(MemberReflectionError, ValueError):
    """An absent or invalid argument was passed to a reflection operation."""


class TypeMismatchError(MemberReflectionError, TypeError):
    """A value does not conform to the type a member or caller expects."""


class MemberNotFoundError(MemberReflectionError, LookupError):
    """A named field or property is not declared anywhere on the type."""
