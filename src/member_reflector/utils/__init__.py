"""Utilities module initialization."""

from .class_loader import load_class
from .member_format import format_member

__all__ = [
    "format_member",
    "load_class",
]
