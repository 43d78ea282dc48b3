#!/usr/bin/env python3

"""Domain layer containing the member model and reflection services."""

from . import errors, models, services

__all__ = [
    "errors",
    "models",
    "services",
]
