"""Pytest configuration and shared fixtures."""

import os
import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from member_reflector.domain.services.reflection import TypeReflector
from member_reflector.infrastructure.config import DEFAULT_CONFIG
from member_reflector.infrastructure.logging import LoggerSetup


@pytest.fixture(autouse=True)
def clean_member_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove MEMBERS_* overrides so every test starts from the defaults."""
    for key in list(os.environ):
        if key.startswith("MEMBERS_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Undo any handler installation done by the command line."""
    yield
    LoggerSetup.reset()


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def reflector() -> TypeReflector:
    """Type reflector with the default configuration."""
    return TypeReflector(DEFAULT_CONFIG.copy())


@pytest.fixture
def make_reflector():
    """
    Factory for type reflectors with individual settings overridden.

    Usage:
        reflector = make_reflector(INCLUDE_SLOTS=False)
    """

    def factory(**overrides: object) -> TypeReflector:
        settings = DEFAULT_CONFIG.copy()
        settings.update(overrides)
        return TypeReflector(settings)

    return factory
