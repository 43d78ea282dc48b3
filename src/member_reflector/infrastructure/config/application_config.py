"""Configuration management for the member-reflector command line."""

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

TARGET_PATTERN = re.compile(r"^[A-Za-z_][\w.]*:[A-Za-z_][\w.]*$")


@dataclass
class Config:
    """Configuration for the member-reflector command line."""

    target: str | None = None
    verbose: bool = False
    show_attributes: bool = False
    log_dir: Path = Path("logs")

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "Config":
        """
        Load configuration from environment variables or .env file.

        Args:
            env_path: Optional path to .env file (defaults to .env in current directory)

        Returns:
            Config object
        """
        if env_path is None:
            env_path = Path.cwd() / ".env"

        if env_path.exists():
            load_dotenv(env_path)

        target = os.getenv("MEMBERS_TARGET") or None
        verbose_str = os.getenv("MEMBERS_VERBOSE", "false").lower()
        log_dir_str = os.getenv("MEMBERS_LOG_DIR", "logs")

        return cls(
            target=target,
            verbose=verbose_str in ("true", "1", "yes"),
            log_dir=Path(log_dir_str),
        )

    @classmethod
    def from_args(
        cls,
        target: Optional[str] = None,
        verbose: Optional[bool] = None,
        show_attributes: Optional[bool] = None,
    ) -> "Config":
        """
        Create configuration from explicit arguments, falling back to environment.

        Args:
            target: Class to inspect as ``package.module:ClassName`` (overrides env)
            verbose: Enable verbose output (overrides env)
            show_attributes: Print metadata attributes of each member

        Returns:
            Config object
        """
        config = cls.from_env()

        if target is not None:
            config.target = target
        if verbose is not None:
            config.verbose = verbose
        if show_attributes is not None:
            config.show_attributes = show_attributes

        return config

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        if not self.target:
            raise ValueError("No target class given (expected package.module:ClassName)")

        if not TARGET_PATTERN.match(self.target):
            raise ValueError(f"Invalid target {self.target!r} (expected package.module:ClassName)")

    @property
    def module_name(self) -> str:
        return self.target.partition(":")[0] if self.target else ""

    @property
    def class_name(self) -> str:
        return self.target.partition(":")[2] if self.target else ""
