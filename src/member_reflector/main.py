"""Main entry point for the member-reflector command line."""

import argparse
import sys
from typing import NoReturn

from .domain.models import BindingFlags
from .domain.services import enumerate_type_members
from .infrastructure.config import Config
from .infrastructure.logging import LoggerSetup, get_logger
from .utils import format_member, load_class


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="List the fields and properties of a Python class",
        epilog="""
Examples:
  # List every member of a class
  member-reflector collections:OrderedDict

  # Public instance members only, with metadata attributes
  member-reflector mypkg.models:User --public-only --instance-only --attributes

  # Using .env file for configuration
  echo 'MEMBERS_TARGET=mypkg.models:User' > .env
  member-reflector
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "target",
        nargs="?",
        help="Class to inspect as package.module:ClassName (optional if using .env)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output with debug logs",
    )
    parser.add_argument(
        "-a",
        "--attributes",
        action="store_true",
        help="Show metadata attributes of each member (inherited ones included)",
    )
    parser.add_argument(
        "--public-only",
        action="store_true",
        help="Only list members whose name does not start with an underscore",
    )
    parser.add_argument(
        "--instance-only",
        action="store_true",
        help="Skip ClassVar (static) fields",
    )
    return parser.parse_args(argv)


def binding_flags_from_args(args: argparse.Namespace) -> BindingFlags:
    """Build the member filter requested on the command line."""
    flags = BindingFlags.ALL
    if args.public_only:
        flags &= ~BindingFlags.NON_PUBLIC
    if args.instance_only:
        flags &= ~BindingFlags.STATIC
    return flags


def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point: print the members of the requested class."""
    args = parse_args(argv)

    # Load configuration
    try:
        config = Config.from_args(
            target=args.target,
            verbose=args.verbose if args.verbose else None,
            show_attributes=args.attributes if args.attributes else None,
        )
        config.validate()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    LoggerSetup.initialize(config.log_dir, verbose=config.verbose)
    logger = get_logger(__name__)
    logger.debug(f"Target: {config.target}")

    try:
        cls = load_class(config.module_name, config.class_name)
    except (ImportError, LookupError, ValueError) as e:
        logger.error(f"Cannot load {config.target}: {e}")
        sys.exit(1)

    members = enumerate_type_members(cls, binding_flags_from_args(args))
    print(f"{cls.__module__}.{cls.__qualname__}: {len(members)} member(s)")
    for member in members:
        print("  " + format_member(member, show_attributes=config.show_attributes))

    logger.debug("Main program completed successfully")
    sys.exit(0)


if __name__ == "__main__":
    main()
