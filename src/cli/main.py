"""Main CLI entry point for schema-refs."""

import argparse

from src.cli.commands.check import check_command
from src.cli.commands.resolve import resolve_command
from src.cli.config import Config
from src.utils.logging_config import setup_logging


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="schema-refs",
        description="Schema refs - follow and check JSON Schema $ref chains",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Resolve command
    resolve_parser = subparsers.add_parser("resolve", help="Print the fully dereferenced node of a schema")
    resolve_parser.add_argument("schema_file", help="JSON or YAML schema file")
    resolve_parser.add_argument(
        "--pointer",
        default="",
        help="JSON Pointer of the node to resolve (default: document root)",
    )
    resolve_parser.add_argument("--config", help="Path to .env configuration file", default=None)
    resolve_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show detailed processing information",
    )

    # Check command
    check_parser = subparsers.add_parser("check", help="Resolve every $ref in a schema and report failures")
    check_parser.add_argument("schema_file", help="JSON or YAML schema file")
    check_parser.add_argument("--config", help="Path to .env configuration file", default=None)
    check_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show detailed processing information",
    )

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    # Load configuration
    config = Config(args.config)

    setup_logging(verbose=args.verbose, trace=config.log_resolution_steps)

    # Execute command
    if args.command == "resolve":
        resolve_command(config, args.schema_file, pointer=args.pointer)
    elif args.command == "check":
        check_command(config, args.schema_file)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
