#!/usr/bin/env python3
"""
qbexport CLI - browse question categories and render them for export.

Usage:
    python -m cli <command> <subcommand> [options]

Commands:
    contexts     Manage contexts
    categories   Manage question categories
    export       Render category export lists
    migrate      Database migrations

Examples:
    python -m cli migrate apply
    python -m cli categories seed fixtures.yaml
    python -m cli contexts list
    python -m cli export render --context-id 2 --context-id 5 --page 1
    python -m cli export render --context-id 2 --output course.html
"""

import sys
import argparse
from cli import categories, contexts, export, migrate
from config import load_config
from services.base import Services
from db.manager import DatabaseManager
from logger import setup_logging


def main():
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="qbexport - question category export lists",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    contexts.setup_parser(subparsers)
    categories.setup_parser(subparsers)
    export.setup_parser(subparsers)
    migrate.setup_parser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        try:
            config = load_config()
            setup_logging(config)

            # migrate works on raw connections, everything else on services
            if args.command == "migrate":
                args.func(args, DatabaseManager(config))
            else:
                args.func(args, Services(config))
        except Exception as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
