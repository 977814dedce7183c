#!/usr/bin/env python3

from logger import get_logger
from models.context import CONTEXT_LEVEL_STRINGS
from rendering.strings import StringManager

logger = get_logger()


def cmd_list(args, services):
    """List all contexts."""
    contexts = services.contexts.find_all()

    if not contexts:
        logger.info("No contexts found.")
        return

    strings = StringManager(default_lang=services.config.lang)
    for context in contexts:
        line = f"{context.id:>5}  level {context.contextlevel:<3} {context.get_context_name(strings)}"
        if context.lang:
            line += f" [{context.lang}]"
        logger.info(line)

    logger.info(f"Total contexts: {len(contexts)}")


def cmd_create(args, services):
    """Create a context."""
    context = services.contexts.create(args.level, args.name, lang=args.lang)
    logger.info(f"✓ Context created with ID: {context.id}")


def setup_parser(subparsers):
    """Setup contexts subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "contexts",
        help="Manage contexts",
        description="List and create the contexts categories are grouped in",
    )

    contexts_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available context commands",
        dest="subcommand",
        required=True,
    )

    list_parser = contexts_subparsers.add_parser("list", help="List all contexts")
    list_parser.set_defaults(func=cmd_list)

    create_parser = contexts_subparsers.add_parser("create", help="Create a context")
    create_parser.add_argument(
        "--level",
        type=int,
        required=True,
        choices=sorted(CONTEXT_LEVEL_STRINGS),
        help="Context level (10 system, 40 course category, 50 course, 70 module, ...)",
    )
    create_parser.add_argument("--name", required=True, help="Instance name")
    create_parser.add_argument("--lang", help="Forced language for this context")
    create_parser.set_defaults(func=cmd_create)
