#!/usr/bin/env python3

import sys
from pathlib import Path
from logger import get_logger
from services.seeding import seed_from_file

logger = get_logger()


def cmd_list(args, services):
    """List the categories of one context as an indented tree."""
    context = services.contexts.find(args.context_id)
    if not context:
        logger.error(f"Context with ID {args.context_id} not found.")
        sys.exit(1)

    categories = services.categories.find_by_context(context.id, include_top=True)
    if not categories:
        logger.info("No categories found.")
        return

    ids = {category.id for category in categories}
    children = {}
    for category in categories:
        children.setdefault(category.parent, []).append(category)

    def show(category, depth):
        logger.info(
            f"{'  ' * depth}{category.name} (ID: {category.id}, "
            f"questions: {category.questioncount})"
        )
        for child in children.get(category.id, []):
            show(child, depth + 1)

    for category in categories:
        if category.parent not in ids:
            show(category, 0)

    logger.info(f"Total categories: {len(categories)}")


def cmd_create(args, services):
    """Create a category in a context."""
    if args.parent:
        parent = services.categories.find(args.parent)
        if not parent or parent.contextid != args.context_id:
            logger.error(
                f"Parent category {args.parent} not found in context {args.context_id}."
            )
            sys.exit(1)

    category = services.categories.create(
        args.name,
        args.context_id,
        parent=args.parent,
        sortorder=args.sortorder,
        info=args.info or "",
    )
    logger.info(f"✓ Category created with ID: {category.id}")


def cmd_add_question(args, services):
    """Add a question to a category."""
    category = services.categories.find(args.category_id)
    if not category:
        logger.error(f"Category with ID {args.category_id} not found.")
        sys.exit(1)

    question_id = services.categories.add_question(
        category.id, args.name, hidden=args.hidden
    )
    logger.info(f"✓ Question {question_id} added to '{category.name}'")


def cmd_seed(args, services):
    """Seed contexts and categories from a YAML fixture."""
    seed_file = Path(args.file)
    if not seed_file.exists():
        logger.error(f"Seed file not found: {seed_file}")
        sys.exit(1)

    counts = seed_from_file(services, seed_file)
    logger.info("Seeding complete!")
    logger.info(f"Contexts created: {counts['contexts']}")
    logger.info(f"Categories created: {counts['categories']}")


def setup_parser(subparsers):
    """Setup categories subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "categories",
        help="Manage question categories",
        description="List, create and seed question categories",
    )

    categories_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available category commands",
        dest="subcommand",
        required=True,
    )

    list_parser = categories_subparsers.add_parser(
        "list", help="List the categories of a context"
    )
    list_parser.add_argument("--context-id", type=int, required=True)
    list_parser.set_defaults(func=cmd_list)

    create_parser = categories_subparsers.add_parser("create", help="Create a category")
    create_parser.add_argument("--context-id", type=int, required=True)
    create_parser.add_argument("--name", required=True)
    create_parser.add_argument(
        "--parent", type=int, default=0, help="Parent category ID (0 for a top category)"
    )
    create_parser.add_argument("--sortorder", type=int, default=999)
    create_parser.add_argument("--info", help="Optional description")
    create_parser.set_defaults(func=cmd_create)

    question_parser = categories_subparsers.add_parser(
        "add-question", help="Add a question to a category"
    )
    question_parser.add_argument("category_id", type=int)
    question_parser.add_argument("--name", required=True)
    question_parser.add_argument(
        "--hidden", action="store_true", help="Hidden questions are not counted"
    )
    question_parser.set_defaults(func=cmd_add_question)

    seed_parser = categories_subparsers.add_parser(
        "seed", help="Seed contexts and categories from a YAML file"
    )
    seed_parser.add_argument("file", help="Path to the YAML fixture")
    seed_parser.set_defaults(func=cmd_seed)
