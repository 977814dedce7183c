#!/usr/bin/env python3

import sys
from pathlib import Path
from logger import get_logger
from rendering.export import build_category_export

logger = get_logger()


def cmd_render(args, services):
    """Render the category export lists as HTML."""
    if args.page < 0:
        logger.error("Page must be 0 (no paging) or a positive number.")
        sys.exit(1)

    export = build_category_export(
        services, services.config, args.context_id, page=args.page
    )
    html = export.render()

    if args.output is None:
        sys.stdout.write(html)
        return

    output_path = Path(args.output)
    if not output_path.is_absolute():
        output_path = services.config.output_dir / output_path
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html, encoding="utf-8")
    logger.info(f"✓ Wrote {len(html)} characters to {output_path}")


def setup_parser(subparsers):
    """Setup export subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "export",
        help="Render category export lists",
        description="Render the question categories of one or more contexts for export",
    )

    export_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available export commands",
        dest="subcommand",
        required=True,
    )

    render_parser = export_subparsers.add_parser(
        "render", help="Render the category lists as HTML"
    )
    render_parser.add_argument(
        "--context-id",
        type=int,
        action="append",
        required=True,
        help="Context to list; repeat for several contexts, in display order",
    )
    render_parser.add_argument(
        "--page", type=int, default=1, help="Page number, 0 disables paging (default: 1)"
    )
    render_parser.add_argument(
        "--output",
        help="File to write; relative paths go under the configured output_dir. "
        "Defaults to stdout.",
    )
    render_parser.set_defaults(func=cmd_render)
