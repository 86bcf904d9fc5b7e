#!/usr/bin/env python3
"""
Main CLI entry point with argument parser and command dispatch.
"""

from __future__ import annotations

import argparse
from typing import Any

import vaultviews.app as app
from vaultviews.__version__ import __version__
from vaultviews.helpers.logging_helper import configure_logging
from vaultviews.interfaces.cli.commands.add_thing import cmd_add_thing
from vaultviews.interfaces.cli.commands.init_view import cmd_init_view
from vaultviews.interfaces.cli.commands.match import cmd_match
from vaultviews.interfaces.cli.commands.serve import cmd_serve
from vaultviews.interfaces.cli.commands.tags import cmd_tags
from vaultviews.interfaces.cli.commands.things import cmd_things
from vaultviews.interfaces.cli.commands.views import cmd_views


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    p = argparse.ArgumentParser(
        prog="vv",
        description="vaultviews - tag-driven views over a vault of notes",
        epilog="Examples:\n"
        "  vv --vault ~/notes views                   # List views\n"
        "  vv views --merge --subfolders              # One sorted list, with folder views\n"
        "  vv things 'proj web'                       # Things tagged #proj/web...\n"
        "  vv match Others '#proj/cli'                # Would this thing show in Others?\n"
        "  vv init-view 'proj cli'                    # Create Views/proj cli.md\n"
        "  vv init-view --tag '#proj/cli'             # Same, named by its tag\n"
        "  vv serve --port 8357                       # Run the HTTP API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--vault", help="vault root folder (default: config vault_path)")
    p.add_argument("--views-path", help="vault folder holding view files")
    p.add_argument("--things-path", help="vault folder holding things")
    p.add_argument("--log-level", default=None, help="logging level (default: config log_level)")

    sub = p.add_subparsers(
        dest="cmd",
        title="commands",
        description="Available commands (use 'vv <command> --help' for command-specific help)",
    )

    # views: Navigation list
    s = sub.add_parser("views", help="List initiated and uninitiated views")
    s.add_argument("--merge", action="store_true", help="sort initiated and uninitiated views together")
    s.add_argument("--subfolders", action="store_true", help="offer views for every folder things live in")
    s.add_argument("--pin", action="append", metavar="VIEW", help="pin a view to the top (repeatable)")
    s.set_defaults(func=cmd_views)

    # things: Contents of a view
    s = sub.add_parser("things", help="List the things shown in a view")
    s.add_argument("view", help="view name, e.g. 'proj web' or 'Work/Inbox'")
    s.set_defaults(func=cmd_things)

    # match: Membership check
    s = sub.add_parser("match", help="Check whether a thing with these tags shows in a view")
    s.add_argument("view", help="view name")
    s.add_argument("tags", nargs="*", help="tags, with or without '#'")
    s.set_defaults(func=cmd_match)

    # tags: Tag counts
    s = sub.add_parser("tags", help="Show all tags in the vault")
    s.set_defaults(func=cmd_tags)

    # init-view: Materialize a view
    s = sub.add_parser("init-view", help="Create the file for a view")
    s.add_argument("name", help="view path; '/' separates folders, e.g. 'proj cli' or 'Work/proj cli'")
    s.add_argument("--tag", action="store_true", help="NAME is a tag ('proj/cli'); create the view it maps to")
    s.set_defaults(func=cmd_init_view)

    # add-thing: New thing
    s = sub.add_parser("add-thing", help="Create a new empty thing")
    s.set_defaults(func=cmd_add_thing)

    # serve: HTTP API
    s = sub.add_parser("serve", help="Run the HTTP API")
    s.add_argument("--host", help="bind address (default: config host)")
    s.add_argument("--port", type=int, help="port (default: config port)")
    s.set_defaults(func=cmd_serve)

    return p


def _overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if args.vault:
        overrides["vault_path"] = args.vault
    if args.views_path:
        overrides["views_path"] = args.views_path
    if args.things_path:
        overrides["things_path"] = args.things_path
    return overrides


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # If no command provided, show help
    if args.cmd is None:
        parser.print_help()
        return 0

    app.application.configure(_overrides(args))
    configure_logging(args.log_level or app.application.config.get("log_level", "INFO"))

    result: int = args.func(args)
    return result


if __name__ == "__main__":
    raise SystemExit(main())
