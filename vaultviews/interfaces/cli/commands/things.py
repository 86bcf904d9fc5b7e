"""
Things command: List the things shown in a view.
"""

from __future__ import annotations

import argparse

import vaultviews.app as app
from vaultviews.helpers.exceptions import VaultViewsError
from vaultviews.interfaces.cli.ui import TableDisplay, print_error, print_info


def cmd_things(args: argparse.Namespace) -> int:
    """
    Show the things of a view, sorted by name.
    """
    try:
        rows = app.application.views.things_in_view(args.view)
    except (VaultViewsError, OSError, ValueError) as e:
        print_error(f"Error listing things: {e}")
        return 1

    if not rows:
        print_info(f"No things in view '{args.view}'")
        return 0
    TableDisplay.show_things(rows, args.view)
    return 0
