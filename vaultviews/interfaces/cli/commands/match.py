"""
Match command: Check whether tags belong to a view.
"""

from __future__ import annotations

import argparse

import vaultviews.app as app
from vaultviews.helpers.exceptions import VaultViewsError
from vaultviews.helpers.names import strip_tag_marker
from vaultviews.interfaces.cli.ui import print_error, print_info, print_success


def cmd_match(args: argparse.Namespace) -> int:
    """
    Exit 0 when a thing with the given tags shows in the view, 2 when it doesn't.
    """
    tags = [strip_tag_marker(tag) for tag in args.tags]
    try:
        matched = app.application.views.matches(args.view, tags)
    except (VaultViewsError, OSError, ValueError) as e:
        print_error(f"Error matching view: {e}")
        return 1

    shown = " ".join(f"#{tag}" for tag in tags) or "(no tags)"
    if matched:
        print_success(f"{shown} shows in '{args.view}'")
        return 0
    print_info(f"{shown} does not show in '{args.view}'")
    return 2
