"""
Views command: List initiated and uninitiated views.
"""

from __future__ import annotations

import argparse

import vaultviews.app as app
from vaultviews.helpers.exceptions import VaultViewsError
from vaultviews.interfaces.cli.ui import TableDisplay, print_error, print_info


def cmd_views(args: argparse.Namespace) -> int:
    """
    Show the views navigation list (pinned views first).
    """
    try:
        service = app.application.views
        links = service.list_views(
            pinned_view_names=args.pin or None,
            merge=True if args.merge else None,
            derive_subfolders=True if args.subfolders else None,
        )
        if not links:
            print_info("No views found")
            return 0
        TableDisplay.show_views(links)
        return 0
    except (VaultViewsError, OSError, ValueError) as e:
        print_error(f"Error listing views: {e}")
        return 1
