"""
Tags command: Show vault-wide tag counts.
"""

from __future__ import annotations

import argparse

import vaultviews.app as app
from vaultviews.helpers.exceptions import VaultViewsError
from vaultviews.interfaces.cli.ui import TableDisplay, print_error, print_info


def cmd_tags(args: argparse.Namespace) -> int:
    """
    Show every tag in the vault with its count and view name.
    """
    try:
        stats = app.application.views.tag_stats()
    except (VaultViewsError, OSError) as e:
        print_error(f"Error reading tags: {e}")
        return 1

    if not stats:
        print_info("No tags found")
        return 0
    TableDisplay.show_tags(stats)
    return 0
