"""
Add-thing command: Create a new, empty thing.
"""

from __future__ import annotations

import argparse

import vaultviews.app as app
from vaultviews.interfaces.cli.ui import print_error, print_success, print_warning


def cmd_add_thing(args: argparse.Namespace) -> int:
    """
    Create <things_path>/<new_thing_name>.md unless it already exists.
    """
    try:
        result = app.application.views.add_thing()
    except (OSError, ValueError) as e:
        print_error(f"Error creating thing: {e}")
        return 1

    if result.created:
        print_success(f"Created {result.path}")
    else:
        print_warning(f"Thing already exists: {result.path}")
    return 0
