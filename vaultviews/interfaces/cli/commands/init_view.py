"""
Init-view command: Create the file for an uninitiated view.
"""

from __future__ import annotations

import argparse

import vaultviews.app as app
from vaultviews.helpers.exceptions import VaultViewsError, ViewAlreadyInitiatedError
from vaultviews.helpers.names import strip_tag_marker, tag_to_view_name
from vaultviews.interfaces.cli.ui import print_error, print_success, print_warning


def cmd_init_view(args: argparse.Namespace) -> int:
    """
    Materialize a view as a file under the views root.

    With --tag the name is a tag and every '/' becomes a view level;
    otherwise '/' separates folders.
    """
    name = tag_to_view_name(strip_tag_marker(args.name)) if args.tag else args.name
    try:
        created = app.application.views.initiate_view(name)
    except ViewAlreadyInitiatedError as e:
        print_warning(str(e))
        return 1
    except (VaultViewsError, OSError, ValueError) as e:
        print_error(f"Error creating view: {e}")
        return 1

    print_success(f"Created {created.path}")
    return 0
