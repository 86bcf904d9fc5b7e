"""
Views navigation list workflow.

Builds the entries of the views list: pinned views first, then every
initiated and uninitiated view. Rendering the entries is left to the caller.
"""

from __future__ import annotations

from vaultviews.helpers.dto.views_dto import ViewLink, ViewListing
from vaultviews.helpers.names import PATH_SEPARATOR, ViewName, trim

PIN_MARKER = "🖈"


def _link(name: str, views_path: str, pinned: bool, initiated: bool) -> ViewLink:
    label = ViewName(name).label
    root = trim(views_path)
    return ViewLink(
        name=name,
        label=f"{PIN_MARKER} {label}" if pinned else label,
        target=f"{root}{PATH_SEPARATOR}{name}" if root else name,
        pinned=pinned,
        initiated=initiated,
    )


def list_views_workflow(
    listing: ViewListing,
    views_path: str,
    pinned_view_names: list[str] | None = None,
) -> list[ViewLink]:
    """
    Build the views navigation list.

    Args:
        listing: Result of view enumeration
        views_path: Vault folder holding view files
        pinned_view_names: Views shown first, in the given order

    Returns:
        Pinned entries followed by the listing's names, pinned ones not repeated
    """
    pinned = list(dict.fromkeys(pinned_view_names or []))
    initiated = set(listing.initiated)

    links = [_link(name, views_path, pinned=True, initiated=name in initiated) for name in pinned]
    pinned_set = set(pinned)
    for name in listing.names():
        if name in pinned_set:
            continue
        links.append(_link(name, views_path, pinned=False, initiated=name in initiated))
    return links
