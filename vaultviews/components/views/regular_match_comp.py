"""
Regular view matching.

A regular view is one without a custom rule: it matches a thing purely by
tag hierarchy. Only the leaf of the view path takes part, so "Work/proj web"
matches the same things as "proj web".

- Flat view ("proj"): matches any tag whose first level is "proj".
- Nested view ("proj web"): matches any tag starting with the levels
  proj/web, e.g. "proj/web" or "proj/web/frontend", but not "proj".
"""

from __future__ import annotations

from collections.abc import Iterable

from vaultviews.helpers.names import TagName, ViewName


def regular_view_matches_tags(view_name: str, tags: Iterable[str] | None) -> bool:
    """
    Check if a regular (not custom) view matches at least one tag.

    Args:
        view_name: View path; folders are ignored
        tags: Tags without "#"; None is treated as no tags

    Returns:
        True if any tag matches the view
    """
    if not tags:
        return False

    view = ViewName(view_name)
    leaf = view.leaf
    levels = view.levels

    for tag in tags:
        tag_segments = TagName(tag).segments
        if view.is_nested:
            # A view deeper than the tag can't match it
            if len(levels) > len(tag_segments):
                continue
            if tag_segments[: len(levels)] == levels:
                return True
        elif tag_segments[0] == leaf:
            return True
    return False
