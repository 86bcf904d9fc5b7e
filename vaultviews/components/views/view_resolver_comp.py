"""
View membership resolution.

Combines custom tags, custom views and regular matching into the single
decision of whether a thing shows in a view:

1. Every custom tag on the thing must accept the view (AND across tags).
2. If a custom view rule exists for the view path, its result is final.
3. Otherwise the regular tag-hierarchy match decides (OR across tags).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from vaultviews.components.views.regular_match_comp import regular_view_matches_tags
from vaultviews.components.views.rule_registry_comp import CustomRuleRegistry, MatchContext
from vaultviews.helpers.names import trim

logger = logging.getLogger(__name__)


def normalize_tags(tags: Iterable[str] | None) -> frozenset[str]:
    """Treat missing tags and an empty tag list the same way."""
    if tags is None:
        return frozenset()
    return frozenset(tags)


def view_matches_tags(
    view_name: str,
    tags: Iterable[str] | None,
    registry: CustomRuleRegistry,
    context: MatchContext | None = None,
) -> bool:
    """
    Check if a thing with the given tags belongs to a view.

    Args:
        view_name: View path, e.g. "proj web" or "Work/Inbox"
        tags: The thing's tags without "#"; None means no tags
        registry: Custom view and custom tag rules
        context: Known views for the Others view; defaults to none

    Returns:
        True if the thing shows in the view
    """
    tag_set = normalize_tags(tags)
    name = trim(view_name)
    if context is None:
        context = registry.context()

    for tag in tag_set:
        tag_rule = registry.resolve_tag_rule(tag)
        if tag_rule is not None and not tag_rule(name):
            logger.debug(f"[views] Tag '{tag}' excludes view '{name}'")
            return False

    view_rule = registry.resolve_view_rule(name)
    if view_rule is not None:
        return view_rule.evaluate(tag_set, context)

    return regular_view_matches_tags(view_name, tag_set)
