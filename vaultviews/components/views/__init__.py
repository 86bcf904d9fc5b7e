"""Views package."""

from .regular_match_comp import regular_view_matches_tags
from .rule_definition_comp import build_custom_tags, build_custom_views
from .rule_registry_comp import CustomRuleRegistry, MatchContext, ResolvedViewRule, RuleTable
from .view_enumeration_comp import (
    enumerate_views,
    get_existing_tag_names,
    get_initiated_view_names,
    get_subfolder_view_names,
)
from .view_resolver_comp import normalize_tags, view_matches_tags

__all__ = [
    "CustomRuleRegistry",
    "MatchContext",
    "ResolvedViewRule",
    "RuleTable",
    "build_custom_tags",
    "build_custom_views",
    "enumerate_views",
    "get_existing_tag_names",
    "get_initiated_view_names",
    "get_subfolder_view_names",
    "normalize_tags",
    "regular_view_matches_tags",
    "view_matches_tags",
]
