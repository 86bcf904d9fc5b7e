"""
Custom view and custom tag rules.

Two kinds of overrides exist, each as a two-layer table where the user
layer shadows the built-in (core) layer:

- Custom views: view name -> predicate over a thing's tags. A custom view
  decides on its own which things it shows; the regular tag matching is
  not consulted.
- Custom tags: tag -> predicate over a view name. A thing carrying such a
  tag only shows in views the predicate accepts.

Built-in views: All, Untagged, Others. Built-in tag: Archive.
Their names come from CoreNames and may be renamed; their rules may not.

Custom views are looked up by name variants (see helpers.names.name_variants):
a rule registered as "Inbox" applies to every view path ending in "Inbox",
one registered as "/Work/Inbox" only to that exact path.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Generic, TypeVar

from vaultviews.components.views.regular_match_comp import regular_view_matches_tags
from vaultviews.helpers.dto.config_dto import CoreNames
from vaultviews.helpers.names import leaf_name, name_variants, trim

ViewPredicate = Callable[[frozenset[str]], bool]
TagPredicate = Callable[[str], bool]
CoreViewPredicate = Callable[[frozenset[str], "MatchContext"], bool]

P = TypeVar("P")


class RuleTable(Generic[P]):
    """
    Built-in rules overlaid by user rules.

    The core mapping is copied once and never changed; reconfiguring means
    building a new table with a different user mapping.
    """

    def __init__(self, core: Mapping[str, P], user: Mapping[str, P] | None = None) -> None:
        self._core: dict[str, P] = dict(core)
        self._user: dict[str, P] = dict(user or {})

    def find(self, key: str) -> tuple[P, bool] | None:
        """Return (rule, is_core) for a key, user layer first."""
        if key in self._user:
            return self._user[key], False
        if key in self._core:
            return self._core[key], True
        return None

    def resolve(self, key: str) -> P | None:
        found = self.find(key)
        return found[0] if found else None

    def core_keys(self) -> list[str]:
        return list(self._core)

    def user_keys(self) -> list[str]:
        return list(self._user)

    def keys(self) -> list[str]:
        """User keys followed by core keys not shadowed by them."""
        return [*self._user, *(k for k in self._core if k not in self._user)]

    def __contains__(self, key: object) -> bool:
        return key in self._user or key in self._core


@dataclass(frozen=True)
class MatchContext:
    """
    Data a built-in view rule may need beyond the thing's tags.

    known_view_names are the views the Others view compares against
    (normally the initiated views).
    """

    registry: CustomRuleRegistry
    known_view_names: tuple[str, ...] = ()


@dataclass(frozen=True)
class ResolvedViewRule:
    """A custom view rule found for a view path."""

    key: str
    """The name variant the rule is registered under"""

    predicate: ViewPredicate | CoreViewPredicate
    core: bool

    def evaluate(self, tags: frozenset[str], context: MatchContext) -> bool:
        if self.core:
            return bool(self.predicate(tags, context))  # type: ignore[call-arg]
        return bool(self.predicate(tags))  # type: ignore[call-arg]


# ----------------------------------------------------------------------
# Built-in rules
# ----------------------------------------------------------------------


def _all_view(tags: frozenset[str], context: MatchContext) -> bool:
    return True


def _untagged_view(tags: frozenset[str], context: MatchContext) -> bool:
    return len(tags) == 0


def _others_view(tags: frozenset[str], context: MatchContext) -> bool:
    """Show things no known non-core view claims."""
    core_names = set(context.registry.views.core_keys())
    for view_name in context.known_view_names:
        # Built-in names never claim, even when a user rule shadows them
        if trim(view_name) in core_names:
            continue
        rule = context.registry.resolve_view_rule(view_name)
        if rule is not None:
            if rule.core:
                continue
            if rule.evaluate(tags, context):
                return False
        elif regular_view_matches_tags(view_name, tags):
            return False
    return True


def build_core_view_rules(names: CoreNames) -> dict[str, CoreViewPredicate]:
    return {
        names.all: _all_view,
        names.untagged: _untagged_view,
        names.others: _others_view,
    }


def build_core_tag_rules(names: CoreNames) -> dict[str, TagPredicate]:
    archive = names.archive

    def _archive_tag(view_name: str) -> bool:
        return leaf_name(view_name) == archive

    return {archive: _archive_tag}


# ----------------------------------------------------------------------
# Registry
# ----------------------------------------------------------------------


class CustomRuleRegistry:
    """
    Lookup for custom view and custom tag rules.

    Example:
        >>> registry = CustomRuleRegistry(custom_views={"Work": lambda tags: "job" in tags})
        >>> registry.resolve_view_rule("Projects/Work").key
        'Work'
    """

    def __init__(
        self,
        core_names: CoreNames | None = None,
        custom_views: Mapping[str, ViewPredicate] | None = None,
        custom_tags: Mapping[str, TagPredicate] | None = None,
    ) -> None:
        self.core_names = core_names or CoreNames()
        self.views: RuleTable[ViewPredicate | CoreViewPredicate] = RuleTable(
            build_core_view_rules(self.core_names), custom_views
        )
        self.tags: RuleTable[TagPredicate] = RuleTable(build_core_tag_rules(self.core_names), custom_tags)

    def with_user_rules(
        self,
        custom_views: Mapping[str, ViewPredicate] | None = None,
        custom_tags: Mapping[str, TagPredicate] | None = None,
    ) -> CustomRuleRegistry:
        """Build a registry with the same core names and new user rules."""
        return CustomRuleRegistry(self.core_names, custom_views, custom_tags)

    def resolve_tag_rule(self, tag: str) -> TagPredicate | None:
        return self.tags.resolve(tag)

    def resolve_view_rule(self, view_name: str) -> ResolvedViewRule | None:
        """
        Find the custom view rule for a view path.

        Name variants are tried from the full path down to the leaf, then
        the anchored full path; per variant the user rule wins.
        """
        for variant in name_variants(view_name):
            found = self.views.find(variant)
            if found is not None:
                predicate, core = found
                return ResolvedViewRule(key=variant, predicate=predicate, core=core)
        return None

    def context(self, known_view_names: Iterable[str] = ()) -> MatchContext:
        return MatchContext(registry=self, known_view_names=tuple(known_view_names))
