"""
Declarative user rules.

Lets custom views and custom tags be written in YAML config instead of code.

Custom view definition (all present clauses must hold):
    any: [ref, ...]    - at least one reference matches the thing's tags
    all: [ref, ...]    - every reference matches
    none: [ref, ...]   - no reference matches
    untagged: bool     - the thing has (true) or has not (false) zero tags

References are view names or tags ("proj web" == "proj/web") and match
the way a regular view does, so "proj" also covers "proj/web/frontend".

Custom tag definition:
    only: [view, ...]    - the tagged thing shows only in these views
    except: [view, ...]  - the tagged thing never shows in these views

View references follow custom view lookup: "Inbox" means any folder's
Inbox, "/Work/Inbox" only that path.

Example config:
    custom_views:
      Work:
        any: [job, clients]
        none: [personal]
    custom_tags:
      draft:
        only: [Drafts]
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from vaultviews.components.views.regular_match_comp import regular_view_matches_tags
from vaultviews.components.views.rule_registry_comp import TagPredicate, ViewPredicate
from vaultviews.helpers.exceptions import RuleDefinitionError
from vaultviews.helpers.names import name_variants, tag_to_view_name

logger = logging.getLogger(__name__)


class ViewRuleDefinition(BaseModel):
    """Custom view definition as written in config."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    any_of: list[str] = Field(default_factory=list, alias="any")
    all_of: list[str] = Field(default_factory=list, alias="all")
    none_of: list[str] = Field(default_factory=list, alias="none")
    untagged: bool | None = None

    @model_validator(mode="after")
    def require_clause(self) -> ViewRuleDefinition:
        if not (self.any_of or self.all_of or self.none_of or self.untagged is not None):
            raise ValueError("custom view needs at least one of: any, all, none, untagged")
        return self


class TagRuleDefinition(BaseModel):
    """Custom tag definition as written in config."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    only: list[str] = Field(default_factory=list)
    except_: list[str] = Field(default_factory=list, alias="except")

    @model_validator(mode="after")
    def require_clause(self) -> TagRuleDefinition:
        if not (self.only or self.except_):
            raise ValueError("custom tag needs at least one of: only, except")
        return self


def make_view_predicate(definition: ViewRuleDefinition) -> ViewPredicate:
    any_refs = [tag_to_view_name(ref) for ref in definition.any_of]
    all_refs = [tag_to_view_name(ref) for ref in definition.all_of]
    none_refs = [tag_to_view_name(ref) for ref in definition.none_of]
    untagged = definition.untagged

    def predicate(tags: frozenset[str]) -> bool:
        if untagged is not None and (len(tags) == 0) != untagged:
            return False
        if any_refs and not any(regular_view_matches_tags(ref, tags) for ref in any_refs):
            return False
        if not all(regular_view_matches_tags(ref, tags) for ref in all_refs):
            return False
        return not any(regular_view_matches_tags(ref, tags) for ref in none_refs)

    return predicate


def make_tag_predicate(definition: TagRuleDefinition) -> TagPredicate:
    only = set(definition.only)
    excluded = set(definition.except_)

    def predicate(view_name: str) -> bool:
        variants = set(name_variants(view_name))
        if only and not variants & only:
            return False
        return not variants & excluded

    return predicate


def _build(
    definitions: Mapping[str, Any] | None,
    model: type[BaseModel],
    factory: Callable[[Any], Callable[..., bool]],
    kind: str,
) -> dict[str, Callable[..., bool]]:
    rules: dict[str, Callable[..., bool]] = {}
    for name, definition in (definitions or {}).items():
        if not isinstance(name, str) or not name:
            raise RuleDefinitionError(f"Custom {kind} names must be non-empty strings, got {name!r}")
        if callable(definition):
            rules[name] = definition
            continue
        if not isinstance(definition, Mapping):
            raise RuleDefinitionError(f"Custom {kind} '{name}' must be a mapping, got {type(definition).__name__}")
        try:
            parsed = model.model_validate(definition)
        except ValidationError as e:
            raise RuleDefinitionError(f"Invalid custom {kind} '{name}': {e}") from e
        rules[name] = factory(parsed)
    logger.debug(f"[rules] Built {len(rules)} custom {kind} rule(s)")
    return rules


def build_custom_views(definitions: Mapping[str, Any] | None) -> dict[str, ViewPredicate]:
    """
    Turn custom view definitions into predicates.

    Values may be mappings (see module docs) or callables taking the tag set.

    Raises:
        RuleDefinitionError: If a definition is malformed
    """
    return _build(definitions, ViewRuleDefinition, make_view_predicate, "view")


def build_custom_tags(definitions: Mapping[str, Any] | None) -> dict[str, TagPredicate]:
    """
    Turn custom tag definitions into predicates.

    Values may be mappings (see module docs) or callables taking the view name.

    Raises:
        RuleDefinitionError: If a definition is malformed
    """
    return _build(definitions, TagRuleDefinition, make_tag_predicate, "tag")
