"""
Config domain DTOs.

Data transfer objects for configuration service results.
These form cross-layer contracts between services and interfaces.

Rules:
- Import only stdlib and typing (no vaultviews.* imports)
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ConfigResult:
    """Result from config_service.get_config and reload - wraps configuration dict."""

    config: dict[str, Any]


@dataclass(frozen=True)
class CoreNames:
    """
    Names of the built-in views and tags.

    Renaming changes only the key a built-in rule is registered under,
    never what the rule does.
    """

    all: str = "All"
    untagged: str = "Untagged"
    others: str = "Others"
    archive: str = "Archive"


@dataclass
class ViewsConfig:
    """
    Settings for the view engine and its vault.

    All fields have defaults so tests can build one directly.
    Validation happens in ConfigService.make_views_config().
    """

    vault_path: str = "."
    views_path: str = "Views"
    things_path: str = "Things"
    view_extension: str = ".md"
    merge_views_in_list: bool = False
    derive_subfolder_views: bool = False
    pinned_views: list[str] = field(default_factory=list)
    new_thing_name: str = "Untitled"
    view_template: str = ""
    core_names: CoreNames = field(default_factory=CoreNames)

    # Raw user rule definitions as loaded from YAML, keyed by view name / tag
    custom_views: dict[str, Any] = field(default_factory=dict)
    custom_tags: dict[str, Any] = field(default_factory=dict)
