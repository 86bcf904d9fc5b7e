"""
Views service - owns the rule registry and the vault, answers view questions.

Interfaces (CLI, API) call this service; it reads a fresh vault snapshot per
call and delegates to view workflows and components.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from vaultviews.components.views.rule_definition_comp import build_custom_tags, build_custom_views
from vaultviews.components.views.rule_registry_comp import CustomRuleRegistry, TagPredicate, ViewPredicate
from vaultviews.components.views.view_enumeration_comp import enumerate_views, get_initiated_view_names
from vaultviews.components.views.view_resolver_comp import view_matches_tags
from vaultviews.helpers.dto.config_dto import ViewsConfig
from vaultviews.helpers.dto.vault_dto import VaultFile, VaultSnapshot, VaultSource
from vaultviews.helpers.dto.views_dto import (
    AddThingResult,
    EnumerateOptions,
    TagStat,
    ThingRow,
    ViewLink,
    ViewListing,
)
from vaultviews.persistence.markdown_vault import MarkdownVault
from vaultviews.persistence.snapshot import take_snapshot
from vaultviews.workflows.views.add_thing_wf import add_thing_workflow
from vaultviews.workflows.views.initiate_view_wf import initiate_view_workflow
from vaultviews.workflows.views.list_views_wf import list_views_workflow
from vaultviews.workflows.views.tag_stats_wf import get_tag_stats_workflow
from vaultviews.workflows.views.view_things_wf import list_view_things_workflow

logger = logging.getLogger(__name__)


class ViewsService:
    """
    Service for view membership, view listings and vault changes.

    Custom rules come from config (declarative definitions) and can be
    extended in code with register_view() / register_tag(). Registering
    builds a new registry; the built-in rules are never modified.
    """

    def __init__(self, cfg: ViewsConfig, vault: VaultSource | None = None) -> None:
        """
        Args:
            cfg: View engine settings
            vault: Vault collaborator; defaults to a MarkdownVault at cfg.vault_path

        Raises:
            RuleDefinitionError: If a configured custom rule is invalid
        """
        self.cfg = cfg
        self.vault: VaultSource = vault if vault is not None else MarkdownVault(cfg.vault_path)
        self._custom_views: dict[str, ViewPredicate] = build_custom_views(cfg.custom_views)
        self._custom_tags: dict[str, TagPredicate] = build_custom_tags(cfg.custom_tags)
        self.registry = CustomRuleRegistry(cfg.core_names, self._custom_views, self._custom_tags)
        logger.info(
            f"[views] Loaded {len(self._custom_views)} custom view(s) and {len(self._custom_tags)} custom tag(s)"
        )

    # ----------------------------------------------------------------------
    # Rules
    # ----------------------------------------------------------------------

    def register_view(self, name: str, predicate: ViewPredicate) -> None:
        """Add or replace a user custom view."""
        self._custom_views[name] = predicate
        self.registry = self.registry.with_user_rules(self._custom_views, self._custom_tags)

    def register_tag(self, tag: str, predicate: TagPredicate) -> None:
        """Add or replace a user custom tag."""
        self._custom_tags[tag] = predicate
        self.registry = self.registry.with_user_rules(self._custom_views, self._custom_tags)

    # ----------------------------------------------------------------------
    # Queries
    # ----------------------------------------------------------------------

    def snapshot(self) -> VaultSnapshot:
        return take_snapshot(self.vault)

    def initiated_view_names(self, snapshot: VaultSnapshot | None = None) -> list[str]:
        """Initiated views; without a snapshot only the file list is read, no tags."""
        if snapshot is None:
            snapshot = VaultSnapshot(files=self.vault.list_files())
        return get_initiated_view_names(snapshot, self.cfg.views_path, self.cfg.view_extension)

    def enumerate_options(self, merge: bool | None = None, derive_subfolders: bool | None = None) -> EnumerateOptions:
        return EnumerateOptions(
            views_path=self.cfg.views_path,
            things_path=self.cfg.things_path,
            view_extension=self.cfg.view_extension,
            derive_subfolders=self.cfg.derive_subfolder_views if derive_subfolders is None else derive_subfolders,
            merge=self.cfg.merge_views_in_list if merge is None else merge,
        )

    def get_listing(self, merge: bool | None = None, derive_subfolders: bool | None = None) -> ViewListing:
        """Initiated and uninitiated views of the vault."""
        return enumerate_views(self.snapshot(), self.registry, self.enumerate_options(merge, derive_subfolders))

    def list_views(
        self,
        pinned_view_names: list[str] | None = None,
        merge: bool | None = None,
        derive_subfolders: bool | None = None,
    ) -> list[ViewLink]:
        """Navigation list; pinned views default to the configured ones."""
        pinned = self.cfg.pinned_views if pinned_view_names is None else pinned_view_names
        return list_views_workflow(self.get_listing(merge, derive_subfolders), self.cfg.views_path, pinned)

    def matches(
        self,
        view_name: str,
        tags: Iterable[str] | None,
        known_view_names: Iterable[str] | None = None,
    ) -> bool:
        """
        Check if a thing with these tags shows in a view.

        Known views (for the Others view) default to the vault's initiated views.
        """
        if known_view_names is None:
            known_view_names = self.initiated_view_names()
        return view_matches_tags(view_name, tags, self.registry, self.registry.context(known_view_names))

    def things_in_view(self, view_name: str) -> list[ThingRow]:
        """Things shown in a view, sorted by name."""
        snapshot = self.snapshot()
        return list_view_things_workflow(
            snapshot,
            view_name,
            self.registry,
            self.cfg.things_path,
            known_view_names=self.initiated_view_names(snapshot),
            thing_extension=self.cfg.view_extension,
        )

    def tag_stats(self) -> list[TagStat]:
        return get_tag_stats_workflow(self.vault)

    # ----------------------------------------------------------------------
    # Changes
    # ----------------------------------------------------------------------

    def add_thing(self) -> AddThingResult:
        return add_thing_workflow(self.vault, self.cfg.things_path, self.cfg.new_thing_name, self.cfg.view_extension)

    def initiate_view(self, view_name: str) -> VaultFile:
        """
        Raises:
            ValueError: If the view name is empty
            ViewAlreadyInitiatedError: If the view file already exists
        """
        return initiate_view_workflow(
            self.vault,
            view_name,
            self.cfg.views_path,
            extension=self.cfg.view_extension,
            template=self.cfg.view_template,
        )
