"""
View contents workflow.

Lists the things under the things root that belong to a view.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from vaultviews.components.views.rule_registry_comp import CustomRuleRegistry
from vaultviews.components.views.view_enumeration_comp import files_under
from vaultviews.components.views.view_resolver_comp import view_matches_tags
from vaultviews.helpers.dto.vault_dto import VaultSnapshot
from vaultviews.helpers.dto.views_dto import ThingRow

logger = logging.getLogger(__name__)


def list_view_things_workflow(
    snapshot: VaultSnapshot,
    view_name: str,
    registry: CustomRuleRegistry,
    things_path: str,
    known_view_names: Iterable[str] = (),
    thing_extension: str | None = ".md",
) -> list[ThingRow]:
    """
    Find the things shown in a view, sorted by name.

    Args:
        snapshot: Files and tags of the vault
        view_name: View to list
        registry: Custom view and custom tag rules
        things_path: Vault folder holding things
        known_view_names: Views the Others view compares against
        thing_extension: Only files with this extension count as things (None for all)

    Returns:
        One row per matching thing
    """
    context = registry.context(known_view_names)
    rows = []
    for file, _ in files_under(snapshot, things_path):
        if thing_extension and file.extension != thing_extension:
            continue
        tags = snapshot.tags_of(file)
        if view_matches_tags(view_name, tags, registry, context):
            rows.append(ThingRow(path=file.path, name=file.name, tags=sorted(tags)))
    rows.sort(key=lambda row: (row.name, row.path))
    logger.debug(f"[views] View '{view_name}' shows {len(rows)} thing(s)")
    return rows
