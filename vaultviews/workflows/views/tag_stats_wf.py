"""Tag statistics workflow."""

from __future__ import annotations

from vaultviews.helpers.dto.vault_dto import VaultSource
from vaultviews.helpers.dto.views_dto import TagStat
from vaultviews.helpers.names import strip_tag_marker, tag_to_view_name


def get_tag_stats_workflow(source: VaultSource) -> list[TagStat]:
    """Vault-wide tag counts, sorted by tag, with the view each tag maps to."""
    stats = []
    for raw_tag, count in source.tag_counts().items():
        tag = strip_tag_marker(raw_tag)
        stats.append(TagStat(tag=tag, count=count, view_name=tag_to_view_name(tag)))
    return sorted(stats, key=lambda stat: stat.tag)
