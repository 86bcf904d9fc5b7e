"""
Vault snapshots.

Reads every file's tags from a VaultSource once so the view engine works
on a consistent picture of the vault for the duration of a call.
"""

from __future__ import annotations

import logging

from vaultviews.helpers.dto.vault_dto import VaultSnapshot, VaultSource

logger = logging.getLogger(__name__)


def take_snapshot(source: VaultSource) -> VaultSnapshot:
    """Read all files and their tags; files without tags get an empty set."""
    files = source.list_files()
    tags = {file.path: frozenset(source.file_tags(file) or ()) for file in files}
    logger.debug(f"[vault] Snapshot of {len(files)} files")
    return VaultSnapshot(files=files, tags=tags)
