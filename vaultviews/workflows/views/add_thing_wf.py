"""
New thing workflow.

Creates an empty note in the things folder. If a note with the default name
already exists it is reused, so repeated clicks open the same draft.
"""

from __future__ import annotations

import logging

from vaultviews.helpers.dto.vault_dto import VaultSource
from vaultviews.helpers.dto.views_dto import AddThingResult
from vaultviews.helpers.names import PATH_SEPARATOR, trim

logger = logging.getLogger(__name__)


def add_thing_workflow(
    source: VaultSource,
    things_path: str,
    name: str = "Untitled",
    extension: str = ".md",
) -> AddThingResult:
    """Create <things_path>/<name><extension>, or report the existing one."""
    root = trim(things_path)
    path = f"{root}{PATH_SEPARATOR}{name}{extension}" if root else f"{name}{extension}"
    try:
        created = source.create_file(path, "")
    except FileExistsError:
        logger.warning(f"[things] Thing already exists: {path}")
        return AddThingResult(path=path, created=False)
    return AddThingResult(path=created.path, created=True)
