"""
View initiation workflow.

Materializes an uninitiated view by creating its file under the views root.
The file body comes from the configured view template, where "{{view_name}}"
is replaced by the view's name.
"""

from __future__ import annotations

import logging

from vaultviews.helpers.dto.vault_dto import VaultFile, VaultSource
from vaultviews.helpers.exceptions import ViewAlreadyInitiatedError
from vaultviews.helpers.names import PATH_SEPARATOR, trim

logger = logging.getLogger(__name__)

VIEW_NAME_PLACEHOLDER = "{{view_name}}"


def initiate_view_workflow(
    source: VaultSource,
    view_name: str,
    views_path: str,
    extension: str = ".md",
    template: str = "",
) -> VaultFile:
    """
    Create the file for a view.

    Args:
        source: Vault to write to
        view_name: View path below the views root, e.g. "Work/proj web";
            "/" always separates folders
        views_path: Vault folder holding view files
        extension: View file extension
        template: File body; "{{view_name}}" is substituted

    Returns:
        The created file

    Raises:
        ValueError: If the view name is empty
        ViewAlreadyInitiatedError: If the view file already exists
    """
    name = trim(view_name)
    if not name:
        raise ValueError("View name must not be empty")
    root = trim(views_path)
    path = f"{root}{PATH_SEPARATOR}{name}{extension}" if root else f"{name}{extension}"
    try:
        created = source.create_file(path, template.replace(VIEW_NAME_PLACEHOLDER, name))
    except FileExistsError as e:
        raise ViewAlreadyInitiatedError(name, path) from e
    logger.info(f"[views] Initiated view '{name}'")
    return created
