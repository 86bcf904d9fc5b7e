"""
View enumeration.

An initiated view has a file under the views root; its name is the file's
path below that root without extension ("Views/Work/proj web.md" ->
"Work/proj web"). An uninitiated view is one we know can exist, because a
thing carries a matching tag or a custom rule names it, but whose file has
not been created yet.
"""

from __future__ import annotations

import logging
from pathlib import PurePosixPath

from vaultviews.components.views.rule_registry_comp import CustomRuleRegistry
from vaultviews.helpers.dto.vault_dto import VaultFile, VaultSnapshot
from vaultviews.helpers.dto.views_dto import EnumerateOptions, ViewListing
from vaultviews.helpers.names import PATH_SEPARATOR, tag_to_view_name, trim

logger = logging.getLogger(__name__)


def relative_to_root(path: str, root: str) -> str | None:
    """
    Return path below root, or None if path is not inside root.

    An empty root is the vault root and contains every path.
    """
    root = trim(root)
    if not root:
        return path
    prefix = root + PATH_SEPARATOR
    if path.startswith(prefix):
        return path[len(prefix) :]
    return None


def files_under(snapshot: VaultSnapshot, root: str) -> list[tuple[VaultFile, str]]:
    """Files below root (recursive) paired with their root-relative path."""
    found = []
    for file in snapshot.files:
        relative = relative_to_root(file.path, root)
        if relative is not None:
            found.append((file, relative))
    return found


def get_initiated_view_names(
    snapshot: VaultSnapshot,
    views_path: str,
    view_extension: str | None = ".md",
) -> list[str]:
    """
    Names of the view files below views_path, sorted.

    Only files with view_extension count; attachments kept next to views
    are skipped. Pass None to count every file.
    """
    names = set()
    for file, relative in files_under(snapshot, views_path):
        if view_extension and file.extension != view_extension:
            continue
        if file.extension:
            relative = relative[: -len(file.extension)]
        names.add(relative)
    return sorted(names)


def get_existing_tag_names(snapshot: VaultSnapshot, things_path: str) -> list[str]:
    """Every tag found on things below things_path, sorted."""
    tags: set[str] = set()
    for file, _ in files_under(snapshot, things_path):
        tags.update(snapshot.tags_of(file))
    return sorted(tags)


def get_subfolder_view_names(snapshot: VaultSnapshot, things_path: str) -> list[str]:
    """
    Views offered in the folders things live in.

    A tag x on a thing at "a/b/note.md" below the things root yields
    "a/x" and "a/b/x". Things directly in the root yield nothing here.
    """
    candidates = []
    for file, relative in files_under(snapshot, things_path):
        folders = PurePosixPath(relative).parent.parts
        if not folders:
            continue
        for tag in snapshot.tags_of(file):
            view_name = tag_to_view_name(tag)
            for depth in range(1, len(folders) + 1):
                prefix = PATH_SEPARATOR.join(folders[:depth])
                candidates.append(f"{prefix}{PATH_SEPARATOR}{view_name}")
    return candidates


def enumerate_views(
    snapshot: VaultSnapshot,
    registry: CustomRuleRegistry,
    options: EnumerateOptions | None = None,
) -> ViewListing:
    """
    Compute the initiated and uninitiated views of a vault.

    Uninitiated candidates come from existing tags, subfolder derivation
    (when enabled), and the keys of the custom view and custom tag tables.
    Names already initiated are left out; both lists are sorted.
    """
    options = options or EnumerateOptions()
    initiated = get_initiated_view_names(snapshot, options.views_path, options.view_extension)

    candidate_groups = [
        [tag_to_view_name(tag) for tag in get_existing_tag_names(snapshot, options.things_path)],
        get_subfolder_view_names(snapshot, options.things_path) if options.derive_subfolders else [],
        [trim(name) for name in registry.views.user_keys()],
        [trim(name) for name in registry.views.core_keys()],
        [tag_to_view_name(name) for name in registry.tags.user_keys()],
        [tag_to_view_name(name) for name in registry.tags.core_keys()],
    ]

    initiated_set = set(initiated)
    uninitiated = {name for group in candidate_groups for name in group if name and name not in initiated_set}

    logger.debug(f"[views] Enumerated {len(initiated)} initiated and {len(uninitiated)} uninitiated views")
    return ViewListing(initiated=initiated, uninitiated=sorted(uninitiated), merged=options.merge)
