"""
Filesystem vault of markdown notes.

Implements the VaultSource collaborator for a plain folder of notes, the way
Obsidian lays a vault out on disk:
- Hidden entries (".obsidian", ".git", ".trash") are skipped
- Paths are vault-relative POSIX strings
- Tags come from YAML front matter ("tags:" as list or string) and from
  inline "#tags" in the note body
"""

from __future__ import annotations

import logging
import os
import re
from collections import Counter
from pathlib import Path
from typing import Any

import yaml

from vaultviews.helpers.dto.vault_dto import VaultFile
from vaultviews.helpers.names import strip_tag_marker

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = {".md", ".markdown"}

FRONT_MATTER_DELIMITER = "---"

# Obsidian tags: letters, digits, "_", "-", "/"; must not be purely numeric
INLINE_TAG_RE = re.compile(r"(?<![\w/#&])#([\w\-/]*[^\W\d][\w\-/]*)")

FENCE_RE = re.compile(r"^\s*(```|~~~)")


def split_front_matter(text: str) -> tuple[dict[str, Any], str]:
    """
    Split a note into its YAML front matter and body.

    Returns ({}, text) when there is no front matter or it is not a mapping.
    """
    lines = text.splitlines()
    if not lines or lines[0].strip() != FRONT_MATTER_DELIMITER:
        return {}, text
    for index in range(1, len(lines)):
        if lines[index].strip() == FRONT_MATTER_DELIMITER:
            raw = "\n".join(lines[1:index])
            body = "\n".join(lines[index + 1 :])
            try:
                data = yaml.safe_load(raw) or {}
            except yaml.YAMLError as e:
                logger.warning(f"[vault] Ignoring invalid front matter: {e}")
                return {}, body
            return (data if isinstance(data, dict) else {}), body
    return {}, text


def parse_front_matter_tags(front_matter: dict[str, Any]) -> list[str]:
    """Tags listed under "tags" (or "tag") as a list or a comma/space separated string."""
    value = front_matter.get("tags", front_matter.get("tag"))
    if value is None:
        return []
    if isinstance(value, str):
        items: list[Any] = re.split(r"[,\s]+", value)
    elif isinstance(value, list):
        items = value
    else:
        items = [value]
    tags = []
    for item in items:
        if item is None:
            continue
        tag = strip_tag_marker(str(item).strip())
        if tag:
            tags.append(tag)
    return tags


def parse_inline_tags(body: str) -> list[str]:
    """Inline "#tags" outside fenced code blocks."""
    tags = []
    in_fence = False
    for line in body.splitlines():
        if FENCE_RE.match(line):
            in_fence = not in_fence
            continue
        if in_fence:
            continue
        tags.extend(match.rstrip("/") for match in INLINE_TAG_RE.findall(line))
    return tags


def parse_note_tags(text: str) -> list[str]:
    """All tags of a note in first-seen order, without duplicates."""
    front_matter, body = split_front_matter(text)
    tags = parse_front_matter_tags(front_matter) + parse_inline_tags(body)
    return list(dict.fromkeys(tag for tag in tags if tag))


class MarkdownVault:
    """VaultSource over a folder of markdown notes."""

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root).expanduser().resolve()

    def list_files(self) -> list[VaultFile]:
        files = []
        for dirpath, dirnames, filenames in os.walk(self.root):
            dirnames[:] = sorted(d for d in dirnames if not d.startswith("."))
            for filename in sorted(filenames):
                if filename.startswith("."):
                    continue
                relative = (Path(dirpath) / filename).relative_to(self.root).as_posix()
                files.append(VaultFile(relative))
        return files

    def file_tags(self, file: VaultFile) -> list[str] | None:
        if file.extension.lower() not in MARKDOWN_EXTENSIONS:
            return None
        try:
            text = (self.root / file.path).read_text(encoding="utf-8")
        except UnicodeDecodeError:
            logger.warning(f"[vault] Skipping non UTF-8 note: {file.path}")
            return None
        tags = parse_note_tags(text)
        return tags or None

    def tag_counts(self) -> dict[str, int]:
        counts: Counter[str] = Counter()
        for file in self.list_files():
            counts.update(self.file_tags(file) or [])
        return dict(counts)

    def create_file(self, path: str, content: str = "") -> VaultFile:
        """
        Create a file below the vault root.

        Raises:
            FileExistsError: If the file already exists
            ValueError: If path escapes the vault root
        """
        target = (self.root / path).resolve()
        if not target.is_relative_to(self.root):
            raise ValueError(f"Path {path} is not within vault root {self.root}")
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "x", encoding="utf-8") as f:
            f.write(content)
        logger.info(f"[vault] Created {path}")
        return VaultFile(target.relative_to(self.root).as_posix())
