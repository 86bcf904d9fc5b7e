"""Vault domain DTOs.

Data transfer objects describing the files of a vault and the collaborator
that provides them. The view engine only ever sees these types; how files
are actually read is up to the VaultSource implementation.

Rules:
- Import only stdlib and typing (no vaultviews.* imports)
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Protocol


@dataclass(frozen=True)
class VaultFile:
    """A file in the vault, addressed by its vault-relative POSIX path."""

    path: str
    """Vault-relative path, e.g. "Things/Projects/site.md" """

    @property
    def name(self) -> str:
        """File name without extension."""
        return PurePosixPath(self.path).stem

    @property
    def extension(self) -> str:
        return PurePosixPath(self.path).suffix

    @property
    def parent(self) -> str:
        """Vault-relative folder ("" for files at the vault root)."""
        parent = PurePosixPath(self.path).parent.as_posix()
        return "" if parent == "." else parent


class VaultSource(Protocol):
    """Host vault collaborator used by workflows and services."""

    def list_files(self) -> list[VaultFile]:
        """All files in the vault."""
        ...

    def file_tags(self, file: VaultFile) -> list[str] | None:
        """Tags of a file without "#"; None when the file has no tags."""
        ...

    def tag_counts(self) -> dict[str, int]:
        """Every tag known vault-wide with its number of uses."""
        ...

    def create_file(self, path: str, content: str = "") -> VaultFile:
        """Create a file; raises FileExistsError when it already exists."""
        ...


@dataclass
class VaultSnapshot:
    """Files and their tags, read once so enumeration sees a consistent state."""

    files: list[VaultFile] = field(default_factory=list)
    tags: dict[str, frozenset[str]] = field(default_factory=dict)
    """Tags per file path; files without tags map to an empty set"""

    def tags_of(self, file: VaultFile) -> frozenset[str]:
        return self.tags.get(file.path, frozenset())
