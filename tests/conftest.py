"""
Pytest fixtures and configuration for the test suite.

Strategy:
- Pure logic is tested against an in-memory vault
- Filesystem behavior is tested against real markdown vaults in tmp_path
"""

import sys
from collections import Counter
from collections.abc import Callable
from pathlib import Path

import pytest

# Add project root to path so tests can import vaultviews package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from vaultviews.components.views.rule_registry_comp import CustomRuleRegistry  # noqa: E402
from vaultviews.helpers.dto.vault_dto import VaultFile, VaultSnapshot  # noqa: E402


class InMemoryVault:
    """VaultSource backed by a dict of path -> tags (None for no tags)."""

    def __init__(self, files: dict[str, list[str] | None] | None = None) -> None:
        self.files: dict[str, list[str] | None] = dict(files or {})
        self.contents: dict[str, str] = {}

    def list_files(self) -> list[VaultFile]:
        return [VaultFile(path) for path in self.files]

    def file_tags(self, file: VaultFile) -> list[str] | None:
        return self.files.get(file.path)

    def tag_counts(self) -> dict[str, int]:
        counts: Counter[str] = Counter()
        for tags in self.files.values():
            counts.update(f"#{tag}" for tag in tags or [])
        return dict(counts)

    def create_file(self, path: str, content: str = "") -> VaultFile:
        if path in self.files:
            raise FileExistsError(path)
        self.files[path] = None
        self.contents[path] = content
        return VaultFile(path)


def make_snapshot(files: dict[str, list[str] | None]) -> VaultSnapshot:
    """Snapshot straight from a path -> tags mapping."""
    return VaultSnapshot(
        files=[VaultFile(path) for path in files],
        tags={path: frozenset(tags or ()) for path, tags in files.items()},
    )


@pytest.fixture
def snapshot_factory() -> Callable[[dict[str, list[str] | None]], VaultSnapshot]:
    return make_snapshot


@pytest.fixture
def vault_factory() -> type[InMemoryVault]:
    return InMemoryVault


@pytest.fixture
def registry() -> CustomRuleRegistry:
    """Registry with only the built-in rules."""
    return CustomRuleRegistry()


@pytest.fixture
def memory_vault() -> InMemoryVault:
    """Small vault: two projects, one archived note, one untagged note, one view."""
    return InMemoryVault(
        {
            "Things/site.md": ["proj/web"],
            "Things/tool.md": ["proj/cli"],
            "Things/old.md": ["proj/web", "Archive"],
            "Things/loose.md": None,
            "Views/proj web.md": None,
        }
    )


@pytest.fixture
def write_note(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a note below tmp_path and return its path."""

    def _write(relative: str, text: str = "") -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
