"""Fixtures shared by the CLI and API integration tests."""

from collections.abc import Iterator
from pathlib import Path

import pytest

import vaultviews.app as app


@pytest.fixture
def vault(tmp_path: Path, write_note, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """
    A small vault on disk, with the application configured to use it.

    Runs from tmp_path so no local config/config.yaml is picked up.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("VAULTVIEWS_CONFIG", raising=False)
    write_note("Things/site.md", "Landing page for #proj/web")
    write_note("Things/tool.md", "---\ntags: [proj/cli]\n---\nA command line tool")
    write_note("Things/old.md", "#proj/web #Archive")
    write_note("Things/loose.md", "Nothing here")
    write_note("Views/proj web.md", "# proj web\n")

    app.application.configure({"vault_path": str(tmp_path)})
    yield tmp_path
    app.application.configure()
