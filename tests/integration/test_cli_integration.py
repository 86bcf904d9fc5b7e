"""
Integration tests for the vv command line.

Commands run in-process through main() against a vault in tmp_path.
"""

from pathlib import Path

import pytest

from vaultviews.interfaces.cli.main import main

pytestmark = pytest.mark.integration


def run(vault: Path, *args: str) -> int:
    return main(["--vault", str(vault), *args])


class TestViewsCommands:
    def test_no_command_shows_help(self, capsys) -> None:
        assert main([]) == 0
        assert "usage: vv" in capsys.readouterr().out

    def test_views(self, vault: Path, capsys) -> None:
        assert run(vault, "views") == 0
        out = capsys.readouterr().out
        assert "proj/web" in out
        assert "Untagged" in out

    def test_things(self, vault: Path, capsys) -> None:
        assert run(vault, "things", "proj") == 0
        out = capsys.readouterr().out
        assert "site" in out
        assert "tool" in out

    def test_things_in_empty_view(self, vault: Path, capsys) -> None:
        assert run(vault, "things", "nothing") == 0
        assert "No things in view" in capsys.readouterr().out

    def test_tags(self, vault: Path, capsys) -> None:
        assert run(vault, "tags") == 0
        assert "#proj/cli" in capsys.readouterr().out


class TestMatchCommand:
    def test_match(self, vault: Path) -> None:
        assert run(vault, "match", "proj", "#proj/web") == 0

    def test_no_match(self, vault: Path) -> None:
        assert run(vault, "match", "proj", "#proj/web", "#Archive") == 2

    def test_others_compares_with_initiated_views(self, vault: Path) -> None:
        assert run(vault, "match", "Others", "proj/web") == 2
        assert run(vault, "match", "Others", "proj/cli") == 0

    def test_untagged(self, vault: Path) -> None:
        assert run(vault, "match", "Untagged") == 0


class TestChangeCommands:
    def test_init_view(self, vault: Path) -> None:
        assert run(vault, "init-view", "proj cli") == 0
        assert (vault / "Views" / "proj cli.md").read_text(encoding="utf-8") == "# proj cli\n"

    def test_init_view_slash_means_folder(self, vault: Path) -> None:
        assert run(vault, "init-view", "proj/cli") == 0
        assert (vault / "Views" / "proj" / "cli.md").exists()
        assert not (vault / "Views" / "proj cli.md").exists()

    def test_init_view_from_tag(self, vault: Path, capsys) -> None:
        assert run(vault, "init-view", "--tag", "#proj/cli") == 0
        assert (vault / "Views" / "proj cli.md").read_text(encoding="utf-8") == "# proj cli\n"
        assert not (vault / "Views" / "proj").exists()
        assert "Created Views/proj cli.md" in capsys.readouterr().out

    def test_init_existing_view_from_tag(self, vault: Path) -> None:
        assert run(vault, "init-view", "--tag", "proj/web") == 1

    def test_init_existing_view(self, vault: Path, capsys) -> None:
        assert run(vault, "init-view", "proj web") == 1
        assert "already exists" in capsys.readouterr().out

    def test_add_thing_twice(self, vault: Path, capsys) -> None:
        assert run(vault, "add-thing") == 0
        assert run(vault, "add-thing") == 0

        assert (vault / "Things" / "Untitled.md").exists()
        assert "already exists" in capsys.readouterr().out

    def test_custom_views_path(self, vault: Path) -> None:
        assert run(vault, "--views-path", "Lists", "init-view", "proj web") == 0
        assert (vault / "Lists" / "proj web.md").exists()
