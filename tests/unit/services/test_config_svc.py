"""Tests for configuration loading."""

from pathlib import Path

import pytest

from vaultviews.helpers.dto.config_dto import CoreNames
from vaultviews.services.config_svc import DEFAULT_VIEW_TEMPLATE, ConfigService


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty folder with no VAULTVIEWS_* variables set."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("VAULTVIEWS_CONFIG", raising=False)
    monkeypatch.delenv("VAULTVIEWS_VIEWS_PATH", raising=False)
    monkeypatch.delenv("VAULTVIEWS_MERGE_VIEWS_IN_LIST", raising=False)
    monkeypatch.delenv("VAULTVIEWS_PORT", raising=False)
    return tmp_path


def write_config(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.mark.unit
class TestConfigService:
    def test_defaults(self) -> None:
        service = ConfigService()
        assert service.get("views_path") == "Views"
        assert service.get("core_names.others") == "Others"
        assert service.get("missing.key", "fallback") == "fallback"

    def test_views_config_defaults(self) -> None:
        cfg = ConfigService().make_views_config()
        assert cfg.things_path == "Things"
        assert cfg.view_template == DEFAULT_VIEW_TEMPLATE
        assert cfg.core_names == CoreNames()
        assert cfg.custom_views == {}

    def test_overrides_merge_deeply(self) -> None:
        service = ConfigService({"core_names": {"others": "Misc"}})
        names = service.make_views_config().core_names
        assert names.others == "Misc"
        assert names.all == "All"

    def test_local_config_file(self, isolated_config: Path) -> None:
        write_config(
            isolated_config / "config" / "config.yaml",
            "views_path: Lists\ncustom_views:\n  Work:\n    any: [job]\n",
        )
        cfg = ConfigService().make_views_config()
        assert cfg.views_path == "Lists"
        assert cfg.custom_views == {"Work": {"any": ["job"]}}

    def test_config_path_from_env(self, isolated_config: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = write_config(isolated_config / "elsewhere.yaml", "pinned_views: Inbox\n")
        monkeypatch.setenv("VAULTVIEWS_CONFIG", str(path))
        assert ConfigService().make_views_config().pinned_views == ["Inbox"]

    def test_env_overrides_win(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VAULTVIEWS_VIEWS_PATH", "Lists")
        monkeypatch.setenv("VAULTVIEWS_MERGE_VIEWS_IN_LIST", "true")
        monkeypatch.setenv("VAULTVIEWS_PORT", "9000")
        service = ConfigService({"views_path": "Other"})

        assert service.get("views_path") == "Lists"
        assert service.get("merge_views_in_list") is True
        assert service.get("port") == 9000

    def test_invalid_yaml_is_ignored(self, isolated_config: Path) -> None:
        write_config(isolated_config / "config" / "config.yaml", "views_path: [unclosed\n")
        assert ConfigService().get("views_path") == "Views"

    def test_reload(self, isolated_config: Path) -> None:
        service = ConfigService()
        assert service.get("things_path") == "Things"
        write_config(isolated_config / "config" / "config.yaml", "things_path: Notes\n")

        assert service.get("things_path") == "Things"
        assert service.reload().config["things_path"] == "Notes"

    def test_core_view_names_must_be_distinct(self) -> None:
        service = ConfigService({"core_names": {"others": "All"}})
        with pytest.raises(ValueError, match="distinct"):
            service.make_views_config()

    def test_custom_views_must_be_mapping(self) -> None:
        service = ConfigService({"custom_views": ["Work"]})
        with pytest.raises(ValueError, match="custom_views must be a mapping"):
            service.make_views_config()
