"""Tests for view initiation."""

import pytest

from vaultviews.helpers.exceptions import ViewAlreadyInitiatedError
from vaultviews.workflows.views.initiate_view_wf import initiate_view_workflow


@pytest.mark.unit
class TestInitiateViewWorkflow:
    def test_creates_view_file_from_template(self, vault_factory) -> None:
        vault = vault_factory()
        created = initiate_view_workflow(vault, "proj web", "Views", template="# {{view_name}}\n")

        assert created.path == "Views/proj web.md"
        assert vault.contents["Views/proj web.md"] == "# proj web\n"

    def test_slash_means_folder(self, vault_factory) -> None:
        created = initiate_view_workflow(vault_factory(), "proj/web", "Views")
        assert created.path == "Views/proj/web.md"

    def test_folders_are_kept(self, vault_factory) -> None:
        created = initiate_view_workflow(vault_factory(), "/Work/proj web/", "Views/")
        assert created.path == "Views/Work/proj web.md"

    def test_already_initiated(self, memory_vault) -> None:
        with pytest.raises(ViewAlreadyInitiatedError) as exc_info:
            initiate_view_workflow(memory_vault, "proj web", "Views")

        assert exc_info.value.view_name == "proj web"
        assert exc_info.value.path == "Views/proj web.md"

    @pytest.mark.parametrize("name", ["", "/"])
    def test_empty_name(self, vault_factory, name: str) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            initiate_view_workflow(vault_factory(), name, "Views")
