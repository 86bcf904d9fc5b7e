"""Unit tests for rule_registry_comp.

Tests two-layer shadowing, name-variant lookup, and the built-in rules.
"""

import pytest

from vaultviews.components.views.rule_registry_comp import CustomRuleRegistry, RuleTable
from vaultviews.helpers.dto.config_dto import CoreNames


class TestRuleTable:
    """Tests for RuleTable shadowing."""

    @pytest.mark.unit
    def test_user_layer_wins(self) -> None:
        table = RuleTable(core={"a": "core-a", "b": "core-b"}, user={"a": "user-a"})
        assert table.resolve("a") == "user-a"
        assert table.find("a") == ("user-a", False)
        assert table.find("b") == ("core-b", True)

    @pytest.mark.unit
    def test_missing_key(self) -> None:
        table = RuleTable(core={"a": 1})
        assert table.resolve("zzz") is None
        assert table.find("zzz") is None
        assert "zzz" not in table
        assert "a" in table

    @pytest.mark.unit
    def test_keys_do_not_repeat_shadowed_core_keys(self) -> None:
        table = RuleTable(core={"a": 1, "b": 2}, user={"a": 3, "c": 4})
        assert table.keys() == ["a", "c", "b"]
        assert table.user_keys() == ["a", "c"]
        assert table.core_keys() == ["a", "b"]

    @pytest.mark.unit
    def test_core_mapping_is_copied(self) -> None:
        core = {"a": 1}
        table = RuleTable(core=core)
        core["a"] = 99
        assert table.resolve("a") == 1


class TestResolveViewRule:
    """Tests for name-variant lookup of custom views."""

    @pytest.mark.unit
    def test_leaf_registration_applies_in_every_folder(self) -> None:
        registry = CustomRuleRegistry(custom_views={"Inbox": lambda tags: True})
        rule = registry.resolve_view_rule("Work/Clients/Inbox")
        assert rule is not None
        assert rule.key == "Inbox"
        assert not rule.core

    @pytest.mark.unit
    def test_anchored_registration_applies_only_at_that_path(self) -> None:
        registry = CustomRuleRegistry(custom_views={"/Work/Inbox": lambda tags: True})
        rule = registry.resolve_view_rule("Work/Inbox")
        assert rule is not None
        assert rule.key == "/Work/Inbox"
        assert registry.resolve_view_rule("Home/Work/Inbox") is None
        assert registry.resolve_view_rule("Inbox") is None

    @pytest.mark.unit
    def test_longest_suffix_wins(self) -> None:
        registry = CustomRuleRegistry(
            custom_views={"Inbox": lambda tags: False, "Work/Inbox": lambda tags: True},
        )
        rule = registry.resolve_view_rule("Work/Inbox")
        assert rule is not None
        assert rule.key == "Work/Inbox"

    @pytest.mark.unit
    def test_core_view_found_inside_folder(self) -> None:
        rule = CustomRuleRegistry().resolve_view_rule("Projects/All")
        assert rule is not None
        assert rule.key == "All"
        assert rule.core

    @pytest.mark.unit
    def test_user_view_shadows_core_view(self) -> None:
        registry = CustomRuleRegistry(custom_views={"All": lambda tags: False})
        rule = registry.resolve_view_rule("All")
        assert rule is not None
        assert not rule.core
        assert rule.evaluate(frozenset(), registry.context()) is False

    @pytest.mark.unit
    def test_unknown_view(self) -> None:
        assert CustomRuleRegistry().resolve_view_rule("proj web") is None


class TestCoreNames:
    """Built-in rules follow renamed core names."""

    @pytest.mark.unit
    def test_renamed_views(self) -> None:
        registry = CustomRuleRegistry(CoreNames(all="Everything", untagged="No tags", others="Rest"))
        assert registry.resolve_view_rule("Everything") is not None
        assert registry.resolve_view_rule("All") is None
        assert sorted(registry.views.core_keys()) == ["Everything", "No tags", "Rest"]

    @pytest.mark.unit
    def test_renamed_archive_tag(self) -> None:
        registry = CustomRuleRegistry(CoreNames(archive="Old"))
        rule = registry.resolve_tag_rule("Old")
        assert rule is not None
        assert rule("Old")
        assert not rule("Archive")
        assert registry.resolve_tag_rule("Archive") is None


class TestResolveTagRule:
    """Tests for custom tag lookup."""

    @pytest.mark.unit
    def test_archive_allows_only_archive_views(self) -> None:
        rule = CustomRuleRegistry().resolve_tag_rule("Archive")
        assert rule is not None
        assert rule("Archive")
        assert rule("Work/Archive")
        assert not rule("proj web")

    @pytest.mark.unit
    def test_user_tag_shadows_core_tag(self) -> None:
        registry = CustomRuleRegistry(custom_tags={"Archive": lambda view: True})
        rule = registry.resolve_tag_rule("Archive")
        assert rule is not None
        assert rule("proj web")

    @pytest.mark.unit
    def test_tag_lookup_is_exact(self) -> None:
        assert CustomRuleRegistry().resolve_tag_rule("Archive/2023") is None


class TestWithUserRules:
    """Reconfiguring replaces the user layer only."""

    @pytest.mark.unit
    def test_new_registry_keeps_core_names(self) -> None:
        original = CustomRuleRegistry(CoreNames(all="Everything"), custom_views={"Work": lambda tags: True})
        updated = original.with_user_rules(custom_views={"Home": lambda tags: True})

        assert updated.core_names == original.core_names
        assert updated.resolve_view_rule("Home") is not None
        assert updated.resolve_view_rule("Work") is None
        assert original.resolve_view_rule("Work") is not None
        assert updated.resolve_view_rule("Everything") is not None

    @pytest.mark.unit
    def test_context_carries_known_views(self) -> None:
        registry = CustomRuleRegistry()
        context = registry.context(["a", "b"])
        assert context.known_view_names == ("a", "b")
        assert context.registry is registry
