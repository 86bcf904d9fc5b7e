#!/usr/bin/env python3
# ======================================================================
#  Config Service - Configuration loading and caching
#  - Loads config from YAML files and env vars
#  - Caches composed config
#  - Provides reload() for runtime changes
# ======================================================================

from __future__ import annotations

import logging
import os
from typing import Any

import yaml

from vaultviews.helpers.dto.config_dto import ConfigResult, CoreNames, ViewsConfig

ENV_PREFIX = "VAULTVIEWS_"
ENV_CONFIG_PATH = "VAULTVIEWS_CONFIG"

DEFAULT_VIEW_TEMPLATE = "# {{view_name}}\n"


class ConfigService:
    """
    Service for loading and caching application configuration.

    Loads config from multiple sources (defaults → YAML → overrides → env),
    caches the result, and provides reload capability.
    """

    def __init__(self, overrides: dict[str, Any] | None = None) -> None:
        """Initialize ConfigService with empty cache."""
        self._overrides = overrides or {}
        self._config: dict[str, Any] | None = None
        self._logger = logging.getLogger(__name__)

    def get_config(self, force_reload: bool = False) -> ConfigResult:
        """
        Get the composed configuration.

        Args:
            force_reload: If True, bypass cache and reload from sources

        Returns:
            ConfigResult wrapping the complete configuration dict
        """
        if self._config is None or force_reload:
            self._config = self._compose(self._overrides)
        return ConfigResult(config=self._config)

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dotted path.

        Example:
            >>> service.get("views_path")
            'Views'
            >>> service.get("core_names.others")
            'Others'
        """
        node: Any = self.get_config().config
        for part in key_path.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def reload(self) -> ConfigResult:
        """Force reload configuration from all sources."""
        self._logger.info("[config] Reloading configuration from all sources")
        return self.get_config(force_reload=True)

    def make_views_config(self) -> ViewsConfig:
        """
        Build a ViewsConfig from the current configuration.

        This is the boundary where raw config values are type-checked.

        Raises:
            ValueError: If a value has the wrong shape
        """
        cfg = self.get_config().config

        core_names = cfg.get("core_names") or {}
        if not isinstance(core_names, dict):
            raise ValueError("core_names must be a mapping")
        names = CoreNames(**{k: str(v) for k, v in core_names.items() if k in CoreNames.__dataclass_fields__})
        if len({names.all, names.untagged, names.others}) != 3:
            raise ValueError("core view names must be distinct")

        pinned = cfg.get("pinned_views") or []
        if isinstance(pinned, str):
            pinned = [pinned]

        for key in ("custom_views", "custom_tags"):
            if cfg.get(key) is not None and not isinstance(cfg[key], dict):
                raise ValueError(f"{key} must be a mapping")

        return ViewsConfig(
            vault_path=str(cfg["vault_path"]),
            views_path=str(cfg["views_path"]),
            things_path=str(cfg["things_path"]),
            view_extension=str(cfg["view_extension"]),
            merge_views_in_list=bool(cfg["merge_views_in_list"]),
            derive_subfolder_views=bool(cfg["derive_subfolder_views"]),
            pinned_views=[str(name) for name in pinned],
            new_thing_name=str(cfg["new_thing_name"]),
            view_template=str(cfg["view_template"]),
            core_names=names,
            custom_views=dict(cfg.get("custom_views") or {}),
            custom_tags=dict(cfg.get("custom_tags") or {}),
        )

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _compose(self, overrides: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        Load final configuration from:
          1) Built-in defaults
          2) /etc/vaultviews/config.yaml  (if present)
          3) ./config/config.yaml
          4) $VAULTVIEWS_CONFIG (if set)
          5) overrides dict passed in
          6) Environment variables (VAULTVIEWS_*)

        Returns merged config as dict.
        """
        cfg = self._default_config()

        self._deep_merge(cfg, self._load_yaml("/etc/vaultviews/config.yaml"))
        self._deep_merge(cfg, self._load_yaml(os.path.join(os.getcwd(), "config", "config.yaml")))

        env_path = os.getenv(ENV_CONFIG_PATH)
        if env_path:
            self._deep_merge(cfg, self._load_yaml(env_path))

        if overrides:
            self._deep_merge(cfg, overrides)

        self._apply_env_overrides(cfg)

        self._logger.debug("[config] compose() loaded config; keys: %s", list(cfg.keys()))
        return cfg

    def _default_config(self) -> dict[str, Any]:
        """
        Base defaults; all fields present so no KeyErrors downstream.
        """
        return {
            # Vault layout
            "vault_path": ".",
            "views_path": "Views",
            "things_path": "Things",
            "view_extension": ".md",
            # Views list
            "merge_views_in_list": False,
            "derive_subfolder_views": False,
            "pinned_views": [],
            # New files
            "new_thing_name": "Untitled",
            "view_template": DEFAULT_VIEW_TEMPLATE,
            # Built-in view/tag names (rules are fixed, names are not)
            "core_names": {"all": "All", "untagged": "Untagged", "others": "Others", "archive": "Archive"},
            # User rules
            "custom_views": {},
            "custom_tags": {},
            # API settings
            "host": "127.0.0.1",
            "port": 8357,
            "log_level": "INFO",
        }

    def _deep_merge(self, a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
        """
        Recursively merge dict b into dict a (mutates a, returns it).
        """
        for k, v in b.items():
            if isinstance(v, dict) and isinstance(a.get(k), dict):
                self._deep_merge(a[k], v)
            else:
                a[k] = v
        return a

    def _load_yaml(self, path: str) -> dict[str, Any]:
        """
        Load a YAML file; returns {} if not found or invalid.
        """
        if not path or not os.path.exists(path):
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            self._logger.warning(f"[config] Ignoring unreadable config {path}: {e}")
            return {}
        if not isinstance(data, dict):
            self._logger.warning(f"[config] Ignoring config {path}: top level is not a mapping")
            return {}
        self._logger.info(f"[config] Loaded {path}")
        return data

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        """
        Support environment overrides of the form:
          VAULTVIEWS_VIEWS_PATH=Lists
          VAULTVIEWS_MERGE_VIEWS_IN_LIST=true
          VAULTVIEWS_PORT=9000
        Only top-level keys that already exist are overridden.
        """
        for k, v in os.environ.items():
            if not k.startswith(ENV_PREFIX) or k == ENV_CONFIG_PATH:
                continue
            key = k[len(ENV_PREFIX) :].lower()
            if key not in cfg or isinstance(cfg[key], dict | list):
                continue
            if v.lower() in ("true", "false"):
                val: Any = v.lower() == "true"
            elif v.isdigit():
                val = int(v)
            else:
                val = v
            cfg[key] = val
