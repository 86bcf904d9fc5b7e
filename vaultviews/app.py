"""
Application composition root and dependency injection container.

The Application owns the config service and the views service. Interfaces
get services from here instead of constructing them.

Architecture:
- Services are created lazily on first access and cached
- Access services via: application.get_service("name") or application.services["name"]
- configure() resets the container with new config overrides (CLI flags, tests)

The singleton instance is available as `application` at module level.
"""

from __future__ import annotations

import logging
from typing import Any

from vaultviews.services.config_svc import ConfigService
from vaultviews.services.views_svc import ViewsService

logger = logging.getLogger(__name__)


class Application:
    """Application composition root and dependency injection container."""

    def __init__(self, overrides: dict[str, Any] | None = None) -> None:
        self.services: dict[str, Any] = {}
        self.configure(overrides)

    def configure(self, overrides: dict[str, Any] | None = None) -> None:
        """Drop existing services and start from a fresh config."""
        self.services.clear()
        self.register_service("config", ConfigService(overrides))

    def register_service(self, name: str, service: Any) -> None:
        self.services[name] = service

    def get_service(self, name: str) -> Any:
        """
        Get a service by name, building the views service on first use.

        Raises:
            KeyError: If the service is unknown
            RuleDefinitionError: If configured custom rules are invalid
        """
        if name == "views" and "views" not in self.services:
            config_service: ConfigService = self.services["config"]
            views_cfg = config_service.make_views_config()
            logger.info(f"[app] Using vault at {views_cfg.vault_path}")
            self.register_service("views", ViewsService(views_cfg))
        return self.services[name]

    @property
    def config(self) -> ConfigService:
        return self.get_service("config")  # type: ignore[no-any-return]

    @property
    def views(self) -> ViewsService:
        return self.get_service("views")  # type: ignore[no-any-return]


application = Application()
