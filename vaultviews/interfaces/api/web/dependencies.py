"""
FastAPI dependency injection helpers for endpoints.

Endpoints only inject services, never the vault or raw infrastructure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import HTTPException

from vaultviews.helpers.exceptions import RuleDefinitionError

if TYPE_CHECKING:
    from vaultviews.services.views_svc import ViewsService


def get_views_service() -> ViewsService:
    """Get ViewsService instance."""
    from vaultviews.app import application

    try:
        return application.views
    except (RuleDefinitionError, ValueError) as e:
        raise HTTPException(status_code=503, detail=f"Views service not available: {e}") from e
