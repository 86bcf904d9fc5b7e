"""Web routers."""

from .views_if import router

__all__ = ["router"]
