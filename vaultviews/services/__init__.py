"""
Services package.
"""

from .config_svc import ConfigService
from .views_svc import ViewsService

__all__ = [
    "ConfigService",
    "ViewsService",
]
