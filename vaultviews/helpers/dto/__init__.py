"""
DTO package.
"""

from .config_dto import ConfigResult, CoreNames, ViewsConfig
from .vault_dto import VaultFile, VaultSnapshot, VaultSource
from .views_dto import AddThingResult, EnumerateOptions, TagStat, ThingRow, ViewLink, ViewListing

__all__ = [
    "AddThingResult",
    "ConfigResult",
    "CoreNames",
    "EnumerateOptions",
    "TagStat",
    "ThingRow",
    "VaultFile",
    "VaultSnapshot",
    "VaultSource",
    "ViewLink",
    "ViewListing",
    "ViewsConfig",
]
