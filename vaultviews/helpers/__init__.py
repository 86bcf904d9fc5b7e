"""
Helpers package.
"""

from .exceptions import RuleDefinitionError, VaultViewsError, ViewAlreadyInitiatedError
from .logging_helper import configure_logging, sanitize_exception_message
from .names import (
    PATH_SEPARATOR,
    TAG_SEPARATOR,
    VIEW_SEPARATOR,
    TagName,
    ViewName,
    leaf_name,
    name_variants,
    tag_to_view_name,
    trim,
    view_name_to_tag,
)

__all__ = [
    "PATH_SEPARATOR",
    "TAG_SEPARATOR",
    "VIEW_SEPARATOR",
    "RuleDefinitionError",
    "TagName",
    "VaultViewsError",
    "ViewAlreadyInitiatedError",
    "ViewName",
    "configure_logging",
    "leaf_name",
    "name_variants",
    "sanitize_exception_message",
    "tag_to_view_name",
    "trim",
    "view_name_to_tag",
]
