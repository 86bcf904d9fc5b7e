"""
Workflows package.
"""

from .views import (
    add_thing_workflow,
    get_tag_stats_workflow,
    initiate_view_workflow,
    list_view_things_workflow,
    list_views_workflow,
)

__all__ = [
    "add_thing_workflow",
    "get_tag_stats_workflow",
    "initiate_view_workflow",
    "list_view_things_workflow",
    "list_views_workflow",
]
