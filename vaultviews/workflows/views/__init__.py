"""Views workflows."""

from .add_thing_wf import add_thing_workflow
from .initiate_view_wf import initiate_view_workflow
from .list_views_wf import list_views_workflow
from .tag_stats_wf import get_tag_stats_workflow
from .view_things_wf import list_view_things_workflow

__all__ = [
    "add_thing_workflow",
    "get_tag_stats_workflow",
    "initiate_view_workflow",
    "list_view_things_workflow",
    "list_views_workflow",
]
