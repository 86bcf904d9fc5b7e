"""
Persistence package.
"""

from .markdown_vault import MarkdownVault, parse_note_tags
from .snapshot import take_snapshot

__all__ = [
    "MarkdownVault",
    "parse_note_tags",
    "take_snapshot",
]
