"""
Name helpers for tags, view names and view paths.

Tags use "/" between hierarchy levels ("proj/web"). View files cannot contain
"/" in their names, so a view derived from a tag uses " " instead ("proj web").
Views may also live in folders under the views root, which gives a view path
such as "Work/Clients/proj web": folders are separated by "/", the last
segment (the leaf) is the view name proper.

Rules:
- Only import from standard library
- Keep pure: no I/O, no config loading, no side effects
"""

from __future__ import annotations

from dataclasses import dataclass

TAG_SEPARATOR = "/"
VIEW_SEPARATOR = " "
PATH_SEPARATOR = "/"
TAG_MARKER = "#"


def trim(path: str) -> str:
    """
    Strip one leading and one trailing path separator.

    Only a single character is removed on each side.

    Examples:
        >>> trim("/a/b/")
        'a/b'
        >>> trim("a/b")
        'a/b'
    """
    if path.startswith(PATH_SEPARATOR):
        path = path[1:]
    if path.endswith(PATH_SEPARATOR):
        path = path[:-1]
    return path


def tag_to_view_name(tag: str) -> str:
    """Convert a tag ("proj/web") to a view name ("proj web")."""
    return tag.replace(TAG_SEPARATOR, VIEW_SEPARATOR)


def view_name_to_tag(view_name: str) -> str:
    """Convert the leaf of a view name back to tag notation, for display."""
    return leaf_name(view_name).replace(VIEW_SEPARATOR, TAG_SEPARATOR)


def strip_tag_marker(tag: str) -> str:
    """Drop a leading "#" from a tag as written in note text."""
    return tag[1:] if tag.startswith(TAG_MARKER) else tag


def leaf_name(view_name: str) -> str:
    """Return the final path segment of a view name."""
    return trim(view_name).split(PATH_SEPARATOR)[-1]


def name_variants(view_name: str) -> list[str]:
    """
    List the keys a custom view may be registered under for a view path.

    Order is the full path, then each shorter suffix down to the leaf, then
    the anchored form of the full path. A rule registered as "Inbox" thus
    applies in every folder, while "/Work/Inbox" only applies at that path.

    Examples:
        >>> name_variants("Work/Clients/Inbox")
        ['Work/Clients/Inbox', 'Clients/Inbox', 'Inbox', '/Work/Clients/Inbox']
    """
    segments = trim(view_name).split(PATH_SEPARATOR)
    variants = [PATH_SEPARATOR.join(segments[i:]) for i in range(len(segments))]
    variants.append(PATH_SEPARATOR + variants[0])
    return variants


@dataclass(frozen=True)
class TagName:
    """A tag without its "#" marker."""

    value: str

    @property
    def segments(self) -> list[str]:
        """Hierarchy levels, most general first."""
        return self.value.split(TAG_SEPARATOR)

    @property
    def root(self) -> str:
        return self.segments[0]

    def to_view_name(self) -> ViewName:
        return ViewName(tag_to_view_name(self.value))


@dataclass(frozen=True)
class ViewName:
    """
    A view path, optionally inside folders of the views root.

    The stored value is kept as given; accessors work on the trimmed form.
    """

    value: str

    @property
    def trimmed(self) -> str:
        return trim(self.value)

    @property
    def segments(self) -> list[str]:
        """Path segments (folders followed by the leaf)."""
        return self.trimmed.split(PATH_SEPARATOR)

    @property
    def folders(self) -> list[str]:
        return self.segments[:-1]

    @property
    def leaf(self) -> str:
        return self.segments[-1]

    @property
    def levels(self) -> list[str]:
        """Hierarchy levels of the leaf, comparable to TagName.segments."""
        return self.leaf.split(VIEW_SEPARATOR)

    @property
    def is_nested(self) -> bool:
        return VIEW_SEPARATOR in self.leaf

    @property
    def is_anchored(self) -> bool:
        return self.value.startswith(PATH_SEPARATOR)

    @property
    def variants(self) -> list[str]:
        return name_variants(self.value)

    @property
    def label(self) -> str:
        """Display form with levels shown as tag hierarchy ("Work/proj web" -> "Work/proj/web")."""
        return self.trimmed.replace(VIEW_SEPARATOR, TAG_SEPARATOR)
