"""Views domain DTOs.

Data transfer objects for view enumeration, navigation lists and view listings.
These form cross-layer contracts between interfaces, services, and workflows.

Rules:
- Import only stdlib and typing (no vaultviews.* imports)
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class EnumerateOptions:
    """Where to look for views and things, and how to build the listing."""

    views_path: str = "Views"
    things_path: str = "Things"
    view_extension: str | None = ".md"
    """Extension of view files; None counts every file under views_path"""

    derive_subfolders: bool = False
    """Offer each tag found in a things subfolder at every ancestor folder level"""

    merge: bool = False
    """Sort initiated and uninitiated names together in ViewListing.names()"""


@dataclass
class ViewListing:
    """Initiated and uninitiated view names, each sorted, never overlapping."""

    initiated: list[str] = field(default_factory=list)
    uninitiated: list[str] = field(default_factory=list)
    merged: bool = False

    def names(self) -> list[str]:
        """All view names: initiated first, or one sorted list when merged."""
        names = [*self.initiated, *self.uninitiated]
        return sorted(names) if self.merged else names


@dataclass
class ViewLink:
    """One entry of the views navigation list."""

    name: str
    label: str
    target: str
    """Vault path the entry links to, e.g. "Views/proj web" """

    pinned: bool = False
    initiated: bool = True


@dataclass
class ThingRow:
    """A thing shown in a view listing."""

    path: str
    name: str
    tags: list[str]
    """Sorted tags without "#" """

    @property
    def tags_text(self) -> str:
        """Tags joined as note text, e.g. "#proj/web #todo"."""
        return " ".join(f"#{tag}" for tag in self.tags)


@dataclass
class AddThingResult:
    """Result of creating a new thing."""

    path: str
    created: bool
    """False when a thing with the default name already existed"""


@dataclass
class TagStat:
    """A tag and how many times it is used in the vault."""

    tag: str
    count: int
    view_name: str
