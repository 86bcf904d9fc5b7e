"""
Views API types - Pydantic models for the views domain.

External API contracts for views endpoints.
These models are thin adapters around DTOs from helpers/dto/views_dto.py.

Architecture:
- Response models use .from_dto() to convert DTOs to Pydantic
- Services continue using DTOs (no Pydantic imports in services layer)
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from vaultviews.helpers.dto.vault_dto import VaultFile
from vaultviews.helpers.dto.views_dto import AddThingResult, TagStat, ThingRow, ViewLink, ViewListing

# ──────────────────────────────────────────────────────────────────────
# Request Models
# ──────────────────────────────────────────────────────────────────────


class MatchRequest(BaseModel):
    """Membership check for a single thing."""

    view_name: str = Field(..., description="View name, e.g. 'proj web' or 'Work/Inbox'")
    tags: list[str] | None = Field(default=None, description="Tags without '#'; null means no tags")
    known_view_names: list[str] | None = Field(
        default=None, description="Views the Others view compares against (default: initiated views)"
    )


class InitiateViewRequest(BaseModel):
    """Create the file for a view."""

    view_name: str = Field(..., min_length=1, description="View path; '/' separates folders")


# ──────────────────────────────────────────────────────────────────────
# Response Models
# ──────────────────────────────────────────────────────────────────────


class ViewLinkResponse(BaseModel):
    """Pydantic model for ViewLink DTO."""

    name: str
    label: str
    target: str
    pinned: bool
    initiated: bool

    @classmethod
    def from_dto(cls, dto: ViewLink) -> ViewLinkResponse:
        return cls(name=dto.name, label=dto.label, target=dto.target, pinned=dto.pinned, initiated=dto.initiated)


class ViewsResponse(BaseModel):
    """Views of the vault plus the navigation list."""

    initiated: list[str] = Field(default_factory=list)
    uninitiated: list[str] = Field(default_factory=list)
    links: list[ViewLinkResponse] = Field(default_factory=list)

    @classmethod
    def from_dto(cls, listing: ViewListing, links: list[ViewLink]) -> ViewsResponse:
        return cls(
            initiated=listing.initiated,
            uninitiated=listing.uninitiated,
            links=[ViewLinkResponse.from_dto(link) for link in links],
        )


class ThingResponse(BaseModel):
    """Pydantic model for ThingRow DTO."""

    path: str
    name: str
    tags: list[str]
    tags_text: str

    @classmethod
    def from_dto(cls, dto: ThingRow) -> ThingResponse:
        return cls(path=dto.path, name=dto.name, tags=dto.tags, tags_text=dto.tags_text)


class ViewThingsResponse(BaseModel):
    view_name: str
    things: list[ThingResponse]
    count: int


class MatchResponse(BaseModel):
    view_name: str
    matches: bool


class VaultFileResponse(BaseModel):
    """A created vault file."""

    path: str
    created: bool = True

    @classmethod
    def from_file(cls, file: VaultFile) -> VaultFileResponse:
        return cls(path=file.path, created=True)

    @classmethod
    def from_dto(cls, dto: AddThingResult) -> VaultFileResponse:
        return cls(path=dto.path, created=dto.created)


class TagStatResponse(BaseModel):
    """Pydantic model for TagStat DTO."""

    tag: str
    count: int
    view_name: str

    @classmethod
    def from_dto(cls, dto: TagStat) -> TagStatResponse:
        return cls(tag=dto.tag, count=dto.count, view_name=dto.view_name)
