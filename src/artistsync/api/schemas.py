"""Response schemas for a catalog sync run."""

from __future__ import annotations

from http import HTTPStatus

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from artistsync.domain.model import MatchConfidence, OutcomeStatus  # noqa: TC001


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class CatalogArtistData(ApiModel):
    """Catalog artist snapshot attached to updated and flagged results."""

    id: str
    name: str
    image_url: str | None = None
    spotify_url: str
    followers: int = 0
    popularity: int = 0


class SyncResultItem(ApiModel):
    artist: str
    status: OutcomeStatus
    spotify_data: CatalogArtistData | None = None
    confidence: MatchConfidence | None = None
    error: str | None = None


class SyncSummary(ApiModel):
    total: int
    updated: int
    skipped: int
    failed: int


class SyncResponse(ApiModel):
    success: bool
    status_code: int = Field(default=HTTPStatus.OK, exclude=True)
    summary: SyncSummary | None = None
    results: list[SyncResultItem] | None = None
    error: str | None = None
    details: dict[str, str] | None = None

    def to_payload(self) -> dict[str, object]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, *, indent: int | None = None) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)
