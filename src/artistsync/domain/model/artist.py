"""Artist records and the catalog data matched against them."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .enums import MatchConfidence


@dataclass(eq=False, kw_only=True)
class ArtistRecord:
    """Local artist row. Only the catalog fields and a missing image are ever written."""

    name: str
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    image_url: str | None = None
    catalog_url: str | None = None
    catalog_id: str | None = None

    @property
    def is_synced(self) -> bool:
        return bool(self.catalog_id)


@dataclass(frozen=True, slots=True, kw_only=True)
class CatalogCandidate:
    """Catalog artist returned by a search. Never persisted as a whole."""

    id: str
    name: str
    url: str
    image_url: str | None = None
    follower_count: int = 0
    popularity: int = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class MatchResult:
    """Best candidate for a queried name together with its confidence class."""

    confidence: MatchConfidence
    candidate: CatalogCandidate | None = None
    similarity: float | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ArtistUpdate:
    """Partial update applied to one artist after an accepted match."""

    catalog_id: str
    catalog_url: str
    image_url: str | None = None

    @classmethod
    def for_candidate(cls, record: ArtistRecord, candidate: CatalogCandidate) -> ArtistUpdate:
        # curated images are never replaced
        image_url = candidate.image_url if not record.image_url else None
        return cls(catalog_id=candidate.id, catalog_url=candidate.url, image_url=image_url)

    def changes(self) -> dict[str, str]:
        values = {"catalog_id": self.catalog_id, "catalog_url": self.catalog_url}
        if self.image_url:
            values["image_url"] = self.image_url
        return values
