"""Confidence-scored matching of local artist names against catalog candidates.

Responsibilities:
- normalise names so casing, accents and punctuation do not affect comparison
- score every candidate by lexical similarity to the queried name
- rank ties by popularity, then follower count
- classify the best candidate into a confidence class

The engine returns a description only; it never touches artist records.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rapidfuzz import fuzz

from artistsync.domain.errors import MatchError
from artistsync.domain.model import CatalogCandidate, MatchConfidence, MatchResult

if TYPE_CHECKING:
    from collections.abc import Iterable

    from artistsync.domain.ports.catalog import ArtistCatalog

DEFAULT_SEARCH_LIMIT = 10
DEFAULT_HIGH_THRESHOLD = 100.0
DEFAULT_MEDIUM_THRESHOLD = 80.0


@dataclass(frozen=True, slots=True)
class MatchThresholds:
    """Similarity cut-offs (0-100). Exact normalised names are always ``high``."""

    high: float = DEFAULT_HIGH_THRESHOLD
    medium: float = DEFAULT_MEDIUM_THRESHOLD

    def __post_init__(self) -> None:
        if not 0 <= self.medium <= self.high <= 100:  # noqa: PLR2004
            msg = f"Expected 0 <= medium <= high <= 100, got {self.medium}/{self.high}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class ScoredCandidate:
    candidate: CatalogCandidate
    similarity: float
    exact: bool


def normalize_artist_name(value: str) -> str:
    """Fold accents, case and punctuation; collapse whitespace.

    Names consisting only of punctuation keep it, so they stay searchable and comparable.
    """

    text = unicodedata.normalize("NFKD", value)
    text = "".join(ch for ch in text if not unicodedata.combining(ch))
    folded = unicodedata.normalize("NFKC", text).casefold()
    text = "".join(ch for ch in folded if not unicodedata.category(ch).startswith("P"))
    normalized = " ".join(text.split())
    return normalized or " ".join(folded.split())


def name_similarity(query: str, candidate: str) -> float:
    left = normalize_artist_name(query)
    right = normalize_artist_name(candidate)
    if not left or not right:
        return 0.0
    return float(fuzz.ratio(left, right))


def rank_candidates(query: str, candidates: Iterable[CatalogCandidate]) -> list[ScoredCandidate]:
    """Score candidates and order them best first; the catalog order breaks full ties."""

    normalized_query = normalize_artist_name(query)
    scored = [
        ScoredCandidate(
            candidate=candidate,
            similarity=name_similarity(query, candidate.name),
            exact=bool(normalized_query)
            and normalize_artist_name(candidate.name) == normalized_query,
        )
        for candidate in candidates
    ]
    return sorted(
        scored,
        key=lambda item: (
            item.exact,
            item.similarity,
            item.candidate.popularity,
            item.candidate.follower_count,
        ),
        reverse=True,
    )


def classify(scored: ScoredCandidate, thresholds: MatchThresholds) -> MatchConfidence:
    if scored.exact or scored.similarity >= thresholds.high:
        return MatchConfidence.HIGH
    if scored.similarity >= thresholds.medium:
        return MatchConfidence.MEDIUM
    return MatchConfidence.LOW


class ArtistMatcher:
    """Match engine backed by an :class:`ArtistCatalog` search port."""

    def __init__(
        self,
        catalog: ArtistCatalog,
        *,
        thresholds: MatchThresholds | None = None,
        search_limit: int = DEFAULT_SEARCH_LIMIT,
    ) -> None:
        if search_limit < 1:
            raise ValueError("search_limit must be positive")
        self._catalog = catalog
        self._thresholds = thresholds or MatchThresholds()
        self._search_limit = search_limit

    @property
    def thresholds(self) -> MatchThresholds:
        return self._thresholds

    def match_artist(self, name: str) -> MatchResult:
        query = name.strip()
        if not normalize_artist_name(query):
            return MatchResult(confidence=MatchConfidence.NONE)

        try:
            candidates = list(self._catalog.search_artists(query, limit=self._search_limit))
        except Exception as exc:
            message = f"Catalog search failed for {query!r}: {exc}"
            raise MatchError(message, artist_name=name) from exc

        ranked = rank_candidates(query, candidates)
        if not ranked:
            return MatchResult(confidence=MatchConfidence.NONE)

        best = ranked[0]
        confidence = classify(best, self._thresholds)
        return MatchResult(
            confidence=confidence,
            candidate=best.candidate,
            similarity=best.similarity,
        )

    # name used by catalog-facing callers
    search_with_confidence = match_artist
