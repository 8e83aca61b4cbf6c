from __future__ import annotations

import pytest

from artistsync.domain.errors import MatchError
from artistsync.domain.matching import (
    ArtistMatcher,
    MatchThresholds,
    name_similarity,
    normalize_artist_name,
    rank_candidates,
)
from artistsync.domain.model import MatchConfidence
from tests.helpers.artists import FakeArtistCatalog, make_candidate


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Beyoncé", "beyonce"),
        ("  The   Beatles ", "the beatles"),
        ("AC/DC", "acdc"),
        ("Guns N' Roses", "guns n roses"),
        ("ＳＩＡ", "sia"),
        ("...", "..."),
        ("  !!!  ", "!!!"),
        ("   ", ""),
    ],
)
def test_normalize_artist_name(raw: str, expected: str) -> None:
    assert normalize_artist_name(raw) == expected


def test_name_similarity_ignores_case_and_accents() -> None:
    assert name_similarity("Sigur Ros", "Sigur Rós") == 100.0
    assert name_similarity("", "Anything") == 0.0
    assert 80.0 <= name_similarity("Cold Play", "Coldplay") < 100.0


def test_rank_candidates_prefers_exact_then_popularity() -> None:
    tribute = make_candidate("Nirvana Tribute", popularity=90)
    obscure = make_candidate("Nirvana", candidate_id="obscure", popularity=5)
    famous = make_candidate("Nirvana", candidate_id="famous", popularity=80)

    ranked = rank_candidates("nirvana", [tribute, obscure, famous])

    assert [item.candidate.id for item in ranked] == ["famous", "obscure", tribute.id]
    assert ranked[0].exact
    assert not ranked[2].exact


def test_rank_candidates_breaks_popularity_ties_by_followers() -> None:
    few = make_candidate("Nirvana", candidate_id="few", popularity=50, follower_count=10)
    many = make_candidate("Nirvana", candidate_id="many", popularity=50, follower_count=10_000)

    ranked = rank_candidates("Nirvana", [few, many])

    assert ranked[0].candidate.id == "many"


def test_match_artist_exact_name_is_high_confidence() -> None:
    coldplay = make_candidate("Coldplay")
    catalog = FakeArtistCatalog(
        {"Coldplay": [make_candidate("Coldplay Tribute Band", popularity=99), coldplay]}
    )

    result = ArtistMatcher(catalog).match_artist("Coldplay")

    assert result.confidence is MatchConfidence.HIGH
    assert result.candidate == coldplay
    assert result.similarity == 100.0


def test_match_artist_close_name_is_medium_confidence() -> None:
    catalog = FakeArtistCatalog({"Cold Play": [make_candidate("Coldplay")]})

    result = ArtistMatcher(catalog).match_artist("Cold Play")

    assert result.confidence is MatchConfidence.MEDIUM
    assert result.candidate is not None
    assert result.candidate.name == "Coldplay"


def test_match_artist_unrelated_candidates_are_low_confidence() -> None:
    catalog = FakeArtistCatalog({"Radiohead": [make_candidate("Metallica")]})

    result = ArtistMatcher(catalog).match_artist("Radiohead")

    assert result.confidence is MatchConfidence.LOW
    assert result.candidate is not None


def test_match_artist_without_candidates_is_none() -> None:
    catalog = FakeArtistCatalog()

    result = ArtistMatcher(catalog).match_artist("Obscure Name Xyz123")

    assert result.confidence is MatchConfidence.NONE
    assert result.candidate is None
    assert catalog.queries == [("Obscure Name Xyz123", 10)]


def test_match_artist_punctuation_only_name_is_searched_and_matched() -> None:
    chk = make_candidate("!!!", candidate_id="chk-chk-chk")
    catalog = FakeArtistCatalog({"!!!": [make_candidate("!!! Tribute"), chk]})

    result = ArtistMatcher(catalog).match_artist("!!!")

    assert catalog.queries == [("!!!", 10)]
    assert result.confidence is MatchConfidence.HIGH
    assert result.candidate == chk


def test_match_artist_blank_name_does_not_search() -> None:
    catalog = FakeArtistCatalog()

    result = ArtistMatcher(catalog).match_artist("   ")

    assert result.confidence is MatchConfidence.NONE
    assert catalog.queries == []


def test_match_artist_uses_configured_thresholds_and_limit() -> None:
    catalog = FakeArtistCatalog({"Cold Play": [make_candidate("Coldplay")]})
    matcher = ArtistMatcher(
        catalog,
        thresholds=MatchThresholds(high=90.0, medium=70.0),
        search_limit=3,
    )

    result = matcher.search_with_confidence("Cold Play")

    assert result.confidence is MatchConfidence.HIGH
    assert catalog.queries == [("Cold Play", 3)]


def test_match_artist_wraps_search_failures() -> None:
    catalog = FakeArtistCatalog(failures={"Muse": ConnectionError("timed out")})

    with pytest.raises(MatchError) as excinfo:
        ArtistMatcher(catalog).match_artist("Muse")

    assert excinfo.value.artist_name == "Muse"
    assert isinstance(excinfo.value.__cause__, ConnectionError)


def test_thresholds_must_be_ordered() -> None:
    with pytest.raises(ValueError, match="medium <= high"):
        MatchThresholds(high=70.0, medium=80.0)


def test_matcher_rejects_non_positive_limit() -> None:
    with pytest.raises(ValueError, match="search_limit"):
        ArtistMatcher(FakeArtistCatalog(), search_limit=0)
