"""Minimal Pydantic models for the Spotify Web API artist search."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SpotifyBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class SpotifyImage(SpotifyBaseModel):
    url: str
    height: int | None = None
    width: int | None = None


class SpotifyFollowers(SpotifyBaseModel):
    href: str | None = None
    total: int | None = None


class SpotifyExternalUrls(SpotifyBaseModel):
    spotify: str | None = None


class SpotifyArtist(SpotifyBaseModel):
    id: str
    name: str
    popularity: int | None = None
    genres: list[str] = Field(default_factory=list)
    uri: str | None = None
    followers: SpotifyFollowers = Field(default_factory=SpotifyFollowers)
    images: list[SpotifyImage] = Field(default_factory=list["SpotifyImage"])
    external_urls: SpotifyExternalUrls = Field(default_factory=SpotifyExternalUrls)


class SpotifyPage(SpotifyBaseModel):
    href: str | None = None
    limit: int | None = None
    next: str | None = None
    offset: int | None = None
    previous: str | None = None
    total: int | None = None


class ArtistSearchPage(SpotifyPage):
    items: list[SpotifyArtist] = Field(default_factory=list["SpotifyArtist"])


class ArtistSearchResponse(SpotifyBaseModel):
    artists: ArtistSearchPage = Field(default_factory=ArtistSearchPage)
