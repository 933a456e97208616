"""
Media metadata entities.

Canonical representation of a movie, TV show, game or book, produced fresh
per request from an upstream API response (TMDB, IGDB, Google Books).
Entities are frozen: transformers build them once and nobody mutates them.
"""

from enum import Enum
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.core.value_objects.rating import OfficialRating


class MediaType(str, Enum):
    """Kind of media handled by the site."""

    MOVIE = "MOVIE"
    TV = "TV"
    GAME = "GAME"
    BOOK = "BOOK"
    APP = "APP"


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_json(self) -> dict:
        """JSON-ready dict with camelCase keys."""
        return self.model_dump(by_alias=True, mode="json")


class CastMember(_CamelModel):
    """Actor credited on a movie or show."""

    name: str
    character: Optional[str] = None
    photo: Optional[str] = None


class MediaItem(_CamelModel):
    """
    Canonical media DTO.

    Only id, title and type are always present. Every other field is None
    (or an empty list) when the upstream payload does not provide it.

    Attributes:
        id: Upstream id as a string
        tmdb_id / igdb_id / external_id: Native id, set for the matching source
        synopsis_fr: French synopsis
        official_rating: Official age rating (CSA or PEGI)
        expert_age_rec: Recommended minimum age
        vote_average: Average rating (0-10 for TMDB, 0-5 for games and books)
    """

    id: str
    title: str
    type: MediaType
    tmdb_id: Optional[int] = None
    igdb_id: Optional[int] = None
    external_id: Optional[str] = None
    original_title: Optional[str] = None
    release_date: Optional[str] = None
    poster_url: Optional[str] = None
    backdrop_url: Optional[str] = None
    synopsis_fr: Optional[str] = None
    official_rating: Optional[OfficialRating] = None
    expert_age_rec: Optional[int] = None
    genres: list[str] = Field(default_factory=list)
    cast: Optional[list[CastMember]] = None
    vote_average: Optional[float] = None
    vote_count: Optional[int] = None

    # Films et series
    duration: Optional[int] = None
    director: Optional[str] = None
    number_of_seasons: Optional[int] = None
    number_of_episodes: Optional[int] = None
    networks: list[str] = Field(default_factory=list)
    created_by: list[str] = Field(default_factory=list)

    # Jeux
    platforms: list[str] = Field(default_factory=list)
    developer: Optional[str] = None
    publisher: Optional[str] = None
    themes: list[str] = Field(default_factory=list)
    game_modes: list[str] = Field(default_factory=list)

    # Livres
    author: Optional[str] = None
    page_count: Optional[int] = None
    isbn: Optional[str] = None
    language: Optional[str] = None
    preview_link: Optional[str] = None
    info_link: Optional[str] = None


T = TypeVar("T")


class PagedResult(_CamelModel, Generic[T]):
    """One page of results from a paginated upstream endpoint."""

    items: list[T] = Field(default_factory=list)
    page: int = 1
    total_pages: int = 0
    total_results: int = 0
