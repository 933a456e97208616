"""
Schemas des reponses des API externes.

Chaque payload JSON est valide a la frontiere de l'adaptateur avant d'etre
transforme. Tous les champs que l'API peut omettre sont optionnels; les
champs inconnus sont ignores. Un payload qui ne respecte pas le schema
leve UpstreamError (voir decode_payload).

Sources:
- TMDB v3 : https://developer.themoviedb.org/reference
- IGDB v4 : https://api-docs.igdb.com/
- Google Books v1 : https://developers.google.com/books/docs/v1/reference/volumes
"""

from typing import Any, Generic, Optional, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from src.core.errors import UpstreamError


class _UpstreamModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


# ============================================
# TMDB
# ============================================


class TMDBGenre(_UpstreamModel):
    id: int
    name: Optional[str] = None


class TMDBNamed(_UpstreamModel):
    id: Optional[int] = None
    name: Optional[str] = None


class TMDBCastMember(_UpstreamModel):
    id: Optional[int] = None
    name: Optional[str] = None
    character: Optional[str] = None
    profile_path: Optional[str] = None
    order: Optional[int] = None


class TMDBCrewMember(_UpstreamModel):
    id: Optional[int] = None
    name: Optional[str] = None
    job: Optional[str] = None
    department: Optional[str] = None


class TMDBCredits(_UpstreamModel):
    cast: list[TMDBCastMember] = Field(default_factory=list)
    crew: list[TMDBCrewMember] = Field(default_factory=list)


class TMDBReleaseDate(_UpstreamModel):
    certification: Optional[str] = None
    release_date: Optional[str] = None
    type: Optional[int] = None


class TMDBCountryReleaseDates(_UpstreamModel):
    iso_3166_1: str
    release_dates: list[TMDBReleaseDate] = Field(default_factory=list)


class TMDBReleaseDates(_UpstreamModel):
    results: list[TMDBCountryReleaseDates] = Field(default_factory=list)


class TMDBContentRating(_UpstreamModel):
    iso_3166_1: str
    rating: Optional[str] = None


class TMDBContentRatings(_UpstreamModel):
    results: list[TMDBContentRating] = Field(default_factory=list)


class TMDBMovie(_UpstreamModel):
    """Film tel que renvoye par les listes (search, popular, discover)."""

    id: int
    title: Optional[str] = None
    original_title: Optional[str] = None
    overview: Optional[str] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    release_date: Optional[str] = None
    vote_average: Optional[float] = None
    vote_count: Optional[int] = None
    genre_ids: list[int] = Field(default_factory=list)
    popularity: Optional[float] = None
    adult: bool = False


class TMDBMovieDetails(TMDBMovie):
    """Fiche /movie/{id} avec append_to_response=credits,release_dates."""

    genres: list[TMDBGenre] = Field(default_factory=list)
    runtime: Optional[int] = None
    status: Optional[str] = None
    tagline: Optional[str] = None
    credits: Optional[TMDBCredits] = None
    release_dates: Optional[TMDBReleaseDates] = None


class TMDBTVShow(_UpstreamModel):
    """Serie telle que renvoyee par les listes (search, popular)."""

    id: int
    name: Optional[str] = None
    original_name: Optional[str] = None
    overview: Optional[str] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    first_air_date: Optional[str] = None
    vote_average: Optional[float] = None
    vote_count: Optional[int] = None
    genre_ids: list[int] = Field(default_factory=list)
    popularity: Optional[float] = None


class TMDBTVDetails(TMDBTVShow):
    """Fiche /tv/{id} avec append_to_response=content_ratings,credits."""

    genres: list[TMDBGenre] = Field(default_factory=list)
    episode_run_time: list[int] = Field(default_factory=list)
    number_of_episodes: Optional[int] = None
    number_of_seasons: Optional[int] = None
    status: Optional[str] = None
    created_by: list[TMDBNamed] = Field(default_factory=list)
    networks: list[TMDBNamed] = Field(default_factory=list)
    content_ratings: Optional[TMDBContentRatings] = None
    credits: Optional[TMDBCredits] = None


ItemT = TypeVar("ItemT")


class TMDBPage(_UpstreamModel, Generic[ItemT]):
    page: int = 1
    results: list[ItemT] = Field(default_factory=list)
    total_pages: int = 0
    total_results: int = 0


# ============================================
# IGDB
# ============================================


class IGDBToken(_UpstreamModel):
    """Reponse de l'echange client_credentials Twitch."""

    access_token: str
    expires_in: int
    token_type: Optional[str] = None


class IGDBCover(_UpstreamModel):
    id: Optional[int] = None
    url: Optional[str] = None
    image_id: Optional[str] = None


class IGDBNamed(_UpstreamModel):
    id: Optional[int] = None
    name: Optional[str] = None


class IGDBPlatform(IGDBNamed):
    abbreviation: Optional[str] = None


class IGDBAgeRating(_UpstreamModel):
    id: Optional[int] = None
    category: Optional[int] = None  # 1 = ESRB, 2 = PEGI
    rating: Optional[int] = None


class IGDBInvolvedCompany(_UpstreamModel):
    id: Optional[int] = None
    company: Optional[IGDBNamed] = None
    developer: bool = False
    publisher: bool = False


class IGDBGame(_UpstreamModel):
    id: int
    name: Optional[str] = None
    summary: Optional[str] = None
    storyline: Optional[str] = None
    url: Optional[str] = None
    cover: Optional[IGDBCover] = None
    first_release_date: Optional[int] = None  # timestamp Unix
    genres: list[IGDBNamed] = Field(default_factory=list)
    platforms: list[IGDBPlatform] = Field(default_factory=list)
    age_ratings: list[IGDBAgeRating] = Field(default_factory=list)
    involved_companies: list[IGDBInvolvedCompany] = Field(default_factory=list)
    themes: list[IGDBNamed] = Field(default_factory=list)
    game_modes: list[IGDBNamed] = Field(default_factory=list)
    total_rating: Optional[float] = None  # 0-100
    total_rating_count: Optional[int] = None


IGDB_GAME_LIST = TypeAdapter(list[IGDBGame])


# ============================================
# Google Books
# ============================================


class _GoogleModel(_UpstreamModel):
    model_config = ConfigDict(extra="ignore", alias_generator=to_camel, populate_by_name=True)


class GoogleBooksIdentifier(_GoogleModel):
    type: Optional[str] = None  # ISBN_10, ISBN_13, OTHER
    identifier: Optional[str] = None


class GoogleBooksImageLinks(_GoogleModel):
    small_thumbnail: Optional[str] = None
    thumbnail: Optional[str] = None
    small: Optional[str] = None
    medium: Optional[str] = None
    large: Optional[str] = None
    extra_large: Optional[str] = None


class GoogleBooksVolumeInfo(_GoogleModel):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    authors: list[str] = Field(default_factory=list)
    publisher: Optional[str] = None
    published_date: Optional[str] = None
    description: Optional[str] = None
    industry_identifiers: list[GoogleBooksIdentifier] = Field(default_factory=list)
    page_count: Optional[int] = None
    categories: list[str] = Field(default_factory=list)
    average_rating: Optional[float] = None
    ratings_count: Optional[int] = None
    maturity_rating: Optional[str] = None  # NOT_MATURE, MATURE
    image_links: Optional[GoogleBooksImageLinks] = None
    language: Optional[str] = None
    preview_link: Optional[str] = None
    info_link: Optional[str] = None


class GoogleBooksVolume(_GoogleModel):
    id: str
    volume_info: GoogleBooksVolumeInfo = Field(default_factory=GoogleBooksVolumeInfo)


class GoogleBooksSearchResult(_GoogleModel):
    total_items: int = 0
    items: list[GoogleBooksVolume] = Field(default_factory=list)


def decode_payload(response: httpx.Response, schema: Any, source: str) -> Any:
    """
    Decode le JSON d'une reponse et le valide contre un schema.

    Args:
        response: Reponse 2xx
        schema: Classe pydantic ou TypeAdapter
        source: Identifiant de l'API pour UpstreamError

    Raises:
        UpstreamError: JSON illisible ou non conforme au schema
    """
    try:
        data = response.json()
    except ValueError as e:
        raise UpstreamError(source, detail="reponse JSON illisible") from e
    try:
        if isinstance(schema, TypeAdapter):
            return schema.validate_python(data)
        return schema.model_validate(data)
    except PydanticValidationError as e:
        raise UpstreamError(
            source, detail=f"payload invalide ({e.error_count()} erreurs)"
        ) from e
