"""
Client TMDB pour les films et series TV.

Implemente IMovieCatalog pour TMDB (The Movie Database). Chaque requete
porte la cle API et force language=fr-FR et region=FR (titres, synopsis,
dates de sortie et certifications francaises).

Usage:
    client = TMDBClient(api_key="your_key")
    page = await client.search_movies("Shrek", page=1)
    movie = await client.get_movie_details(808)
    await client.close()
"""

from typing import Any, Optional

import httpx

from src.adapters.api.retry import request_with_retry
from src.adapters.api.schemas import (
    TMDBMovie,
    TMDBMovieDetails,
    TMDBPage,
    TMDBTVDetails,
    TMDBTVShow,
    decode_payload,
)
from src.adapters.api.transformers import (
    get_director,
    get_french_certification,
    get_image_url,
    get_tv_french_rating,
    transform_movie,
    transform_movie_details,
    transform_tv,
    transform_tv_details,
)
from src.core.entities.media import MediaItem, PagedResult
from src.core.errors import ConfigError, ValidationError
from src.core.ports.api_clients import IMovieCatalog
from src.core.sanitize import sanitize_number, sanitize_page
from src.utils.constants import (
    GENRE_ANIMATION,
    GENRE_FAMILY,
    TMDB_BASE_URL,
    TMDB_MAX_PAGE,
)

__all__ = [
    "TMDBClient",
    "get_director",
    "get_french_certification",
    "get_image_url",
    "get_tv_french_rating",
]

# Indication de fraicheur envoyee avec chaque requete (1 heure)
CACHE_MAX_AGE = 3600

FAMILY_FILTERS: dict[str, str] = {
    "with_genres": f"{GENRE_FAMILY},{GENRE_ANIMATION}",
    "sort_by": "popularity.desc",
    "vote_average.gte": "6",
    "certification_country": "FR",
    "certification.lte": "12",
}


class TMDBClient(IMovieCatalog):
    """
    Client API TMDB pour les films et series.

    Fournit:
    - Recherche de films et series (paginee)
    - Listes populaires, a l'affiche, a venir, mieux notes, familiales
    - Fiches detaillees avec casting et certification CSA

    Un echec amont (non-2xx) leve UpstreamError avec le code HTTP.
    Sans cle API, chaque appel leve ConfigError avant toute requete.

    Example:
        client = TMDBClient(api_key="xxx")
        results = await client.search_movies("Le Roi Lion")
        details = await client.get_movie_details(int(results.items[0].id))
        await client.close()
    """

    def __init__(
        self,
        api_key: Optional[str],
        language: str = "fr-FR",
        region: str = "FR",
        timeout: float = 30.0,
        max_attempts: int = 1,
    ) -> None:
        """
        Initialise le client TMDB.

        Args:
            api_key: Cle API TMDB (v3) ou Read Access Token (v4), None si non configuree
            language: Langue des contenus
            region: Region des dates de sortie et certifications
            timeout: Timeout des requetes en secondes
            max_attempts: Tentatives sur HTTP 429 (1 = pas de retry)
        """
        self._api_key = api_key
        self._language = language
        self._region = region
        self._timeout = timeout
        self._max_attempts = max_attempts
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "tmdb"

    @property
    def enabled(self) -> bool:
        return bool(self._api_key)

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        Supporte les deux modes d'authentification TMDB:
        - API Key v3 (32 caracteres hex) : passe en parametre api_key
        - Read Access Token v4 (long JWT) : passe en header Bearer
        """
        if self._client is None or self._client.is_closed:
            is_v4_token = len(self._api_key) > 40

            headers = {
                "Accept": "application/json",
                "Cache-Control": f"max-age={CACHE_MAX_AGE}",
            }
            params = {"language": self._language, "region": self._region}

            if is_v4_token:
                headers["Authorization"] = f"Bearer {self._api_key}"
            else:
                params["api_key"] = self._api_key

            self._client = httpx.AsyncClient(
                base_url=TMDB_BASE_URL,
                headers=headers,
                params=params,
                timeout=self._timeout,
            )
        return self._client

    async def _get(self, endpoint: str, params: Optional[dict[str, str]] = None) -> httpx.Response:
        if not self._api_key:
            raise ConfigError(self.source, ("TMDB_API_KEY",))
        return await request_with_retry(
            self._get_client(),
            "GET",
            endpoint,
            source=self.source,
            max_attempts=self._max_attempts,
            params=params or {},
        )

    async def _movie_page(self, endpoint: str, params: dict[str, str]) -> PagedResult[MediaItem]:
        response = await self._get(endpoint, params)
        data = decode_payload(response, TMDBPage[TMDBMovie], self.source)
        return PagedResult[MediaItem](
            items=[transform_movie(movie) for movie in data.results],
            page=data.page,
            total_pages=data.total_pages,
            total_results=data.total_results,
        )

    async def _tv_page(self, endpoint: str, params: dict[str, str]) -> PagedResult[MediaItem]:
        response = await self._get(endpoint, params)
        data = decode_payload(response, TMDBPage[TMDBTVShow], self.source)
        return PagedResult[MediaItem](
            items=[transform_tv(show) for show in data.results],
            page=data.page,
            total_pages=data.total_pages,
            total_results=data.total_results,
        )

    @staticmethod
    def _page_param(page: Any) -> str:
        return str(sanitize_page(page, TMDB_MAX_PAGE))

    @staticmethod
    def _require_query(query: str) -> str:
        if not query or not query.strip():
            raise ValidationError("La requete de recherche est vide", field="q")
        return query.strip()

    @staticmethod
    def _require_id(media_id: Any, label: str) -> int:
        safe_id = sanitize_number(media_id, minimum=0)
        if not safe_id:
            raise ValidationError(f"Identifiant {label} invalide", field="id")
        return safe_id

    # ============================================
    # Films
    # ============================================

    async def search_movies(self, query: str, page: int = 1) -> PagedResult[MediaItem]:
        """
        Recherche des films en francais.

        Args:
            query: Titre recherche (deja nettoye par l'appelant)
            page: Numero de page, ramene a 1 hors de [1, 500]
        """
        return await self._movie_page(
            "/search/movie",
            {
                "query": self._require_query(query),
                "page": self._page_param(page),
                "include_adult": "false",
            },
        )

    async def get_popular_movies(self, page: int = 1) -> PagedResult[MediaItem]:
        """Films populaires en France."""
        return await self._movie_page("/movie/popular", {"page": self._page_param(page)})

    async def get_now_playing_movies(self, page: int = 1) -> PagedResult[MediaItem]:
        """Films a l'affiche dans les cinemas francais."""
        return await self._movie_page("/movie/now_playing", {"page": self._page_param(page)})

    async def get_upcoming_movies(self, page: int = 1) -> PagedResult[MediaItem]:
        """Prochaines sorties en France."""
        return await self._movie_page("/movie/upcoming", {"page": self._page_param(page)})

    async def get_top_rated_movies(self, page: int = 1) -> PagedResult[MediaItem]:
        """Films les mieux notes."""
        return await self._movie_page("/movie/top_rated", {"page": self._page_param(page)})

    async def discover_movies(
        self,
        page: int = 1,
        filters: Optional[dict[str, Any]] = None,
    ) -> PagedResult[MediaItem]:
        """
        Decouverte de films avec filtres TMDB.

        Args:
            page: Numero de page
            filters: Parametres /discover/movie (with_genres, certification.lte,
                     sort_by, vote_average.gte...). Les valeurs None sont ignorees.
        """
        params = {
            key: str(value)
            for key, value in (filters or {}).items()
            if value is not None
        }
        params["page"] = self._page_param(page)
        return await self._movie_page("/discover/movie", params)

    async def get_family_movies(self, page: int = 1) -> PagedResult[MediaItem]:
        """Films familiaux et d'animation bien notes, certification FR <= 12."""
        return await self.discover_movies(page=page, filters=FAMILY_FILTERS)

    async def get_movie_details(self, movie_id: int) -> MediaItem:
        """
        Recupere la fiche complete d'un film.

        Inclut casting, realisateur et certification CSA francaise.
        Un film inconnu leve UpstreamError(404).
        """
        safe_id = self._require_id(movie_id, "de film")
        response = await self._get(
            f"/movie/{safe_id}",
            {"append_to_response": "credits,release_dates"},
        )
        data = decode_payload(response, TMDBMovieDetails, self.source)
        return transform_movie_details(data)

    # ============================================
    # Series TV
    # ============================================

    async def search_tv(self, query: str, page: int = 1) -> PagedResult[MediaItem]:
        """Recherche des series TV en francais."""
        return await self._tv_page(
            "/search/tv",
            {"query": self._require_query(query), "page": self._page_param(page)},
        )

    async def get_popular_tv(self, page: int = 1) -> PagedResult[MediaItem]:
        """Series populaires."""
        return await self._tv_page("/tv/popular", {"page": self._page_param(page)})

    async def get_tv_details(self, tv_id: int) -> MediaItem:
        """Recupere la fiche complete d'une serie avec sa classification CSA."""
        safe_id = self._require_id(tv_id, "de serie")
        response = await self._get(
            f"/tv/{safe_id}",
            {"append_to_response": "content_ratings,credits"},
        )
        data = decode_payload(response, TMDBTVDetails, self.source)
        return transform_tv_details(data)

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
