"""
Client Google Books pour les livres.

Implemente IBookCatalog. Client sans etat: chaque appel est un GET
authentifie par la cle API en parametre "key". Les recherches sont
restreintes au francais par defaut.

Reference API: https://developers.google.com/books/docs/v1/using
"""

import re
from typing import Optional

import httpx

from src.adapters.api.retry import request_with_retry
from src.adapters.api.schemas import GoogleBooksSearchResult, GoogleBooksVolume, decode_payload
from src.adapters.api.transformers import (
    estimate_age_recommendation,
    get_book_image_url,
    transform_book,
)
from src.core.entities.media import MediaItem, PagedResult
from src.core.errors import ConfigError, ValidationError
from src.core.sanitize import sanitize_number
from src.core.ports.api_clients import IBookCatalog
from src.utils.constants import GOOGLE_BOOKS_BASE_URL

__all__ = ["GoogleBooksClient", "estimate_age_recommendation", "get_book_image_url"]

CACHE_MAX_AGE = 3600
MAX_RESULTS_LIMIT = 40  # plafond impose par l'API
CHILDREN_SUBJECT = "subject:jeunesse"
ORDER_BY_VALUES = ("relevance", "newest")
_VOLUME_ID = re.compile(r"[A-Za-z0-9_-]+")


class GoogleBooksClient(IBookCatalog):
    """
    Client API Google Books.

    Example:
        client = GoogleBooksClient(api_key="xxx")
        page = await client.search_books("Le Petit Prince")
        book = await client.get_book_details(page.items[0].id)
        await client.close()
    """

    def __init__(
        self,
        api_key: Optional[str],
        language: str = "fr",
        timeout: float = 30.0,
        max_attempts: int = 1,
    ) -> None:
        """
        Initialise le client Google Books.

        Args:
            api_key: Cle API Google Cloud (Books API activee)
            language: Restriction de langue par defaut (langRestrict)
            timeout: Timeout des requetes en secondes
            max_attempts: Tentatives sur HTTP 429 (1 = pas de retry)
        """
        self._api_key = api_key
        self._language = language
        self._timeout = timeout
        self._max_attempts = max_attempts
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "google_books"

    @property
    def enabled(self) -> bool:
        return bool(self._api_key)

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=GOOGLE_BOOKS_BASE_URL,
                headers={
                    "Accept": "application/json",
                    "Cache-Control": f"max-age={CACHE_MAX_AGE}",
                },
                params={"key": self._api_key},
                timeout=self._timeout,
            )
        return self._client

    async def _get(self, endpoint: str, params: Optional[dict[str, str]] = None) -> httpx.Response:
        if not self._api_key:
            raise ConfigError(self.source, ("GOOGLE_BOOKS_API_KEY",))
        return await request_with_retry(
            self._get_client(),
            "GET",
            endpoint,
            source=self.source,
            max_attempts=self._max_attempts,
            params=params or {},
        )

    async def search_books(
        self,
        query: str,
        start_index: int = 0,
        max_results: int = 20,
        order_by: str = "relevance",
        lang_restrict: Optional[str] = None,
    ) -> PagedResult[MediaItem]:
        """
        Recherche des livres.

        Args:
            query: Requete (accepte les operateurs Google: subject:, isbn:, intitle:)
            start_index: Index du premier resultat (pagination)
            max_results: Nombre de resultats (1 a 40)
            order_by: "relevance" ou "newest"
            lang_restrict: Code langue, francais par defaut

        Returns:
            PagedResult dont page et total_pages sont deduits de start_index
        """
        if not query or not query.strip():
            raise ValidationError("La requete de recherche est vide", field="q")
        if order_by not in ORDER_BY_VALUES:
            raise ValidationError(f"Tri inconnu: {order_by}", field="orderBy")

        safe_start = sanitize_number(start_index, minimum=0) or 0
        safe_max = sanitize_number(max_results, 1, MAX_RESULTS_LIMIT) or 20
        params = {
            "q": query.strip(),
            "langRestrict": lang_restrict or self._language,
            "maxResults": str(safe_max),
            "orderBy": order_by,
            "printType": "books",
        }
        if safe_start:
            params["startIndex"] = str(safe_start)

        response = await self._get("/volumes", params)
        data = decode_payload(response, GoogleBooksSearchResult, self.source)
        return PagedResult[MediaItem](
            items=[transform_book(volume) for volume in data.items],
            page=safe_start // safe_max + 1,
            total_pages=-(-data.total_items // safe_max),
            total_results=data.total_items,
        )

    async def search_childrens_books(self, query: str, max_results: int = 20) -> PagedResult[MediaItem]:
        """Recherche restreinte aux livres jeunesse."""
        return await self.search_books(f"{query} {CHILDREN_SUBJECT}", max_results=max_results)

    async def get_popular_childrens_books(self, max_results: int = 20) -> PagedResult[MediaItem]:
        """Livres jeunesse francais les plus pertinents."""
        return await self.search_books(CHILDREN_SUBJECT, max_results=max_results)

    async def search_books_by_category(self, category: str, max_results: int = 20) -> PagedResult[MediaItem]:
        """Livres francais d'une categorie (subject:)."""
        return await self.search_books(f"subject:{category}", max_results=max_results)

    async def search_by_isbn(self, isbn: str) -> Optional[MediaItem]:
        """Premier livre correspondant a un ISBN, ou None."""
        digits = "".join(ch for ch in isbn if ch in "0123456789xX")
        if not digits:
            raise ValidationError("ISBN invalide", field="isbn")
        page = await self.search_books(f"isbn:{digits}", max_results=1)
        return page.items[0] if page.items else None

    async def get_book_details(self, volume_id: str) -> MediaItem:
        """
        Recupere la fiche d'un livre.

        Un volume inconnu leve UpstreamError(404).
        """
        safe_id = (volume_id or "").strip()
        if not _VOLUME_ID.fullmatch(safe_id):
            raise ValidationError("Identifiant de livre invalide", field="id")
        response = await self._get(f"/volumes/{safe_id}")
        volume = decode_payload(response, GoogleBooksVolume, self.source)
        return transform_book(volume)

    async def close(self) -> None:
        """Ferme le client HTTP et libere les ressources."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
