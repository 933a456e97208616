"""
Client IGDB pour les jeux video.

Implemente IGameCatalog pour IGDB (Internet Game Database, Twitch).
Gere l'authentification OAuth2 client_credentials: le token est obtenu
aupres de Twitch au premier appel, conserve dans un IGDBTokenStore partage
et renouvele 60 secondes avant son expiration annoncee.

Les requetes de donnees sont des POST dont le corps est ecrit dans le
langage de requete IGDB (Apicalypse).

Reference API: https://api-docs.igdb.com/
"""

import asyncio
import time
from typing import Optional

import httpx
from loguru import logger

from src.adapters.api.retry import request_with_retry
from src.adapters.api.schemas import IGDB_GAME_LIST, IGDBToken, decode_payload
from src.adapters.api.token_store import IGDBTokenStore
from src.adapters.api.transformers import get_igdb_image_url, transform_game
from src.core.entities.media import MediaItem
from src.core.errors import AuthError, ConfigError, UpstreamError
from src.core.ports.api_clients import IGameCatalog
from src.core.sanitize import escape_igdb_query, sanitize_number
from src.utils.constants import IGDB_BASE_URL, TWITCH_AUTH_URL

__all__ = ["IGDBClient", "get_igdb_image_url"]

MAX_LIMIT = 500
RECENT_WINDOW_SECONDS = 6 * 30 * 24 * 60 * 60  # ~6 mois

_LIST_FIELDS = (
    "fields name, summary, cover.url, cover.image_id, first_release_date, "
    "genres.name, platforms.name, platforms.abbreviation, "
    "age_ratings.category, age_ratings.rating, "
    "total_rating, total_rating_count;"
)

_DETAIL_FIELDS = (
    "fields name, summary, storyline, url, cover.url, cover.image_id, "
    "first_release_date, genres.name, platforms.name, platforms.abbreviation, "
    "age_ratings.category, age_ratings.rating, "
    "involved_companies.company.name, involved_companies.developer, "
    "involved_companies.publisher, themes.name, game_modes.name, "
    "total_rating, total_rating_count;"
)


def _safe_limit(limit: int, default: int) -> int:
    return sanitize_number(limit, 1, MAX_LIMIT) or default


class IGDBClient(IGameCatalog):
    """
    Client IGDB pour la recherche de jeux.

    Deux etats d'authentification: non authentifie (pas de token ou token
    expire) et authentifie. Tout appel qui a besoin d'un token verifie le
    store; s'il n'est plus valide, un echange client_credentials est fait
    sous verrou, de sorte que des requetes concurrentes ne declenchent
    qu'un seul echange.

    Erreurs:
    - ConfigError si IGDB_CLIENT_ID ou IGDB_CLIENT_SECRET manquent
    - AuthError si Twitch refuse l'echange
    - UpstreamError si l'appel de donnees echoue

    Example:
        client = IGDBClient(client_id="id", client_secret="secret", token_store=IGDBTokenStore())
        games = await client.search_games("Zelda")
        await client.close()
    """

    def __init__(
        self,
        client_id: Optional[str],
        client_secret: Optional[str],
        token_store: Optional[IGDBTokenStore] = None,
        timeout: float = 30.0,
        max_attempts: int = 1,
    ) -> None:
        """
        Initialise le client IGDB.

        Args:
            client_id: Client ID de l'application Twitch
            client_secret: Client secret de l'application Twitch
            token_store: Stockage du token partage (un store neuf si None)
            timeout: Timeout des requetes en secondes
            max_attempts: Tentatives sur HTTP 429 (1 = pas de retry)
        """
        self._client_id = client_id
        self._client_secret = client_secret
        self._token_store = token_store if token_store is not None else IGDBTokenStore()
        self._timeout = timeout
        self._max_attempts = max_attempts
        self._token_lock = asyncio.Lock()
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "igdb"

    @property
    def enabled(self) -> bool:
        return bool(self._client_id and self._client_secret)

    @property
    def token_store(self) -> IGDBTokenStore:
        return self._token_store

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, cree s'il n'existe pas.

        Utilise un client unique pour beneficier du connection pooling.
        """
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=IGDB_BASE_URL,
                timeout=httpx.Timeout(self._timeout, connect=10.0),
            )
        return self._client

    def _check_credentials(self) -> None:
        if not self.enabled:
            raise ConfigError(self.source, ("IGDB_CLIENT_ID", "IGDB_CLIENT_SECRET"))

    async def _ensure_token(self) -> str:
        """
        S'assure qu'un token bearer valide est disponible.

        Returns:
            Token valide (depuis le store, ou fraichement obtenu)
        """
        self._check_credentials()
        if self._token_store.is_valid():
            return self._token_store.token

        async with self._token_lock:
            # Une autre requete a pu rafraichir pendant l'attente du verrou
            if self._token_store.is_valid():
                return self._token_store.token
            return await self._exchange_token()

    async def _exchange_token(self) -> str:
        client = self._get_client()
        try:
            response = await client.post(
                TWITCH_AUTH_URL,
                params={
                    "client_id": self._client_id,
                    "client_secret": self._client_secret,
                    "grant_type": "client_credentials",
                },
            )
        except httpx.TransportError as e:
            logger.warning(f"igdb: echange de token impossible: {e!r}")
            self._token_store.clear()
            raise AuthError(self.source, detail=type(e).__name__) from e

        if not response.is_success:
            logger.warning(f"igdb: echange de token refuse (HTTP {response.status_code})")
            self._token_store.clear()
            raise AuthError(self.source, response.status_code)

        try:
            token = decode_payload(response, IGDBToken, self.source)
        except UpstreamError as e:
            self._token_store.clear()
            raise AuthError(self.source, detail="reponse de token invalide") from e

        self._token_store.store(token.access_token, token.expires_in)
        logger.info(f"igdb: nouveau token obtenu, valable {token.expires_in}s")
        return token.access_token

    async def _query(self, endpoint: str, body: str) -> list[MediaItem]:
        """Execute une requete Apicalypse et transforme les jeux renvoyes."""
        token = await self._ensure_token()
        response = await request_with_retry(
            self._get_client(),
            "POST",
            endpoint,
            source=self.source,
            max_attempts=self._max_attempts,
            content=body,
            headers={
                "Client-ID": self._client_id,
                "Authorization": f"Bearer {token}",
                "Content-Type": "text/plain",
                "Accept": "application/json",
            },
        )
        games = decode_payload(response, IGDB_GAME_LIST, self.source)
        return [transform_game(game) for game in games]

    async def search_games(self, query: str, limit: int = 50) -> list[MediaItem]:
        """
        Recherche des jeux par nom.

        La requete est echappee pour le langage IGDB; si elle est vide
        apres echappement, aucun appel n'est fait.
        """
        self._check_credentials()
        safe_query = escape_igdb_query(query)
        if not safe_query:
            return []
        body = f'search "{safe_query}"; {_LIST_FIELDS} limit {_safe_limit(limit, 50)};'
        return await self._query("/games", body)

    async def get_popular_games(self, limit: int = 100) -> list[MediaItem]:
        """Jeux les mieux notes ayant plus de 50 votes et une jaquette."""
        body = (
            f"{_LIST_FIELDS} "
            "where total_rating_count > 50 & cover != null; "
            "sort total_rating desc; "
            f"limit {_safe_limit(limit, 100)};"
        )
        return await self._query("/games", body)

    async def get_family_games(self, limit: int = 100) -> list[MediaItem]:
        """Jeux PEGI 3 ou PEGI 7."""
        body = (
            f"{_LIST_FIELDS} "
            "where age_ratings.category = 2 & age_ratings.rating = (1,2) & cover != null; "
            "sort total_rating desc; "
            f"limit {_safe_limit(limit, 100)};"
        )
        return await self._query("/games", body)

    async def get_recent_games(self, limit: int = 100) -> list[MediaItem]:
        """Jeux sortis ces six derniers mois, du plus recent au plus ancien."""
        now = int(time.time())
        since = now - RECENT_WINDOW_SECONDS
        body = (
            f"{_LIST_FIELDS} "
            f"where first_release_date > {since} & first_release_date < {now} & cover != null; "
            "sort first_release_date desc; "
            f"limit {_safe_limit(limit, 100)};"
        )
        return await self._query("/games", body)

    async def get_game_details(self, game_id: int) -> Optional[MediaItem]:
        """
        Recupere la fiche d'un jeu.

        Returns:
            Le jeu, ou None si l'id n'est pas un entier positif ou si IGDB
            ne renvoie aucun resultat
        """
        self._check_credentials()
        safe_id = sanitize_number(game_id, minimum=0)
        if not safe_id:
            return None
        games = await self._query("/games", f"{_DETAIL_FIELDS} where id = {safe_id};")
        return games[0] if games else None

    async def close(self) -> None:
        """Ferme le client HTTP et libere les ressources."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
