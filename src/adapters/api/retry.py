"""
Execution des requetes sortantes et retry optionnel sur 429.

Toutes les requetes vers TMDB, IGDB et Google Books passent par
request_with_retry, qui traduit chaque echec en UpstreamError:
- reponse non-2xx (le code HTTP est conserve)
- erreur de transport (timeout, connexion refusee)
- 429 persistant apres epuisement des tentatives

Par defaut max_attempts vaut 1: un echec amont est un echec rapporte.
Le retry avec backoff exponentiel n'est actif que si la configuration
l'augmente (CINEFAMILLE_UPSTREAM_RETRY_ATTEMPTS).

Usage:
    response = await request_with_retry(client, "GET", "/search/movie", source="tmdb")
"""

from typing import Optional

import httpx
from loguru import logger
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)

from src.core.errors import UpstreamError


class RateLimitError(Exception):
    """
    Exception levee quand l'API retourne 429 Too Many Requests.

    Attributes:
        retry_after: Nombre de secondes a attendre (depuis le header Retry-After),
                     ou None si non specifie.
    """

    def __init__(self, retry_after: Optional[int] = None) -> None:
        self.retry_after = retry_after
        super().__init__(f"Rate limited. Retry after: {retry_after}s")


def wait_retry_after(max_wait: int = 60):
    """
    Strategie d'attente tenacity: la duree du header Retry-After si
    l'API l'a fournie (plafonnee a max_wait), sinon backoff exponentiel
    avec jitter.
    """
    fallback = wait_random_exponential(multiplier=1, min=1, max=max_wait)

    def _wait(retry_state: RetryCallState) -> float:
        error = retry_state.outcome.exception()
        if isinstance(error, RateLimitError) and error.retry_after is not None:
            return float(min(error.retry_after, max_wait))
        return fallback(retry_state)

    return _wait


def with_retry(max_attempts: int = 5, max_wait: int = 60):
    """
    Decorateur pour relancer sur RateLimitError.

    Attend la duree annoncee par Retry-After, ou a defaut applique un
    backoff exponentiel avec jitter.

    Args:
        max_attempts: Nombre maximum de tentatives (defaut: 5)
        max_wait: Delai maximum entre les tentatives en secondes (defaut: 60)
    """
    return retry(
        retry=retry_if_exception_type(RateLimitError),
        wait=wait_retry_after(max_wait),
        stop=stop_after_attempt(max_attempts),
        reraise=True,
    )


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    if value and value.isascii() and value.isdigit():
        return int(value)
    return None


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    source: str,
    max_attempts: int = 1,
    **kwargs,
) -> httpx.Response:
    """
    Execute une requete HTTP et renvoie la reponse si elle est 2xx.

    Args:
        client: Client httpx async a utiliser
        method: Methode HTTP (GET, POST)
        url: URL (relative au base_url du client ou absolue)
        source: Identifiant de l'API, repris dans UpstreamError
        max_attempts: Nombre de tentatives sur 429 (1 = aucune relance)
        **kwargs: Arguments supplementaires passes a client.request()

    Raises:
        UpstreamError: reponse non-2xx, 429 persistant ou erreur de transport
    """

    @with_retry(max_attempts=max_attempts)
    async def _do_request() -> httpx.Response:
        response = await client.request(method, url, **kwargs)
        if response.status_code == 429:
            raise RateLimitError(_parse_retry_after(response.headers.get("Retry-After")))
        return response

    try:
        response = await _do_request()
    except RateLimitError as e:
        logger.warning(f"{source}: limite de requetes atteinte sur {url}")
        raise UpstreamError(source, 429, "limite de requetes atteinte") from e
    except httpx.TransportError as e:
        logger.warning(f"{source}: erreur reseau sur {url}: {e!r}")
        raise UpstreamError(source, detail=type(e).__name__) from e

    logger.debug(f"{source}: {method} {url} -> {response.status_code}")
    if not response.is_success:
        logger.warning(f"{source}: {method} {url} a echoue (HTTP {response.status_code})")
        raise UpstreamError(source, response.status_code, response.reason_phrase)
    return response
