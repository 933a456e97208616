"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour l'application web
et la CLI: configuration, store du token IGDB, clients API et services.
"""

from dependency_injector import containers, providers

from .adapters.api.google_books_client import GoogleBooksClient
from .adapters.api.igdb_client import IGDBClient
from .adapters.api.tmdb_client import TMDBClient
from .adapters.api.token_store import IGDBTokenStore
from .config import Settings
from .services.media_lookup import MediaLookupService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Les clients API sont des Singletons: un seul httpx.AsyncClient par API
    pour beneficier du connection pooling. Le store du token IGDB est un
    Singleton distinct, injecte dans IGDBClient, que les tests peuvent
    surcharger ou reinitialiser.

    Utilisation :
        container = Container()
        tmdb = container.tmdb_client()
        lookup = container.media_lookup_service()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Token OAuth2 IGDB partage par toutes les requetes
    igdb_token_store = providers.Singleton(IGDBTokenStore)

    # Clients API - Singleton avec identifiants depuis config
    # Si une cle est None, le client est cree mais leve ConfigError a l'appel
    tmdb_client = providers.Singleton(
        TMDBClient,
        api_key=config.provided.tmdb_api_key,
        language=config.provided.tmdb_language,
        region=config.provided.tmdb_region,
        timeout=config.provided.http_timeout,
        max_attempts=config.provided.upstream_retry_attempts,
    )

    igdb_client = providers.Singleton(
        IGDBClient,
        client_id=config.provided.igdb_client_id,
        client_secret=config.provided.igdb_client_secret,
        token_store=igdb_token_store,
        timeout=config.provided.http_timeout,
        max_attempts=config.provided.upstream_retry_attempts,
    )

    google_books_client = providers.Singleton(
        GoogleBooksClient,
        api_key=config.provided.google_books_api_key,
        language=config.provided.books_language,
        timeout=config.provided.http_timeout,
        max_attempts=config.provided.upstream_retry_attempts,
    )

    # Service de lookup (stateless, Factory sur des clients Singletons)
    media_lookup_service = providers.Factory(
        MediaLookupService,
        movie_catalog=tmdb_client,
        game_catalog=igdb_client,
        book_catalog=google_books_client,
    )
