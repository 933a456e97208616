"""
Clients API externes pour les metadonnees media.

Ce module fournit les adaptateurs pour communiquer avec les API externes:
- TMDB: The Movie Database pour les films et series
- IGDB: Internet Game Database pour les jeux video (OAuth2 Twitch)
- Google Books: livres

Infrastructure partagee:
- IGDBTokenStore: stockage injectable du token OAuth2 IGDB
- request_with_retry: execution des requetes, traduction des echecs en UpstreamError
- schemas / transformers: validation des payloads et conversion vers MediaItem

Les clients implementent les ports definis dans core/ports/api_clients.py.
"""

from src.adapters.api.google_books_client import GoogleBooksClient
from src.adapters.api.igdb_client import IGDBClient
from src.adapters.api.tmdb_client import TMDBClient
from src.adapters.api.token_store import IGDBTokenStore

__all__ = [
    "GoogleBooksClient",
    "IGDBClient",
    "IGDBTokenStore",
    "TMDBClient",
]
