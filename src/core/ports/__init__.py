"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Les ports sont les frontieres de l'architecture hexagonale. Ils definissent
ce dont le domaine a besoin du monde exterieur sans specifier
comment ces besoins sont satisfaits.

Ports client API :
- IMediaAPIClient : Base commune (source, enabled, close)
- IMovieCatalog : Films et series TV (TMDB)
- IGameCatalog : Jeux video (IGDB)
- IBookCatalog : Livres (Google Books)
"""

from src.core.ports.api_clients import (
    IBookCatalog,
    IGameCatalog,
    IMediaAPIClient,
    IMovieCatalog,
)

__all__ = [
    "IMediaAPIClient",
    "IMovieCatalog",
    "IGameCatalog",
    "IBookCatalog",
]
