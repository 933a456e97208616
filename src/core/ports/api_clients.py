"""
Interfaces ports pour les clients API.

Interfaces abstraites (ports) definissant les contrats pour les catalogues
media externes. Les implementations (adaptateurs) sont TMDB pour les films
et series, IGDB pour les jeux, Google Books pour les livres.

Chaque methode renvoie des MediaItem deja normalises et leve une
MediaAPIError (ConfigError, AuthError, UpstreamError) en cas d'echec.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.core.entities.media import MediaItem, PagedResult


class IMediaAPIClient(ABC):
    """Base commune des clients API."""

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source API (ex: 'tmdb', 'igdb')."""
        ...

    @property
    @abstractmethod
    def enabled(self) -> bool:
        """Indique si les identifiants de l'API sont configures."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Libere les ressources reseau."""
        ...


class IMovieCatalog(IMediaAPIClient):
    """Catalogue de films et series TV."""

    @abstractmethod
    async def search_movies(self, query: str, page: int = 1) -> PagedResult[MediaItem]:
        """
        Recherche des films par titre.

        Args :
            query : Requete deja nettoyee par l'appelant
            page : Numero de page, ramene a 1 hors de [1, 500]
        """
        ...

    @abstractmethod
    async def get_movie_details(self, movie_id: int) -> MediaItem:
        """Recupere la fiche complete d'un film."""
        ...

    @abstractmethod
    async def search_tv(self, query: str, page: int = 1) -> PagedResult[MediaItem]:
        """Recherche des series TV par titre."""
        ...

    @abstractmethod
    async def get_tv_details(self, tv_id: int) -> MediaItem:
        """Recupere la fiche complete d'une serie TV."""
        ...


class IGameCatalog(IMediaAPIClient):
    """Catalogue de jeux video."""

    @abstractmethod
    async def search_games(self, query: str, limit: int = 50) -> list[MediaItem]:
        """Recherche des jeux par nom."""
        ...

    @abstractmethod
    async def get_popular_games(self, limit: int = 100) -> list[MediaItem]:
        """Jeux les mieux notes."""
        ...

    @abstractmethod
    async def get_game_details(self, game_id: int) -> Optional[MediaItem]:
        """
        Recupere la fiche d'un jeu.

        Retourne :
            Le jeu, ou None si l'API ne renvoie aucun resultat
        """
        ...


class IBookCatalog(IMediaAPIClient):
    """Catalogue de livres."""

    @abstractmethod
    async def search_books(
        self,
        query: str,
        start_index: int = 0,
        max_results: int = 20,
    ) -> PagedResult[MediaItem]:
        """Recherche des livres (francais par defaut)."""
        ...

    @abstractmethod
    async def get_book_details(self, volume_id: str) -> MediaItem:
        """Recupere la fiche d'un livre."""
        ...
