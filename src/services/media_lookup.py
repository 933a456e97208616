"""
Service de recuperation d'un media a partir de son identifiant de route.

Les pages media du site sont adressees par "<type>:<id>" (ex: "movie:808",
"book:zyTCAlFPjgYC"). Ce service decode l'identifiant et appelle le
catalogue correspondant.
"""

from loguru import logger

from src.core.entities.media import MediaItem, MediaType
from src.core.errors import NotFoundError, ValidationError
from src.core.ports.api_clients import IBookCatalog, IGameCatalog, IMovieCatalog
from src.core.sanitize import sanitize_number
from src.utils.helpers import parse_media_route_id


class MediaLookupService:
    """
    Dispatch d'un identifiant de route vers le bon catalogue.

    Args:
        movie_catalog: Films et series (TMDB)
        game_catalog: Jeux (IGDB)
        book_catalog: Livres (Google Books)
    """

    def __init__(
        self,
        movie_catalog: IMovieCatalog,
        game_catalog: IGameCatalog,
        book_catalog: IBookCatalog,
    ) -> None:
        self._movies = movie_catalog
        self._games = game_catalog
        self._books = book_catalog

    async def get(self, route_id: str) -> MediaItem:
        """
        Recupere la fiche du media designe par route_id.

        Raises:
            ValidationError: type absent, inconnu ou non pris en charge, ou id invalide
            NotFoundError: le catalogue ne connait pas ce media
            ConfigError, AuthError, UpstreamError: propagees depuis l'adaptateur
        """
        media_type, media_id = parse_media_route_id(route_id)
        if media_type is None:
            raise ValidationError(f"Identifiant de media invalide: {route_id}", field="id")
        if not media_id:
            raise ValidationError("Identifiant de media vide", field="id")

        logger.debug(f"Lookup {media_type.value} {media_id}")

        if media_type is MediaType.BOOK:
            return await self._books.get_book_details(media_id)

        numeric_id = sanitize_number(media_id, minimum=0)
        if not numeric_id or str(numeric_id) != media_id:
            raise ValidationError(f"Identifiant numerique attendu: {media_id}", field="id")

        if media_type is MediaType.MOVIE:
            return await self._movies.get_movie_details(numeric_id)
        if media_type is MediaType.TV:
            return await self._movies.get_tv_details(numeric_id)
        if media_type is MediaType.GAME:
            game = await self._games.get_game_details(numeric_id)
            if game is None:
                raise NotFoundError(f"Jeu introuvable: {media_id}")
            return game

        raise ValidationError(f"Type de media non pris en charge: {media_type.value}", field="id")
