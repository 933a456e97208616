"""
Fonctions utilitaires partagees dans le projet CineFamille.

- to_media_route_id / parse_media_route_id : identifiant "<type>:<id>"
  utilise par les pages media et par /api/media/{route_id}
"""

from typing import Optional
from urllib.parse import quote, unquote

from src.core.entities.media import MediaType


def to_media_route_id(media_type: MediaType, media_id: str) -> str:
    """
    Construit l'identifiant de route d'un media.

    Le type est en minuscules et l'id est encode pour pouvoir contenir
    des caracteres speciaux (les ids Google Books contiennent '-' et '_').
    """
    return f"{media_type.value.lower()}:{quote(str(media_id), safe='')}"


def parse_media_route_id(route_id: str) -> tuple[Optional[MediaType], str]:
    """
    Decompose un identifiant de route.

    Le segment complet est decode d'abord (les routeurs peuvent transmettre
    "movie%3A123"), puis coupe au premier ':'.

    Returns:
        (type, id) ou type vaut None si le prefixe est absent ou inconnu
    """
    decoded = unquote(route_id)
    prefix, sep, raw_id = decoded.partition(":")
    if not sep:
        return None, decoded
    try:
        media_type = MediaType(prefix.upper())
    except ValueError:
        media_type = None
    return media_type, raw_id
