"""
Routes API jeux vidéo (IGDB).

IGDB ne pagine pas: les listes sont renvoyées en une seule page.
"""

from typing import Optional

from fastapi import APIRouter, Request

from ...core.errors import NotFoundError
from ...core.sanitize import sanitize_number
from ..deps import get_container, list_response, parse_int_id, require_query

router = APIRouter(prefix="/api/games", tags=["games"])


@router.get("/search")
async def search_games(request: Request, q: Optional[str] = None, limit: Optional[str] = None):
    """Recherche de jeux par nom."""
    query = require_query(q)
    igdb = get_container(request).igdb_client()
    games = await igdb.search_games(query, sanitize_number(limit, minimum=1, maximum=500) or 50)
    return list_response("games", games)


@router.get("/popular")
async def popular_games(request: Request, limit: Optional[str] = None):
    """Jeux les mieux notés."""
    igdb = get_container(request).igdb_client()
    games = await igdb.get_popular_games(sanitize_number(limit, minimum=1, maximum=500) or 100)
    return list_response("games", games)


@router.get("/{game_id}")
async def game_detail(request: Request, game_id: str):
    """Fiche d'un jeu; 404 si IGDB ne le connaît pas."""
    igdb = get_container(request).igdb_client()
    game = await igdb.get_game_details(parse_int_id(game_id))
    if game is None:
        raise NotFoundError(f"Jeu introuvable: {game_id}")
    return game.to_json()
