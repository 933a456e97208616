"""
Routes API films (TMDB).

Recherche, listes populaires et familiales, fiche détaillée.
"""

from typing import Optional

from fastapi import APIRouter, Request

from ...core.sanitize import sanitize_page
from ..deps import get_container, paged_response, parse_int_id, require_query

router = APIRouter(prefix="/api/movies", tags=["movies"])

# Une recherche d'un seul caractère renvoie du bruit côté TMDB
MIN_QUERY_LENGTH = 2


@router.get("/search")
async def search_movies(request: Request, q: Optional[str] = None, page: Optional[str] = None):
    """Recherche de films par titre."""
    query = require_query(q, MIN_QUERY_LENGTH)
    tmdb = get_container(request).tmdb_client()
    result = await tmdb.search_movies(query, sanitize_page(page))
    return paged_response("movies", result)


@router.get("/popular")
async def popular_movies(request: Request, page: Optional[str] = None):
    """Films populaires en France."""
    tmdb = get_container(request).tmdb_client()
    return paged_response("movies", await tmdb.get_popular_movies(sanitize_page(page)))


@router.get("/family")
async def family_movies(request: Request, page: Optional[str] = None):
    """Films familiaux (animation ou famille, classés par popularité)."""
    tmdb = get_container(request).tmdb_client()
    return paged_response("movies", await tmdb.get_family_movies(sanitize_page(page)))


@router.get("/{movie_id}")
async def movie_detail(request: Request, movie_id: str):
    """Fiche complète d'un film (casting, réalisateur, classification)."""
    tmdb = get_container(request).tmdb_client()
    movie = await tmdb.get_movie_details(parse_int_id(movie_id))
    return movie.to_json()
