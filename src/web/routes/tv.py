"""
Routes API séries (TMDB).
"""

from typing import Optional

from fastapi import APIRouter, Request

from ...core.sanitize import sanitize_page
from ..deps import get_container, paged_response, parse_int_id, require_query

router = APIRouter(prefix="/api/tv", tags=["tv"])


@router.get("/search")
async def search_tv(request: Request, q: Optional[str] = None, page: Optional[str] = None):
    query = require_query(q)
    tmdb = get_container(request).tmdb_client()
    return paged_response("shows", await tmdb.search_tv(query, sanitize_page(page)))


@router.get("/{tv_id}")
async def tv_detail(request: Request, tv_id: str):
    tmdb = get_container(request).tmdb_client()
    show = await tmdb.get_tv_details(parse_int_id(tv_id))
    return show.to_json()
