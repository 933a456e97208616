"""
Route de santé: état de configuration des API externes.
"""

from fastapi import APIRouter, Request

from ..deps import get_container

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
async def health(request: Request):
    settings = get_container(request).config()
    return {
        "status": "ok",
        "sources": {
            "tmdb": settings.tmdb_enabled,
            "igdb": settings.igdb_enabled,
            "google_books": settings.books_enabled,
        },
    }
