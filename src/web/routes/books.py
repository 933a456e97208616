"""
Routes API livres (Google Books).
"""

from typing import Optional

from fastapi import APIRouter, Request

from ...core.errors import ValidationError
from ...core.sanitize import sanitize_number
from ..deps import get_container, paged_response, require_query

router = APIRouter(prefix="/api/books", tags=["books"])


@router.get("/search")
async def search_books(
    request: Request,
    q: Optional[str] = None,
    start: Optional[str] = None,
    max_results: Optional[str] = None,
):
    """Recherche de livres; start est l'index du premier résultat."""
    query = require_query(q)
    books = get_container(request).google_books_client()
    result = await books.search_books(
        query,
        start_index=sanitize_number(start, minimum=0) or 0,
        max_results=sanitize_number(max_results, minimum=1, maximum=40) or 20,
    )
    return paged_response("books", result)


@router.get("/children")
async def childrens_books(request: Request):
    """Sélection de livres jeunesse."""
    books = get_container(request).google_books_client()
    return paged_response("books", await books.get_popular_childrens_books())


@router.get("/{volume_id}")
async def book_detail(request: Request, volume_id: str):
    volume_id = volume_id.strip()
    if not volume_id:
        raise ValidationError("Identifiant de livre vide", field="id")
    books = get_container(request).google_books_client()
    book = await books.get_book_details(volume_id)
    return book.to_json()
