"""
Dépendances partagées de l'application web.

Accès au container DI porté par l'application et mise en forme
commune des réponses liste.
"""

from typing import Optional

from fastapi import Request

from ..core.entities.media import MediaItem, PagedResult
from ..core.errors import ValidationError
from ..core.sanitize import sanitize_search_query


def get_container(request: Request):
    """Container DI initialisé par le lifespan."""
    return request.app.state.container


def require_query(q: Optional[str], min_length: int = 1) -> str:
    """Nettoie le paramètre q et vérifie sa longueur minimale."""
    query = sanitize_search_query(q or "")
    if len(query) < min_length:
        if min_length > 1:
            raise ValidationError(
                f"La recherche doit contenir au moins {min_length} caractères", field="q"
            )
        raise ValidationError("Paramètre de recherche manquant", field="q")
    return query


def parse_int_id(raw: str, field: str = "id") -> int:
    """Convertit un identifiant de chemin en entier strictement positif."""
    if not (raw.isascii() and raw.isdigit()) or int(raw) <= 0:
        raise ValidationError(f"Identifiant invalide: {raw}", field=field)
    return int(raw)


def paged_response(key: str, result: PagedResult[MediaItem]) -> dict:
    """Corps JSON d'une route liste: {key: [...], page, totalPages, totalResults}."""
    return {
        key: [item.to_json() for item in result.items],
        "page": result.page,
        "totalPages": result.total_pages,
        "totalResults": result.total_results,
    }


def list_response(key: str, items: list[MediaItem]) -> dict:
    """Corps JSON d'une liste non paginée (IGDB)."""
    return paged_response(
        key,
        PagedResult[MediaItem](
            items=items, page=1, total_pages=1 if items else 0, total_results=len(items)
        ),
    )
