"""
Route générique de fiche media, adressée par identifiant de route ("movie:808").
"""

from fastapi import APIRouter, Request

from ..deps import get_container

router = APIRouter(prefix="/api/media", tags=["media"])


@router.get("/{route_id:path}")
async def media_detail(request: Request, route_id: str):
    """Résout l'identifiant de route vers le bon catalogue."""
    service = get_container(request).media_lookup_service()
    media = await service.get(route_id)
    return media.to_json()
