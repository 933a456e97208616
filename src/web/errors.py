"""
Traduction des erreurs du domaine en réponses HTTP.

Chaque MediaAPIError porte son ErrorKind; le statut HTTP en découle
(CONFIG 503, AUTH 502, UPSTREAM 502 ou 404, VALIDATION 400, NOT_FOUND 404).
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..core.errors import ErrorKind, MediaAPIError

logger = logging.getLogger(__name__)


async def media_api_error_handler(request: Request, exc: MediaAPIError) -> JSONResponse:
    """Réponse JSON {"error", "kind"} avec le statut associé au kind."""
    status = exc.http_status
    if exc.kind in (ErrorKind.CONFIG, ErrorKind.AUTH, ErrorKind.UPSTREAM):
        logger.warning("%s %s -> %s: %s", request.method, request.url.path, status, exc)
    else:
        logger.debug("%s %s -> %s: %s", request.method, request.url.path, status, exc)
    return JSONResponse(
        status_code=status,
        content={"error": str(exc), "kind": exc.kind.value},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MediaAPIError, media_api_error_handler)
