"""
Application FastAPI de CineFamille.

Initialise le Container DI, configure le logging, monte les routes API
et enregistre le handler d'erreurs du domaine.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from loguru import logger

from ..container import Container
from ..logging_config import configure_logging
from .errors import register_error_handlers
from .routes.books import router as books_router
from .routes.games import router as games_router
from .routes.health import router as health_router
from .routes.media import router as media_router
from .routes.movies import router as movies_router
from .routes.tv import router as tv_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise le Container DI au démarrage et ferme les clients HTTP à l'arrêt."""
    container = app.state.container
    settings = container.config()
    if app.state.configure_logging:
        configure_logging(
            log_level=settings.log_level,
            log_file=settings.log_file,
            rotation_size=settings.log_rotation_size,
            retention_count=settings.log_retention_count,
        )
    logger.info(
        "Démarrage de CineFamille",
        tmdb=settings.tmdb_enabled,
        igdb=settings.igdb_enabled,
        google_books=settings.books_enabled,
    )
    yield
    await container.tmdb_client().close()
    await container.igdb_client().close()
    await container.google_books_client().close()
    logger.info("Arrêt de CineFamille")


def create_app(container: Optional[Container] = None, setup_logging: bool = True) -> FastAPI:
    """
    Construit l'application.

    Args:
        container: Container DI à utiliser (les tests passent un container
            dont les providers clients sont surchargés)
        setup_logging: Configure loguru au démarrage
    """
    application = FastAPI(title="CineFamille", lifespan=lifespan)
    application.state.container = container or Container()
    application.state.configure_logging = setup_logging

    register_error_handlers(application)

    application.include_router(health_router)
    application.include_router(movies_router)
    application.include_router(tv_router)
    application.include_router(games_router)
    application.include_router(books_router)
    application.include_router(media_router)
    return application


app = create_app()
