"""
Point d'entrée CLI de CineFamille.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="cinefamille",
    help="Agregation de metadonnees films, series, jeux et livres pour les familles",
)
container = Container()


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.callback()
def main_callback() -> None:
    """CineFamille - API de metadonnees media."""
    settings = get_config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


@app.command()
def check() -> None:
    """Affiche les API externes configurees."""
    config = get_config()
    logger.info("Configuration CineFamille")
    typer.echo(f"API TMDB : {'activée' if config.tmdb_enabled else 'désactivée'}")
    typer.echo(f"API IGDB : {'activée' if config.igdb_enabled else 'désactivée'}")
    typer.echo(f"API Google Books : {'activée' if config.books_enabled else 'désactivée'}")
    typer.echo(f"Langue : {config.tmdb_language} / région {config.tmdb_region}")
    typer.echo(f"Niveau de log : {config.log_level}")
    if not (config.tmdb_enabled and config.igdb_enabled and config.books_enabled):
        logger.warning("Certaines API ne sont pas configurees, leurs routes renverront 503")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo("CineFamille v0.1.0")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "0.0.0.0",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 8000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web CineFamille."""
    import uvicorn

    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("src.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()
