"""
Utilitaires et constantes pour CineFamille.

Ce module contient les constantes et fonctions utilitaires partagees.
"""

from src.utils.constants import (
    PLACEHOLDER_BOOK,
    PLACEHOLDER_GAME,
    PLACEHOLDER_POSTER,
    TMDB_GENRE_MAPPING,
    TMDB_TV_GENRE_MAPPING,
)

__all__ = [
    "PLACEHOLDER_BOOK",
    "PLACEHOLDER_GAME",
    "PLACEHOLDER_POSTER",
    "TMDB_GENRE_MAPPING",
    "TMDB_TV_GENRE_MAPPING",
]
