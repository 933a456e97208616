"""
Fixtures pytest partagees pour les tests CineFamille.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec des identifiants factices et un log temporaire
- Horloge manipulable et store de token IGDB branche dessus
"""

from pathlib import Path

import pytest

from src.adapters.api.token_store import IGDBTokenStore
from src.config import Settings


class FakeClock:
    """Horloge controlee par le test (secondes epoch)."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec toutes les API configurees.

    Les valeurs sont passees explicitement pour ne dependre ni de
    l'environnement ni d'un eventuel fichier .env.
    """
    return Settings(
        _env_file=None,
        tmdb_api_key="test_tmdb_key",
        igdb_client_id="test_client_id",
        igdb_client_secret="test_client_secret",
        google_books_api_key="test_books_key",
        log_file=tmp_path / "logs" / "test.log",
        log_level="DEBUG",
    )


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def token_store(fake_clock: FakeClock) -> IGDBTokenStore:
    """Store de token IGDB vide, pilote par fake_clock."""
    return IGDBTokenStore(clock=fake_clock)
