"""
Stockage du token OAuth2 IGDB (Twitch client_credentials).

Le token est partage par toutes les requetes du processus. Il est detenu
par un objet explicite injecte dans IGDBClient (via le container), ce qui
permet aux tests de le controler et de le reinitialiser.
"""

import time
from dataclasses import dataclass
from typing import Callable, Optional

# Marge de securite avant l'expiration annoncee par Twitch
EXPIRY_MARGIN_SECONDS = 60


@dataclass
class IGDBTokenStore:
    """
    Cellule unique {token, expiration}.

    Deux etats: non authentifie (pas de token ou expire) et authentifie.
    Un nouveau token remplace entierement l'ancien.

    Attributes:
        token: Token bearer courant, ou None
        expires_at: Instant d'expiration effective (epoch, secondes),
                    deja diminue de EXPIRY_MARGIN_SECONDS
        clock: Source de temps, remplacable dans les tests
    """

    token: Optional[str] = None
    expires_at: float = 0.0
    clock: Callable[[], float] = time.time

    def is_valid(self) -> bool:
        """Vrai si un token est present et pas encore expire."""
        return self.token is not None and self.clock() < self.expires_at

    def store(self, token: str, expires_in: int) -> None:
        """Enregistre un nouveau token valable expires_in secondes (moins la marge)."""
        self.token = token
        self.expires_at = self.clock() + expires_in - EXPIRY_MARGIN_SECONDS

    def clear(self) -> None:
        """Revient a l'etat non authentifie."""
        self.token = None
        self.expires_at = 0.0
