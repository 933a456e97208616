"""
Taxonomie des erreurs de la couche d'agregation des metadonnees.

Chaque erreur porte un ErrorKind explicite. La couche HTTP traduit le kind
en code de statut via un unique handler (voir src/web/errors.py), ce qui
oblige a traiter chaque famille d'erreur plutot que de laisser remonter
une exception generique.

Hierarchie:
- MediaAPIError : base commune (kind + message)
  - ConfigError : identifiants absents, leve avant tout appel reseau
  - AuthError : echange de token OAuth refuse (IGDB)
  - UpstreamError : reponse non-2xx ou payload invalide d'une API externe
  - ValidationError : parametre appelant invalide, leve avant tout appel reseau
  - NotFoundError : ressource absente
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Famille d'erreur, utilisee pour choisir le statut HTTP."""

    CONFIG = "config"
    AUTH = "auth"
    UPSTREAM = "upstream"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"


class MediaAPIError(Exception):
    """Erreur de base pour les adaptateurs et la couche HTTP."""

    kind: ErrorKind = ErrorKind.UPSTREAM

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    @property
    def http_status(self) -> int:
        """Code HTTP a renvoyer au client pour cette erreur."""
        return _STATUS_BY_KIND[self.kind]


class ConfigError(MediaAPIError):
    """Identifiants d'une API externe non configures."""

    kind = ErrorKind.CONFIG

    def __init__(self, source: str, variables: tuple[str, ...]) -> None:
        self.source = source
        self.variables = variables
        super().__init__(
            f"{source}: configuration manquante ({', '.join(variables)})"
        )


class AuthError(MediaAPIError):
    """L'echange de credentials OAuth a ete refuse."""

    kind = ErrorKind.AUTH

    def __init__(
        self,
        source: str,
        status_code: Optional[int] = None,
        detail: Optional[str] = None,
    ) -> None:
        self.source = source
        self.status_code = status_code
        message = f"{source}: authentification refusee"
        if status_code is not None:
            message += f" (HTTP {status_code})"
        if detail:
            message += f" - {detail}"
        super().__init__(message)


class UpstreamError(MediaAPIError):
    """
    Echec d'un appel a une API externe.

    Attributes:
        source: Identifiant de l'API ("tmdb", "igdb", "google_books")
        status_code: Code HTTP renvoye, ou None si le payload etait invalide
    """

    kind = ErrorKind.UPSTREAM

    def __init__(
        self,
        source: str,
        status_code: Optional[int] = None,
        detail: Optional[str] = None,
    ) -> None:
        self.source = source
        self.status_code = status_code
        message = f"{source}: erreur API"
        if status_code is not None:
            message += f" (HTTP {status_code})"
        if detail:
            message += f" - {detail}"
        super().__init__(message)

    @property
    def http_status(self) -> int:
        # Un 404 amont reste un 404 pour le client
        if self.status_code == 404:
            return 404
        return super().http_status


class ValidationError(MediaAPIError):
    """Parametre de requete invalide."""

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        self.field = field
        super().__init__(message)


class NotFoundError(MediaAPIError):
    """Ressource introuvable."""

    kind = ErrorKind.NOT_FOUND


_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.CONFIG: 503,
    ErrorKind.AUTH: 502,
    ErrorKind.UPSTREAM: 502,
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
}
