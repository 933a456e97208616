"""
Configuration de l'application via pydantic-settings.

La configuration est chargee depuis les variables d'environnement avec le prefixe
CINEFAMILLE_, et peut optionnellement etre fournie via un fichier .env.

Les cles API sont lues sous leur nom usuel (TMDB_API_KEY, IGDB_CLIENT_ID,
IGDB_CLIENT_SECRET, GOOGLE_BOOKS_API_KEY), avec ou sans le prefixe.
Elles sont optionnelles: un client sans identifiants leve ConfigError
au moment de l'appel, sans toucher au reseau.
"""

from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env a la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


def _credential(name: str) -> AliasChoices:
    return AliasChoices(name, f"CINEFAMILLE_{name}", name.lower())


class Settings(BaseSettings):
    """Parametres de l'application avec support des variables d'environnement.

    Exemple : CINEFAMILLE_LOG_LEVEL=DEBUG, TMDB_API_KEY=xxx
    """

    model_config = SettingsConfigDict(
        env_prefix="CINEFAMILLE_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Cles API (OPTIONNELLES - fonctionnalites desactivees si non definies)
    tmdb_api_key: Optional[str] = Field(default=None, validation_alias=_credential("TMDB_API_KEY"))
    igdb_client_id: Optional[str] = Field(default=None, validation_alias=_credential("IGDB_CLIENT_ID"))
    igdb_client_secret: Optional[str] = Field(
        default=None, validation_alias=_credential("IGDB_CLIENT_SECRET")
    )
    google_books_api_key: Optional[str] = Field(
        default=None, validation_alias=_credential("GOOGLE_BOOKS_API_KEY")
    )

    # Langue et region des contenus
    tmdb_language: str = Field(default="fr-FR")
    tmdb_region: str = Field(default="FR")
    books_language: str = Field(default="fr")

    # Appels sortants
    http_timeout: float = Field(default=30.0, gt=0)
    # 1 = pas de retry; au-dela, relance sur HTTP 429 uniquement
    upstream_retry_attempts: int = Field(default=1, ge=1, le=10)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de retention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/cinefamille.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Etend ~ vers le repertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator(
        "tmdb_api_key", "igdb_client_id", "igdb_client_secret", "google_books_api_key"
    )
    @classmethod
    def blank_as_none(cls, v: Optional[str]) -> Optional[str]:
        """Une cle vide dans le .env equivaut a une cle absente."""
        if v is not None and not v.strip():
            return None
        return v

    @property
    def tmdb_enabled(self) -> bool:
        """Verifie si l'API TMDB est configuree."""
        return self.tmdb_api_key is not None

    @property
    def igdb_enabled(self) -> bool:
        """Verifie si les identifiants Twitch/IGDB sont configures."""
        return self.igdb_client_id is not None and self.igdb_client_secret is not None

    @property
    def books_enabled(self) -> bool:
        """Verifie si l'API Google Books est configuree."""
        return self.google_books_api_key is not None
