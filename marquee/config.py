"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe MARQUEE_,
et peut optionnellement être fournie via un fichier .env.

La clé API est optionnelle ici : si elle n'est pas fournie, FANDANGO_API_KEY
est consultée au moment de construire le client.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from marquee.adapters.api.url_builder import BASE_URL
from marquee.core.client_config import DEFAULT_API_VERSION

# Trouver le fichier .env à la racine du projet (parent de marquee/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe MARQUEE_.
    Exemple : MARQUEE_POLL_INTERVAL=2.5
    """

    model_config = SettingsConfigDict(
        env_prefix="MARQUEE_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # API
    api_key: Optional[str] = Field(default=None)
    api_version: str = Field(default=DEFAULT_API_VERSION)
    base_url: str = Field(default=BASE_URL)

    # Pagination
    poll_interval: float = Field(default=1.0, gt=0)
    request_timeout: float = Field(default=30.0, gt=0)
    max_attempts: int = Field(default=1, ge=1)
    interrupt_fetch: bool = Field(default=False)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/marquee.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Normalise le niveau de log en majuscules."""
        return str(v).strip().upper()
