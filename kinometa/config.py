"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe KINOMETA_,
et peut optionnellement être fournie via un fichier .env.

Le token API Kinopoisk est optionnel - les appels API sont désactivés (absence de données)
si non fourni.

Les paramètres sont relus à chaque requête par la passerelle : modifier une instance
Settings en cours d'exécution (ex: settings.max_requests_per_second = 10) prend effet
dès la requête suivante, sans recréer la passerelle.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de kinometa/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe KINOMETA_.
    Exemple : KINOMETA_API_TOKEN=xxxx-xxxx

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="KINOMETA_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Token API (OPTIONNEL - appels API désactivés si non défini)
    api_token: Optional[str] = Field(default=None)

    # Cache des réponses API
    cache_duration_minutes: int = Field(default=60, ge=0)
    cache_backend: Literal["memory", "disk"] = Field(default="memory")
    cache_dir: Path = Field(default=Path(".cache/kinopoisk"))

    # Rate limiting (budget partagé par tous les providers)
    max_requests_per_second: float = Field(default=5.0, gt=0)
    enable_rate_limiting: bool = Field(default=True)

    # HTTP
    request_timeout: float = Field(default=30.0, gt=0)

    # Langue des métadonnées (russe en priorité si disponible)
    prefer_russian_metadata: bool = Field(default=True)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/kinometa.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("cache_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def api_enabled(self) -> bool:
        """Vérifie si le token API Kinopoisk est configuré."""
        return bool(self.api_token)

    @property
    def cache_ttl_seconds(self) -> int:
        """Durée de vie des entrées du cache, en secondes."""
        return self.cache_duration_minutes * 60

    @property
    def min_request_interval(self) -> float:
        """Intervalle minimum entre deux requêtes, en secondes."""
        return 1.0 / self.max_requests_per_second
