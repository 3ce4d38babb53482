"""
➡️ But : Centraliser tous les paramètres configurables (nom d’app, chemin DB, CORS, logs…)

Utilise pydantic-settings pour charger automatiquement les variables d’environnement (.env, variables système…).

Fournit un objet settings unique, que tu importes ailleurs :

from tutorial_api.core.config import settings
print(settings.APP_NAME)
"""

from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "Tutorial-API"
    ENV: str = "dev"  # dev | prod | test
    HOST: str = "127.0.0.1"
    PORT: int = 8080

    # -----------------------------
    # DB
    # -----------------------------
    SQLITE_PATH: str = "tutorials.db"  # fichier SQLite embarqué
    # Si tu veux forcer une URL différente (ex: Postgres), définis DATABASE_URL dans l'env.
    DATABASE_URL: Optional[str] = None

    # -----------------------------
    # CORS
    # -----------------------------
    CORS_ORIGINS: List[str] = ["http://localhost:8081"]

    # -----------------------------
    # Logs
    # -----------------------------
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"  # text | json

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }

    def model_post_init(self, __context):
        # DATABASE_URL par défaut depuis SQLITE_PATH si non fourni
        if not self.DATABASE_URL:
            object.__setattr__(self, "DATABASE_URL", f"sqlite:///{self.SQLITE_PATH}")


# Instance globale importable partout
settings = Settings()
