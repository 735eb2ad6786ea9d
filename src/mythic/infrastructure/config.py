"""Application settings, read from the environment and an optional ``.env``."""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))
load_dotenv(os.path.join(project_root, ".env"))


class Settings(BaseSettings):
    PROJECT_NAME: str = "Mythic Games API"

    # HTTP server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Database
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASSWORD: str = "root"
    DB_NAME: str = "MythicGamesRest"
    DATABASE_URI: Optional[str] = None
    # Per-statement bound; expiry surfaces as a retryable persistence error
    STATEMENT_TIMEOUT_MS: int = Field(default=5000, ge=0)
    CREATE_TABLES: bool = True

    LOG_LEVEL: str = "INFO"

    # FreeToGame public API
    F2P_API_BASE: str = "https://www.freetogame.com/api"
    F2P_TIMEOUT_SECONDS: float = Field(default=10.0, gt=0)

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        if self.DATABASE_URI:
            return self.DATABASE_URI
        return (
            f"postgresql+psycopg2://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
