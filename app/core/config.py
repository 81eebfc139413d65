"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "AirPass - air quality exposure passport."
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["AirPass team"]
    AUTHORS_EMAILS: List[str] = ["N.A."]
    PROJECT_URL: str = "https://github.com/airpass/airpass-api"

    DEBUG: bool = False

    # Database
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = "postgres"
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_DBNAME: str = "airpass"

    # Full URL override (e.g. sqlite:///./airpass.db for local runs)
    DATABASE_URL_OVERRIDE: Optional[str] = None

    # Sessions
    SESSION_TTL_DAYS: int = 14
    SESSION_TOKEN_BYTES: int = 32

    # Passwords
    PASSWORD_HASH_ROUNDS: int = 29000

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def DATABASE_URL(self) -> str:
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        return (f"postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}"
                f":{self.DATABASE_PORT}"
                f"/{self.DATABASE_DBNAME}")

    @property
    def SESSION_TTL_MS(self) -> int:
        return self.SESSION_TTL_DAYS * 24 * 60 * 60 * 1000


# Global settings instance
settings = Settings()
