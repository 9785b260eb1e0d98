"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import Optional
from urllib.parse import quote_plus

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Snippetbox"
    VERSION: str = "0.1.0"

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    # A full URL wins over the individual parts below.
    DATABASE_URL: Optional[str] = None
    DATABASE_USER: str = "web"
    DATABASE_PASSWORD: str = ""
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_DBNAME: str = "snippetbox"

    DATABASE_POOL_SIZE: int = 5
    DATABASE_MAX_OVERFLOW: int = 10
    DATABASE_CONNECT_TIMEOUT: int = 10

    # Sessions
    SECRET_KEY: str
    SESSION_LIFETIME_HOURS: int = 12

    # Snippets
    SNIPPET_DEFAULT_EXPIRES_DAYS: int = 7

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @model_validator(mode="after")
    def assemble_database_url(self) -> "Settings":
        if not self.DATABASE_URL:
            self.DATABASE_URL = (f"postgresql://{self.DATABASE_USER}:{quote_plus(self.DATABASE_PASSWORD)}"
                                 f"@{self.DATABASE_HOST}:{self.DATABASE_PORT}/{self.DATABASE_DBNAME}")
        return self


# Global settings instance
settings = Settings()
