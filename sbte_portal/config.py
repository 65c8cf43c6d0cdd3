"""Application configuration."""

import os
from typing import Optional

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        """Initialize settings from environment variables."""
        # API Settings
        self.API_TITLE: str = os.getenv("API_TITLE", "SBTE Portal")
        self.API_VERSION: str = os.getenv("API_VERSION", "0.1.0")
        self.DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
        self.ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development").lower()
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

        # Server Settings
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        self.PORT: int = int(os.getenv("PORT", "8000"))

        # Session verification
        self.SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret-key")

        # Database Settings
        self.DB_HOST: str = os.getenv("DB_HOST", "localhost")
        self.DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
        self.DB_USER: str = os.getenv("DB_USER", "postgres")
        self.DB_PASSWORD: str = os.getenv("DB_PASSWORD", "")
        self.DB_NAME: str = os.getenv("DB_NAME", "sbte_portal")
        self.DATABASE_URL: Optional[str] = os.getenv("DATABASE_URL") or None
        self.RUN_MIGRATIONS: bool = (
            os.getenv("RUN_MIGRATIONS", "True").lower() == "true"
        )

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return settings
