"""SCRUM Board Configuration Settings."""

from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    # Application
    APP_NAME: str = "SCRUM Board"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = Field(default="development")
    API_PREFIX: str = "/api"
    CORS_ORIGINS: str = "*"

    # Database
    DATABASE_URL: Optional[str] = None
    DATA_DIR: Optional[str] = None
    DB_FILENAME: str = "scrum_board.db"

    # Logging
    LOG_LEVEL: Optional[str] = None

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() in ("development", "dev")

    @property
    def cors_origins_list(self) -> List[str]:
        """Return the configured CORS origins as a sanitized list."""

        if not self.CORS_ORIGINS:
            return []

        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def data_dir(self) -> Path:
        """Directory holding the database file for the current environment."""
        if self.is_development:
            return PROJECT_ROOT
        if self.DATA_DIR:
            return Path(self.DATA_DIR).expanduser()
        return Path.home() / ".scrum-board"

    @property
    def database_path(self) -> Path:
        return self.data_dir / self.DB_FILENAME

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"sqlite:///{self.database_path}"

    @property
    def log_level(self) -> str:
        if self.LOG_LEVEL:
            return self.LOG_LEVEL.upper()
        return "DEBUG" if self.is_development else "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


settings = Settings()
