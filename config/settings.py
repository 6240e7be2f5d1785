"""Application settings using Pydantic Settings."""

from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database Configuration
    mongodb_url: str
    mongodb_database: str = ""

    # Application Configuration
    app_name: str = "Gym Tracker API"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 3000

    # CORS Configuration
    cors_origins: List[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def database_name(self) -> str:
        """Database name, taken from the URL path when not set explicitly."""
        if self.mongodb_database:
            return self.mongodb_database
        path = self.mongodb_url.split("://", 1)[-1].split("/", 1)
        if len(path) == 2:
            name = path[1].split("?", 1)[0]
            if name:
                return name
        return "gym_tracker"


# Global settings instance
settings = Settings()
