"""Application settings using Pydantic Settings."""

from typing import List, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database Configuration
    mongodb_url: str = Field(
        "mongodb://localhost:27017/exercise_tracker",
        validation_alias=AliasChoices("mongodb_url", "mongo_uri"),
    )
    mongodb_database: Optional[str] = None

    # Application Configuration
    app_name: str = "Exercise Tracker"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 3000

    # CORS Configuration
    cors_origins: List[str] = ["*"]

    # Exercise fields
    description_max_length: int = 20

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
