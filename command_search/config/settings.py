"""Application settings and configuration management."""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application
    app_name: str = Field(default="Command Search")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    workers: int = Field(default=1)

    # Search Configuration
    score_threshold: float = Field(default=0.1)
    max_query_length: int = Field(default=200)
    max_records: int = Field(default=10000)
    max_suggestions: int = Field(default=5)
    suggestion_threshold: float = Field(default=0.6)

    # Field weights for the aggregate relevance score
    name_weight: float = Field(default=3.0)
    value_weight: float = Field(default=2.0)
    description_weight: float = Field(default=1.0)
    tags_weight: float = Field(default=2.5)

    # Records loaded at startup (bundled sample commands when unset)
    sample_records_path: Optional[str] = Field(default=None)

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")

    # CORS
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080", "http://localhost:8000"]
    )

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
