"""Application settings and configuration management."""

from functools import lru_cache

from pydantic import Field, ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""
    
    # Files
    file_encoding: str = Field(default="utf-8")
    
    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")  # json or console
    
    model_config = ConfigDict(
        env_prefix="ANAGRAM_INDEX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
