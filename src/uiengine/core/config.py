"""Configuration Management."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Interpreter settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="UI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Actions
    http_timeout: float = Field(default=10.0, gt=0, description="Action HTTP timeout (seconds)")

    # Documents
    max_document_size: int = Field(default=512 * 1024, gt=0, description="Max document text size")
    max_document_depth: int = Field(default=100, gt=0, description="Max JSON nesting depth")
    repair_json: bool = Field(default=False, description="Repair malformed document JSON")

    # Caching
    enable_cache: bool = Field(default=True, description="Memoize document load outcomes")
    cache_size: int = Field(default=64, gt=0, description="Cache max size")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
