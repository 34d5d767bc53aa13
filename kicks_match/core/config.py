"""Application configuration using Pydantic BaseSettings."""
from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


def _load_env_file() -> None:
    """Load .env with fallback encodings to avoid Unicode errors."""
    env_path = Path(".env")
    if not env_path.exists():
        return
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            load_dotenv(dotenv_path=env_path, encoding=encoding, override=False)
            return
        except UnicodeDecodeError:
            continue
    logger.warning("Failed to decode .env; using process env vars only.")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_name: str = "Kicks Match"
    app_description: str = "Match clothes to your kicks"
    app_version: str = "0.1.0"
    app_env: str = "dev"  # Environment: dev, test, prod

    # Gemini settings. The key is only checked when a request needs it.
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-1.5-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_temperature: float = 0.2  # Output is machine-parsed, keep it low
    gemini_max_output_tokens: int = 512
    gemini_timeout_seconds: float = 60.0

    # Upload encoding: must stay a multiple of 3 so chunks join cleanly
    base64_chunk_size: int = 0x8000 * 3

    # Logging settings
    log_level: str = "info"  # debug, info, warning, error
    log_dir: str = "logs"
    log_backup_count: int = 14
    log_to_file: bool = False

    # CORS (local front-end dev servers)
    cors_origins: list[str] = [
        "http://127.0.0.1:8080",
        "http://localhost:8080",
        "http://127.0.0.1:3000",
        "http://localhost:3000",
    ]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Ignore extra fields from .env


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()


# Load .env file on module import
_load_env_file()
