"""Configuration settings for certiweb."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_REGISTRY_ID = "default"
DEFAULT_MAX_TEXT_LENGTH = 1000


def get_certiweb_home() -> Path:
    """Root directory for registry databases and logs.

    Honors CERTIWEB_DATA_DIR, otherwise ``~/.certiweb``.
    """
    env_dir = os.environ.get("CERTIWEB_DATA_DIR")
    if env_dir:
        return Path(env_dir).expanduser()
    return Path.home() / ".certiweb"


def validate_registry_id(registry_id: str) -> str:
    """Reject registry ids that are empty or could escape the data directory."""
    if not registry_id or not registry_id.strip():
        raise ValueError("Registry ID cannot be empty")
    if "/" in registry_id or "\\" in registry_id:
        raise ValueError("Registry ID must not contain path separators")
    if registry_id.strip() in (".", ".."):
        raise ValueError("Registry ID must not contain path traversal sequences")
    return registry_id.strip()


class Settings(BaseSettings):
    """Registry settings loaded from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="CERTIWEB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_dir: Path = Field(default_factory=get_certiweb_home)
    registry_id: str = DEFAULT_REGISTRY_ID
    log_level: str = "INFO"
    max_text_length: int = DEFAULT_MAX_TEXT_LENGTH

    @field_validator("registry_id")
    @classmethod
    def _check_registry_id(cls, value: str) -> str:
        return validate_registry_id(value)

    @field_validator("max_text_length")
    @classmethod
    def _check_max_text_length(cls, value: int) -> int:
        if value < 1:
            raise ValueError("max_text_length must be >= 1")
        return value

    def db_path(self, registry_id: Optional[str] = None) -> Path:
        """SQLite file backing the given registry (default: this one)."""
        return self.data_dir / f"{registry_id or self.registry_id}.db"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
