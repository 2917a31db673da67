"""Application configuration — environment-driven settings via pydantic-settings.

Every field can be overridden with an ``IMS_``-prefixed environment
variable or a ``.env`` file in the working directory.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="IMS_", env_file=".env", case_sensitive=False
    )

    # Persistence
    data_dir: Path = _DEFAULT_DATA_DIR

    # Listing
    default_page_size: int = Field(default=20, ge=1)
    max_page_size: int = Field(default=100, ge=1)

    # HTTP
    host: str = "127.0.0.1"
    port: int = 8000

    # Observability
    log_level: str = "INFO"
    log_format: str = "text"

    @field_validator("log_format")
    @classmethod
    def known_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("text", "json"):
            raise ValueError("log_format must be 'text' or 'json'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
