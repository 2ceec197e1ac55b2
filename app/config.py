# app/config.py
from __future__ import annotations
import logging
from pathlib import Path
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # --- Catalog ---
    starting_id: int = Field(default=1, ge=1)       # first id when the store starts empty
    seed_demo_data: bool = True                      # load the demo catalog on startup

    # --- Listing ---
    default_page_size: int = Field(default=5, ge=1)

    # --- Logging ---
    log_level: str = "INFO"
    log_to_file: bool = True

    # Tell Pydantic Settings to load .env automatically
    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).resolve().parent.parent / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",        # ignore unexpected envs
    )

    @field_validator("log_level")
    @classmethod
    def _validate_level(cls, v: str) -> str:
        v = v.upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {v!r}")
        return v

# Singleton
settings = Settings()
