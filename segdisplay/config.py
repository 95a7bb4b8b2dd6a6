"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    segdisplay_log_level: str = "warning"

    # Default display type for the CLI
    segdisplay_type: str = "seven"

    # Style defaults (colour name or palette index)
    segdisplay_lit: str = "red"
    segdisplay_unlit: str = "52"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
