"""Library configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from beatmapkit.models.modes import GameMode


class Settings(BaseSettings):
    beatmapkit_env: str = "development"
    beatmapkit_log_level: str = "info"

    # Mode used by convert() when the caller does not pass one.
    default_mode: GameMode = GameMode.OSU

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
