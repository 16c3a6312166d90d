"""Application configuration from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    littleartist_env: str = "development"
    littleartist_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Template catalogue (defaults to the packaged drawing_templates.json)
    templates_file: Path | None = None

    # Outline preview edge length in pixels
    preview_size: int = 512

    # Fill rule for the drawing mask: "nonzero" or "evenodd"
    fill_rule: str = "nonzero"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
