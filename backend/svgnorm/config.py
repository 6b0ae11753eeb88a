"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svgnorm_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Normalization defaults
    default_target_size: float = 24.0
    precision: int = 3

    # Batch processing
    batch_workers: int = 4
    archive_extension: str = "zip"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
