"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

APP_VERSION = "0.1.0"


class Settings(BaseSettings):
    icontint_env: str = "development"
    icontint_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Upper bound on files per /colors/extract-multiple call
    max_batch_svgs: int = 500

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
