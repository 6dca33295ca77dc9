"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    anthropic_api_key: str = ""
    tbassist_env: str = "development"
    tbassist_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Model routing
    model_cheap: str = "claude-haiku-4-5-20251001"
    model_mid: str = "claude-sonnet-4-5-20250929"
    model_frontier: str = "claude-sonnet-4-5-20250929"
    diagnosis_max_tokens: int = 4096

    # Persistence
    database_url: str = "sqlite:///./tbassist.db"

    # Auth
    jwt_secret: str = "tbassist-dev-secret-change-me"
    jwt_algorithm: str = "HS256"
    jwt_expire_hours: int = 24

    # Imaging
    max_image_bytes: int = 10 * 1024 * 1024
    max_image_pixels: int = 40_000_000
    overlay_max_width: int = 800

    # Admin analytics
    stats_days_back: int = 30

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
