"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    studio_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Simulation limits for the animate/render endpoints
    max_animation_frames: int = 600

    default_palette: str = "Aurora"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
