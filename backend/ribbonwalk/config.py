"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    ribbonwalk_env: str = "development"
    ribbonwalk_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Where stills and capture archives are written
    output_dir: str = "output"

    # Scene defaults for regeneration
    default_variant: str = "walk"
    default_seed: int | None = None

    # Capture budget: seconds × fps frames per archive
    rec_seconds: int = 10
    rec_fps: int = 60

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def rec_frames(self) -> int:
        return self.rec_seconds * self.rec_fps


settings = Settings()
