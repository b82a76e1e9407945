"""Configuration management for the tiling service."""

from pydantic import Field
from pydantic_settings import BaseSettings

from .slicer import MAX_TILE_SIZE


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Tiling defaults
    tile_size: int = Field(default=512, gt=0, le=MAX_TILE_SIZE)
    quality: int = Field(default=80, ge=1, le=100)
    lossless: bool = False

    # Upload limits
    max_upload_bytes: int = 50 * 1024 * 1024

    # Server settings
    host: str = "127.0.0.1"
    port: int = 8000
    workers: int = 1
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "TILER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


settings = Settings()
