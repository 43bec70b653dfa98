from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "cars.json"


class Settings(BaseSettings):
    """Application settings loaded from the environment."""

    app_name: str = "Car Rental API"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 4000
    log_level: str = "INFO"
    catalog_path: Path = DEFAULT_CATALOG_PATH
    cors_origins: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Ensure settings are constructed once per process."""

    return Settings()
