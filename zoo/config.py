"""Application configuration settings."""
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGED_DATA_DIR = Path(__file__).resolve().parent / "data"


class Settings(BaseSettings):
    """Central configuration for the enclosure viability service."""

    data_dir: Path = PACKAGED_DATA_DIR
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="ZOO_", env_file=".env", env_file_encoding="utf-8")

    @property
    def species_catalog_path(self) -> Path:
        return self.data_dir / "species_catalog.json"

    @property
    def enclosure_registry_path(self) -> Path:
        return self.data_dir / "enclosures.json"


@lru_cache(1)
def get_settings() -> Settings:
    return Settings()
