from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PAGEBUILD_", case_sensitive=False)

    manifest: Path = Path("component.json")
    config_key: str = "pagebuild"
    verbose: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
