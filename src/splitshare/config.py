from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False)

    bot_token: Optional[str] = Field(None, alias="BOT_TOKEN")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    split_tolerance: float = Field(1e-4, alias="SPLIT_TOLERANCE", gt=0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]
