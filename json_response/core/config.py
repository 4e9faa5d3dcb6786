from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "json-response-demo"
    app_version: str = "0.1.0"
    debug: bool = False
    env: Literal["dev", "qa", "prod"] = "prod"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 3001

    model_config = SettingsConfigDict(
        env_prefix="JSON_RESPONSE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
