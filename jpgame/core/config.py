from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    dictionary_path: str = Field(default="dictionary.json", alias="JPGAME_DICTIONARY_PATH")
    title: str = Field(default="JPGAME", alias="JPGAME_TITLE")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    # Empty string sends logs to stderr instead of a file.
    log_file: str = Field(default="jpgame.log", alias="JPGAME_LOG_FILE")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
