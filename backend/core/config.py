from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)

    # Ingestion of interlinear tables
    INGEST_ON_ERROR: Literal["skip", "abort"] = "skip"
    INGEST_PARSING_COLUMN: str = "Parsing"
    INGEST_LANGUAGE_COLUMN: str = "Language"
    INGEST_LANGUAGES: list[str] = ["Greek"]  # Hebrew rows use a different code scheme
    INGEST_DELIMITER: str = "\t"

    @property
    def aborts_on_error(self) -> bool:
        return self.INGEST_ON_ERROR == "abort"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
