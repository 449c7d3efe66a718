"""Library configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Settings loaded from ``DOCINSPECT_*`` environment variables."""

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Dictionary resources
    DICTIONARY_DELIMITER: str = "\t"
    DICTIONARY_ENCODING: str = "utf-8"

    # Engine
    MAX_WORKERS: int = 4

    model_config = {
        "env_prefix": "DOCINSPECT_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    return Settings()
