"""Settings for fpcore, read from the environment via pydantic-settings.

FPCORE_SEED_PATH points at the JSON seed file; LOG_LEVEL sets the package
logger level. An unknown LOG_LEVEL fails validation with the variable named.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SEED_PATH = Path(__file__).resolve().parent.parent / "data" / "seed.json"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=False, frozen=True)

    seed_path: Path = Field(
        default=DEFAULT_SEED_PATH,
        validation_alias=AliasChoices("FPCORE_SEED_PATH", "seed_path"),
    )
    log_level: LogLevel = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_level(cls, v):
        return v.strip().upper() if isinstance(v, str) else v


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
