"""Application settings using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .rules import DEFAULT_EMPTY_PATH_POLICY, DEFAULT_FLAVOR, EmptyPathPolicy, Flavor


class Settings(BaseSettings):
    """Settings loaded from LEXICLEAN_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LEXICLEAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_flavor: Flavor = DEFAULT_FLAVOR
    empty_path_policy: EmptyPathPolicy = Field(
        default=DEFAULT_EMPTY_PATH_POLICY,
        description="What an empty result becomes: 'cur_dir' for '.', 'empty' to keep it empty",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v):
        return v.upper() if isinstance(v, str) else v


@lru_cache
def get_settings() -> Settings:
    return Settings()
