import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from s2i_demo.constants.app_constants import DEFAULT_ENVIRONMENT


class Settings(BaseSettings):
    # Server Configuration
    HOST: str = "0.0.0.0"
    PORT: int = Field(default=8080, ge=1, le=65535)

    # App Info
    APP_NAME: str = "S2I Go Demo"

    # Environment
    ENVIRONMENT: str = DEFAULT_ENVIRONMENT

    # Logging
    LOG_LEVEL: str = "INFO"

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    class Config:
        env_file = ".env"
        case_sensitive = True
        env_ignore_empty = True
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Load settings from the environment once per process"""
    return Settings()
