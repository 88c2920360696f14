# -*- coding: utf-8 -*-
"""
Runtime settings for boxes, loaded from environment variables.

  - BOXES_ENVIRONMENT : "development" (pretty console logs) or "production" (JSON logs)
  - BOXES_LOG_LEVEL   : standard logging level name, e.g. "DEBUG", "INFO"
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    environment: str = "development"
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "BOXES_",
        "frozen": True,
    }


@lru_cache()
def get_settings() -> Settings:
    return Settings()
