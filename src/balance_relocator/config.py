from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ValidationPolicy = Literal["eager", "trust"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # eager: reject a negative total before scanning
    # trust: scan as-is, a negative total is not reported
    validation: ValidationPolicy = Field(default="eager", alias="RELOCATOR_VALIDATION")

    @property
    def validate_input(self) -> bool:
        return self.validation == "eager"

    def validate_required(self) -> None:
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"LOG_LEVEL is not a valid logging level: {self.log_level}")


@lru_cache
def load_settings() -> Settings:
    settings = Settings()
    settings.validate_required()
    return settings
