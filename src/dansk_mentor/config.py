"""
Runtime settings read from the environment.
"""

import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from .vocabulary import DEFAULT_VOCABULARY_PATH

logger = logging.getLogger("dansk-mentor")


class MentorSettings(BaseModel):
    """Settings for the mentor server.

    Attributes:
        vocabulary_path: JSON/YAML vocabulary file to load
        default_level: Level used by tools called without one
        word_bank_size: Default number of words in a word bank
        log_level: Logging level name for the server
    """
    vocabulary_path: Path = Field(default=DEFAULT_VOCABULARY_PATH)
    default_level: str = Field(default="A1", min_length=1)
    word_bank_size: int = Field(default=15, ge=1)
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"Unknown log level: {v}")
        return v


def load_settings() -> MentorSettings:
    """Build settings from ``DANSK_MENTOR_*`` environment variables.

    Unset or empty variables keep their defaults. Invalid values are logged
    and the defaults are used instead.
    """
    overrides = {
        "vocabulary_path": os.getenv("DANSK_MENTOR_VOCABULARY"),
        "default_level": os.getenv("DANSK_MENTOR_LEVEL"),
        "word_bank_size": os.getenv("DANSK_MENTOR_WORD_BANK_SIZE"),
        "log_level": os.getenv("DANSK_MENTOR_LOG_LEVEL"),
    }
    values = {key: value for key, value in overrides.items() if value}

    try:
        return MentorSettings(**values)
    except ValidationError as e:
        logger.warning(f"Invalid DANSK_MENTOR_* settings, using defaults: {e}")
        return MentorSettings()
