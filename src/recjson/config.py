"""Configuration models for recjson using Pydantic."""

import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_MESSAGE = "invalid_json"
DEFAULT_MAX_SCHEMA_DEPTH = 16


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"
    TRACE = "trace"

    def to_logging(self) -> int:
        """Map to a stdlib logging level (trace has no stdlib equivalent)."""
        return {
            LogLevel.ERROR: logging.ERROR,
            LogLevel.WARN: logging.WARNING,
            LogLevel.INFO: logging.INFO,
            LogLevel.DEBUG: logging.DEBUG,
            LogLevel.TRACE: logging.NOTSET,
        }[self]


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN


class JsonValidatorOptions(BaseModel):
    """Options accepted by the JSON attribute rule.

    ``schema`` is stored as ``schema_source`` so it does not shadow
    ``BaseModel.schema``; both names are accepted on input.
    """
    attributes: list[str] = Field(min_length=1)
    schema_source: Any = Field(alias="schema")
    message: str = DEFAULT_MESSAGE
    options: dict[str, Any] = Field(default_factory=dict)
    max_schema_depth: int = DEFAULT_MAX_SCHEMA_DEPTH
    allow_none: bool = False

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    @field_validator("attributes")
    @classmethod
    def validate_attributes(cls, v):
        for name in v:
            if not name.isidentifier():
                raise ValueError(f"attribute name must be a valid identifier, got: {name!r}")
        return v

    @field_validator("schema_source")
    @classmethod
    def validate_schema_source(cls, v):
        if v is None:
            raise ValueError("schema is required")
        return v

    @field_validator("message", mode="before")
    @classmethod
    def default_message(cls, v):
        """A missing message falls back to the ``invalid_json`` key."""
        return DEFAULT_MESSAGE if v is None else v

    @field_validator("max_schema_depth")
    @classmethod
    def validate_max_schema_depth(cls, v):
        """Validate resolution depth is reasonable."""
        if v < 1:
            raise ValueError("max_schema_depth must be >= 1")
        if v > 100:
            raise ValueError("max_schema_depth must be <= 100 to prevent excessive recursion")
        return v
