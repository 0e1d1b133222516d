"""Configuration contract for claimcore.

This module provides a Pydantic-validated configuration model for the
settings the library reads: logging and the grammar's trailing-dot mode.

Direct os.environ/os.getenv usage is limited to load_config_from_env();
everything else receives a ClaimConfig.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from .exceptions import ConfigurationError


class LogLevel(str, Enum):
    """Standard log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ClaimConfig(BaseModel):
    """Configuration for claim parsing and library logging.

    ``allow_trailing_dot`` selects between the two historical grammars:
    when False (default) ``verb:a.`` is rejected, when True it is accepted
    and normalized to ``verb:a``.
    """

    # Logging
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level used by setup_logging()",
    )
    log_json: bool = Field(
        default=False,
        description="Use JSON log format (default: plain text)",
    )

    # Grammar
    allow_trailing_dot: bool = Field(
        default=False,
        description="Accept 'verb:subject.' and strip the trailing dot",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | LogLevel) -> LogLevel:
        """Convert string to LogLevel enum."""
        if isinstance(v, LogLevel):
            return v
        if isinstance(v, str):
            try:
                return LogLevel[v.upper()]
            except KeyError:
                raise ValueError(f"Invalid log level: {v}. Must be one of {[e.value for e in LogLevel]}")
        raise ValueError(f"Log level must be string or LogLevel enum, got {type(v)}")

    model_config = {
        "frozen": True,
        "extra": "forbid",  # Prevent accidental extra fields
    }


_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off", "")


def _env_flag(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean flag, got {raw!r}", variable=name)


def load_config_from_env() -> ClaimConfig:
    """Load configuration from environment variables.

    Environment variables:
    - CLAIMCORE_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - CLAIMCORE_LOG_JSON: Use JSON log format (true/false, default: false)
    - CLAIMCORE_ALLOW_TRAILING_DOT: Accept 'verb:subject.' (true/false, default: false)

    Returns:
        ClaimConfig instance with values from environment or defaults.

    Raises:
        ConfigurationError: If a variable holds a value that cannot be used.
    """
    import os

    log_level = os.getenv("CLAIMCORE_LOG_LEVEL", "INFO")
    try:
        return ClaimConfig(
            log_level=log_level,
            log_json=_env_flag("CLAIMCORE_LOG_JSON", os.getenv("CLAIMCORE_LOG_JSON", "false")),
            allow_trailing_dot=_env_flag(
                "CLAIMCORE_ALLOW_TRAILING_DOT",
                os.getenv("CLAIMCORE_ALLOW_TRAILING_DOT", "false"),
            ),
        )
    except ValueError as e:
        raise ConfigurationError(f"Invalid claimcore configuration: {e}") from e


__all__ = [
    "ClaimConfig",
    "LogLevel",
    "load_config_from_env",
]
