"""Logging utilities for claimcore.

This module provides:
- Logging configuration from ClaimConfig
- Safe preview of untrusted claim text for log messages
- JSON / plain-text formatter

Library modules only create loggers via ``logging.getLogger(__name__)``;
nothing here runs on import.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from .config import ClaimConfig, LogLevel


def safe_preview(value: Any, limit: int = 240) -> str:
    """Create a safe, length-bounded preview of a value for logging.

    Claim text reaching the parser is untrusted input: it may be huge or
    contain control characters. The preview is rendered with ``repr`` so
    whitespace stays visible (whitespace is what usually makes a claim invalid)
    and is truncated to ``limit`` characters.

    Args:
        value: The value to preview (any type)
        limit: Maximum length of the preview (default: 240)

    Returns:
        A single-line, truncated string representation
    """
    if value is None:
        return ""

    s = repr(value) if isinstance(value, str) else str(value)
    s = s.replace("\n", "\\n").replace("\r", "\\r")

    if len(s) > limit:
        return s[: limit - 1] + "…"

    return s


# Attributes every LogRecord carries; anything else arrived through ``extra``.
_RESERVED_ATTRS = frozenset(
    {
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "message", "pathname", "process", "processName", "relativeCreated",
        "thread", "threadName", "exc_info", "exc_text", "stack_info",
        "taskName",
    }
)


class ClaimFormatter(logging.Formatter):
    """Formatter producing structured JSON or compact plain-text lines.

    Extra fields passed via ``extra={...}`` are included (as safe previews)
    in both formats.
    """

    def __init__(self, json_format: bool = False, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.json_format = json_format

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extras = {
            key: safe_preview(value)
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS
        }
        log_data.update(extras)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if self.json_format:
            return json.dumps(log_data, default=str, ensure_ascii=False)

        parts = [
            f"[{log_data['timestamp']}]",
            log_data["level"],
            log_data["logger"],
        ]
        parts.extend(f"{key}={value}" for key, value in extras.items())
        parts.append(f": {log_data['message']}")
        line = " ".join(parts)
        if "exception" in log_data:
            line = f"{line}\n{log_data['exception']}"
        return line


def setup_logging(
    config: Optional[ClaimConfig] = None,
    json_format: Optional[bool] = None,
) -> None:
    """Configure the root logger for an application embedding claimcore.

    Args:
        config: ClaimConfig instance (if None, loads from environment)
        json_format: Override ``config.log_json`` when given
    """
    if config is None:
        from .config import load_config_from_env
        config = load_config_from_env()

    level_map = {
        LogLevel.DEBUG: logging.DEBUG,
        LogLevel.INFO: logging.INFO,
        LogLevel.WARNING: logging.WARNING,
        LogLevel.ERROR: logging.ERROR,
        LogLevel.CRITICAL: logging.CRITICAL,
    }
    log_level = level_map.get(config.log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(
        ClaimFormatter(json_format=config.log_json if json_format is None else json_format)
    )
    root_logger.addHandler(console_handler)


__all__ = [
    "safe_preview",
    "ClaimFormatter",
    "setup_logging",
]
