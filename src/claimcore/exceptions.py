"""Exception hierarchy for claimcore.

All errors raised by the library inherit from ClaimError, which carries a
stable error ``code`` alongside the message.

Usage:
    from claimcore.exceptions import ClaimSyntaxError

    try:
        claim = parse(text)
    except ClaimSyntaxError as e:
        reject(e.claim_str)
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "ClaimError",
    "ClaimSyntaxError",
    "ConfigurationError",
]


# ---- Exception Hierarchy ----------------------------------------------------


class ClaimError(Exception):
    """Base exception for claimcore.

    Attributes:
        code: Stable error code string (e.g. "CLAIM_SYNTAX_ERROR").
        message: Human-readable error description.
        details: Additional context as keyword arguments.
    """

    code: str = "INTERNAL_ERROR"
    message: str = "An internal error occurred"

    def __init__(self, message: str | None = None, code: str | None = None, **kwargs: Any) -> None:
        self.message = message or self.message
        self.code = code or self.code
        self.details = kwargs
        super().__init__(self.message)


class ClaimSyntaxError(ClaimError, ValueError):
    """Claim text (or claim components) do not follow the ``verb:subject`` grammar.

    The offending input is kept on ``claim_str`` so callers can report it.
    """

    code: str = "CLAIM_SYNTAX_ERROR"

    def __init__(self, claim_str: Any, message: str | None = None, **kwargs: Any) -> None:
        self.claim_str = claim_str
        super().__init__(
            message or f"the given claim {claim_str!r} is not valid",
            claim=claim_str,
            **kwargs,
        )


class ConfigurationError(ClaimError):
    """Invalid or missing configuration."""

    code: str = "CONFIGURATION_ERROR"
