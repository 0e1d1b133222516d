"""Parsing claim text into :class:`Claim` values.

Provides:
- ``parse()`` — one claim string → Claim.
- ``parse_many()`` — a collection of claim strings → sorted, deduplicated claims.
- ``ClaimParser`` — the same operations bound to a :class:`ClaimConfig`.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from ..config import ClaimConfig
from ..exceptions import ClaimSyntaxError
from ..logging import safe_preview
from .claim import Claim
from .grammar import GLOBAL_SUBJECT, SEPARATOR, WILDCARD_SUFFIX, claim_pattern, is_valid

logger = logging.getLogger(__name__)


def normalize_subject(subject: str) -> str:
    """Strip wildcard decoration from a raw subject capture.

    ``"*"`` and ``""`` become ``""`` (global); a trailing ``.*`` or ``.``
    is removed; anything else is returned unchanged.
    """
    if subject in (GLOBAL_SUBJECT, ""):
        return ""
    if subject.endswith(WILDCARD_SUFFIX):
        return subject[: -len(WILDCARD_SUFFIX)]
    if subject.endswith(SEPARATOR):
        return subject[: -len(SEPARATOR)]
    return subject


def parse(text: Any, *, allow_trailing_dot: bool = False) -> Claim:
    """Parse claim text into a Claim.

    Args:
        text: Claim text such as ``"read:orgs.42"`` or ``"admin:*"``.
        allow_trailing_dot: Accept ``"verb:subject."`` (stripped on parse).

    Returns:
        The parsed, normalized Claim.

    Raises:
        ClaimSyntaxError: If ``text`` is not well-formed claim text.

    Example::

        parse("read:orgs.*")   # Claim(verb='read', subject='orgs')
        parse("read:*")        # Claim(verb='read', subject='')
    """
    match = claim_pattern(allow_trailing_dot).fullmatch(text) if isinstance(text, str) else None
    if match is None:
        logger.debug("rejected claim text %s", safe_preview(text))
        raise ClaimSyntaxError(text)

    return Claim(match.group("verb"), normalize_subject(match.group("subject")))


def parse_many(texts: Iterable[Any], *, allow_trailing_dot: bool = False) -> tuple[Claim, ...]:
    """Parse a collection of claim strings.

    Fails on the first invalid element (in input order); there is no partial
    result. On success the claims are deduplicated and sorted, so the output
    depends only on the set of distinct claims given.

    Example::

        parse_many(["read:something", "read:*", "read:*"])
        # (Claim('read', ''), Claim('read', 'something'))
    """
    claims = {parse(text, allow_trailing_dot=allow_trailing_dot) for text in texts}
    return tuple(sorted(claims))


class ClaimParser:
    """Parser bound to a grammar configuration.

    Args:
        allow_trailing_dot: Accept ``"verb:subject."``.

    Example::

        parser = ClaimParser.from_config(load_config_from_env())
        parser.parse("read:orgs.42")
    """

    def __init__(self, *, allow_trailing_dot: bool = False) -> None:
        self._allow_trailing_dot = allow_trailing_dot

    @classmethod
    def from_config(cls, config: ClaimConfig) -> ClaimParser:
        return cls(allow_trailing_dot=config.allow_trailing_dot)

    @property
    def allow_trailing_dot(self) -> bool:
        return self._allow_trailing_dot

    def is_valid(self, text: Any) -> bool:
        return is_valid(text, allow_trailing_dot=self._allow_trailing_dot)

    def parse(self, text: Any) -> Claim:
        return parse(text, allow_trailing_dot=self._allow_trailing_dot)

    def parse_many(self, texts: Iterable[Any]) -> tuple[Claim, ...]:
        return parse_many(texts, allow_trailing_dot=self._allow_trailing_dot)

    def __repr__(self) -> str:
        return f"ClaimParser(allow_trailing_dot={self._allow_trailing_dot})"


__all__ = [
    "ClaimParser",
    "normalize_subject",
    "parse",
    "parse_many",
]
