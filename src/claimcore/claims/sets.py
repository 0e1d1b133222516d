"""Operations over collections of claims against a single query."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Optional

from ..exceptions import ClaimSyntaxError
from ..logging import safe_preview
from .algebra import check, direct_child, direct_descendant
from .claim import Claim
from .parser import parse

logger = logging.getLogger(__name__)


def _collect(
    relation: Callable[[Claim, Claim], Optional[str]],
    claims: Iterable[Claim],
    query: Claim,
) -> tuple[str, ...]:
    segments = {segment for segment in (relation(claim, query) for claim in claims) if segment is not None}
    return tuple(sorted(segments))


def filter_direct_children(claims: Iterable[Claim], query: Claim) -> tuple[str, ...]:
    """Sorted, deduplicated :func:`direct_child` segments of ``claims`` under ``query``.

    Example::

        claims = [Claim("read", "paco"), Claim("read", "paco"), Claim("read", "something")]
        filter_direct_children(claims, Claim("read", ""))  # ("paco", "something")
    """
    return _collect(direct_child, claims, query)


def filter_direct_descendants(claims: Iterable[Claim], query: Claim) -> tuple[str, ...]:
    """Sorted, deduplicated :func:`direct_descendant` segments of ``claims`` under ``query``.

    Example::

        claims = [Claim("read", "paco.what"), Claim("read", "paco.and.more"), Claim("read", "paco")]
        filter_direct_descendants(claims, Claim("read", "paco"))  # ("and", "what")
    """
    return _collect(direct_descendant, claims, query)


def check_any(claims: Iterable[Claim], query: Claim) -> bool:
    """True if any claim in ``claims`` authorizes ``query`` (see :func:`check`)."""
    return any(check(claim, query) for claim in claims)


# ── Text query variants ────────────────────────────────


def _parse_query(query: Any, allow_trailing_dot: bool) -> Optional[Claim]:
    try:
        return parse(query, allow_trailing_dot=allow_trailing_dot)
    except ClaimSyntaxError:
        logger.debug("invalid query %s, nothing matches", safe_preview(query))
        return None


def filter_direct_children_text(
    claims: Iterable[Claim],
    query: Any,
    *,
    allow_trailing_dot: bool = False,
) -> tuple[str, ...]:
    """:func:`filter_direct_children` with query text; ``()`` if the text is invalid."""
    parsed = _parse_query(query, allow_trailing_dot)
    if parsed is None:
        return ()
    return filter_direct_children(claims, parsed)


def filter_direct_descendants_text(
    claims: Iterable[Claim],
    query: Any,
    *,
    allow_trailing_dot: bool = False,
) -> tuple[str, ...]:
    """:func:`filter_direct_descendants` with query text; ``()`` if the text is invalid."""
    parsed = _parse_query(query, allow_trailing_dot)
    if parsed is None:
        return ()
    return filter_direct_descendants(claims, parsed)


def check_any_text(
    claims: Iterable[Claim],
    query: Any,
    *,
    allow_trailing_dot: bool = False,
) -> bool:
    """:func:`check_any` with query text; False if the text is invalid."""
    parsed = _parse_query(query, allow_trailing_dot)
    if parsed is None:
        return False
    return check_any(claims, parsed)


__all__ = [
    "check_any",
    "check_any_text",
    "filter_direct_children",
    "filter_direct_children_text",
    "filter_direct_descendants",
    "filter_direct_descendants_text",
]
