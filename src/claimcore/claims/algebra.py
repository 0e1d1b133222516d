"""Relations between a held claim and a queried claim.

Every function takes ``claim`` (the claim held, the authority) and ``query``
(the claim being requested or enumerated from). Verbs must match exactly for
any relation to hold.

The ``*_text`` variants take the query as claim text. They accept the same
``allow_trailing_dot`` switch as :func:`parse`. Invalid query text
never grants anything: they answer ``False`` / ``None`` instead of raising.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, TypeVar

from ..exceptions import ClaimSyntaxError
from ..logging import safe_preview
from .claim import Claim
from .grammar import SEPARATOR
from .parser import parse

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


def exact(claim: Claim, query: Claim) -> bool:
    """True if both claims have the same verb and subject."""
    return claim.verb == query.verb and claim.subject == query.subject


def check(claim: Claim, query: Claim) -> bool:
    """Check if ``claim`` authorizes ``query``.

    Rules (same verb required):
    1. A global claim authorizes every query.
    2. A global query is authorized only by a global claim.
    3. Otherwise the query subject must equal the claim subject or lie below
       it on a segment boundary.

    Example::

        check(Claim("read", "orgs"), Claim("read", "orgs.42"))   # True
        check(Claim("read", "orgs"), Claim("read", "orgsx"))     # False
        check(Claim("read", "orgs"), Claim("read", ""))          # False
        check(Claim("read", ""), Claim("read", "orgs"))          # True
    """
    if claim.verb != query.verb:
        return False

    if claim.is_global:
        return True

    if query.is_global:
        return False

    if claim.subject == query.subject:
        return True

    return query.subject.startswith(claim.subject + SEPARATOR)


def _remainder(claim: Claim, query: Claim) -> Optional[str]:
    """Part of ``claim.subject`` strictly below ``query.subject``, if any."""
    if claim.verb != query.verb or claim.is_global:
        return None

    if query.is_global:
        return claim.subject

    prefix = query.subject + SEPARATOR
    if not claim.subject.startswith(prefix):
        return None
    return claim.subject[len(prefix):]


def direct_child(claim: Claim, query: Claim) -> Optional[str]:
    """Segment of ``claim`` exactly one level below ``query``.

    Returns None unless the claim subject is ``query.subject`` plus one
    more segment (or, for a global query, a single top-level segment).

    Example::

        direct_child(Claim("admin", "paco"), Claim("admin", ""))            # "paco"
        direct_child(Claim("admin", "paco.something"), Claim("admin", ""))  # None
        direct_child(Claim("read", "a.b.c"), Claim("read", "a.b"))          # "c"
    """
    rest = _remainder(claim, query)
    if rest is None or SEPARATOR in rest:
        return None
    return rest


def direct_descendant(claim: Claim, query: Claim) -> Optional[str]:
    """First segment of ``claim`` below ``query``, however deep the claim goes.

    Example::

        direct_descendant(Claim("admin", "paco.something"), Claim("admin", ""))  # "paco"
        direct_descendant(Claim("read", "a.b.c"), Claim("read", "a"))            # "b"
    """
    rest = _remainder(claim, query)
    if rest is None:
        return None
    return rest.split(SEPARATOR, 1)[0]


# ── Text query variants ────────────────────────────────


def _with_query_text(
    relation: Callable[[Claim, Claim], _T],
    claim: Claim,
    query: Any,
    default: _T,
    allow_trailing_dot: bool,
) -> _T:
    try:
        parsed = parse(query, allow_trailing_dot=allow_trailing_dot)
    except ClaimSyntaxError:
        logger.debug("invalid query %s for %s, no relation", safe_preview(query), relation.__name__)
        return default
    return relation(claim, parsed)


def exact_text(claim: Claim, query: Any, *, allow_trailing_dot: bool = False) -> bool:
    """:func:`exact` against claim text; False if the text is invalid."""
    return _with_query_text(exact, claim, query, False, allow_trailing_dot)


def check_text(claim: Claim, query: Any, *, allow_trailing_dot: bool = False) -> bool:
    """:func:`check` against claim text; False if the text is invalid.

    Example::

        check_text(Claim("read", "orgs"), "read:orgs.42.billing")  # True
        check_text(Claim("read", ""), "whatever-this-is")          # False
    """
    return _with_query_text(check, claim, query, False, allow_trailing_dot)


def direct_child_text(claim: Claim, query: Any, *, allow_trailing_dot: bool = False) -> Optional[str]:
    """:func:`direct_child` against claim text; None if the text is invalid."""
    return _with_query_text(direct_child, claim, query, None, allow_trailing_dot)


def direct_descendant_text(claim: Claim, query: Any, *, allow_trailing_dot: bool = False) -> Optional[str]:
    """:func:`direct_descendant` against claim text; None if the text is invalid."""
    return _with_query_text(direct_descendant, claim, query, None, allow_trailing_dot)


__all__ = [
    "check",
    "check_text",
    "direct_child",
    "direct_child_text",
    "direct_descendant",
    "direct_descendant_text",
    "exact",
    "exact_text",
]
