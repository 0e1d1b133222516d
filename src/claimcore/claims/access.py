"""Access-check helpers over raw permission strings.

Provides runtime functions to check whether a set of permission strings
(as carried by a token or stored on a role) grants access to a requested
claim. Invalid permission strings are skipped with a warning: a malformed
grant never authorizes anything.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from ..exceptions import ClaimSyntaxError
from ..logging import safe_preview
from .claim import Claim
from .parser import parse
from .sets import check_any, filter_direct_children, filter_direct_descendants

logger = logging.getLogger(__name__)


def held_claims(permissions: Iterable[Any], *, allow_trailing_dot: bool = False) -> tuple[Claim, ...]:
    """Parse the valid permission strings of a permission set.

    Unlike :func:`parse_many`, invalid entries do not fail the whole set;
    they are logged and dropped.

    Returns:
        Sorted, deduplicated tuple of the claims that parsed.
    """
    claims: set[Claim] = set()
    for perm in permissions:
        try:
            claims.add(parse(perm, allow_trailing_dot=allow_trailing_dot))
        except ClaimSyntaxError:
            logger.warning("ignoring malformed permission %s", safe_preview(perm))
    return tuple(sorted(claims))


def _request(query: Any, *, allow_trailing_dot: bool) -> Claim | None:
    try:
        return parse(query, allow_trailing_dot=allow_trailing_dot)
    except ClaimSyntaxError:
        logger.debug("denying malformed request %s", safe_preview(query))
        return None


def has_access(
    permissions: Iterable[Any],
    request: Any,
    *,
    allow_trailing_dot: bool = False,
) -> bool:
    """Check if a permission set grants the requested claim.

    Checks each held claim with :func:`check`:
    1. ``verb:*`` grants every subject of ``verb``
    2. ``verb:a.b`` grants ``verb:a.b`` and everything below it (``verb:a.b.c``)
    3. nothing grants across verbs

    Args:
        permissions: Permission strings (e.g. ``("read:orgs", "admin:*")``).
        request: Requested claim text (e.g. ``"read:orgs.42.billing"``).
        allow_trailing_dot: Grammar mode used for both sides.

    Returns:
        True if access is granted. A malformed request is always denied.

    Example::

        has_access(("read:orgs",), "read:orgs.42.billing")  # True
        has_access(("read:orgs",), "read:orgsx")            # False
        has_access(("read:orgs",), "read:*")                # False
        has_access(("read:*",), "read:orgs")                # True
    """
    query = _request(request, allow_trailing_dot=allow_trailing_dot)
    if query is None:
        return False
    return check_any(held_claims(permissions, allow_trailing_dot=allow_trailing_dot), query)


def visible_children(
    permissions: Iterable[Any],
    query: Any,
    *,
    allow_trailing_dot: bool = False,
) -> tuple[str, ...]:
    """Subject segments a permission set reaches exactly one level below ``query``.

    Example::

        visible_children(("read:orgs.42", "read:orgs.7.billing"), "read:orgs")  # ("42",)
    """
    parsed = _request(query, allow_trailing_dot=allow_trailing_dot)
    if parsed is None:
        return ()
    return filter_direct_children(held_claims(permissions, allow_trailing_dot=allow_trailing_dot), parsed)


def visible_descendants(
    permissions: Iterable[Any],
    query: Any,
    *,
    allow_trailing_dot: bool = False,
) -> tuple[str, ...]:
    """Subject segments a permission set reaches anywhere below ``query``, truncated to the next level.

    Example::

        visible_descendants(("read:orgs.42", "read:orgs.7.billing"), "read:orgs")  # ("42", "7")
    """
    parsed = _request(query, allow_trailing_dot=allow_trailing_dot)
    if parsed is None:
        return ()
    return filter_direct_descendants(held_claims(permissions, allow_trailing_dot=allow_trailing_dot), parsed)


__all__ = [
    "has_access",
    "held_claims",
    "visible_children",
    "visible_descendants",
]
