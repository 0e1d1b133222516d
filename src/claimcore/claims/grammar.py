"""Claim text grammar.

Accepted surface syntax::

    verb:*              global claim for ``verb``
    verb:a.b.c          claim on subject ``a.b.c``
    verb:a.b.c.*        same as ``verb:a.b.c``
    verb:a.b.c.         same as ``verb:a.b.c`` (only with ``allow_trailing_dot``)

Verbs and subject segments are ``[A-Za-z0-9_-]+``; a subject path starts and
ends on ``[A-Za-z0-9_]``, so hyphens only appear inside it. Whitespace is never
allowed.
"""

from __future__ import annotations

import functools
import re
from typing import Any, Pattern

VERB = r"[A-Za-z0-9_-]+"
WORD_CHAR = r"[A-Za-z0-9_]"
SEGMENT = r"[A-Za-z0-9_-]+"
# Hyphens only inside the path: it starts and ends on a word character.
SUBJECT_PATH = rf"(?={WORD_CHAR}){SEGMENT}(?:\.{SEGMENT})*(?<={WORD_CHAR})"

GLOBAL_SUBJECT = "*"
WILDCARD_SUFFIX = ".*"
SEPARATOR = "."


@functools.lru_cache(maxsize=None)
def claim_pattern(allow_trailing_dot: bool = False) -> Pattern[str]:
    """Compiled pattern for full claim text, built once per grammar variant.

    Groups: ``verb`` and the raw ``subject`` (``*``, a path, or a path with
    its ``.*`` / ``.`` suffix).
    """
    suffix = r"(?:\.\*|\.)?" if allow_trailing_dot else r"(?:\.\*)?"
    return re.compile(rf"(?P<verb>{VERB}):(?P<subject>\*|{SUBJECT_PATH}{suffix})")


@functools.lru_cache(maxsize=None)
def verb_pattern() -> Pattern[str]:
    return re.compile(VERB)


@functools.lru_cache(maxsize=None)
def subject_pattern() -> Pattern[str]:
    """Pattern for a normalized, non-global subject."""
    return re.compile(SUBJECT_PATH)


def is_valid(text: Any, *, allow_trailing_dot: bool = False) -> bool:
    """Return True if ``text`` is well-formed claim text.

    Non-string input is never valid.

    Example::

        is_valid("read:orgs.42")   # True
        is_valid("read:orgs.*")    # True
        is_valid("read:*.orgs")    # False
        is_valid(" read:orgs")     # False
    """
    if not isinstance(text, str):
        return False
    return claim_pattern(allow_trailing_dot).fullmatch(text) is not None


def is_valid_verb(verb: Any) -> bool:
    return isinstance(verb, str) and verb_pattern().fullmatch(verb) is not None


def is_valid_subject(subject: Any) -> bool:
    """Return True for ``""`` (global) or a dot-joined path of segments."""
    if not isinstance(subject, str):
        return False
    return subject == "" or subject_pattern().fullmatch(subject) is not None


__all__ = [
    "GLOBAL_SUBJECT",
    "SEPARATOR",
    "WILDCARD_SUFFIX",
    "claim_pattern",
    "is_valid",
    "is_valid_subject",
    "is_valid_verb",
]
