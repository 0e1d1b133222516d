"""Hierarchical permission claims.

Defines:
- Claim: immutable ``verb:subject`` value
- is_valid(): claim text grammar check
- parse() / parse_many() / ClaimParser: claim text → Claim
- exact(), check(), direct_child(), direct_descendant(): claim relations
- filter_direct_children(), filter_direct_descendants(), check_any(): collection helpers
- has_access(), visible_children(), visible_descendants(): raw permission-set helpers
"""

from .access import (
    has_access,
    held_claims,
    visible_children,
    visible_descendants,
)
from .algebra import (
    check,
    check_text,
    direct_child,
    direct_child_text,
    direct_descendant,
    direct_descendant_text,
    exact,
    exact_text,
)
from .claim import Claim
from .grammar import is_valid
from .parser import ClaimParser, normalize_subject, parse, parse_many
from .sets import (
    check_any,
    check_any_text,
    filter_direct_children,
    filter_direct_children_text,
    filter_direct_descendants,
    filter_direct_descendants_text,
)

__all__ = [
    "Claim",
    "ClaimParser",
    "check",
    "check_any",
    "check_any_text",
    "check_text",
    "direct_child",
    "direct_child_text",
    "direct_descendant",
    "direct_descendant_text",
    "exact",
    "exact_text",
    "filter_direct_children",
    "filter_direct_children_text",
    "filter_direct_descendants",
    "filter_direct_descendants_text",
    "has_access",
    "held_claims",
    "is_valid",
    "normalize_subject",
    "parse",
    "parse_many",
    "visible_children",
    "visible_descendants",
]
