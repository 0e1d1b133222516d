"""The Claim value type."""

from __future__ import annotations

from dataclasses import dataclass

from ..exceptions import ClaimSyntaxError
from .grammar import GLOBAL_SUBJECT, SEPARATOR, is_valid_subject, is_valid_verb


@dataclass(frozen=True, order=True)
class Claim:
    """A permission: ``verb`` over a dot-delimited ``subject`` path.

    - verb: Action token (e.g. ``"read"``, ``"admin"``)
    - subject: Namespace path (e.g. ``"orgs.42.billing"``).
      Empty string = global, the claim covers every subject of its verb.

    Claims order by verb, then subject, so a global claim sorts before every
    other claim of the same verb. ``str(claim)`` gives the claim text
    (``read:*`` for global claims).

    Components are validated on construction; use :func:`parse` to build a
    claim from text.
    """

    verb: str
    subject: str = ""

    def __post_init__(self) -> None:
        if not is_valid_verb(self.verb) or not is_valid_subject(self.subject):
            raise ClaimSyntaxError(
                f"{self.verb}:{self.subject}",
                message=f"invalid claim components verb={self.verb!r} subject={self.subject!r}",
            )

    @classmethod
    def global_for(cls, verb: str) -> Claim:
        """Build the global claim for ``verb`` (``verb:*``)."""
        return cls(verb, "")

    @property
    def is_global(self) -> bool:
        return self.subject == ""

    @property
    def segments(self) -> tuple[str, ...]:
        if self.is_global:
            return ()
        return tuple(self.subject.split(SEPARATOR))

    def __str__(self) -> str:
        return f"{self.verb}:{self.subject or GLOBAL_SUBJECT}"


__all__ = ["Claim"]
