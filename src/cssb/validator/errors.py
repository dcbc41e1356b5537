"""Error types raised while building selectors.

Every error is raised synchronously at the call that violates a rule and
carries the fragment kinds involved, so callers and the CLI can report
exactly which step of a chain was rejected.
"""
from __future__ import annotations

from cssb.grammar.grammar import COMBINATOR_TOKENS, FRAGMENT_ORDER_NAMES
from cssb.grammar.kinds import FragmentKind


class SelectorError(Exception):
    """Base class for all errors raised by ``cssb``."""


class DuplicateSingletonError(SelectorError):
    """Raised when an element, id, or pseudo-element fragment is repeated.

    Parameters
    ----------
    kind:
        The singleton kind that was added twice in a row.
    """

    def __init__(self, kind: FragmentKind) -> None:
        super().__init__(
            "Element, id and pseudo-element should not occur more than one time "
            f"inside the selector (got a second {kind.label})"
        )
        self.kind = kind


class OrderViolationError(SelectorError):
    """Raised when a fragment is added out of canonical order.

    Parameters
    ----------
    kind:
        The rejected fragment kind.
    previous:
        The kind of the fragment accepted immediately before.
    """

    def __init__(self, kind: FragmentKind, previous: FragmentKind) -> None:
        super().__init__(
            "Selector parts should be arranged in the following order: "
            f"{', '.join(FRAGMENT_ORDER_NAMES)} "
            f"(got {kind.label} after {previous.label})"
        )
        self.kind = kind
        self.previous = previous


class InvalidCombinatorError(SelectorError):
    """Raised by a strict builder when a combinator token is not recognised.

    Parameters
    ----------
    combinator:
        The rejected combinator string.
    """

    def __init__(self, combinator: str) -> None:
        allowed = ", ".join(repr(token) for token in COMBINATOR_TOKENS)
        super().__init__(f"Unknown combinator {combinator!r}; expected one of {allowed}")
        self.combinator = combinator


class SelectorDecodeError(SelectorError):
    """Raised when a serialized selector document is malformed."""
