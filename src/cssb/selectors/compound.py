"""Compound selectors: fragments that all apply to a single element.

A ``CompoundSelector`` starts empty and grows through chained fragment
calls, each of which returns the same instance::

    CompoundSelector().element("a").attr('href$=".png"').pseudo_class("focus")

Every call is checked by ``FragmentValidator`` before anything is
appended.  A rejected call raises and leaves the selector exactly as it
was, so ``stringify()`` never observes a partial fragment.
"""
from __future__ import annotations

import logging

from cssb.grammar.kinds import Fragment, FragmentKind
from cssb.validator.errors import SelectorError
from cssb.validator.validator import FragmentValidator

logger = logging.getLogger(__name__)

_VALIDATOR = FragmentValidator()


class CompoundSelector:
    """Mutable, chainable builder for a single compound selector."""

    __slots__ = ("_fragments", "_last_kind")

    def __init__(self) -> None:
        self._fragments: list[Fragment] = []
        self._last_kind: FragmentKind | None = None

    def __repr__(self) -> str:
        return f"CompoundSelector({self.stringify()!r})"

    def __str__(self) -> str:
        return self.stringify()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def last_kind(self) -> FragmentKind | None:
        """Kind of the most recently accepted fragment, or ``None`` if empty."""
        return self._last_kind

    @property
    def fragments(self) -> tuple[Fragment, ...]:
        """Accepted fragments in insertion order."""
        return tuple(self._fragments)

    # ------------------------------------------------------------------
    # Fragment operations
    # ------------------------------------------------------------------

    def add(self, kind: FragmentKind, value: str) -> CompoundSelector:
        """Validate and append a fragment of ``kind``.

        Parameters
        ----------
        kind:
            The fragment kind to append.
        value:
            Undecorated fragment text, e.g. ``"main"`` for ``#main``.

        Returns
        -------
        CompoundSelector
            ``self``, for chaining.

        Raises
        ------
        DuplicateSingletonError
            If ``kind`` is a singleton kind equal to the previous kind.
        OrderViolationError
            If ``kind`` sorts before the previous kind.
        """
        try:
            _VALIDATOR.validate(self._last_kind, kind)
        except SelectorError:
            logger.debug(
                "Rejected %s %r after %r", kind.label, value, self.stringify()
            )
            raise
        self._fragments.append(Fragment(kind, value))
        self._last_kind = kind
        return self

    def element(self, value: str) -> CompoundSelector:
        """Append a type selector, rendered as ``value``."""
        return self.add(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> CompoundSelector:
        """Append an id selector, rendered as ``#value``."""
        return self.add(FragmentKind.ID, value)

    def class_(self, value: str) -> CompoundSelector:
        """Append a class selector, rendered as ``.value``."""
        return self.add(FragmentKind.CLASS, value)

    def attr(self, value: str) -> CompoundSelector:
        """Append an attribute selector, rendered as ``[value]``."""
        return self.add(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> CompoundSelector:
        """Append a pseudo-class, rendered as ``:value``."""
        return self.add(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> CompoundSelector:
        """Append a pseudo-element, rendered as ``::value``."""
        return self.add(FragmentKind.PSEUDO_ELEMENT, value)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def stringify(self) -> str:
        """Return the selector text; empty string for an empty selector."""
        return "".join(fragment.render() for fragment in self._fragments)
