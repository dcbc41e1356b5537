"""Selector builder facade: the entry points for building selectors.

Each fragment entry point starts a brand new ``CompoundSelector`` so
that independent chains never share state::

    from cssb.facade import builder

    builder.combine(
        builder.element("div").id("main").class_("container"),
        ">",
        builder.element("p").pseudo_class("first-child"),
    ).stringify()
    # 'div#main.container > p:first-child'

``combine`` accepts any ``Stringifiable`` on either side, including the
result of another ``combine`` call, and never mutates its operands.
"""
from __future__ import annotations

from cssb.grammar.grammar import COMBINATOR_TOKENS
from cssb.selectors.base import Stringifiable
from cssb.selectors.combined import CombinedSelector
from cssb.selectors.compound import CompoundSelector
from cssb.validator.errors import InvalidCombinatorError


class SelectorBuilder:
    """Factory for compound and combined selectors.

    Parameters
    ----------
    strict_combinators:
        When ``True``, ``combine`` rejects combinator tokens other than
        ``" "``, ``"+"``, ``"~"`` and ``">"``.  By default any string is
        accepted and interpolated verbatim.
    """

    def __init__(self, strict_combinators: bool = False) -> None:
        self._strict_combinators: bool = strict_combinators

    def __repr__(self) -> str:
        return f"SelectorBuilder(strict_combinators={self._strict_combinators})"

    @property
    def strict_combinators(self) -> bool:
        """Return True if ``combine`` validates its combinator token."""
        return self._strict_combinators

    def new(self) -> CompoundSelector:
        """Return an empty ``CompoundSelector``."""
        return CompoundSelector()

    # ------------------------------------------------------------------
    # Fragment entry points
    # ------------------------------------------------------------------

    def element(self, value: str) -> CompoundSelector:
        """Start a new selector with a type selector."""
        return self.new().element(value)

    def id(self, value: str) -> CompoundSelector:
        """Start a new selector with ``#value``."""
        return self.new().id(value)

    def class_(self, value: str) -> CompoundSelector:
        """Start a new selector with ``.value``."""
        return self.new().class_(value)

    def attr(self, value: str) -> CompoundSelector:
        """Start a new selector with ``[value]``."""
        return self.new().attr(value)

    def pseudo_class(self, value: str) -> CompoundSelector:
        """Start a new selector with ``:value``."""
        return self.new().pseudo_class(value)

    def pseudo_element(self, value: str) -> CompoundSelector:
        """Start a new selector with ``::value``."""
        return self.new().pseudo_element(value)

    # ------------------------------------------------------------------
    # Combination
    # ------------------------------------------------------------------

    def combine(
        self,
        left: Stringifiable,
        combinator: str,
        right: Stringifiable,
    ) -> CombinedSelector:
        """Join two selectors with a combinator.

        Parameters
        ----------
        left:
            Selector rendered before the combinator.
        combinator:
            Combinator text.  Rendered as ``" <combinator> "``.
        right:
            Selector rendered after the combinator.

        Returns
        -------
        CombinedSelector
            A new immutable selector; ``left`` and ``right`` are untouched.

        Raises
        ------
        InvalidCombinatorError
            If the builder is strict and ``combinator`` is not a
            documented token.
        """
        if self._strict_combinators and combinator not in COMBINATOR_TOKENS:
            raise InvalidCombinatorError(combinator)
        return CombinedSelector(left=left, combinator=combinator, right=right)


# Shared default instance used by the top-level ``cssb`` functions.
builder = SelectorBuilder()
