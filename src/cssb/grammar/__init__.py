"""cssb grammar module.

Exports fragment kinds, ordering constants, and formal grammar constants.
"""
from __future__ import annotations

from cssb.grammar.grammar import (
    COMBINATOR_TOKENS,
    FRAGMENT_ORDER_NAMES,
    FULL_GRAMMAR,
    GRAMMAR_COMBINED,
    GRAMMAR_COMPOUND,
)
from cssb.grammar.kinds import (
    COMBINATORS,
    FRAGMENT_ORDER,
    KIND_NAMES,
    SINGLETON_KINDS,
    Fragment,
    FragmentKind,
    order,
    render,
)

__all__ = [
    # Fragment kinds
    "FragmentKind",
    "Fragment",
    "FRAGMENT_ORDER",
    "SINGLETON_KINDS",
    "KIND_NAMES",
    "COMBINATORS",
    "order",
    "render",
    # Grammar constants
    "FULL_GRAMMAR",
    "GRAMMAR_COMPOUND",
    "GRAMMAR_COMBINED",
    "FRAGMENT_ORDER_NAMES",
    "COMBINATOR_TOKENS",
]
