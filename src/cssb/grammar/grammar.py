"""Formal grammar of the selector text produced by ``cssb``.

The builder never parses selectors; these EBNF-style constants document
the shape of what ``stringify()`` emits and are printed by
``cssb grammar``.

Grammar notation used here:
    ``::=``     production rule
    ``|``       alternation
    ``?``       optional (zero or one)
    ``*``       zero or more repetitions
    ``TEXT``    terminal: caller-supplied text, emitted verbatim
"""
from __future__ import annotations

from cssb.grammar.kinds import COMBINATORS, FRAGMENT_ORDER

# ---------------------------------------------------------------------------
# Compound selectors
# ---------------------------------------------------------------------------

GRAMMAR_COMPOUND = """
compound       ::= element? id? class* attr* pseudo_class* pseudo_element?

element        ::= TEXT
id             ::= '#' TEXT
class          ::= '.' TEXT
attr           ::= '[' TEXT ']'
pseudo_class   ::= ':' TEXT
pseudo_element ::= '::' TEXT
"""

# ---------------------------------------------------------------------------
# Combined selectors
# ---------------------------------------------------------------------------

GRAMMAR_COMBINED = """
selector   ::= compound | combined
combined   ::= selector ' ' combinator ' ' selector
combinator ::= ' ' | '+' | '~' | '>' | TEXT
"""

FULL_GRAMMAR: str = GRAMMAR_COMPOUND + GRAMMAR_COMBINED

# Canonical fragment order as external names, e.g. for error messages.
FRAGMENT_ORDER_NAMES: list[str] = [kind.label for kind in FRAGMENT_ORDER]

# Documented combinator tokens in display order.
COMBINATOR_TOKENS: list[str] = list(COMBINATORS.values())
