"""cssb — CSS compound selector builder with ordering and cardinality checks.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import cssb

    cssb.id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'

    cssb.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
    # 'a[href$=".png"]:focus'

    cssb.combine(
        cssb.element("div").id("main").class_("container").class_("draggable"),
        "+",
        cssb.combine(
            cssb.element("table").id("data"),
            "~",
            cssb.combine(
                cssb.element("tr").pseudo_class("nth-of-type(even)"),
                ">",
                cssb.element("td").pseudo_class("nth-of-type(even)"),
            ),
        ),
    ).stringify()
    # 'div#main.container.draggable + table#data ~ tr:nth-of-type(even) > td:nth-of-type(even)'

    cssb.element("div").element("span")
    # raises cssb.DuplicateSingletonError

    cssb.__version__
    '0.1.0'
"""
from __future__ import annotations

from cssb.facade import SelectorBuilder, builder
from cssb.grammar.kinds import Fragment, FragmentKind
from cssb.selectors import CombinedSelector, CompoundSelector, Stringifiable
from cssb.validator.errors import (
    DuplicateSingletonError,
    InvalidCombinatorError,
    OrderViolationError,
    SelectorDecodeError,
    SelectorError,
)

__version__: str = "0.1.0"


def element(value: str) -> CompoundSelector:
    """Start a new compound selector with a type selector, e.g. ``div``."""
    return builder.element(value)


def id(value: str) -> CompoundSelector:  # noqa: A001
    """Start a new compound selector with an id selector, ``#value``."""
    return builder.id(value)


def class_(value: str) -> CompoundSelector:
    """Start a new compound selector with a class selector, ``.value``."""
    return builder.class_(value)


def attr(value: str) -> CompoundSelector:
    """Start a new compound selector with an attribute selector, ``[value]``."""
    return builder.attr(value)


def pseudo_class(value: str) -> CompoundSelector:
    """Start a new compound selector with a pseudo-class, ``:value``."""
    return builder.pseudo_class(value)


def pseudo_element(value: str) -> CompoundSelector:
    """Start a new compound selector with a pseudo-element, ``::value``."""
    return builder.pseudo_element(value)


def combine(left: Stringifiable, combinator: str, right: Stringifiable) -> CombinedSelector:
    """Join two selectors with ``combinator``.

    Parameters
    ----------
    left:
        Selector rendered before the combinator.
    combinator:
        Combinator text, normally one of ``" "``, ``"+"``, ``"~"``, ``">"``.
        Any string is accepted.
    right:
        Selector rendered after the combinator.

    Returns
    -------
    CombinedSelector
        An immutable selector rendering as ``"<left> <combinator> <right>"``.
    """
    return builder.combine(left, combinator, right)


__all__ = [
    "__version__",
    # Facade
    "builder",
    "SelectorBuilder",
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    # Selector types
    "Stringifiable",
    "CompoundSelector",
    "CombinedSelector",
    "Fragment",
    "FragmentKind",
    # Errors
    "SelectorError",
    "DuplicateSingletonError",
    "OrderViolationError",
    "InvalidCombinatorError",
    "SelectorDecodeError",
]
