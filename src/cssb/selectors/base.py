"""The ``Stringifiable`` protocol shared by every selector type."""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Stringifiable(Protocol):
    """Protocol for anything that renders to selector text.

    Any object with a ``stringify()`` method returning ``str`` satisfies
    this protocol, so ``combine`` accepts compound selectors, combined
    selectors, and caller-defined types alike.  The protocol is
    :func:`runtime-checkable <typing.runtime_checkable>` so
    ``isinstance`` tests work.
    """

    def stringify(self) -> str:
        """Return the selector as CSS text."""
        ...
