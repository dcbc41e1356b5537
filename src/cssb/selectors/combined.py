"""Combined selectors: two selectors joined by a combinator."""
from __future__ import annotations

from dataclasses import dataclass

from cssb.selectors.base import Stringifiable


@dataclass(frozen=True)
class CombinedSelector:
    """Immutable pair of selectors joined by a combinator token.

    Operands are rendered on every ``stringify()`` call, not captured at
    construction.  Either side may itself be a ``CombinedSelector``.

    Parameters
    ----------
    left:
        Selector on the left of the combinator.
    combinator:
        Combinator text, normally one of ``" "``, ``"+"``, ``"~"``, ``">"``.
    right:
        Selector on the right of the combinator.
    """

    left: Stringifiable
    combinator: str
    right: Stringifiable

    def __str__(self) -> str:
        return self.stringify()

    def stringify(self) -> str:
        """Return ``"<left> <combinator> <right>"``."""
        return f"{self.left.stringify()} {self.combinator} {self.right.stringify()}"
