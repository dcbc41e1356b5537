"""Fragment kind definitions for CSS compound selectors.

Defines the complete fragment vocabulary used by the selector builder.
Every piece of a compound selector is represented as a member of the
``FragmentKind`` enum, and every accepted piece is stored as a
``Fragment`` dataclass that carries its kind and raw value.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Final


class FragmentKind(Enum):
    """Exhaustive enumeration of compound selector fragment kinds.

    Members are declared in canonical order; see ``FRAGMENT_ORDER``.
    """

    ELEMENT = auto()
    ID = auto()
    CLASS = auto()
    ATTRIBUTE = auto()
    PSEUDO_CLASS = auto()
    PSEUDO_ELEMENT = auto()

    @property
    def label(self) -> str:
        """Return the external name of this kind, e.g. ``"pseudo-class"``."""
        return _KIND_LABELS[self]

    @property
    def is_singleton(self) -> bool:
        """Return True if this kind may occur at most once per selector."""
        return self in SINGLETON_KINDS


# Fixed total order used for validity checking.
FRAGMENT_ORDER: Final[tuple[FragmentKind, ...]] = (
    FragmentKind.ELEMENT,
    FragmentKind.ID,
    FragmentKind.CLASS,
    FragmentKind.ATTRIBUTE,
    FragmentKind.PSEUDO_CLASS,
    FragmentKind.PSEUDO_ELEMENT,
)

SINGLETON_KINDS: Final[frozenset[FragmentKind]] = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)

_KIND_LABELS: Final[dict[FragmentKind, str]] = {
    FragmentKind.ELEMENT: "element",
    FragmentKind.ID: "id",
    FragmentKind.CLASS: "class",
    FragmentKind.ATTRIBUTE: "attribute",
    FragmentKind.PSEUDO_CLASS: "pseudo-class",
    FragmentKind.PSEUDO_ELEMENT: "pseudo-element",
}

# Mapping from external kind name to its FragmentKind.
KIND_NAMES: Final[dict[str, FragmentKind]] = {
    label: kind for kind, label in _KIND_LABELS.items()
}

# (prefix, suffix) wrapped around a fragment's value when rendered.
_DECORATIONS: Final[dict[FragmentKind, tuple[str, str]]] = {
    FragmentKind.ELEMENT: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTRIBUTE: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
}

# Documented combinator tokens, keyed by the relationship they express.
COMBINATORS: Final[dict[str, str]] = {
    "descendant": " ",
    "adjacent": "+",
    "sibling": "~",
    "child": ">",
}


def order(kind: FragmentKind | None) -> int:
    """Return the position of ``kind`` in ``FRAGMENT_ORDER``.

    ``None`` (no fragment yet) sorts before every kind and maps to ``-1``.
    """
    if kind is None:
        return -1
    return FRAGMENT_ORDER.index(kind)


def render(kind: FragmentKind, value: str) -> str:
    """Decorate ``value`` with the prefix and suffix for ``kind``."""
    prefix, suffix = _DECORATIONS[kind]
    return f"{prefix}{value}{suffix}"


@dataclass(frozen=True, slots=True)
class Fragment:
    """A single accepted piece of a compound selector.

    Parameters
    ----------
    kind:
        The ``FragmentKind`` variant for this fragment.
    value:
        The undecorated text supplied by the caller.
    """

    kind: FragmentKind
    value: str

    def __repr__(self) -> str:
        return f"Fragment({self.kind.name}, {self.value!r})"

    def render(self) -> str:
        """Return the decorated text for this fragment, e.g. ``".nav"``."""
        return render(self.kind, self.value)
