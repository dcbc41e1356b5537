"""Fragment validator: the state machine behind ``CompoundSelector``.

The validator decides, from the kind of the fragment accepted last and
the kind of a candidate fragment, whether appending the candidate is
legal.  It holds no state of its own; the selector owns ``last_kind``
and passes it in on every call.

Only the immediately preceding kind is consulted.  Two singleton
fragments separated by a higher-order fragment are therefore not
reported as duplicates; the ordering rule rejects the second one
instead.

Usage
-----
::

    from cssb.grammar import FragmentKind
    from cssb.validator import FragmentValidator

    FragmentValidator().validate(FragmentKind.ID, FragmentKind.CLASS)  # ok
    FragmentValidator().validate(FragmentKind.ID, FragmentKind.ID)     # raises
"""
from __future__ import annotations

from cssb.grammar.kinds import FragmentKind, order
from cssb.validator.errors import DuplicateSingletonError, OrderViolationError


class FragmentValidator:
    """Ordering and cardinality rules for compound selector fragments."""

    def validate(self, last_kind: FragmentKind | None, new_kind: FragmentKind) -> None:
        """Check that ``new_kind`` may follow ``last_kind``.

        Parameters
        ----------
        last_kind:
            Kind of the most recently accepted fragment, or ``None`` for
            an empty selector.
        new_kind:
            Kind of the fragment about to be appended.

        Raises
        ------
        DuplicateSingletonError
            If ``new_kind`` is a singleton kind equal to ``last_kind``.
        OrderViolationError
            If ``new_kind`` sorts before ``last_kind``.
        """
        if last_kind is new_kind and new_kind.is_singleton:
            raise DuplicateSingletonError(new_kind)
        if last_kind is not None and order(new_kind) < order(last_kind):
            raise OrderViolationError(new_kind, last_kind)


_DEFAULT_VALIDATOR = FragmentValidator()


def validate(last_kind: FragmentKind | None, new_kind: FragmentKind) -> None:
    """Convenience function: check a transition with the shared validator."""
    _DEFAULT_VALIDATOR.validate(last_kind, new_kind)
