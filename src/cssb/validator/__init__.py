"""cssb Validator module.

Exports the ``FragmentValidator`` state machine, the ``validate``
convenience function, and all selector error types.
"""
from __future__ import annotations

from cssb.validator.errors import (
    DuplicateSingletonError,
    InvalidCombinatorError,
    OrderViolationError,
    SelectorDecodeError,
    SelectorError,
)
from cssb.validator.validator import FragmentValidator, validate

__all__ = [
    "FragmentValidator",
    "validate",
    "SelectorError",
    "DuplicateSingletonError",
    "OrderViolationError",
    "InvalidCombinatorError",
    "SelectorDecodeError",
]
