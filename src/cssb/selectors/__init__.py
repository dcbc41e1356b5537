"""cssb selectors module.

Exports the ``Stringifiable`` protocol and both selector implementations.
"""
from __future__ import annotations

from cssb.selectors.base import Stringifiable
from cssb.selectors.combined import CombinedSelector
from cssb.selectors.compound import CompoundSelector

__all__ = ["Stringifiable", "CompoundSelector", "CombinedSelector"]
