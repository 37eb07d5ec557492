r"""Delay sequences for spacing out retry attempts.

This package provides reusable delay sequences. Any iterable of
non-negative numbers works as a delay sequence; these classes add
unbounded sequences for polling and sequences computed per retry.
"""

from __future__ import annotations

__all__ = [
    "BaseDelays",
    "ConstantDelays",
    "FixedDelays",
    "FunctionDelays",
]

from aretry.delays.base import BaseDelays
from aretry.delays.constant import ConstantDelays
from aretry.delays.fixed import FixedDelays
from aretry.delays.function import FunctionDelays
