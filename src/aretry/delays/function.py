r"""Delay sequence computed by a caller-supplied function."""

from __future__ import annotations

__all__ = ["FunctionDelays"]

from typing import TYPE_CHECKING

from aretry.delays.base import BaseDelays

if TYPE_CHECKING:
    from collections.abc import Callable


class FunctionDelays(BaseDelays):
    """Sequence whose delays are computed from the retry index.

    The function receives the retry index (0-indexed) and returns the
    delay in seconds. Returning ``None`` ends the sequence early.

    Args:
        func: Function computing the delay for a retry index.
        count: Optional number of retries. ``None`` means the sequence
            only ends when ``func`` returns ``None``.

    Example:
        ```pycon
        >>> from aretry.delays import FunctionDelays
        >>> delays = FunctionDelays(lambda retry: 0.1 * (retry + 1), count=3)
        >>> [round(delay, 1) for delay in delays]
        [0.1, 0.2, 0.3]

        ```
    """

    def __init__(self, func: Callable[[int], float | None], count: int | None = None) -> None:
        if not callable(func):
            msg = f"func must be callable, got {type(func).__name__}"
            raise TypeError(msg)
        if count is not None and count < 0:
            msg = f"count must be >= 0 if specified, got {count}"
            raise ValueError(msg)

        self.func = func
        self.count = count

    def calculate(self, retry: int) -> float | None:
        if self.count is not None and retry >= self.count:
            return None
        return self.func(retry)
