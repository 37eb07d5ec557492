r"""Constant delay sequence."""

from __future__ import annotations

__all__ = ["ConstantDelays"]

from aretry.delays.base import BaseDelays


class ConstantDelays(BaseDelays):
    """Sequence repeating the same delay.

    Without ``count`` the sequence never ends, which makes it the
    natural choice for polling until a stop policy accepts an outcome.

    Args:
        delay: The delay in seconds used before every retry (default: 1.0).
        count: Optional number of retries. ``None`` means unbounded.

    Example:
        ```pycon
        >>> from aretry.delays import ConstantDelays
        >>> list(ConstantDelays(delay=0.5, count=3))
        [0.5, 0.5, 0.5]
        >>> ConstantDelays(delay=2.0).calculate(1000)
        2.0

        ```
    """

    def __init__(self, delay: float = 1.0, count: int | None = None) -> None:
        if delay < 0:
            msg = f"delay must be non-negative, got {delay}"
            raise ValueError(msg)
        if count is not None and count < 0:
            msg = f"count must be >= 0 if specified, got {count}"
            raise ValueError(msg)

        self.delay = delay
        self.count = count

    def calculate(self, retry: int) -> float | None:
        if self.count is not None and retry >= self.count:
            return None
        return self.delay
