r"""Finite delay sequence."""

from __future__ import annotations

__all__ = ["FixedDelays"]

from typing import TYPE_CHECKING

from aretry.delays.base import BaseDelays

if TYPE_CHECKING:
    from collections.abc import Iterable


class FixedDelays(BaseDelays):
    """Finite sequence of explicit delays.

    The number of delays is the maximum number of retries.

    Args:
        delays: The delays in seconds, in the order they are used.

    Example:
        ```pycon
        >>> from aretry.delays import FixedDelays
        >>> delays = FixedDelays([0.1, 0.5, 1.0])
        >>> list(delays)
        [0.1, 0.5, 1.0]
        >>> delays.calculate(3) is None
        True

        ```
    """

    def __init__(self, delays: Iterable[float]) -> None:
        self.delays = tuple(delays)
        for delay in self.delays:
            if delay < 0:
                msg = f"delays must be non-negative, got {delay}"
                raise ValueError(msg)

    def __len__(self) -> int:
        return len(self.delays)

    def calculate(self, retry: int) -> float | None:
        if retry < len(self.delays):
            return self.delays[retry]
        return None
