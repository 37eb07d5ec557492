r"""Abstract base class for delay sequences."""

from __future__ import annotations

__all__ = ["BaseDelays"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


class BaseDelays(ABC):
    """Abstract base class for delay sequences.

    A delay sequence yields one delay (in seconds) per retry. Iterating
    over an instance always starts from the first retry, so the same
    object can be shared by several retry loops.
    """

    @abstractmethod
    def calculate(self, retry: int) -> float | None:
        """Calculate the delay before a given retry.

        Args:
            retry: The retry index (0-indexed). For example, retry=0 is
                the delay before the second attempt.

        Returns:
            The delay in seconds, or ``None`` if the sequence has no
            delay for this retry (the sequence is exhausted).
        """

    def __iter__(self) -> Iterator[float]:
        retry = 0
        while (delay := self.calculate(retry)) is not None:
            yield delay
            retry += 1
