r"""Outcome types describing the result of a single attempt.

Every invocation of the action produces exactly one outcome: a
``Success`` carrying the returned value, or a ``Failure`` carrying the
raised exception. Stop policies receive these objects to decide whether
the retry loop should end.

Example:
    ```pycon
    >>> from aretry.outcome import Failure, Success
    >>> outcome = Success(attempt=1, value="done")
    >>> outcome.succeeded
    True
    >>> outcome.status
    <OutcomeStatus.SUCCESS: 'success'>
    >>> Failure(attempt=2, error=ValueError("boom")).succeeded
    False

    ```
"""

from __future__ import annotations

__all__ = ["Failure", "Outcome", "OutcomeStatus", "Success"]

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class OutcomeStatus(str, Enum):
    """Status of an attempt."""

    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class Success:
    """Outcome of an attempt that returned a value.

    Attributes:
        attempt: The attempt number (1-indexed).
        value: The value returned by the action.
    """

    attempt: int
    value: Any

    @property
    def status(self) -> OutcomeStatus:
        return OutcomeStatus.SUCCESS

    @property
    def succeeded(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """Outcome of an attempt that raised an exception.

    Attributes:
        attempt: The attempt number (1-indexed).
        error: The exception raised by the action.
    """

    attempt: int
    error: Exception

    @property
    def status(self) -> OutcomeStatus:
        return OutcomeStatus.FAILURE

    @property
    def succeeded(self) -> bool:
        return False


Outcome = Union[Success, Failure]
