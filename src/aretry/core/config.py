r"""Default values for retry configuration.

The defaults describe a single attempt: no delays means no retries, so
an action runs once unless the caller supplies a delay sequence.
"""

from __future__ import annotations

__all__ = ["DEFAULT_DELAYS", "DEFAULT_FALLBACK", "DEFAULT_RETRY_ON_FAILURE"]

from typing import Any

# Delays (in seconds) between attempts.
DEFAULT_DELAYS: tuple[float, ...] = ()

# Value returned when no success ends the retry loop.
DEFAULT_FALLBACK: Any = None

# Whether a failed attempt may be retried at all.
DEFAULT_RETRY_ON_FAILURE: bool = True
