r"""Core defaults shared by the retry executors."""

from __future__ import annotations

__all__ = ["DEFAULT_DELAYS", "DEFAULT_FALLBACK", "DEFAULT_RETRY_ON_FAILURE"]

from aretry.core.config import DEFAULT_DELAYS, DEFAULT_FALLBACK, DEFAULT_RETRY_ON_FAILURE
