r"""Adapters turning httpx requests into retryable actions.

A request action performs the request and raises for 4xx/5xx statuses,
so error responses and transport errors become failures, while other
responses are successes whose value is the ``httpx.Response``.

Example:
    ```pycon
    >>> import httpx
    >>> from aretry import retry
    >>> from aretry.delays import ConstantDelays
    >>> from aretry.http import request_action
    >>> with httpx.Client() as client:  # doctest: +SKIP
    ...     response = retry(
    ...         request_action(client.get, "https://api.example.com/jobs/42"),
    ...         delays=ConstantDelays(2.0, count=30),
    ...         on_success=lambda response, attempt: response.json()["state"] == "done",
    ...     )
    ...

    ```
"""

from __future__ import annotations

__all__ = ["request_action", "request_action_async"]

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    import httpx

logger: logging.Logger = logging.getLogger(__name__)


def request_action(
    request_func: Callable[..., httpx.Response],
    url: str,
    **kwargs: Any,
) -> Callable[[int], httpx.Response]:
    """Create an action sending a request on every attempt.

    Args:
        request_func: The function to call to make the request (e.g.,
            client.get, client.post).
        url: The URL to send the request to.
        **kwargs: Additional keyword arguments passed to the request
            function.

    Returns:
        A callable taking the attempt number and returning the response.
    """

    def action(attempt: int) -> httpx.Response:
        logger.debug(f"Sending request to {url} (attempt {attempt})")
        response = request_func(url, **kwargs)
        response.raise_for_status()
        return response

    return action


def request_action_async(
    request_func: Callable[..., Awaitable[httpx.Response]],
    url: str,
    **kwargs: Any,
) -> Callable[[int], Awaitable[httpx.Response]]:
    """Create an async action sending a request on every attempt.

    Args:
        request_func: The async function to call to make the request
            (e.g., client.get, client.post of an httpx.AsyncClient).
        url: The URL to send the request to.
        **kwargs: Additional keyword arguments passed to the request
            function.

    Returns:
        An async callable taking the attempt number and returning the
        response.
    """

    async def action(attempt: int) -> httpx.Response:
        logger.debug(f"Sending request to {url} (attempt {attempt})")
        response = await request_func(url, **kwargs)
        response.raise_for_status()
        return response

    return action
