"""Retry with exponential backoff for calls to the hosted backend."""
from __future__ import annotations

import functools
import random
import time
from typing import Any, Callable, Tuple, Type

import requests

from jobmatch.log import get_logger

log = get_logger(__name__)

# Status codes worth a second attempt; everything else fails fast.
RETRYABLE_STATUS: frozenset[int] = frozenset({408, 425, 429, 500, 502, 503, 504})


def is_transient(exc: BaseException) -> bool:
    """Connection problems and throttling/5xx responses are transient.

    RequestException subclasses OSError, so only the connection and timeout
    types count; a malformed URL or an unreadable body fails fast.
    """
    if isinstance(exc, requests.HTTPError):
        response = exc.response
        return response is not None and response.status_code in RETRYABLE_STATUS
    return isinstance(exc, (requests.ConnectionError, requests.Timeout))


def backoff_delay(attempt: int, base_delay: float, max_delay: float, jitter: bool) -> float:
    delay = min(base_delay * (2 ** (attempt - 1)), max_delay)
    if jitter:
        delay *= 0.5 + random.random()
    return delay


def retry(
    *,
    max_attempts: int = 3,
    base_delay: float = 1.0,
    max_delay: float = 20.0,
    jitter: bool = True,
    retryable: Tuple[Type[BaseException], ...] = (requests.RequestException, OSError),
) -> Callable:
    """Decorator: re-invoke on transient failures, re-raise the last error."""

    def decorator(fn: Callable) -> Callable:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            attempt = 1
            while True:
                try:
                    return fn(*args, **kwargs)
                except retryable as exc:
                    if attempt >= max_attempts or not is_transient(exc):
                        log.error("%s gave up after %d attempt(s): %s", fn.__qualname__, attempt, exc)
                        raise
                    delay = backoff_delay(attempt, base_delay, max_delay, jitter)
                    log.warning(
                        "%s attempt %d/%d failed (%s), retrying in %.1fs",
                        fn.__qualname__, attempt, max_attempts, exc, delay,
                    )
                    time.sleep(delay)
                    attempt += 1

        return wrapper

    return decorator
