"""Retry logic with exponential backoff for model calls."""

from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class RetryConfig:
    """Configuration for retry behavior."""

    max_attempts: int = 3
    base_delay: float = 1.0
    max_delay: float = 30.0
    exponential_base: float = 2.0
    jitter_factor: float = 0.2  # ±20% random variation


class TransientError(Exception):
    """Exception for transient errors that should be retried."""


class PermanentError(Exception):
    """Exception for permanent errors that should not be retried."""


async def retry_with_backoff(
    func: Callable[..., Awaitable[T]],
    config: RetryConfig,
    *args: Any,
    **kwargs: Any,
) -> T:
    """
    Await ``func(*args, **kwargs)`` with exponential backoff between attempts.

    Args:
        func: Async function to execute
        config: Retry configuration
        *args: Positional arguments for func
        **kwargs: Keyword arguments for func

    Returns:
        Result from the first successful attempt

    Raises:
        PermanentError: If the failure is not transient
        Exception: The last transient failure once attempts run out
    """
    attempts = max(config.max_attempts, 1)

    for attempt in range(attempts):
        try:
            result = await func(*args, **kwargs)
            if attempt > 0:
                logger.info("Retry succeeded on attempt %d", attempt + 1)
            return result

        except asyncio.CancelledError:
            raise
        except PermanentError:
            logger.error("Permanent error encountered, not retrying")
            raise

        except Exception as e:
            if not is_transient_error(e):
                logger.error("Permanent error encountered, not retrying: %s", e)
                raise PermanentError(str(e)) from e

            if attempt == attempts - 1:
                logger.error("All %d retry attempts failed", attempts)
                raise

            base_delay = min(config.base_delay * (config.exponential_base**attempt), config.max_delay)
            jitter = base_delay * config.jitter_factor * (2 * random.random() - 1)
            delay = max(base_delay + jitter, 0.0)

            logger.warning("Attempt %d/%d failed: %s. Retrying in %.2fs...", attempt + 1, attempts, e, delay)
            await asyncio.sleep(delay)

    raise RuntimeError("unreachable")


def is_transient_error(error: Exception) -> bool:
    """
    Determine if an error is transient and should be retried.

    Args:
        error: Exception to check

    Returns:
        True if error is transient, False otherwise
    """
    if isinstance(error, TransientError):
        return True

    if isinstance(error, (ConnectionError, TimeoutError)):
        return True

    error_msg = str(error).lower()
    transient_patterns = [
        "timeout",
        "connection",
        "rate limit",
        "429",
        "500",
        "503",
        "504",
        "ssl",
        "eof",
        "connection reset",
        "broken pipe",
        "temporary",
        "unavailable",
    ]

    return any(pattern in error_msg for pattern in transient_patterns)
