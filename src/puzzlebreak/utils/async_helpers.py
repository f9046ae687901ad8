"""
Async Utility Functions

Retry helpers for the network-bound synonym lookup clients.
"""

import asyncio
import random
from typing import Callable, Any, Tuple, Type
from functools import wraps

from puzzlebreak.core.exceptions import SynonymLookupError
from puzzlebreak.utils.logging import get_logger

logger = get_logger(__name__)

RETRYABLE_EXCEPTIONS: Tuple[Type[BaseException], ...] = (SynonymLookupError, asyncio.TimeoutError)


def retry_with_backoff(max_retries: int = 3, base_delay: float = 1.0,
                       max_delay: float = 60.0, backoff_factor: float = 2.0,
                       jitter: bool = True,
                       retry_on: Tuple[Type[BaseException], ...] = RETRYABLE_EXCEPTIONS):
    """
    Decorator for retry logic with exponential backoff.

    Args:
        max_retries: Maximum number of retry attempts
        base_delay: Base delay in seconds
        max_delay: Maximum delay in seconds
        backoff_factor: Multiplier for exponential backoff
        jitter: Add random jitter to prevent thundering herd
        retry_on: Exception types that trigger another attempt
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args, **kwargs) -> Any:
            for attempt in range(max_retries + 1):
                try:
                    return await func(*args, **kwargs)
                except retry_on as e:
                    if attempt == max_retries:
                        logger.error(f"Function {func.__name__} failed after {max_retries} retries: {str(e)}")
                        raise

                    # Client errors other than rate limiting will not improve on retry
                    status_code = getattr(e, 'status_code', None)
                    if status_code is not None and 400 <= status_code < 500 and status_code != 429:
                        raise

                    delay = min(base_delay * (backoff_factor ** attempt), max_delay)
                    if jitter:
                        delay = delay * (0.5 + random.random() * 0.5)

                    logger.warning(
                        f"Function {func.__name__} failed (attempt {attempt + 1}/{max_retries + 1}), "
                        f"retrying in {delay:.2f}s: {str(e)}"
                    )
                    await asyncio.sleep(delay)

        return wrapper
    return decorator
