"""
osinfra/utils/async_retry.py

Provides a decorator to retry an async function upon failure.
"""

import asyncio
import logging
from typing import Any, Callable, Coroutine, Tuple, Type
from typing_extensions import ParamSpec, TypeVar

P = ParamSpec("P")
R = TypeVar("R")

logger = logging.getLogger(__name__)


def async_retry(
    retries: int = 0,
    delay: float = 1.0,
    retry_on: Tuple[Type[BaseException], ...] = (Exception,),
    noisy: bool = True,
) -> Callable[
    [Callable[P, Coroutine[Any, Any, R]]], Callable[P, Coroutine[Any, Any, R]]
]:
    """Decorates an async function to retry upon failure.

    The decorated function is attempted once, then up to `retries` more times while
    it raises one of `retry_on`, sleeping `delay` seconds between attempts. Other
    exceptions propagate immediately.

    Args:
        retries (int, optional):
            Number of additional attempts after the first one. Defaults to 0.
        delay (float, optional):
            Delay in seconds between attempts. Defaults to 1.0.
        retry_on (Tuple[Type[BaseException], ...], optional):
            Exception types that trigger a retry. Defaults to (Exception,).
        noisy (bool, optional):
            If True, logs a warning on each failed attempt and an error once all
            attempts have failed. Defaults to True.

    Returns:
        A decorator that, when applied to an async function, returns a wrapped
        version that retries on the given exceptions.
    """
    attempts = retries + 1

    def decorator(
        func: Callable[P, Coroutine[Any, Any, R]]
    ) -> Callable[P, Coroutine[Any, Any, R]]:
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            async def attempt(attempt_number: int) -> R:
                try:
                    return await func(*args, **kwargs)
                except retry_on as exc:
                    if attempt_number < attempts:
                        if noisy:
                            logger.warning(
                                "Attempt %d/%d of %r failed: %s",
                                attempt_number,
                                attempts,
                                func.__qualname__,
                                exc,
                            )
                        await asyncio.sleep(delay)
                        return await attempt(attempt_number + 1)

                    if noisy and attempts > 1:
                        logger.error(
                            "All %d attempts of %r failed", attempts, func.__qualname__
                        )
                    raise

            return await attempt(1)

        return wrapper

    return decorator
