import asyncio
import random
import logging
import functools
from typing import Callable, Any, TypeVar, Coroutine, Tuple, Type
from playwright.async_api import Error as PlaywrightError
from jobfeed.config.settings import settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Transport-level failures; HTTP error statuses come back as responses and are not retried
TRANSPORT_ERRORS: Tuple[Type[BaseException], ...] = (PlaywrightError, asyncio.TimeoutError)


def with_retry(
    max_retries: int = settings.MAX_RETRIES,
    base_delay: float = settings.RETRY_BASE_DELAY,
    max_delay: float = settings.RETRY_MAX_DELAY,
    retry_on: Tuple[Type[BaseException], ...] = TRANSPORT_ERRORS,
):
    """
    Decorator for async functions to retry on the given exceptions with
    exponential backoff and jitter. Gives up after max_retries and re-raises.
    """

    def decorator(
        func: Callable[..., Coroutine[Any, Any, T]],
    ) -> Callable[..., Coroutine[Any, Any, T]]:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            retries = 0
            while True:
                try:
                    return await func(*args, **kwargs)
                except retry_on as e:
                    if retries >= max_retries:
                        logger.error(
                            f"Max retries reached for {func.__name__}. Error: {e}"
                        )
                        raise

                    delay = min(base_delay * (2**retries), max_delay)
                    jitter = random.uniform(0, 0.5 * delay)
                    sleep_time = delay + jitter

                    logger.warning(
                        f"Attempt {retries + 1}/{max_retries} failed for {func.__name__}. "
                        f"Retrying in {sleep_time:.2f}s. Error: {e}"
                    )

                    await asyncio.sleep(sleep_time)
                    retries += 1

        return wrapper

    return decorator
