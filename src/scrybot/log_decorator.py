"""Decorator for logging card response resolution."""

import logging
import time
from functools import wraps
from typing import Callable

logger = logging.getLogger("scrybot.responses")


def log_resolve(func: Callable) -> Callable:
    """
    Decorator that logs start, completion and failure of ``resolve()``.

    The decorated coroutine must be a method of a CardResponse so the
    variant name and card name can be attached to each record.
    """

    @wraps(func)
    async def wrapper(self, *args, **kwargs):
        start_time = time.monotonic()
        extra = {
            "variant": type(self).__name__,
            "card_name": self.card_name,
        }

        logger.debug(f"Resolving {extra['variant']} for {self.card_name!r}", extra=extra)

        try:
            result = await func(self, *args, **kwargs)
        except Exception as e:
            execution_time_ms = int((time.monotonic() - start_time) * 1000)
            logger.error(
                f"{extra['variant']} for {self.card_name!r} failed: {e}",
                extra={
                    **extra,
                    "execution_time_ms": execution_time_ms,
                    "success": False,
                    "error": str(e),
                },
            )
            raise

        execution_time_ms = int((time.monotonic() - start_time) * 1000)
        logger.info(
            f"{extra['variant']} for {self.card_name!r} resolved: {result.get('title')!r}",
            extra={**extra, "execution_time_ms": execution_time_ms, "success": True},
        )
        return result

    return wrapper
