import functools
import logging
from typing import Callable, Optional, Type

from pymongo.errors import PyMongoError

from app.core.exceptions import AppException, InternalServerError

logger = logging.getLogger(__name__)


def raise_for_status(
    *,
    condition: bool,
    exception: Type[AppException],
    detail: Optional[str] = None,
    resource_type: Optional[str] = None,
) -> None:
    """Raise ``exception`` when ``condition`` holds."""
    if condition:
        raise exception(detail, resource_type=resource_type)


def handle_exceptions(
    *,
    default_exception: Type[AppException] = InternalServerError,
    message: str = "An unexpected error occurred.",
) -> Callable:
    """
    Decorator for async repository methods.

    Application exceptions pass through untouched; driver errors are logged
    and re-raised as ``default_exception`` so the request fails with a
    consistent error body. Nothing is retried.
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except AppException:
                raise
            except PyMongoError as e:
                logger.error(
                    f"{func.__qualname__} failed: {e}",
                    exc_info=True,
                    extra={"operation": func.__qualname__},
                )
                raise default_exception(message) from e

        return wrapper

    return decorator
