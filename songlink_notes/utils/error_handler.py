"""Shared error-handling helpers.

Used where an operation is explicitly best-effort: the failure is logged with
the operation name and a fallback value is returned instead of raising.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import structlog

logger = structlog.get_logger()

T = TypeVar("T")


class ErrorHandler:
    """Logging pattern shared by the decorator below"""

    @staticmethod
    def log_and_return_default(
        operation_name: str, exception: Exception, default_value: T, **kwargs: Any
    ) -> T:
        logger.warning(f"Failed to {operation_name}", error=str(exception), **kwargs)
        return default_value


def safe_with_default(operation_name: str, default_value: Any, **log_kwargs: Any):
    """
    Decorator for a best-effort operation.

    Args:
        operation_name: name used in the log event
        default_value: value returned when the wrapped callable raises
        **log_kwargs: extra key/value pairs for the log event
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                return ErrorHandler.log_and_return_default(
                    operation_name, e, default_value, **log_kwargs
                )

        return wrapper

    return decorator
