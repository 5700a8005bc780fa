from functools import wraps
from typing import Any, Callable
from redis.exceptions import RedisError
from sqlalchemy.exc import SQLAlchemyError

from taskapi.common.exceptions import StorageException


STORAGE_ERRORS = (SQLAlchemyError, RedisError)


def translate_storage_errors(message: str):
    """Re-raise backend errors from the wrapped call as a StorageException."""

    def decorator(func: Callable[..., Any]):
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            try:
                return func(*args, **kwargs)
            except STORAGE_ERRORS as e:
                raise StorageException(message) from e

        return wrapper

    return decorator
