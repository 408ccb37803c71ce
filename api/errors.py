"""
Translation of store outcomes into HTTP responses.

Routers call unwrap_or_raise() on every Result they receive. Known
application errors keep their message; anything else is an upstream store
failure and is reported with a generic message.
"""
import logging
from typing import TypeVar

from fastapi import HTTPException

from application.exceptions import InvalidArgumentError, NotAuthenticatedError, NotFoundError
from application.result import Result

logger = logging.getLogger(__name__)

T = TypeVar("T")


def unwrap_or_raise(result: Result[T]) -> T:
    """
    Return the value of a successful result.

    Raises:
        HTTPException: 404 for NotFoundError, 400 for InvalidArgumentError,
            401 for NotAuthenticatedError, 502 for any other failure
    """
    if result.success:
        return result.value

    error = result.error
    if isinstance(error, NotFoundError):
        raise HTTPException(status_code=404, detail=str(error))
    if isinstance(error, InvalidArgumentError):
        raise HTTPException(status_code=400, detail=str(error))
    if isinstance(error, NotAuthenticatedError):
        raise HTTPException(status_code=401, detail=str(error))

    logger.error(f"Store request failed: {type(error).__name__}: {error}")
    raise HTTPException(status_code=502, detail="Document store request failed")
