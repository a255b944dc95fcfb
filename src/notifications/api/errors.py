"""Translate dispatch-core errors into HTTP errors."""

from fastapi import HTTPException
from notifications.errors import InvalidTransitionError, NotFoundError, StoreUnavailableError, UnknownRecipientError
from protean.exceptions import ObjectNotFoundError, ValidationError


def to_http_exception(exc: Exception) -> HTTPException:
    if isinstance(exc, InvalidTransitionError):
        return HTTPException(status_code=409, detail=exc.messages)
    if isinstance(exc, ValidationError):
        return HTTPException(status_code=422, detail=exc.messages)
    if isinstance(exc, NotFoundError | UnknownRecipientError):
        return HTTPException(status_code=404, detail=exc.messages)
    if isinstance(exc, ObjectNotFoundError):
        # Raised by Protean itself, without a messages dict
        return HTTPException(status_code=404, detail=str(exc))
    if isinstance(exc, StoreUnavailableError):
        return HTTPException(status_code=503, detail=str(exc) or "Notification store unavailable")
    return HTTPException(status_code=500, detail=str(exc))
