"""
Mapping of domain exceptions to HTTP errors.

Route handlers catch ShelterError and re-raise the result of http_error().
"""

from fastapi import HTTPException

from modules.notifications.exceptions import DeliveryFailedError
from shared.exceptions import (
    ConflictError,
    ExternalServiceError,
    NotFoundError,
    ShelterError,
    ValidationError,
)


def http_error(error: ShelterError) -> HTTPException:
    """
    Convert a domain exception to an HTTPException.

    NotFound -> 404, Conflict -> 409, Validation -> 422,
    delivery and other upstream failures -> 502. Anything else is a 500.
    """
    if isinstance(error, NotFoundError):
        status_code = 404
    elif isinstance(error, ConflictError):
        status_code = 409
    elif isinstance(error, ValidationError):
        status_code = 422
    elif isinstance(error, (DeliveryFailedError, ExternalServiceError)):
        status_code = 502
    else:
        status_code = 500
    return HTTPException(status_code=status_code, detail=error.to_dict())
