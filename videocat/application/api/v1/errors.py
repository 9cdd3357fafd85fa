"""Centralized error transformation for API routes.

Maps videocat errors to HTTPException responses whose detail is the
``{"errorsMessages": [...]}`` body clients receive.
"""

from collections.abc import Iterable
from typing import Any

from fastapi import HTTPException
from fastapi.exceptions import RequestValidationError

from videocat.domain.shared.error import (
    DomainError,
    FieldError,
    NotFoundError,
    ValidationError,
    VideoCatError,
)

DOMAIN_ERROR_STATUS_MAP: dict[type[DomainError], int] = {
    NotFoundError: 404,
    ValidationError: 400,
}


def error_body(errors: Iterable[FieldError]) -> dict[str, Any]:
    """Build the API error body from field errors."""
    return {"errorsMessages": [e.model_dump() for e in errors]}


def map_error(error: VideoCatError) -> HTTPException:
    """Map a videocat error to an HTTPException.

    Args:
        error: The videocat error to map.

    Returns:
        HTTPException with appropriate status code and error body as detail.
    """
    if isinstance(error, DomainError):
        status_code = DOMAIN_ERROR_STATUS_MAP.get(type(error), 400)
        return HTTPException(status_code=status_code, detail=error_body(error.field_errors))

    # Fallback for unknown VideoCatError subclasses
    return HTTPException(
        status_code=500,
        detail=error_body([FieldError(message=error.message, field="")]),
    )


def map_request_validation_error(error: RequestValidationError) -> HTTPException:
    """Map FastAPI's request parsing failures (e.g. malformed JSON) to a 400."""
    field_errors = []
    for item in error.errors():
        loc = [str(part) for part in item.get("loc", ())]
        field_errors.append(
            FieldError(message=item.get("msg", "Invalid request"), field=loc[-1] if loc else "body")
        )
    return HTTPException(status_code=400, detail=error_body(field_errors))
