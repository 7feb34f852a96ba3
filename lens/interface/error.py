"""Interface layer errors.

Translates domain errors into HTTP errors. Every error body the API
returns has the shape ``{"message": str}``; validation failures may add
``errors: [{field, message}]``.
"""

from fastapi import HTTPException, status

from lens.domain.error import (
    DomainError,
    DuplicateVoteError,
    NotFoundError,
    ValidationError,
)

INTERNAL_ERROR_MESSAGE = "Internal server error"

_NOT_FOUND_MESSAGES = {
    "Comment": "Comment not found or already deleted",
}


def http_error(status_code: int, message: str, errors: list | None = None) -> HTTPException:
    """Build an HTTPException whose detail renders as the API error body."""
    detail: dict = {"message": message}
    if errors:
        detail["errors"] = errors
    return HTTPException(status_code=status_code, detail=detail)


def to_http_exception(error: DomainError) -> HTTPException:
    """Map a domain error to the HTTP status clients expect.

    Args:
        error: Domain error raised by a use case

    Returns:
        HTTPException with a ``{"message": ...}`` detail
    """
    if isinstance(error, NotFoundError):
        message = _NOT_FOUND_MESSAGES.get(error.resource, f"{error.resource} not found")
        return http_error(status.HTTP_404_NOT_FOUND, message)
    if isinstance(error, DuplicateVoteError):
        return http_error(status.HTTP_409_CONFLICT, str(error))
    if isinstance(error, ValidationError):
        return http_error(status.HTTP_400_BAD_REQUEST, str(error), error.errors)
    # Duplicate content and duplicate comments are client errors
    return http_error(status.HTTP_400_BAD_REQUEST, str(error))
