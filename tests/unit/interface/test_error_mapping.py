"""Unit tests for domain error to HTTP mapping."""

import pytest

from lens.domain.error import (
    DuplicateCommentError,
    DuplicateContentError,
    DuplicateVoteError,
    InvalidCategoryError,
    InvalidContentKindError,
    NotFoundError,
    ValidationError,
)
from lens.interface.error import to_http_exception


@pytest.mark.parametrize(
    "error,status_code,message",
    [
        (NotFoundError("Content", "quote:1"), 404, "Content not found"),
        (NotFoundError("Comment", "3"), 404, "Comment not found or already deleted"),
        (DuplicateVoteError(), 409, "Duplicate vote ignored"),
        (DuplicateContentError("Book"), 400, "Book already exists"),
        (DuplicateCommentError(), 400, "Duplicate comment"),
        (InvalidCategoryError("hobbies"), 400, "Invalid category"),
        (InvalidContentKindError("podcast"), 400, "Invalid content type"),
    ],
)
def test_status_and_message(error, status_code, message):
    exc = to_http_exception(error)

    assert exc.status_code == status_code
    assert exc.detail == {"message": message}


def test_validation_errors_are_listed():
    errors = [{"field": "content", "message": "too short"}]

    exc = to_http_exception(ValidationError("Validation failed", errors))

    assert exc.status_code == 400
    assert exc.detail == {"message": "Validation failed", "errors": errors}
