"""Content use cases."""

from .create_content import (
    CreateContentRequest,
    CreateContentResponse,
    CreateContentUseCase,
)

__all__ = [
    "CreateContentRequest",
    "CreateContentResponse",
    "CreateContentUseCase",
]
