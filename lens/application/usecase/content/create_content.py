"""Create content use case."""

from typing import Any

import logfire
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from lens.domain.error import ValidationError
from lens.domain.model.content import CONTENT_MODELS
from lens.domain.service import (
    CategoryService,
    ContentService,
    TagService,
    UserService,
)
from lens.domain.value import CategoryId, ContentKind, UserId

# Model field -> request field, where they differ
_REQUEST_FIELDS = {"text": "content", "summary": "content"}


class CreateContentRequest(BaseModel):
    """Create content request."""

    type: str | None = None  # Content kind, "prompt" accepted for aiprompt
    category: str | None = None  # Category slug
    title: str | None = None
    content: str | None = None
    author: str | None = None
    url: str | None = None
    tags: list[str] = Field(default_factory=list)
    user_id: int  # User ID from authenticated user


class CreateContentResponse(BaseModel):
    """Create content response."""

    id: int
    message: str = "Content created successfully"


def _blank_to_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value


def _kind_fields(kind: ContentKind, request: CreateContentRequest) -> dict[str, Any]:
    """Map request fields onto the kind's model fields."""
    author = _blank_to_none(request.author)
    url = _blank_to_none(request.url)
    if kind is ContentKind.QUOTE:
        return {"text": request.content, "author": author}
    if kind is ContentKind.ARTICLE or kind is ContentKind.VIDEO:
        return {"title": request.title, "url": url}
    if kind is ContentKind.BOOK:
        return {
            "title": request.title,
            "summary": request.content,
            "author": author,
            "url": url,
        }
    return {"text": request.content}


def _field_errors(error: PydanticValidationError) -> list[dict[str, str]]:
    errors = []
    for item in error.errors():
        field = str(item["loc"][0]) if item["loc"] else "body"
        errors.append(
            {"field": _REQUEST_FIELDS.get(field, field), "message": item["msg"]}
        )
    return errors


class CreateContentUseCase:
    """Use case for submitting a quote, article, book, video or AI prompt."""

    def __init__(
        self,
        content_service: ContentService,
        category_service: CategoryService,
        tag_service: TagService,
        user_service: UserService,
    ) -> None:
        """Initialize create content use case.

        Args:
            content_service: Content domain service
            category_service: Category domain service
            tag_service: Tag domain service
            user_service: User domain service
        """
        self.content_service = content_service
        self.category_service = category_service
        self.tag_service = tag_service
        self.user_service = user_service

    async def execute(self, request: CreateContentRequest) -> CreateContentResponse:
        """Execute create content flow.

        Steps:
        1. Resolve the kind and check the category slug is present
        2. Normalize tags (rejects more than ten)
        3. Resolve the category slug (via CategoryService)
        4. Check the submitter exists (via UserService)
        5. Build the kind's model (field validation happens there)
        6. Save through the duplicate guard (via ContentService)
        7. Ensure and link each tag (via TagService)

        Args:
            request: Create content request

        Returns:
            Response with the new content ID

        Raises:
            ValidationError: If the kind, fields, tags or category are invalid
            InvalidCategoryError: If the category slug is unknown
            NotFoundError: If the submitting user does not exist
            DuplicateContentError: If an identical active item exists
        """
        kind = ContentKind.parse(request.type)

        with logfire.span(
            "create_content.execute",
            kind=kind.value,
            category=request.category,
            user_id=request.user_id,
        ):
            if not request.category or not request.category.strip():
                raise ValidationError(
                    "Validation failed",
                    [{"field": "category", "message": "Category is required"}],
                )

            self.tag_service.normalize_tags(request.tags)

            category = await self.category_service.resolve_slug(request.category)
            user = await self.user_service.get_by_id(UserId(request.user_id))

            try:
                item = CONTENT_MODELS[kind](
                    user_id=user.id,
                    category_id=CategoryId(category.id),
                    **_kind_fields(kind, request),
                )
            except PydanticValidationError as e:
                errors = _field_errors(e)
                logfire.warn("Content validation failed", kind=kind.value, errors=errors)
                raise ValidationError("Validation failed", errors)

            saved = await self.content_service.create_content(item)
            await self.tag_service.attach_tags(saved.ref, request.tags)

            logfire.info("Content submitted", kind=kind.value, content_id=saved.id)
            return CreateContentResponse(id=saved.id)  # type: ignore[arg-type]
