"""Content items.

InspireLens stores five content shapes in five tables. At the service
boundary they form one tagged union, ``ContentRecord``, discriminated by
``kind``. Each variant declares the fields that make two submissions the
"same" item for the duplicate guard.
"""

from datetime import datetime
from typing import Annotated, Any, ClassVar, Literal, Optional, Union
from urllib.parse import urlparse

from pydantic import AfterValidator, Field

from lens.domain.model.common import DomainModel
from lens.domain.value import CategoryId, ContentId, ContentKind, ContentRef, UserId

TITLE = {"min_length": 5, "max_length": 500}
BODY = {"min_length": 10, "max_length": 5000}
AUTHOR = {"max_length": 255}


def _check_url(v: str) -> str:
    """Require an absolute http(s) URL."""
    parsed = urlparse(v)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError("URL must be an absolute http or https URL")
    return v


WebUrl = Annotated[str, AfterValidator(_check_url)]


class ContentItem(DomainModel):
    """Fields shared by every content kind.

    ``id`` is assigned by the database and is None until the item is saved.
    Items are immutable apart from the soft-delete flag.
    """

    duplicate_fields: ClassVar[tuple[str, ...]] = ()

    id: Optional[ContentId] = None
    user_id: UserId
    category_id: CategoryId
    created_at: datetime = Field(default_factory=datetime.now)
    is_deleted: bool = False

    @property
    def ref(self) -> ContentRef:
        """Composite (kind, id) key of a saved item."""
        if self.id is None:
            raise ValueError("Content item has not been saved")
        return ContentRef(kind=self.kind, id=self.id)  # type: ignore[attr-defined]

    def duplicate_key(self) -> dict[str, Any]:
        """Values of the fields the duplicate guard compares."""
        return {name: getattr(self, name) for name in self.duplicate_fields}


class Quote(ContentItem):
    """A quotation and who said it."""

    duplicate_fields: ClassVar[tuple[str, ...]] = (
        "text",
        "author",
        "category_id",
        "user_id",
    )

    kind: Literal[ContentKind.QUOTE] = ContentKind.QUOTE
    text: str = Field(**BODY)
    author: Optional[str] = Field(default=None, **AUTHOR)


class Article(ContentItem):
    """A link to an article."""

    duplicate_fields: ClassVar[tuple[str, ...]] = (
        "title",
        "url",
        "category_id",
        "user_id",
    )

    kind: Literal[ContentKind.ARTICLE] = ContentKind.ARTICLE
    title: str = Field(**TITLE)
    url: WebUrl


class Book(ContentItem):
    """A book recommendation with a summary."""

    duplicate_fields: ClassVar[tuple[str, ...]] = (
        "title",
        "summary",
        "author",
        "category_id",
        "user_id",
    )

    kind: Literal[ContentKind.BOOK] = ContentKind.BOOK
    title: str = Field(**TITLE)
    summary: str = Field(**BODY)
    author: Optional[str] = Field(default=None, **AUTHOR)
    url: Optional[WebUrl] = None


class Video(ContentItem):
    """A link to a video."""

    duplicate_fields: ClassVar[tuple[str, ...]] = (
        "title",
        "url",
        "category_id",
        "user_id",
    )

    kind: Literal[ContentKind.VIDEO] = ContentKind.VIDEO
    title: str = Field(**TITLE)
    url: WebUrl


class AiPrompt(ContentItem):
    """A reusable AI prompt."""

    duplicate_fields: ClassVar[tuple[str, ...]] = ("text", "category_id", "user_id")

    kind: Literal[ContentKind.AIPROMPT] = ContentKind.AIPROMPT
    text: str = Field(**BODY)


ContentRecord = Annotated[
    Union[Quote, Article, Book, Video, AiPrompt], Field(discriminator="kind")
]

CONTENT_MODELS: dict[ContentKind, type[ContentItem]] = {
    ContentKind.QUOTE: Quote,
    ContentKind.ARTICLE: Article,
    ContentKind.BOOK: Book,
    ContentKind.VIDEO: Video,
    ContentKind.AIPROMPT: AiPrompt,
}
