"""Category entity."""

from typing import Optional

from pydantic import Field

from lens.domain.model.common import DomainModel
from lens.domain.value import CategoryId, Slug


class Category(DomainModel):
    """Shared bucket that content items are filed under.

    Every content item belongs to exactly one category. Categories are
    seeded by migration and soft-deleted rather than removed.
    """

    id: CategoryId
    name: str = Field(min_length=1, max_length=50)
    slug: Slug
    icon: Optional[str] = None  # Emoji glyph shown next to the name
    color: Optional[str] = None  # UI colour token
    is_deleted: bool = False
