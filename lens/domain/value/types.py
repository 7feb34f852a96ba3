"""Domain value objects for InspireLens.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from lens.domain.error import InvalidContentKindError, InvalidVoteTypeError
from lens.domain.value.common import RootValueObject, ValueObject
from lens.domain.value.identifiers import ContentId


class ContentKind(str, Enum):
    """Discriminator for the five content shapes."""

    QUOTE = "quote"
    ARTICLE = "article"
    BOOK = "book"
    VIDEO = "video"
    AIPROMPT = "aiprompt"

    @classmethod
    def parse(cls, value: str | None) -> "ContentKind":
        """Resolve a client-supplied kind token.

        Accepts the ``prompt`` alias for ``aiprompt``; matching is
        case-insensitive.

        Raises:
            InvalidContentKindError: If the token names no known kind
        """
        if value is None:
            raise InvalidContentKindError(value)
        token = value.strip().lower()
        if token == "prompt":
            return cls.AIPROMPT
        try:
            return cls(token)
        except ValueError:
            raise InvalidContentKindError(value)

    @property
    def label(self) -> str:
        """Human readable name used in messages."""
        if self is ContentKind.AIPROMPT:
            return "AI Prompt"
        return self.value.capitalize()


class VoteType(str, Enum):
    """Direction of a vote."""

    UP = "up"
    DOWN = "down"

    @classmethod
    def from_token(cls, token: str | None) -> "VoteType":
        """Normalize an API vote token ('upvote' / 'downvote').

        Raises:
            InvalidVoteTypeError: If the token is not recognised
        """
        if token == "upvote":
            return cls.UP
        if token == "downvote":
            return cls.DOWN
        raise InvalidVoteTypeError(token)


class ContentRef(ValueObject):
    """Composite key of a content item: (kind, id).

    Votes and comments point at content through this pair rather than a
    foreign key, since the five content tables share no id space.
    """

    kind: ContentKind
    id: ContentId

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.id}"


class TagName(RootValueObject[str]):
    """Normalized tag name.

    Surrounding whitespace is trimmed and the name is lowercased, so
    'Habits', ' habits ' and 'HABITS' are the same tag.
    """

    @field_validator("root")
    @classmethod
    def normalize_tag_name(cls, v: str) -> str:
        """Trim, lowercase and bound the tag name."""
        v = v.strip().lower()
        if not v:
            raise ValueError("Tag name must not be empty")
        if len(v) > 50:
            raise ValueError("Tag name must be at most 50 characters")
        return v


class Slug(RootValueObject[str]):
    """URL-safe category slug.

    Must be lowercase, alphanumeric with hyphens, 1-50 characters.
    Examples: 'productivity', 'self-help'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        if len(v) > 50:
            raise ValueError("Slug must be 1-50 characters")
        return v
