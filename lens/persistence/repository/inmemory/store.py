"""Shared state for the in-memory repositories.

The feed reads across content, tags, votes, comments, users and
categories, so the in-memory repositories share one store instead of
keeping private lists.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from itertools import count
from typing import Iterator

from lens.domain.model import Category, Comment, ContentItem, Tag, User, Vote
from lens.domain.value import ContentKind, ContentRef, TagId


@dataclass
class InMemoryStore:
    """Tables of the in-memory database."""

    users: dict[int, User] = field(default_factory=dict)
    categories: dict[int, Category] = field(default_factory=dict)
    content: dict[ContentKind, dict[int, ContentItem]] = field(
        default_factory=lambda: {kind: {} for kind in ContentKind}
    )
    tags: dict[str, Tag] = field(default_factory=dict)
    tag_links: dict[ContentRef, list[TagId]] = field(
        default_factory=lambda: defaultdict(list)
    )
    votes: dict[int, Vote] = field(default_factory=dict)
    comments: dict[int, Comment] = field(default_factory=dict)
    _sequences: dict[str, Iterator[int]] = field(default_factory=dict)

    def next_id(self, sequence: str) -> int:
        """Next value of a per-table id sequence, starting at 1."""
        if sequence not in self._sequences:
            self._sequences[sequence] = count(1)
        return next(self._sequences[sequence])

    def username(self, user_id: int) -> str | None:
        """Username for a user id, like a LEFT JOIN on users."""
        user = self.users.get(user_id)
        return user.username if user else None
