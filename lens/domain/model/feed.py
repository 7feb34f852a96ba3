"""Read models for the aggregated feed.

A feed row is a denormalized view of one content item together with its
tags, active comments and active votes. Rows are computed at read time
and never stored.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from lens.domain.model.common import DomainModel
from lens.domain.value import (
    CategoryId,
    CommentId,
    ContentId,
    ContentKind,
    UserId,
    VoteId,
    VoteType,
)


class FeedComment(DomainModel):
    """Comment as shown inside a feed row."""

    id: CommentId
    username: Optional[str]
    comment: str
    created_at: datetime


class FeedVote(DomainModel):
    """Active vote as shown inside a feed row or a vote response."""

    id: VoteId
    user_id: UserId
    username: Optional[str]
    vote_type: VoteType
    created_at: datetime


class FeedItem(DomainModel):
    """One row of the aggregated feed.

    ``content`` holds the kind's primary text: the quote or prompt text,
    or the title for articles, books and videos.
    """

    type: ContentKind
    id: ContentId
    content: str
    author: Optional[str] = None
    created_at: datetime
    summary: Optional[str] = None
    category_id: Optional[CategoryId] = None
    category_name: Optional[str] = None
    username: Optional[str] = None
    url: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    comments: list[FeedComment] = Field(default_factory=list)
    points: list[FeedVote] = Field(default_factory=list)
    points_count: int = Field(default=0, ge=0)


class FeedPage(DomainModel):
    """Feed rows plus per-kind totals of active content."""

    posts: list[FeedItem]
    type_counts: dict[ContentKind, int] = Field(default_factory=dict)
