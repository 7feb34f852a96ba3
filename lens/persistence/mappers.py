"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

import json
from typing import Any, Dict

from lens.domain.model import (
    AiPrompt,
    Article,
    Book,
    Category,
    Comment,
    ContentItem,
    FeedComment,
    FeedItem,
    FeedVote,
    Quote,
    Tag,
    User,
    Video,
    Vote,
)
from lens.domain.value import (
    CategoryId,
    CommentId,
    ContentId,
    ContentKind,
    Slug,
    TagId,
    TagName,
    UserId,
    VoteId,
    VoteType,
)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        username=row["username"],
        email=row.get("email"),
        created_at=row["created_at"],
        is_deleted=row["is_deleted"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_category(row: Dict[str, Any]) -> Category:
    """Convert database row to Category domain model."""
    return Category(
        id=CategoryId(row["id"]),
        name=row["name"],
        slug=Slug(row["slug"]),
        icon=row.get("icon"),
        color=row.get("color"),
        is_deleted=row["is_deleted"],
    )


def category_to_dict(category: Category) -> Dict[str, Any]:
    """Convert Category domain model to database dict."""
    data = category.model_dump()
    data["slug"] = category.slug.root
    return data


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    return Tag(
        id=TagId(row["id"]),
        name=TagName(row["name"]),
        created_at=row["created_at"],
    )


def row_to_content(kind: ContentKind, row: Dict[str, Any]) -> ContentItem:
    """Convert a row of a kind's content table to its domain model.

    Args:
        kind: Which table the row came from
        row: Database row as dict

    Returns:
        Content item of the matching variant
    """
    common = {
        "id": ContentId(row["id"]),
        "user_id": UserId(row["user_id"]),
        "category_id": CategoryId(row["category_id"]),
        "created_at": row["created_at"],
        "is_deleted": row["is_deleted"],
    }

    if kind is ContentKind.QUOTE:
        return Quote(text=row["quote"], author=row.get("author"), **common)
    if kind is ContentKind.ARTICLE:
        return Article(title=row["title"], url=row["url"], **common)
    if kind is ContentKind.BOOK:
        return Book(
            title=row["title"],
            summary=row["summary"],
            author=row.get("author"),
            url=row.get("url"),
            **common,
        )
    if kind is ContentKind.VIDEO:
        return Video(title=row["title"], url=row["url"], **common)
    return AiPrompt(text=row["prompt"], **common)


def content_to_dict(item: ContentItem) -> Dict[str, Any]:
    """Convert a content item to its table's column dict.

    ``id`` is omitted when unset so the database assigns it, and
    ``created_at`` is left to the server default.

    Args:
        item: Content item

    Returns:
        Dict suitable for database insertion
    """
    data = item.model_dump(exclude={"kind", "created_at"})
    if data.get("id") is None:
        data.pop("id", None)

    # Quote and prompt text live in columns named after the kind
    if isinstance(item, Quote):
        data["quote"] = data.pop("text")
    elif isinstance(item, AiPrompt):
        data["prompt"] = data.pop("text")
    return data


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(row["id"]),
        post_type=ContentKind(row["post_type"]),
        post_id=ContentId(row["post_id"]),
        user_id=UserId(row["user_id"]),
        vote_type=VoteType(row["vote_type"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        is_deleted=row["is_deleted"],
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(row["id"]),
        post_type=ContentKind(row["post_type"]),
        post_id=ContentId(row["post_id"]),
        user_id=UserId(row["user_id"]),
        text=row["comment"],
        created_at=row["created_at"],
        is_deleted=row["is_deleted"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict (without ``id``)."""
    return {
        "post_type": comment.post_type.value,
        "post_id": comment.post_id,
        "user_id": comment.user_id,
        "comment": comment.text,
    }


def row_to_feed_vote(row: Dict[str, Any]) -> FeedVote:
    """Convert a vote row (joined with users) to a FeedVote."""
    return FeedVote(
        id=VoteId(row["id"]),
        user_id=UserId(row["user_id"]),
        username=row.get("username"),
        vote_type=VoteType(row["vote_type"]),
        created_at=row["created_at"],
    )


def row_to_feed_comment(row: Dict[str, Any]) -> FeedComment:
    """Convert a comment row (joined with users) to a FeedComment."""
    return FeedComment(
        id=CommentId(row["id"]),
        username=row.get("username"),
        comment=row["comment"],
        created_at=row["created_at"],
    )


def _json_list(value: Any) -> list:
    # json_agg yields NULL for no rows and may arrive undecoded
    if value is None:
        return []
    if isinstance(value, str):
        return json.loads(value)
    return list(value)


def row_to_feed_item(row: Dict[str, Any]) -> FeedItem:
    """Convert an aggregation row to a FeedItem.

    Args:
        row: Row of the feed query, with JSON-aggregated
            ``tags``, ``comments`` and ``points`` columns

    Returns:
        FeedItem read model
    """
    return FeedItem(
        type=ContentKind(row["type"]),
        id=ContentId(row["id"]),
        content=row["content"],
        author=row.get("author"),
        created_at=row["created_at"],
        summary=row.get("summary"),
        category_id=row.get("category_id"),
        category_name=row.get("category_name"),
        username=row.get("username"),
        url=row.get("url"),
        tags=_json_list(row.get("tags")),
        comments=[row_to_feed_comment(c) for c in _json_list(row.get("comments"))],
        points=[row_to_feed_vote(v) for v in _json_list(row.get("points"))],
        points_count=row.get("points_count") or 0,
    )
