"""PostgreSQL implementation of Feed repository.

The feed is one query: a UNION ALL of the five content tables, joined to
categories and users, with tags, comments and votes folded into each row
by correlated ``json_agg`` subqueries.
"""

from typing import List, Optional

import logfire
from sqlalchemy import JSON, String, Text, and_, cast, func, literal, null, select, union_all
from sqlalchemy.dialects.postgresql import aggregate_order_by
from sqlalchemy.ext.asyncio import AsyncSession

from lens.domain.model import FeedItem
from lens.domain.repository import FeedRepository
from lens.domain.value import CategoryId, ContentKind, VoteType
from lens.persistence.mappers import row_to_feed_item
from lens.persistence.tables import (
    CONTENT_STORAGE,
    categories_table,
    comments_table,
    tags_table,
    users_table,
    votes_table,
)


def _optional(table, name: str):
    """Column if the table has it, else a typed NULL."""
    if name in table.c:
        return table.c[name]
    return cast(null(), Text)


def _kind_literal(kind: ContentKind):
    return cast(literal(kind.value), String)


def _content_select(kind: ContentKind):
    storage = CONTENT_STORAGE[kind]
    table = storage.table
    return select(
        _kind_literal(kind).label("type"),
        table.c.id,
        table.c[storage.text_column].label("content"),
        _optional(table, "author").label("author"),
        table.c.created_at,
        _optional(table, "summary").label("summary"),
        table.c.category_id,
        table.c.user_id,
        _optional(table, "url").label("url"),
    ).where(table.c.is_deleted.is_(False))


def _tag_select(kind: ContentKind):
    storage = CONTENT_STORAGE[kind]
    junction = storage.tag_table
    return select(
        _kind_literal(kind).label("type"),
        junction.c[storage.tag_column].label("content_id"),
        junction.c.tag_id,
    )


class PostgresFeedRepository(FeedRepository):
    """PostgreSQL implementation of FeedRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find(
        self,
        kind: Optional[ContentKind] = None,
        category_id: Optional[CategoryId] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[FeedItem]:
        """Find feed rows, newest first, with their tags, comments and votes."""
        with logfire.span(
            "feed_repository.find",
            kind=kind.value if kind else None,
            category_id=category_id,
            limit=limit,
            offset=offset,
        ):
            kinds = [kind] if kind else list(ContentKind)
            content = union_all(*(_content_select(k) for k in kinds)).cte(
                "unified_content"
            )
            unified_tags = union_all(*(_tag_select(k) for k in kinds)).cte(
                "unified_tags"
            )

            tags = (
                select(
                    func.json_agg(
                        aggregate_order_by(tags_table.c.name, tags_table.c.name),
                        type_=JSON,
                    )
                )
                .select_from(unified_tags)
                .join(tags_table, tags_table.c.id == unified_tags.c.tag_id)
                .where(
                    unified_tags.c.type == content.c.type,
                    unified_tags.c.content_id == content.c.id,
                )
                .correlate(content)
                .scalar_subquery()
            )

            commenter = users_table.alias("commenter")
            comments = (
                select(
                    func.json_agg(
                        aggregate_order_by(
                            func.json_build_object(
                                "id", comments_table.c.id,
                                "username", commenter.c.username,
                                "comment", comments_table.c.comment,
                                "created_at", comments_table.c.created_at,
                            ),
                            comments_table.c.created_at,
                        ),
                        type_=JSON,
                    )
                )
                .select_from(comments_table)
                .join(commenter, commenter.c.id == comments_table.c.user_id)
                .where(
                    comments_table.c.post_type == content.c.type,
                    comments_table.c.post_id == content.c.id,
                    comments_table.c.is_deleted.is_(False),
                )
                .correlate(content)
                .scalar_subquery()
            )

            voter = users_table.alias("voter")
            active_votes = and_(
                votes_table.c.post_type == content.c.type,
                votes_table.c.post_id == content.c.id,
                votes_table.c.is_deleted.is_(False),
            )
            points = (
                select(
                    func.json_agg(
                        aggregate_order_by(
                            func.json_build_object(
                                "id", votes_table.c.id,
                                "user_id", voter.c.id,
                                "username", voter.c.username,
                                "vote_type", votes_table.c.vote_type,
                                "created_at", votes_table.c.created_at,
                            ),
                            votes_table.c.created_at.desc(),
                            votes_table.c.id.desc(),
                        ),
                        type_=JSON,
                    )
                )
                .select_from(votes_table)
                .join(voter, voter.c.id == votes_table.c.user_id)
                .where(active_votes)
                .correlate(content)
                .scalar_subquery()
            )
            points_count = (
                select(func.count())
                .select_from(votes_table)
                .where(active_votes, votes_table.c.vote_type == VoteType.UP.value)
                .correlate(content)
                .scalar_subquery()
            )

            stmt = (
                select(
                    content.c.type,
                    content.c.id,
                    content.c.content,
                    content.c.author,
                    content.c.created_at,
                    content.c.summary,
                    categories_table.c.id.label("category_id"),
                    categories_table.c.name.label("category_name"),
                    users_table.c.username,
                    content.c.url,
                    tags.label("tags"),
                    comments.label("comments"),
                    points.label("points"),
                    points_count.label("points_count"),
                )
                .select_from(
                    content.outerjoin(
                        categories_table, categories_table.c.id == content.c.category_id
                    ).outerjoin(users_table, users_table.c.id == content.c.user_id)
                )
                .order_by(content.c.created_at.desc(), content.c.id.desc())
            )

            if category_id is not None:
                stmt = stmt.where(content.c.category_id == category_id)
            if limit is not None:
                stmt = stmt.limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            rows = result.mappings().all()
            logfire.debug("Feed rows fetched", count=len(rows))
            return [row_to_feed_item(dict(row)) for row in rows]

    async def count_by_kind(self) -> dict[ContentKind, int]:
        """Count active content items per kind."""
        counts = union_all(
            *(
                select(
                    _kind_literal(kind).label("type"),
                    func.count().label("count"),
                )
                .select_from(CONTENT_STORAGE[kind].table)
                .where(CONTENT_STORAGE[kind].table.c.is_deleted.is_(False))
                for kind in ContentKind
            )
        )
        result = await self.session.execute(counts)
        totals = {kind: 0 for kind in ContentKind}
        for row in result.mappings().all():
            totals[ContentKind(row["type"])] = row["count"]
        return totals
