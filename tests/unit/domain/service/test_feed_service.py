"""Unit tests for FeedService."""

from datetime import datetime, timedelta

import pytest

from lens.domain.service import CommentService, FeedService, TagService, VoteService
from lens.domain.value import CategoryId, ContentKind, UserId, VoteType
from tests.conftest import save_content
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

T0 = datetime(2026, 1, 1, 12, 0, 0)


async def _seed_feed(env):
    """One item of each kind, one minute apart, oldest first."""
    items = {}
    for minutes, (kind, category) in enumerate(
        [
            (ContentKind.QUOTE, 2),
            (ContentKind.ARTICLE, 3),
            (ContentKind.BOOK, 2),
            (ContentKind.VIDEO, 5),
            (ContentKind.AIPROMPT, 3),
        ]
    ):
        items[kind] = await save_content(
            env,
            kind,
            category_id=category,
            created_at=T0 + timedelta(minutes=minutes),
        )
    return items


class TestGetFeed:
    """Tests for get_feed."""

    @pytest.mark.asyncio
    async def test_empty_feed(self, unit_env):
        feed_service = await unit_env.get(FeedService)

        page = await feed_service.get_feed()

        assert page.posts == []
        assert all(count == 0 for count in page.type_counts.values())

    @pytest.mark.asyncio
    async def test_newest_first_across_kinds(self, unit_env):
        feed_service = await unit_env.get(FeedService)
        await _seed_feed(unit_env)

        page = await feed_service.get_feed()

        assert [p.type for p in page.posts] == [
            ContentKind.AIPROMPT,
            ContentKind.VIDEO,
            ContentKind.BOOK,
            ContentKind.ARTICLE,
            ContentKind.QUOTE,
        ]
        assert page.type_counts == {kind: 1 for kind in ContentKind}

    @pytest.mark.asyncio
    async def test_row_fields_per_kind(self, unit_env):
        feed_service = await unit_env.get(FeedService)
        items = await _seed_feed(unit_env)

        rows = {p.type: p for p in (await feed_service.get_feed()).posts}

        quote = rows[ContentKind.QUOTE]
        assert quote.content == "Stay hungry, stay foolish."
        assert quote.author == "Steve Jobs"
        assert quote.category_name == "Mindset"
        assert quote.username == "alice"

        book = rows[ContentKind.BOOK]
        assert book.content == "Atomic Habits"
        assert book.summary == items[ContentKind.BOOK].summary

        article = rows[ContentKind.ARTICLE]
        assert article.url == "https://example.com/deep-work"
        assert article.author is None

    @pytest.mark.asyncio
    async def test_filter_by_kind_skips_counts(self, unit_env):
        feed_service = await unit_env.get(FeedService)
        await _seed_feed(unit_env)

        page = await feed_service.get_feed(kind=ContentKind.BOOK)

        assert [p.type for p in page.posts] == [ContentKind.BOOK]
        assert page.type_counts == {}

    @pytest.mark.asyncio
    async def test_filter_by_category(self, unit_env):
        feed_service = await unit_env.get(FeedService)
        await _seed_feed(unit_env)

        page = await feed_service.get_feed(category_id=CategoryId(3))

        assert [p.type for p in page.posts] == [ContentKind.AIPROMPT, ContentKind.ARTICLE]

    @pytest.mark.asyncio
    async def test_filter_by_kind_and_category(self, unit_env):
        feed_service = await unit_env.get(FeedService)
        await _seed_feed(unit_env)

        page = await feed_service.get_feed(
            kind=ContentKind.QUOTE, category_id=CategoryId(3)
        )

        assert page.posts == []

    @pytest.mark.asyncio
    async def test_limit_and_offset(self, unit_env):
        feed_service = await unit_env.get(FeedService)
        await _seed_feed(unit_env)

        page = await feed_service.get_feed(limit=2, offset=2)

        assert [p.type for p in page.posts] == [ContentKind.BOOK, ContentKind.ARTICLE]

    @pytest.mark.asyncio
    async def test_row_aggregates_tags_comments_and_votes(self, unit_env):
        # Arrange
        feed_service = await unit_env.get(FeedService)
        tag_service = await unit_env.get(TagService)
        comment_service = await unit_env.get(CommentService)
        vote_service = await unit_env.get(VoteService)
        items = await _seed_feed(unit_env)
        ref = items[ContentKind.QUOTE].ref

        await tag_service.attach_tags(ref, ["motivation", "Habits"])
        await comment_service.add_comment(ref, UserId(2), "Classic")
        removed = await comment_service.add_comment(ref, UserId(3), "Remove me")
        await comment_service.delete_comment(ref.id, removed.id, UserId(3))
        await vote_service.toggle_vote(ref, UserId(1), VoteType.UP)
        await vote_service.toggle_vote(ref, UserId(2), VoteType.UP)
        await vote_service.toggle_vote(ref, UserId(3), VoteType.DOWN)

        # Act
        page = await feed_service.get_feed(kind=ContentKind.QUOTE)

        # Assert
        row = page.posts[0]
        assert row.tags == ["habits", "motivation"]
        assert [c.comment for c in row.comments] == ["Classic"]
        assert len(row.points) == 3
        assert row.points_count == 2

    @pytest.mark.asyncio
    async def test_items_do_not_share_aggregates(self, unit_env):
        """A quote and a book with the same id keep separate votes and tags."""
        feed_service = await unit_env.get(FeedService)
        tag_service = await unit_env.get(TagService)
        vote_service = await unit_env.get(VoteService)
        items = await _seed_feed(unit_env)

        await tag_service.attach_tags(items[ContentKind.QUOTE].ref, ["wisdom"])
        await vote_service.toggle_vote(items[ContentKind.QUOTE].ref, UserId(1), VoteType.UP)

        book = (await feed_service.get_feed(kind=ContentKind.BOOK)).posts[0]
        assert book.id == items[ContentKind.QUOTE].id
        assert book.tags == []
        assert book.points == []
        assert book.points_count == 0
