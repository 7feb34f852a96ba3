"""Unit tests for ContentService."""

import pytest

from lens.domain.error import DuplicateContentError, NotFoundError
from lens.domain.repository import ContentRepository
from lens.domain.service import ContentService
from lens.domain.value import ContentId, ContentKind, ContentRef
from tests.conftest import make_content
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateContent:
    """Tests for create_content."""

    @pytest.mark.asyncio
    async def test_assigns_ids_per_kind(self, unit_env):
        content_service = await unit_env.get(ContentService)

        first_quote = await content_service.create_content(make_content(ContentKind.QUOTE))
        first_book = await content_service.create_content(make_content(ContentKind.BOOK))
        second_quote = await content_service.create_content(
            make_content(ContentKind.QUOTE, text="Whatever you are, be a good one.")
        )

        assert (first_quote.id, second_quote.id) == (1, 2)
        assert first_book.id == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "kind,label",
        [
            (ContentKind.QUOTE, "Quote"),
            (ContentKind.ARTICLE, "Article"),
            (ContentKind.BOOK, "Book"),
            (ContentKind.VIDEO, "Video"),
            (ContentKind.AIPROMPT, "AI Prompt"),
        ],
    )
    async def test_identical_submission_rejected(self, unit_env, kind, label):
        content_service = await unit_env.get(ContentService)
        await content_service.create_content(make_content(kind))

        with pytest.raises(DuplicateContentError, match=f"{label} already exists"):
            await content_service.create_content(make_content(kind))

    @pytest.mark.asyncio
    async def test_same_text_by_another_user_is_allowed(self, unit_env):
        content_service = await unit_env.get(ContentService)
        await content_service.create_content(make_content(ContentKind.QUOTE, user_id=1))

        saved = await content_service.create_content(
            make_content(ContentKind.QUOTE, user_id=2)
        )

        assert saved.id == 2

    @pytest.mark.asyncio
    async def test_different_author_is_not_a_duplicate(self, unit_env):
        content_service = await unit_env.get(ContentService)
        await content_service.create_content(make_content(ContentKind.QUOTE))

        saved = await content_service.create_content(
            make_content(ContentKind.QUOTE, author=None)
        )

        assert saved.id is not None

    @pytest.mark.asyncio
    async def test_soft_deleted_item_does_not_block(self, unit_env):
        content_service = await unit_env.get(ContentService)
        content_repo = await unit_env.get(ContentRepository)
        removed = await content_service.create_content(make_content(ContentKind.VIDEO))
        await content_repo.save(removed.model_copy(update={"is_deleted": True}))

        saved = await content_service.create_content(make_content(ContentKind.VIDEO))

        assert saved.id != removed.id


class TestEnsureExists:
    """Tests for ensure_exists."""

    @pytest.mark.asyncio
    async def test_saved_item_exists(self, unit_env):
        content_service = await unit_env.get(ContentService)
        saved = await content_service.create_content(make_content(ContentKind.AIPROMPT))

        await content_service.ensure_exists(saved.ref)

    @pytest.mark.asyncio
    async def test_missing_item_raises_not_found(self, unit_env):
        content_service = await unit_env.get(ContentService)
        ref = ContentRef(kind=ContentKind.ARTICLE, id=ContentId(42))

        with pytest.raises(NotFoundError):
            await content_service.ensure_exists(ref)
