"""Unit tests for TagService."""

import pytest

from lens.domain.error import ValidationError
from lens.domain.repository import TagRepository
from lens.domain.service import TagService
from lens.domain.value import ContentKind
from tests.conftest import save_content
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestNormalizeTags:
    """Tests for normalize_tags (pure, no repository)."""

    def test_trims_lowercases_and_dedupes(self):
        names = TagService.normalize_tags(["Habits", " habits ", "HABITS", "Focus"])

        assert [n.root for n in names] == ["habits", "focus"]

    def test_drops_empty_names(self):
        assert TagService.normalize_tags(["", "   ", "calm"])[0].root == "calm"
        assert TagService.normalize_tags(["", " "]) == []

    def test_ten_tags_allowed(self):
        assert len(TagService.normalize_tags([f"t{i}" for i in range(10)])) == 10

    def test_more_than_ten_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            TagService.normalize_tags([f"t{i}" for i in range(11)])

        assert exc_info.value.errors[0]["field"] == "tags"

    def test_overlong_name_rejected(self):
        with pytest.raises(ValidationError):
            TagService.normalize_tags(["x" * 51])


class TestAttachTags:
    """Tests for attach_tags."""

    @pytest.mark.asyncio
    async def test_case_variants_link_one_tag_once(self, unit_env):
        # Arrange
        tag_service = await unit_env.get(TagService)
        tag_repo = await unit_env.get(TagRepository)
        quote = await save_content(unit_env, ContentKind.QUOTE)

        # Act
        tags = await tag_service.attach_tags(quote.ref, ["Habits", " habits ", "HABITS"])

        # Assert
        assert len(tags) == 1
        assert await tag_repo.find_names_for(quote.ref) == ["habits"]
        assert [t.name.root for t in await tag_repo.find_all()] == ["habits"]

    @pytest.mark.asyncio
    async def test_tags_are_shared_across_kinds(self, unit_env):
        tag_service = await unit_env.get(TagService)
        tag_repo = await unit_env.get(TagRepository)
        quote = await save_content(unit_env, ContentKind.QUOTE)
        video = await save_content(unit_env, ContentKind.VIDEO)

        quote_tags = await tag_service.attach_tags(quote.ref, ["focus"])
        video_tags = await tag_service.attach_tags(video.ref, ["Focus", "deep-work"])

        assert quote_tags[0].id == video_tags[0].id
        assert await tag_repo.find_names_for(video.ref) == ["deep-work", "focus"]
        assert await tag_repo.find_names_for(quote.ref) == ["focus"]

    @pytest.mark.asyncio
    async def test_linking_again_is_a_noop(self, unit_env):
        tag_service = await unit_env.get(TagService)
        tag_repo = await unit_env.get(TagRepository)
        book = await save_content(unit_env, ContentKind.BOOK)

        await tag_service.attach_tags(book.ref, ["reading"])
        await tag_service.attach_tags(book.ref, ["Reading"])

        assert await tag_repo.find_names_for(book.ref) == ["reading"]

    @pytest.mark.asyncio
    async def test_get_all_tags_is_alphabetical_and_limited(self, unit_env):
        tag_service = await unit_env.get(TagService)
        article = await save_content(unit_env, ContentKind.ARTICLE)
        await tag_service.attach_tags(article.ref, ["zen", "action", "mindfulness"])

        tags = await tag_service.get_all_tags(limit=2)

        assert [t.name.root for t in tags] == ["action", "mindfulness"]
