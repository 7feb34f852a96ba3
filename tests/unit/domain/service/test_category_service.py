"""Unit tests for CategoryService."""

import pytest

from lens.domain.error import InvalidCategoryError
from lens.domain.repository import CategoryRepository
from lens.domain.service import CategoryService
from tests.di import SEED_CATEGORIES
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestResolveSlug:
    """Tests for resolve_slug."""

    @pytest.mark.asyncio
    async def test_known_slug(self, unit_env):
        category_service = await unit_env.get(CategoryService)

        category = await category_service.resolve_slug("mindset")

        assert category.id == 2
        assert category.name == "Mindset"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("slug", ["MINDSET", " Mindset ", "mindSet"])
    async def test_slug_case_is_ignored(self, unit_env, slug):
        category_service = await unit_env.get(CategoryService)

        category = await category_service.resolve_slug(slug)

        assert category.id == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize("slug", ["hobbies", "Mindset!", "", "  "])
    async def test_unknown_or_malformed_slug(self, unit_env, slug):
        category_service = await unit_env.get(CategoryService)

        with pytest.raises(InvalidCategoryError, match="Invalid category"):
            await category_service.resolve_slug(slug)

    @pytest.mark.asyncio
    async def test_soft_deleted_category_is_invalid(self, unit_env):
        category_service = await unit_env.get(CategoryService)
        category_repo = await unit_env.get(CategoryRepository)
        career = await category_service.resolve_slug("career")
        await category_repo.save(career.model_copy(update={"is_deleted": True}))

        with pytest.raises(InvalidCategoryError):
            await category_service.resolve_slug("career")


class TestListCategories:
    """Tests for list_categories."""

    @pytest.mark.asyncio
    async def test_lists_seeded_categories_in_id_order(self, unit_env):
        category_service = await unit_env.get(CategoryService)

        categories = await category_service.list_categories()

        assert [c.slug.root for c in categories] == [s for _, _, s in SEED_CATEGORIES]
