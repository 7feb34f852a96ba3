"""Unit tests for CreateContentUseCase."""

import pytest

from lens.application.usecase.content import CreateContentRequest, CreateContentUseCase
from lens.domain.error import (
    DuplicateContentError,
    InvalidCategoryError,
    InvalidContentKindError,
    NotFoundError,
    ValidationError,
)
from lens.domain.repository import ContentRepository, TagRepository
from lens.domain.model import AiPrompt, Book, Quote
from lens.domain.value import ContentId, ContentKind, ContentRef
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def _quote_request(**overrides) -> CreateContentRequest:
    fields = {
        "type": "quote",
        "category": "mindset",
        "content": "Stay hungry, stay foolish.",
        "author": "Steve Jobs",
        "tags": ["Motivation"],
        "user_id": 1,
    }
    fields.update(overrides)
    return CreateContentRequest(**fields)


class TestCreateContentUseCase:
    """Tests for CreateContentUseCase."""

    @pytest.mark.asyncio
    async def test_quote_is_stored_with_tags(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateContentUseCase)
        content_repo = await unit_env.get(ContentRepository)
        tag_repo = await unit_env.get(TagRepository)

        # Act
        response = await use_case.execute(_quote_request())

        # Assert
        assert response.id == 1
        assert response.message == "Content created successfully"

        ref = ContentRef(kind=ContentKind.QUOTE, id=ContentId(response.id))
        stored = await content_repo.find_by_ref(ref)
        assert isinstance(stored, Quote)
        assert stored.category_id == 2
        assert stored.user_id == 1
        assert await tag_repo.find_names_for(ref) == ["motivation"]

    @pytest.mark.asyncio
    async def test_repeat_submission_is_rejected(self, unit_env):
        use_case = await unit_env.get(CreateContentUseCase)
        await use_case.execute(_quote_request())

        with pytest.raises(DuplicateContentError, match="Quote already exists"):
            await use_case.execute(_quote_request(tags=[]))

    @pytest.mark.asyncio
    async def test_prompt_alias_creates_aiprompt(self, unit_env):
        use_case = await unit_env.get(CreateContentUseCase)
        content_repo = await unit_env.get(ContentRepository)

        response = await use_case.execute(
            _quote_request(
                type="prompt",
                content="Summarize my journal entry in three bullet points.",
                author=None,
            )
        )

        stored = await content_repo.find_by_ref(
            ContentRef(kind=ContentKind.AIPROMPT, id=ContentId(response.id))
        )
        assert isinstance(stored, AiPrompt)

    @pytest.mark.asyncio
    async def test_book_maps_content_to_summary(self, unit_env):
        use_case = await unit_env.get(CreateContentUseCase)
        content_repo = await unit_env.get(ContentRepository)

        response = await use_case.execute(
            CreateContentRequest(
                type="book",
                category="learning",
                title="Make It Stick",
                content="Retrieval practice beats rereading.",
                author="Peter Brown",
                url="",
                user_id=2,
            )
        )

        stored = await content_repo.find_by_ref(
            ContentRef(kind=ContentKind.BOOK, id=ContentId(response.id))
        )
        assert isinstance(stored, Book)
        assert stored.summary == "Retrieval practice beats rereading."
        assert stored.url is None

    @pytest.mark.asyncio
    async def test_unknown_type(self, unit_env):
        use_case = await unit_env.get(CreateContentUseCase)

        with pytest.raises(InvalidContentKindError):
            await use_case.execute(_quote_request(type="podcast"))

    @pytest.mark.asyncio
    @pytest.mark.parametrize("category", [None, "", "   "])
    async def test_missing_category(self, unit_env, category):
        use_case = await unit_env.get(CreateContentUseCase)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(_quote_request(category=category))

        assert exc_info.value.errors[0]["field"] == "category"

    @pytest.mark.asyncio
    async def test_unknown_category(self, unit_env):
        use_case = await unit_env.get(CreateContentUseCase)

        with pytest.raises(InvalidCategoryError):
            await use_case.execute(_quote_request(category="hobbies"))

    @pytest.mark.asyncio
    async def test_category_slug_is_case_insensitive(self, unit_env):
        use_case = await unit_env.get(CreateContentUseCase)
        content_repo = await unit_env.get(ContentRepository)

        response = await use_case.execute(_quote_request(category=" Productivity "))

        stored = await content_repo.find_by_ref(
            ContentRef(kind=ContentKind.QUOTE, id=ContentId(response.id))
        )
        assert stored.category_id == 3

    @pytest.mark.asyncio
    async def test_unknown_submitter(self, unit_env):
        use_case = await unit_env.get(CreateContentUseCase)
        content_repo = await unit_env.get(ContentRepository)

        with pytest.raises(NotFoundError):
            await use_case.execute(_quote_request(user_id=99))

        ref = ContentRef(kind=ContentKind.QUOTE, id=ContentId(1))
        assert await content_repo.find_by_ref(ref) is None

    @pytest.mark.asyncio
    async def test_field_errors_use_request_names(self, unit_env):
        use_case = await unit_env.get(CreateContentUseCase)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(_quote_request(content="Too short"))

        assert [e["field"] for e in exc_info.value.errors] == ["content"]

    @pytest.mark.asyncio
    async def test_article_requires_valid_url(self, unit_env):
        use_case = await unit_env.get(CreateContentUseCase)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                CreateContentRequest(
                    type="article",
                    category="career",
                    title="Negotiating your salary",
                    url="not a url",
                    user_id=1,
                )
            )

        assert [e["field"] for e in exc_info.value.errors] == ["url"]

    @pytest.mark.asyncio
    async def test_too_many_tags_stores_nothing(self, unit_env):
        use_case = await unit_env.get(CreateContentUseCase)
        content_repo = await unit_env.get(ContentRepository)

        with pytest.raises(ValidationError):
            await use_case.execute(_quote_request(tags=[f"t{i}" for i in range(11)]))

        assert not await content_repo.exists(
            ContentRef(kind=ContentKind.QUOTE, id=ContentId(1))
        )
