"""Test configuration and helpers."""

from lens.config import Settings
from lens.domain.model import AiPrompt, Article, Book, ContentItem, Quote, Video
from lens.domain.repository import ContentRepository
from lens.domain.value import CategoryId, ContentKind, UserId
from lens.util.jwt import create_token


def make_content(
    kind: ContentKind, user_id: int = 1, category_id: int = 2, **fields
) -> ContentItem:
    """Build an unsaved content item of any kind with valid defaults.

    Keyword fields override the defaults of the kind.
    """
    owner = {"user_id": UserId(user_id), "category_id": CategoryId(category_id)}
    if kind is ContentKind.QUOTE:
        defaults = {"text": "Stay hungry, stay foolish.", "author": "Steve Jobs"}
        return Quote(**owner, **{**defaults, **fields})
    if kind is ContentKind.ARTICLE:
        defaults = {"title": "Deep Work Rules", "url": "https://example.com/deep-work"}
        return Article(**owner, **{**defaults, **fields})
    if kind is ContentKind.BOOK:
        defaults = {
            "title": "Atomic Habits",
            "summary": "Small habits compound into remarkable results.",
            "author": "James Clear",
        }
        return Book(**owner, **{**defaults, **fields})
    if kind is ContentKind.VIDEO:
        defaults = {"title": "How to Learn", "url": "https://example.com/watch?v=1"}
        return Video(**owner, **{**defaults, **fields})
    defaults = {"text": "Act as a coach and review my weekly goals."}
    return AiPrompt(**owner, **{**defaults, **fields})


async def save_content(env, kind: ContentKind, **kwargs) -> ContentItem:
    """Store a content item through the environment's repository."""
    repo = await env.get(ContentRepository)
    return await repo.save(make_content(kind, **kwargs))


def make_token(user_id: int = 1, username: str = "alice") -> str:
    """Issue a bearer token the API accepts for a seeded user."""
    return create_token(user_id, username, f"{username}@example.com", Settings().auth)


def auth_header(user_id: int = 1, username: str = "alice") -> dict[str, str]:
    """Authorization header for a seeded user."""
    return {"Authorization": f"Bearer {make_token(user_id, username)}"}
