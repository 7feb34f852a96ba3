"""Unit tests for domain value types."""

import pytest

from lens.domain.error import InvalidContentKindError, InvalidVoteTypeError
from lens.domain.value import ContentId, ContentKind, ContentRef, Slug, TagName, VoteType


class TestContentKind:
    """Tests for ContentKind.parse and labels."""

    @pytest.mark.parametrize(
        "token,expected",
        [
            ("quote", ContentKind.QUOTE),
            ("Article", ContentKind.ARTICLE),
            (" book ", ContentKind.BOOK),
            ("VIDEO", ContentKind.VIDEO),
            ("aiprompt", ContentKind.AIPROMPT),
            ("prompt", ContentKind.AIPROMPT),
        ],
    )
    def test_parse_accepts_known_tokens(self, token, expected):
        """Known kinds parse case-insensitively, with the prompt alias."""
        assert ContentKind.parse(token) is expected

    @pytest.mark.parametrize("token", [None, "", "podcast", "quotes"])
    def test_parse_rejects_unknown_tokens(self, token):
        """Anything else is an invalid content type."""
        with pytest.raises(InvalidContentKindError, match="Invalid content type"):
            ContentKind.parse(token)

    def test_labels(self):
        """Labels are used in duplicate messages."""
        assert ContentKind.QUOTE.label == "Quote"
        assert ContentKind.AIPROMPT.label == "AI Prompt"


class TestVoteType:
    """Tests for VoteType.from_token."""

    def test_api_tokens(self):
        assert VoteType.from_token("upvote") is VoteType.UP
        assert VoteType.from_token("downvote") is VoteType.DOWN

    @pytest.mark.parametrize("token", [None, "up", "Upvote", "sideways"])
    def test_rejects_other_tokens(self, token):
        with pytest.raises(InvalidVoteTypeError, match="Invalid vote type"):
            VoteType.from_token(token)


class TestTagName:
    """Tests for tag name normalization."""

    @pytest.mark.parametrize("raw", ["Habits", " habits ", "HABITS"])
    def test_normalizes_to_one_name(self, raw):
        assert TagName(raw).root == "habits"

    def test_rejects_empty(self):
        with pytest.raises(ValueError):
            TagName("   ")

    def test_rejects_long_names(self):
        with pytest.raises(ValueError):
            TagName("x" * 51)


class TestSlug:
    """Tests for category slugs."""

    def test_valid_slug(self):
        assert Slug("self-help").root == "self-help"

    @pytest.mark.parametrize("raw", ["Mindset", "-lead", "a--b", "with space"])
    def test_invalid_slug(self, raw):
        with pytest.raises(ValueError):
            Slug(raw)


def test_content_ref_is_hashable_and_compares_by_value():
    """Refs key the in-memory tag links, so equal refs must hash equal."""
    a = ContentRef(kind=ContentKind.QUOTE, id=ContentId(7))
    b = ContentRef(kind=ContentKind.QUOTE, id=ContentId(7))
    other = ContentRef(kind=ContentKind.BOOK, id=ContentId(7))

    assert a == b
    assert hash(a) == hash(b)
    assert a != other
    assert str(a) == "quote:7"
