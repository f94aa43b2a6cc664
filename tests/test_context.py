"""Tests for context token handling."""

import pytest
from hypothesis import given

from i18nkeys.runtime.context import append_context, filter_keys_by_context, strip_context
from tests.strategies import context_tokens, key_segments


class TestStripContext:
    """Test strict context stripping."""

    @pytest.mark.parametrize(
        ("key", "context", "expected"),
        [
            ("friend_male", "male", "friend"),
            ("friend_male_one", "male", "friend_one"),
            ("a.b_female", "female", "a.b"),
        ],
    )
    def test_strips_token(self, key: str, context: str, expected: str) -> None:
        """Separator and token are removed; the rest is concatenated."""
        assert strip_context(key, context, "_") == expected

    def test_missing_token_fails(self) -> None:
        """A key without the token is rejected, not passed through."""
        assert strip_context("friend", "male", "_") is None
        assert strip_context("friendmale", "male", "_") is None

    def test_no_context_passes_through(self) -> None:
        """Without a context the key is unchanged."""
        assert strip_context("friend_male", None, "_") == "friend_male"

    def test_custom_separator(self) -> None:
        """The configured separator is part of the token."""
        assert strip_context("friend|male", "male", "|") == "friend"
        assert strip_context("friend_male", "male", "|") is None

    @given(key_segments, context_tokens)
    def test_append_then_strip_is_identity(self, key: str, context: str) -> None:
        """Stripping an appended context returns the original key."""
        assert strip_context(append_context(key, context, "_"), context, "_") == key


class TestAppendContext:
    """Test context appending."""

    def test_appends(self) -> None:
        """Token appended after the separator."""
        assert append_context("friend", "female", "_") == "friend_female"

    def test_none_is_identity(self) -> None:
        """No context leaves the key unchanged."""
        assert append_context("friend", None, "_") == "friend"


class TestFilterKeysByContext:
    """Test deriving the keys available for a context."""

    def test_filters_and_strips(self) -> None:
        """Keys without the token are dropped; the rest are stripped."""
        keys = ["friend", "friend_male", "friend_male_one", "friend_female", "other"]
        assert filter_keys_by_context(keys, "male", "_") == {"friend", "friend_one"}

    def test_no_context(self) -> None:
        """Without a context every key is returned."""
        assert filter_keys_by_context(["a", "b"], None, "_") == {"a", "b"}
