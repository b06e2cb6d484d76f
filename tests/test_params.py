"""Tests for ariroute.routing.params — placeholder syntax."""

import re

from ariroute.routing.params import PLACEHOLDER_PATTERN, placeholder_name


class TestPlaceholderPattern:
    def test_excludes_separator(self) -> None:
        assert re.fullmatch(PLACEHOLDER_PATTERN, "abc123")
        assert re.fullmatch(PLACEHOLDER_PATTERN, "a/b") is None

    def test_requires_one_character(self) -> None:
        assert re.fullmatch(PLACEHOLDER_PATTERN, "") is None


class TestPlaceholderName:
    def test_named(self) -> None:
        assert placeholder_name("{channelId}") == "channelId"

    def test_literal(self) -> None:
        assert placeholder_name("channels") is None

    def test_partial(self) -> None:
        assert placeholder_name("pre{id}") is None

    def test_empty_braces(self) -> None:
        assert placeholder_name("{}") is None
