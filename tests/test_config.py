"""Tests for ariroute.config — ClassifierConfig frozen dataclass."""

import pytest

from ariroute.commands import CommandType
from ariroute.config import ClassifierConfig
from ariroute.routing.route import PathPatternEntry
from ariroute.routing.table import DEFAULT_PATTERNS


class TestClassifierConfig:
    def test_defaults(self) -> None:
        cfg = ClassifierConfig()

        assert cfg.patterns is DEFAULT_PATTERNS
        assert cfg.extra_patterns == ()
        assert cfg.id_less_paths == frozenset({"/channels/create"})
        assert cfg.validate_table is True
        assert cfg.log_extraction_failures is False

    def test_override(self) -> None:
        cfg = ClassifierConfig(validate_table=False, log_extraction_failures=True)

        assert cfg.validate_table is False
        assert cfg.log_extraction_failures is True

    def test_frozen(self) -> None:
        cfg = ClassifierConfig()

        with pytest.raises(AttributeError):
            cfg.validate_table = False  # type: ignore[misc]

    def test_entries_appends_extras(self) -> None:
        extra = PathPatternEntry("/asterisk/info", CommandType.UNKNOWN)
        cfg = ClassifierConfig(extra_patterns=(extra,))

        assert cfg.entries == (*DEFAULT_PATTERNS, extra)
