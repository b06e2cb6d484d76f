"""Classifier configuration.

ClassifierConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass

from ariroute.extraction import ID_LESS_PATHS
from ariroute.routing.route import PathPatternEntry
from ariroute.routing.table import DEFAULT_PATTERNS


@dataclass(frozen=True, slots=True)
class ClassifierConfig:
    """Classifier configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ClassifierConfig(
            extra_patterns=(PathPatternEntry("/channels/{channelId}/transfer", CommandType.CHANNEL),),
        )
    """

    # Pattern table (tried in order, first match wins)
    patterns: tuple[PathPatternEntry, ...] = DEFAULT_PATTERNS
    extra_patterns: tuple[PathPatternEntry, ...] = ()  # Appended after ``patterns``

    # URI extraction
    id_less_paths: frozenset[str] = ID_LESS_PATHS

    # Startup overlap check (raises ConfigurationError on ambiguous tables)
    validate_table: bool = True

    # Log every extraction Failure at DEBUG on the "ariroute.classifier" logger
    log_extraction_failures: bool = False

    @property
    def entries(self) -> tuple[PathPatternEntry, ...]:
        """The effective table: ``patterns`` followed by ``extra_patterns``."""
        return self.patterns + self.extra_patterns
