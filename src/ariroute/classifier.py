"""Classifier facade and two-phase resource-ID resolution.

The classifier compiles the pattern table once and is then read-only,
so a single instance can be shared by any number of threads or tasks.

Usage::

    classifier = Classifier()
    command_type = classifier.classify("/channels/abc123/mute")
    result = classifier.resolve_resource_id(command_type, "/channels/abc123/mute")

Module-level ``classify``, ``extract_from_uri``, ``extract_from_body``,
``resolve_resource_id`` and ``classify_request`` use a shared default
classifier built on first use.
"""

import logging
import threading
from dataclasses import dataclass

from ariroute import extraction
from ariroute.commands import CommandType
from ariroute.config import ClassifierConfig
from ariroute.extraction import Body
from ariroute.results import ExtractionResult, Failure, Success
from ariroute.routing.matcher import PatternMatcher, compile_template
from ariroute.routing.overlap import validate_table

logger = logging.getLogger("ariroute.classifier")


@dataclass(frozen=True, slots=True)
class ClassifiedRequest:
    """A request's command type together with its resolved resource ID."""

    command_type: CommandType
    result: ExtractionResult

    @property
    def resource_id(self) -> str | None:
        if isinstance(self.result, Success):
            return self.result.resource_id
        return None


class Classifier:
    """Classifies request paths and extracts correlation IDs.

    Building a classifier parses and compiles every template and, unless
    ``config.validate_table`` is false, checks the table for ambiguous
    overlaps.  Both steps raise ``ConfigurationError`` on a bad table.
    """

    __slots__ = ("_config", "_matchers")

    def __init__(self, config: ClassifierConfig | None = None) -> None:
        self._config = config or ClassifierConfig()
        entries = self._config.entries
        self._matchers: tuple[PatternMatcher, ...] = tuple(
            compile_template(entry) for entry in entries
        )
        if self._config.validate_table:
            validate_table(entries)
        logger.debug("Compiled %d path patterns", len(self._matchers))

    @property
    def config(self) -> ClassifierConfig:
        return self._config

    @property
    def matchers(self) -> tuple[PatternMatcher, ...]:
        """Compiled matchers in table order."""
        return self._matchers

    def match(self, path: str) -> PatternMatcher | None:
        """Return the first matcher accepting *path*, or None."""
        for matcher in self._matchers:
            if matcher.matches(path):
                return matcher
        return None

    def classify(self, path: str) -> CommandType:
        """Return the command type of *path*; UNKNOWN when nothing matches."""
        matcher = self.match(path)
        if matcher is None:
            return CommandType.UNKNOWN
        return matcher.entry.command_type

    def extract_from_uri(self, command_type: CommandType, path: str) -> ExtractionResult:
        result = extraction.extract_from_uri(command_type, path, self._config.id_less_paths)
        self._log_failure(command_type, "uri", result)
        return result

    def extract_from_body(self, command_type: CommandType, body: Body | None) -> ExtractionResult:
        result = extraction.extract_from_body(command_type, body)
        self._log_failure(command_type, "body", result)
        return result

    def resolve_resource_id(
        self,
        command_type: CommandType,
        path: str,
        body: Body | None = None,
    ) -> ExtractionResult:
        """Resolve the correlation ID, trying the path first and the body second.

        *body* is whichever payload is available: the request body when
        sending, or the response body once it arrives.  When both sources
        fail, the URI failure is returned.
        """
        uri_result = self.extract_from_uri(command_type, path)
        if isinstance(uri_result, Success) or body is None:
            return uri_result

        body_result = self.extract_from_body(command_type, body)
        if isinstance(body_result, Success):
            return body_result
        if isinstance(uri_result, Failure):
            return uri_result
        return body_result

    def classify_request(self, path: str, body: Body | None = None) -> ClassifiedRequest:
        """Classify *path* and resolve its resource ID in one step."""
        command_type = self.classify(path)
        return ClassifiedRequest(
            command_type=command_type,
            result=self.resolve_resource_id(command_type, path, body),
        )

    def _log_failure(self, command_type: CommandType, source: str, result: ExtractionResult) -> None:
        if self._config.log_extraction_failures and isinstance(result, Failure):
            logger.debug(
                "No %s resource ID for %s: %s (%s)",
                source,
                command_type.name,
                result.error.value,
                result.detail,
            )


# -- Default classifier -----------------------------------------------------

_default: Classifier | None = None
_default_lock = threading.Lock()


def default_classifier() -> Classifier:
    """Return the shared classifier built from the default configuration."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = Classifier()
    return _default


def classify(path: str) -> CommandType:
    return default_classifier().classify(path)


def extract_from_uri(command_type: CommandType, path: str) -> ExtractionResult:
    return default_classifier().extract_from_uri(command_type, path)


def extract_from_body(command_type: CommandType, body: Body | None) -> ExtractionResult:
    return default_classifier().extract_from_body(command_type, body)


def resolve_resource_id(
    command_type: CommandType,
    path: str,
    body: Body | None = None,
) -> ExtractionResult:
    return default_classifier().resolve_resource_id(command_type, path, body)


def classify_request(path: str, body: Body | None = None) -> ClassifiedRequest:
    return default_classifier().classify_request(path, body)
