"""Startup-time overlap check for the pattern table.

Two templates overlap when some concrete path matches both.  Because a
placeholder always fills exactly one segment, that happens exactly when
the templates have the same number of segments and, position by
position, the literals agree or at least one side is a placeholder.

Overlaps are classified by which side is more general:

- ``PRECEDENCE``: the earlier entry is at least as specific everywhere.
  This is the intended way to carve a literal out of a placeholder
  (``/channels/create`` before ``/channels/{channelId}``).
- ``SHADOWED``: the earlier entry is more general somewhere and never
  more specific, so the later entry can never match.
- ``DUPLICATE``: same shape; the later entry can never match.
- ``CROSSING``: each side is more general somewhere, so which one wins
  depends on table order alone.

Duplicates are always errors. Shadowed and crossing entries are errors
only when the two entries classify to different command types.

Usage::

    issues = find_overlaps(DEFAULT_PATTERNS)
    for issue in issues:
        print(f"{issue.severity.value}: {issue.message}")
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from ariroute.errors import ConfigurationError
from ariroute.routing.matcher import parse_template
from ariroute.routing.route import PathPatternEntry, PathSegment

logger = logging.getLogger("ariroute.routing")


class Severity(Enum):
    """Severity of a table validation issue."""

    ERROR = "error"
    INFO = "info"


class OverlapKind(Enum):
    PRECEDENCE = "precedence"
    SHADOWED = "shadowed"
    DUPLICATE = "duplicate"
    CROSSING = "crossing"


@dataclass(frozen=True, slots=True)
class OverlapIssue:
    """Two table entries that can match the same concrete path."""

    severity: Severity
    kind: OverlapKind
    earlier: PathPatternEntry
    later: PathPatternEntry
    example_path: str

    @property
    def message(self) -> str:
        return (
            f"{self.kind.value}: {self.earlier.template!r} "
            f"({self.earlier.command_type.name}) and {self.later.template!r} "
            f"({self.later.command_type.name}) both match {self.example_path!r}"
        )


def _example_path(a: Sequence[PathSegment], b: Sequence[PathSegment]) -> str | None:
    """Return a concrete path matched by both segment lists, or None."""
    if len(a) != len(b):
        return None
    parts: list[str] = []
    for sa, sb in zip(a, b, strict=True):
        if not sa.is_placeholder and not sb.is_placeholder:
            if sa.value != sb.value:
                return None
            parts.append(sa.value)
        elif not sa.is_placeholder:
            parts.append(sa.value)
        elif not sb.is_placeholder:
            parts.append(sb.value)
        else:
            parts.append("x")
    return "/" + "/".join(parts)


def _kind(earlier: Sequence[PathSegment], later: Sequence[PathSegment]) -> OverlapKind:
    earlier_general = any(
        e.is_placeholder and not lt.is_placeholder for e, lt in zip(earlier, later, strict=True)
    )
    later_general = any(
        lt.is_placeholder and not e.is_placeholder for e, lt in zip(earlier, later, strict=True)
    )
    if earlier_general and later_general:
        return OverlapKind.CROSSING
    if earlier_general:
        return OverlapKind.SHADOWED
    if later_general:
        return OverlapKind.PRECEDENCE
    return OverlapKind.DUPLICATE


def _severity(kind: OverlapKind, earlier: PathPatternEntry, later: PathPatternEntry) -> Severity:
    if kind is OverlapKind.DUPLICATE:
        return Severity.ERROR
    if kind is OverlapKind.PRECEDENCE or earlier.command_type is later.command_type:
        return Severity.INFO
    return Severity.ERROR


def find_overlaps(entries: Sequence[PathPatternEntry]) -> list[OverlapIssue]:
    """Compare every pair of entries, in table order, and report overlaps."""
    parsed = [(entry, parse_template(entry.template)) for entry in entries]
    issues: list[OverlapIssue] = []
    for i, (earlier, earlier_segs) in enumerate(parsed):
        for later, later_segs in parsed[i + 1 :]:
            example = _example_path(earlier_segs, later_segs)
            if example is None:
                continue
            kind = _kind(earlier_segs, later_segs)
            issues.append(
                OverlapIssue(
                    severity=_severity(kind, earlier, later),
                    kind=kind,
                    earlier=earlier,
                    later=later,
                    example_path=example,
                )
            )
    return issues


def validate_table(entries: Sequence[PathPatternEntry]) -> list[OverlapIssue]:
    """Check *entries* and raise ``ConfigurationError`` on any error-level overlap.

    Returns the non-fatal issues so callers can report them.
    """
    issues = find_overlaps(entries)
    errors = [issue for issue in issues if issue.severity is Severity.ERROR]
    for issue in issues:
        if issue.severity is Severity.ERROR:
            logger.error("Pattern table %s", issue.message)
        else:
            logger.debug("Pattern table %s", issue.message)
    if errors:
        detail = "; ".join(issue.message for issue in errors)
        msg = f"Ambiguous path pattern table ({len(errors)} error(s)): {detail}"
        raise ConfigurationError(msg)
    return issues
