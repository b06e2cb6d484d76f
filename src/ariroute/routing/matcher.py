"""Template parsing and compiled path matchers.

Each template is parsed into segments and compiled into a single
anchored regex.  Placeholders match one path segment; literal text is
escaped, so ``/channels/{channelId}/rtp_statistics`` matches
``/channels/abc/rtp_statistics`` and nothing looser.
"""

import re
from dataclasses import dataclass

from ariroute.errors import ConfigurationError
from ariroute.routing.params import PLACEHOLDER_PATTERN, SEPARATOR, placeholder_name
from ariroute.routing.route import PathPatternEntry, PathSegment


def parse_template(template: str) -> list[PathSegment]:
    """Parse a path template into segments.

    Examples::

        "/channels"              -> [PathSegment("channels")]
        "/channels/{channelId}"  -> [PathSegment("channels"),
                                     PathSegment("{channelId}", is_placeholder=True, name="channelId")]

    Raises ``ConfigurationError`` for templates that do not start with
    ``/``, use ``<param>`` syntax, or put a placeholder inside a larger
    segment.
    """
    if not template.startswith(SEPARATOR):
        msg = f"Path template must start with '/': {template!r}"
        raise ConfigurationError(msg)
    if "<" in template and ">" in template:
        msg = (
            f"Path template {template!r} uses <param> syntax. "
            "Use {param} placeholders instead."
        )
        raise ConfigurationError(msg)

    segments: list[PathSegment] = []
    for part in template.strip(SEPARATOR).split(SEPARATOR):
        if not part:
            if template != SEPARATOR:
                msg = f"Path template {template!r} contains an empty segment."
                raise ConfigurationError(msg)
            continue
        name = placeholder_name(part)
        if name is not None:
            segments.append(PathSegment(value=part, is_placeholder=True, name=name))
        elif "{" in part or "}" in part:
            msg = (
                f"Path template {template!r}: segment {part!r} is not a plain "
                "literal or a single {name} placeholder."
            )
            raise ConfigurationError(msg)
        else:
            segments.append(PathSegment(value=part))
    return segments


@dataclass(frozen=True, slots=True)
class PatternMatcher:
    """A pattern table entry with its template compiled to a regex."""

    entry: PathPatternEntry
    segments: tuple[PathSegment, ...]
    regex: re.Pattern[str]

    def matches(self, path: str) -> bool:
        return self.regex.fullmatch(path) is not None

    def match_params(self, path: str) -> dict[str, str] | None:
        """Return placeholder values captured from *path*, or None on mismatch."""
        m = self.regex.fullmatch(path)
        if m is None:
            return None
        return m.groupdict()


def compile_template(entry: PathPatternEntry) -> PatternMatcher:
    """Compile a table entry into a reusable matcher."""
    segments = tuple(parse_template(entry.template))
    parts: list[str] = []
    seen: set[str] = set()
    for seg in segments:
        if seg.is_placeholder and seg.name is not None:
            # Named groups must be unique and valid identifiers; fall back to
            # an unnamed group otherwise.
            if seg.name.isidentifier() and seg.name not in seen:
                seen.add(seg.name)
                parts.append(f"(?P<{seg.name}>{PLACEHOLDER_PATTERN})")
            else:
                parts.append(f"(?:{PLACEHOLDER_PATTERN})")
        else:
            parts.append(re.escape(seg.value))
    pattern = SEPARATOR + SEPARATOR.join(parts)
    return PatternMatcher(entry=entry, segments=segments, regex=re.compile(pattern))
