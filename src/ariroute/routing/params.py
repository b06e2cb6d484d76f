"""Placeholder syntax for path templates.

A template segment like ``{channelId}`` stands for one path segment of
one or more non-separator characters.
"""

import re

SEPARATOR = "/"

# Regex a placeholder compiles to
PLACEHOLDER_PATTERN = r"[^/]+"

# A whole segment that is exactly one named placeholder
PLACEHOLDER_SEGMENT = re.compile(r"^\{([^{}/]+)\}$")


def placeholder_name(segment: str) -> str | None:
    """Return the placeholder name if *segment* is ``{name}``, else None."""
    m = PLACEHOLDER_SEGMENT.match(segment)
    return m.group(1) if m else None
