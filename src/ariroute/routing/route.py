"""PathSegment and PathPatternEntry frozen dataclasses."""

from dataclasses import dataclass

from ariroute.commands import CommandType


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a path template.

    Literal:      ``/channels``     (is_placeholder=False)
    Placeholder:  ``/{channelId}``  (is_placeholder=True, name="channelId")
    """

    value: str
    is_placeholder: bool = False
    name: str | None = None


@dataclass(frozen=True, slots=True)
class PathPatternEntry:
    """One row of the pattern table: a template and the type it classifies to."""

    template: str
    command_type: CommandType
