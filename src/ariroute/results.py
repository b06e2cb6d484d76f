"""Three-state extraction results.

An extractor either did not apply to the command type (``NotApplicable``),
tried and failed (``Failure``), or found an identifier (``Success``)::

    match extract_from_uri(CommandType.CHANNEL, path):
        case Success(resource_id=rid):
            ...
        case Failure(error=ExtractionError.NO_ID_IN_URI):
            ...
        case NotApplicable():
            ...
"""

from dataclasses import dataclass, field
from typing import TypeAlias

from ariroute.errors import ExtractionError


@dataclass(frozen=True, slots=True)
class NotApplicable:
    """The command type has no extractor for this source. Do not retry it."""


@dataclass(frozen=True, slots=True)
class Failure:
    """Extraction was attempted and failed.

    ``detail`` is a human-readable diagnostic and takes no part in equality,
    so ``Failure(ExtractionError.BLANK_VALUE)`` compares equal to any
    blank-value failure.
    """

    error: ExtractionError
    detail: str = field(default="", compare=False)


@dataclass(frozen=True, slots=True)
class Success:
    """A non-empty resource identifier."""

    resource_id: str

    def __post_init__(self) -> None:
        if not self.resource_id:
            msg = "Success requires a non-empty resource_id"
            raise ValueError(msg)


ExtractionResult: TypeAlias = NotApplicable | Failure | Success
