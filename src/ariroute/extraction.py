"""Resource-ID extraction from request paths and JSON bodies.

Both extractors dispatch on the command type's strategy and report
every outcome as a value:

- **URI**: the ID is the path segment at the type's configured index.
- **Body**: the ID is the text at the type's configured JSON pointer.
  Request and response bodies are handled alike.

Neither function raises for any input.
"""

import json
from collections.abc import Set
from decimal import Decimal
from typing import Any, TypeAlias

from ariroute.commands import BodyPointer, CommandType, UriSegment
from ariroute.errors import ExtractionError
from ariroute.results import ExtractionResult, Failure, NotApplicable, Success
from ariroute.routing.params import SEPARATOR

# Creation endpoints that never carry an ID in the path
ID_LESS_PATHS: frozenset[str] = frozenset({"/channels/create"})

_MISSING = object()

Body: TypeAlias = str | bytes | bytearray


def extract_from_uri(
    command_type: CommandType,
    path: str,
    id_less_paths: Set[str] = ID_LESS_PATHS,
) -> ExtractionResult:
    """Return the resource ID embedded in *path* for *command_type*."""
    strategy = command_type.uri_strategy
    if not isinstance(strategy, UriSegment):
        return NotApplicable()

    if path in id_less_paths:
        return Failure(ExtractionError.NO_ID_IN_URI, f"No ID present in URI {path!r}")

    segments = path.split(SEPARATOR)
    # Trailing separators do not produce segments
    while segments and not segments[-1]:
        segments.pop()

    if not 0 <= strategy.index < len(segments):
        return Failure(
            ExtractionError.INDEX_OUT_OF_RANGE,
            f"URI {path!r} has no segment at index {strategy.index}",
        )

    segment = segments[strategy.index]
    if not segment:
        return Failure(
            ExtractionError.NO_ID_IN_URI,
            f"URI {path!r} has an empty segment at index {strategy.index}",
        )
    return Success(segment)


def extract_from_body(
    command_type: CommandType,
    body: Body | None,
) -> ExtractionResult:
    """Return the resource ID found in the JSON *body* for *command_type*."""
    strategy = command_type.body_strategy
    if not isinstance(strategy, BodyPointer):
        return NotApplicable()

    if body is None:
        return Failure(ExtractionError.MALFORMED_BODY, "No body to extract from")
    try:
        # Integers parse as Decimal, which has no digit limit
        document = json.loads(body, parse_int=Decimal, parse_constant=_reject_constant)
    except (ValueError, TypeError, RecursionError) as exc:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        return Failure(ExtractionError.MALFORMED_BODY, f"Body is not valid JSON: {exc}")

    value = resolve_pointer(document, strategy.pointer)
    if is_missing(value):
        return Failure(
            ExtractionError.PATH_NOT_FOUND,
            f"Failed to extract resourceId at path={strategy.pointer}",
        )

    text = _as_text(value)
    if not text.strip():
        return Failure(
            ExtractionError.BLANK_VALUE,
            f"Blank resourceId at path={strategy.pointer}",
        )
    return Success(text)


def resolve_pointer(document: Any, pointer: str) -> Any:
    """Resolve an RFC 6901 JSON pointer.

    Returns the module-private ``_MISSING`` sentinel when any reference
    token does not resolve.  ``""`` refers to the whole document.
    """
    if pointer == "":
        return document
    if not pointer.startswith("/"):
        return _MISSING

    current = document
    for raw in pointer[1:].split("/"):
        token = raw.replace("~1", "/").replace("~0", "~")
        if isinstance(current, dict):
            if token not in current:
                return _MISSING
            current = current[token]
        elif isinstance(current, list):
            # Array indices are ASCII digits without leading zeros
            if not (token.isascii() and token.isdigit()):
                return _MISSING
            if len(token) > 1 and token.startswith("0"):
                return _MISSING
            index = int(token)
            if index >= len(current):
                return _MISSING
            current = current[index]
        else:
            return _MISSING
    return current


def is_missing(value: Any) -> bool:
    """True if *value* is what ``resolve_pointer`` returns for an unresolved pointer."""
    return value is _MISSING


def _as_text(value: Any) -> str:
    """Render a JSON scalar as text; null and containers render blank."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float | Decimal):
        return str(value)
    return ""


def _reject_constant(name: str) -> Any:
    msg = f"{name} is not a JSON value"
    raise ValueError(msg)
