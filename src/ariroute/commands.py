"""Command type registry.

``CommandType`` is a closed set of variants.  Each variant's behavior
lives in ``COMMAND_SPECS``, a dispatch table of pure-data extraction
strategies, rather than on the enum members themselves.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TypeAlias

# Path segment holding the ID: "/channels/{id}/..." -> ["", "channels", id, ...]
RESOURCE_ID_POSITION = 2
# ID of a resource nested under another: "/channels/{channelId}/play/{playbackId}"
RESOURCE_ID_POSITION_ON_ANOTHER_RESOURCE = 4


@dataclass(frozen=True, slots=True)
class UriSegment:
    """Read the ID from the request path at a fixed segment index."""

    index: int


@dataclass(frozen=True, slots=True)
class BodyPointer:
    """Read the ID from a JSON body at a fixed RFC 6901 pointer."""

    pointer: str


@dataclass(frozen=True, slots=True)
class Unavailable:
    """No extractor for this source."""


UriStrategy: TypeAlias = UriSegment | Unavailable
BodyStrategy: TypeAlias = BodyPointer | Unavailable


@dataclass(frozen=True, slots=True)
class CommandSpec:
    """Creation flag and extraction strategies for one command type."""

    is_resource_creation: bool
    uri_strategy: UriStrategy
    body_strategy: BodyStrategy


class CommandType(Enum):
    """Classification of a call-control request by target resource."""

    BRIDGE_CREATION = "bridge_creation"
    BRIDGE = "bridge"
    CHANNEL_CREATION = "channel_creation"
    CHANNEL = "channel"
    PLAYBACK_CREATION = "playback_creation"
    PLAYBACK = "playback"
    RECORDING_CREATION = "recording_creation"
    RECORDING = "recording"
    SNOOPING_CREATION = "snooping_creation"
    SNOOPING = "snooping"
    UNKNOWN = "unknown"

    @property
    def spec(self) -> CommandSpec:
        return COMMAND_SPECS[self]

    @property
    def is_resource_creation(self) -> bool:
        """True when the response may introduce an ID absent from the request path."""
        return COMMAND_SPECS[self].is_resource_creation

    @property
    def uri_strategy(self) -> UriStrategy:
        return COMMAND_SPECS[self].uri_strategy

    @property
    def body_strategy(self) -> BodyStrategy:
        return COMMAND_SPECS[self].body_strategy


def _spec(creation: bool, uri: UriStrategy, body: BodyStrategy) -> CommandSpec:
    return CommandSpec(is_resource_creation=creation, uri_strategy=uri, body_strategy=body)


_AT_ID = UriSegment(RESOURCE_ID_POSITION)
_AT_NESTED_ID = UriSegment(RESOURCE_ID_POSITION_ON_ANOTHER_RESOURCE)
_UNAVAILABLE = Unavailable()

COMMAND_SPECS: Mapping[CommandType, CommandSpec] = MappingProxyType({
    CommandType.BRIDGE_CREATION: _spec(True, _AT_ID, BodyPointer("/bridgeId")),
    CommandType.BRIDGE: _spec(False, _AT_ID, BodyPointer("/bridgeId")),
    CommandType.CHANNEL_CREATION: _spec(True, _AT_ID, BodyPointer("/channelId")),
    CommandType.CHANNEL: _spec(False, _AT_ID, BodyPointer("/channelId")),
    CommandType.PLAYBACK_CREATION: _spec(True, _AT_NESTED_ID, BodyPointer("/playbackId")),
    CommandType.PLAYBACK: _spec(False, _AT_NESTED_ID, BodyPointer("/playbackId")),
    # Recording names are not embedded predictably in the path.
    CommandType.RECORDING_CREATION: _spec(True, _UNAVAILABLE, BodyPointer("/name")),
    CommandType.RECORDING: _spec(False, _UNAVAILABLE, BodyPointer("/name")),
    CommandType.SNOOPING_CREATION: _spec(True, _AT_NESTED_ID, BodyPointer("/snoopId")),
    CommandType.SNOOPING: _spec(False, _AT_NESTED_ID, BodyPointer("/snoopId")),
    CommandType.UNKNOWN: _spec(False, _UNAVAILABLE, _UNAVAILABLE),
})
