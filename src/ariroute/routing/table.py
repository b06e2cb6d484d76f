"""The default call-control path pattern table.

Order matters: the first matching entry wins.  Literal templates come
before any placeholder template that could also match them, e.g.
``/channels/create`` before ``/channels/{channelId}``.
"""

from ariroute.commands import CommandType
from ariroute.routing.route import PathPatternEntry


def _entries(command_type: CommandType, *templates: str) -> list[PathPatternEntry]:
    return [PathPatternEntry(template, command_type) for template in templates]


_CHANNEL_ACTIONS = (
    "continue",
    "move",
    "redirect",
    "answer",
    "ring",
    "dtmf",
    "mute",
    "hold",
    "moh",
    "silence",
    "variable",
    "dial",
    "rtp_statistics",
)

_BRIDGE_ACTIONS = ("addChannel", "removeChannel", "videoSource", "moh")

DEFAULT_PATTERNS: tuple[PathPatternEntry, ...] = (
    # -- Channels ---------------------------------------------------------
    *_entries(CommandType.CHANNEL_CREATION, "/channels", "/channels/create"),
    *_entries(CommandType.CHANNEL, "/channels/externalMedia"),
    *_entries(CommandType.CHANNEL_CREATION, "/channels/{channelId}"),
    *_entries(CommandType.CHANNEL, *(f"/channels/{{channelId}}/{a}" for a in _CHANNEL_ACTIONS)),
    *_entries(
        CommandType.PLAYBACK_CREATION,
        "/channels/{channelId}/play",
        "/channels/{channelId}/play/{playbackId}",
    ),
    *_entries(CommandType.RECORDING_CREATION, "/channels/{channelId}/record"),
    *_entries(
        CommandType.SNOOPING_CREATION,
        "/channels/{channelId}/snoop",
        "/channels/{channelId}/snoop/{snoopId}",
    ),
    # -- Bridges ----------------------------------------------------------
    *_entries(CommandType.BRIDGE_CREATION, "/bridges", "/bridges/{bridgeId}"),
    *_entries(CommandType.BRIDGE, *(f"/bridges/{{bridgeId}}/{a}" for a in _BRIDGE_ACTIONS)),
    *_entries(CommandType.BRIDGE, "/bridges/{bridgeId}/videoSource/{channelId}"),
    *_entries(
        CommandType.PLAYBACK_CREATION,
        "/bridges/{bridgeId}/play",
        "/bridges/{bridgeId}/play/{playbackId}",
    ),
    *_entries(CommandType.RECORDING_CREATION, "/bridges/{bridgeId}/record"),
    # -- Playbacks --------------------------------------------------------
    *_entries(CommandType.PLAYBACK, "/playbacks/{playbackId}", "/playbacks/{playbackId}/control"),
    # -- Recordings -------------------------------------------------------
    *_entries(
        CommandType.RECORDING,
        "/recordings/stored",
        "/recordings/stored/{recordingName}",
        "/recordings/stored/{recordingName}/file",
        "/recordings/stored/{recordingName}/copy",
        "/recordings/live/{recordingName}",
        "/recordings/live/{recordingName}/stop",
        "/recordings/live/{recordingName}/pause",
        "/recordings/live/{recordingName}/mute",
    ),
)
