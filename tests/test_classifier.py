"""Tests for ariroute.classifier — classification facade and ID resolution."""

import logging

import pytest

from ariroute import classifier as classifier_module
from ariroute.classifier import (
    ClassifiedRequest,
    Classifier,
    classify,
    classify_request,
    default_classifier,
    extract_from_body,
    extract_from_uri,
    resolve_resource_id,
)
from ariroute.commands import CommandType
from ariroute.config import ClassifierConfig
from ariroute.errors import ConfigurationError, ExtractionError
from ariroute.results import Failure, NotApplicable, Success
from ariroute.routing.route import PathPatternEntry


class TestClassify:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/channels", CommandType.CHANNEL_CREATION),
            ("/channels/create", CommandType.CHANNEL_CREATION),
            ("/channels/abc123", CommandType.CHANNEL_CREATION),
            ("/channels/externalMedia", CommandType.CHANNEL),
            ("/channels/abc123/mute", CommandType.CHANNEL),
            ("/channels/abc123/rtp_statistics", CommandType.CHANNEL),
            ("/channels/abc123/play", CommandType.PLAYBACK_CREATION),
            ("/channels/abc123/play/pb1", CommandType.PLAYBACK_CREATION),
            ("/channels/abc123/record", CommandType.RECORDING_CREATION),
            ("/channels/abc123/snoop", CommandType.SNOOPING_CREATION),
            ("/channels/abc123/snoop/s1", CommandType.SNOOPING_CREATION),
            ("/bridges", CommandType.BRIDGE_CREATION),
            ("/bridges/b1", CommandType.BRIDGE_CREATION),
            ("/bridges/b1/addChannel", CommandType.BRIDGE),
            ("/bridges/b1/videoSource/c1", CommandType.BRIDGE),
            ("/bridges/b1/play/pb1", CommandType.PLAYBACK_CREATION),
            ("/bridges/b1/record", CommandType.RECORDING_CREATION),
            ("/playbacks/pb1", CommandType.PLAYBACK),
            ("/playbacks/pb1/control", CommandType.PLAYBACK),
            ("/recordings/stored", CommandType.RECORDING),
            ("/recordings/stored/foo/copy", CommandType.RECORDING),
            ("/recordings/live/foo/pause", CommandType.RECORDING),
        ],
    )
    def test_known_paths(self, path: str, expected: CommandType) -> None:
        assert classify(path) is expected

    @pytest.mark.parametrize(
        "path",
        ["/totally/unknown/path", "", "/", "channels", "/channels/a/b/c/d", "/channels/abc/mute/"],
    )
    def test_unknown(self, path: str) -> None:
        assert classify(path) is CommandType.UNKNOWN

    def test_first_match_wins(self) -> None:
        config = ClassifierConfig(
            patterns=(
                PathPatternEntry("/things/special", CommandType.BRIDGE),
                PathPatternEntry("/things/{id}", CommandType.CHANNEL),
            ),
        )
        c = Classifier(config)
        assert c.classify("/things/special") is CommandType.BRIDGE
        assert c.classify("/things/other") is CommandType.CHANNEL

    def test_deterministic(self) -> None:
        c = Classifier()
        results = {c.classify("/channels/abc/dial") for _ in range(50)}
        assert results == {CommandType.CHANNEL}

    def test_match_returns_matcher(self) -> None:
        c = Classifier()
        matcher = c.match("/channels/abc/hold")
        assert matcher is not None
        assert matcher.entry.template == "/channels/{channelId}/hold"
        assert c.match("/nope") is None


class TestClassifierConstruction:
    def test_matchers_compiled_in_order(self) -> None:
        c = Classifier()
        assert tuple(m.entry for m in c.matchers) == c.config.entries

    def test_extra_patterns_appended(self) -> None:
        extra = PathPatternEntry("/asterisk/info", CommandType.CHANNEL)
        c = Classifier(ClassifierConfig(extra_patterns=(extra,)))
        assert c.matchers[-1].entry == extra
        assert c.classify("/asterisk/info") is CommandType.CHANNEL

    def test_ambiguous_table_rejected(self) -> None:
        config = ClassifierConfig(
            patterns=(
                PathPatternEntry("/x/{id}", CommandType.CHANNEL),
                PathPatternEntry("/x/special", CommandType.BRIDGE),
            ),
        )
        with pytest.raises(ConfigurationError):
            Classifier(config)

    def test_validation_can_be_disabled(self) -> None:
        config = ClassifierConfig(
            patterns=(
                PathPatternEntry("/x/{id}", CommandType.CHANNEL),
                PathPatternEntry("/x/special", CommandType.BRIDGE),
            ),
            validate_table=False,
        )
        assert Classifier(config).classify("/x/special") is CommandType.CHANNEL

    def test_bad_template_rejected(self) -> None:
        config = ClassifierConfig(extra_patterns=(PathPatternEntry("/x/<id>", CommandType.CHANNEL),))
        with pytest.raises(ConfigurationError):
            Classifier(config)


class TestResolveResourceId:
    def test_uri_wins(self) -> None:
        result = resolve_resource_id(
            CommandType.CHANNEL, "/channels/abc/mute", '{"channelId": "other"}'
        )
        assert result == Success("abc")

    def test_body_after_uri_failure(self) -> None:
        result = resolve_resource_id(
            CommandType.CHANNEL_CREATION, "/channels/create", '{"channelId": "new-1"}'
        )
        assert result == Success("new-1")

    def test_body_after_not_applicable(self) -> None:
        result = resolve_resource_id(
            CommandType.RECORDING_CREATION, "/channels/c1/record", '{"name": "rec"}'
        )
        assert result == Success("rec")

    def test_uri_failure_surfaced_when_both_fail(self) -> None:
        result = resolve_resource_id(CommandType.CHANNEL_CREATION, "/channels/create", "not-json")
        assert result == Failure(ExtractionError.NO_ID_IN_URI)

    def test_body_failure_when_uri_not_applicable(self) -> None:
        result = resolve_resource_id(CommandType.RECORDING, "/recordings/stored", "{}")
        assert result == Failure(ExtractionError.PATH_NOT_FOUND)

    def test_no_body_returns_uri_result(self) -> None:
        result = resolve_resource_id(CommandType.PLAYBACK_CREATION, "/channels/c1/play")
        assert result == Failure(ExtractionError.INDEX_OUT_OF_RANGE)

    def test_unknown_not_applicable(self) -> None:
        assert resolve_resource_id(CommandType.UNKNOWN, "/x", '{"a": 1}') == NotApplicable()


class TestClassifyRequest:
    def test_combines_type_and_id(self) -> None:
        classified = classify_request("/channels/c1/play", '{"playbackId": "pb-7"}')
        assert classified == ClassifiedRequest(CommandType.PLAYBACK_CREATION, Success("pb-7"))
        assert classified.resource_id == "pb-7"

    def test_resource_id_none_on_failure(self) -> None:
        classified = classify_request("/bridges")
        assert classified.command_type is CommandType.BRIDGE_CREATION
        assert classified.resource_id is None


class TestModuleFunctions:
    def test_default_classifier_shared(self) -> None:
        assert default_classifier() is default_classifier()

    def test_extract_shortcuts(self) -> None:
        assert extract_from_uri(CommandType.CHANNEL, "/channels/abc123/mute") == Success("abc123")
        assert extract_from_body(CommandType.CHANNEL, '{"channelId":"abc123"}') == Success("abc123")

    def test_top_level_exports(self) -> None:
        import ariroute

        assert ariroute.classify is classifier_module.classify
        assert ariroute.CommandType is CommandType
        with pytest.raises(AttributeError):
            _ = ariroute.does_not_exist


class TestFailureLogging:
    def test_failures_logged_when_enabled(self, caplog: pytest.LogCaptureFixture) -> None:
        c = Classifier(ClassifierConfig(log_extraction_failures=True))
        with caplog.at_level(logging.DEBUG, logger="ariroute.classifier"):
            c.extract_from_body(CommandType.CHANNEL, "not-json")
        assert any("malformed_body" in r.getMessage() for r in caplog.records)

    def test_silent_by_default(self, caplog: pytest.LogCaptureFixture) -> None:
        c = Classifier()
        with caplog.at_level(logging.DEBUG, logger="ariroute.classifier"):
            c.extract_from_uri(CommandType.CHANNEL_CREATION, "/channels/create")
        assert not any("No uri resource ID" in r.getMessage() for r in caplog.records)
