"""
Tests for routing EventSub WebSocket frames to notification handlers.
"""

import orjson

from eventsub_websockets.constants import CHANNEL_MODERATE_EVENT, ERROR_OCCURRED_EVENT
from eventsub_websockets.controller import MessageRouter
from eventsub_websockets.handlers import ChannelModerateHandler, build_handlers
from eventsub_websockets.services import json_mapper
from tests.conftest import RecordingNotifier, make_frame


def session_frame(message_type: str) -> str:
    return orjson.dumps(
        {
            "metadata": {
                "message_id": "84c1e79a-2a4b-4c13-ba0b-4312293e9308",
                "message_type": message_type,
                "message_timestamp": "2024-01-01T00:00:00.000Z",
            },
            "payload": {},
        }
    ).decode("utf-8")


def test_build_handlers(notifier):
    handlers = build_handlers(notifier)

    assert list(handlers) == ["channel.moderate"]
    assert isinstance(handlers["channel.moderate"], ChannelModerateHandler)
    assert handlers["channel.moderate"].dispatcher is notifier


def test_routes_notification_to_handler(notifier, ban_frame):
    router = MessageRouter(notifier)

    assert router.route(ban_frame) is True
    assert [name for name, _ in notifier.calls] == [CHANNEL_MODERATE_EVENT]


def test_session_messages_are_ignored(notifier):
    router = MessageRouter(notifier)

    for message_type in ("session_welcome", "session_keepalive", "revocation", "mystery"):
        assert router.route(session_frame(message_type)) is False

    assert notifier.calls == []


def test_unknown_subscription_type(notifier, ban_event):
    router = MessageRouter(notifier)

    routed = router.route(make_frame(ban_event, subscription_type="channel.follow"))

    assert routed is False
    errors = notifier.named(ERROR_OCCURRED_EVENT)
    assert len(errors) == 1
    assert isinstance(errors[0].exception, LookupError)
    assert "channel.follow" in errors[0].message


def test_unreadable_frame(notifier):
    router = MessageRouter(notifier, redact_raw_json=True)

    assert router.route("not json") is False
    errors = notifier.named(ERROR_OCCURRED_EVENT)
    assert len(errors) == 1
    assert "<redacted 8 chars>" in errors[0].message


def test_handler_failure_still_counts_as_routed(notifier):
    router = MessageRouter(notifier)

    frame = make_frame({"action": "not-an-action"})

    assert router.route(frame) is True
    assert [name for name, _ in notifier.calls] == [ERROR_OCCURRED_EVENT]


def test_failing_error_subscriber_does_not_escape(ban_event):
    notifier = RecordingNotifier(fail_on={ERROR_OCCURRED_EVENT})
    router = MessageRouter(notifier)
    unknown = make_frame(ban_event, subscription_type="channel.follow")

    assert router.route("not json") is False
    assert router.route(unknown) is False
    assert [name for name, _ in notifier.calls] == [
        ERROR_OCCURRED_EVENT,
        ERROR_OCCURRED_EVENT,
    ]


def test_notification_is_parsed_once(notifier, ban_frame, monkeypatch):
    calls = []
    loads = json_mapper.orjson.loads

    def counting_loads(raw):
        calls.append(raw)
        return loads(raw)

    monkeypatch.setattr(json_mapper.orjson, "loads", counting_loads)

    assert MessageRouter(notifier).route(ban_frame) is True
    assert len(calls) == 1
    assert [name for name, _ in notifier.calls] == [CHANNEL_MODERATE_EVENT]


def test_routes_bytes_frames(notifier, ban_frame):
    router = MessageRouter(notifier)

    assert router.route(ban_frame.encode("utf-8")) is True
    assert router.route(b"not json") is False

    errors = notifier.named(ERROR_OCCURRED_EVENT)
    assert "Raw Json: not json" in errors[0].message
    assert "b'" not in errors[0].message
