"""
Shared fixtures for the EventSub WebSocket tests.
"""

import copy
from typing import Any

import orjson
import pytest

from eventsub_websockets.services import EventDispatcher

METADATA = {
    "message_id": "befa7b53-d79d-478f-86b9-120f112b044e",
    "message_type": "notification",
    "message_timestamp": "2024-01-01T00:00:00.462Z",
    "subscription_type": "channel.moderate",
    "subscription_version": "2",
}

SUBSCRIPTION = {
    "id": "f1c2a387-161a-49f9-a165-0f21d7a4e1c4",
    "status": "enabled",
    "type": "channel.moderate",
    "version": "2",
    "cost": 0,
    "condition": {
        "broadcaster_user_id": "1337",
        "moderator_user_id": "9001",
    },
    "transport": {
        "method": "websocket",
        "session_id": "AQoQexAWVYKSTIu4ec_2VAxyuhAB",
    },
    "created_at": "2024-01-01T00:00:00.000Z",
}

BAN_EVENT = {
    "broadcaster_user_id": "1337",
    "broadcaster_user_login": "glowingvoid",
    "broadcaster_user_name": "GlowingVoid",
    "source_broadcaster_user_id": None,
    "source_broadcaster_user_login": None,
    "source_broadcaster_user_name": None,
    "moderator_user_id": "9001",
    "moderator_user_login": "nightwarden",
    "moderator_user_name": "NightWarden",
    "action": "ban",
    "followers": None,
    "slow": None,
    "vip": None,
    "unvip": None,
    "mod": None,
    "unmod": None,
    "ban": {
        "user_id": "4242",
        "user_login": "spambot",
        "user_name": "SpamBot",
        "reason": "spam links",
    },
    "unban": None,
    "timeout": None,
    "untimeout": None,
    "raid": None,
    "unraid": None,
    "delete": None,
    "automod_terms": None,
    "unban_request": None,
    "warn": None,
    "shared_chat_ban": None,
    "shared_chat_unban": None,
    "shared_chat_timeout": None,
    "shared_chat_untimeout": None,
    "shared_chat_delete": None,
}


def make_frame(event: dict[str, Any], **metadata: Any) -> str:
    return orjson.dumps(
        {
            "metadata": {**METADATA, **metadata},
            "payload": {
                "subscription": copy.deepcopy(SUBSCRIPTION),
                "event": event,
            },
        }
    ).decode("utf-8")


class RecordingNotifier:
    """EventNotifier that keeps every notification it receives."""

    def __init__(self, fail_on: set[str] | None = None) -> None:
        self.calls: list[tuple[str, Any]] = []
        self.fail_on = fail_on or set()

    def register(self, event_name, callback) -> None:
        pass

    def notify(self, event_name: str, args: Any) -> int:
        self.calls.append((event_name, args))
        if event_name in self.fail_on:
            raise RuntimeError(f"{event_name} subscriber exploded")
        return 1

    def named(self, event_name: str) -> list[Any]:
        return [args for name, args in self.calls if name == event_name]


@pytest.fixture
def ban_event() -> dict[str, Any]:
    return copy.deepcopy(BAN_EVENT)


@pytest.fixture
def ban_frame(ban_event) -> str:
    return make_frame(ban_event)


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def dispatcher() -> EventDispatcher:
    return EventDispatcher()
