from typing import Dict

from eventsub_websockets.constants import REDACT_RAW_JSON
from eventsub_websockets.services import EventNotifier

from .base import NotificationHandler, notify_error
from .channel import ChannelModerateHandler

NOTIFICATION_HANDLERS: list[type[NotificationHandler]] = [ChannelModerateHandler]


def build_handlers(
    dispatcher: EventNotifier, redact_raw_json: bool = REDACT_RAW_JSON
) -> Dict[str, NotificationHandler]:
    return {
        handler_cls.subscription_type: handler_cls(dispatcher, redact_raw_json)
        for handler_cls in NOTIFICATION_HANDLERS
    }


__all__ = [
    "NOTIFICATION_HANDLERS",
    "NotificationHandler",
    "ChannelModerateHandler",
    "build_handlers",
    "notify_error",
]
