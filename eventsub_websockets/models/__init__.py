from .event_args import ChannelModerateArgs, ErrorOccurredArgs
from .twitch_event_subs.channel_moderate import (
    ChannelModerateEvent,
    ChannelModerateEventSub,
    ChannelModerateNotification,
)
from .twitch_event_subs.common import (
    NotificationMetadata,
    Subscription,
    WebsocketMessage,
)

__all__ = [
    "ChannelModerateArgs",
    "ErrorOccurredArgs",
    "ChannelModerateEvent",
    "ChannelModerateEventSub",
    "ChannelModerateNotification",
    "NotificationMetadata",
    "Subscription",
    "WebsocketMessage",
]
