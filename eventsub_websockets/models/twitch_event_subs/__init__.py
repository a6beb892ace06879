from .channel_moderate import (
    AutomodTerms,
    Ban,
    ChannelModerateCondition,
    ChannelModerateEvent,
    ChannelModerateEventSub,
    ChannelModerateNotification,
    ChannelModerateSubscription,
    Delete,
    Followers,
    ModerateDetail,
    Raid,
    Slow,
    Timeout,
    UnbanRequest,
    User,
    Warn,
)
from .common import (
    EventSubModel,
    NotificationMetadata,
    Subscription,
    Transport,
    WebsocketMessage,
)

__all__ = [
    "AutomodTerms",
    "Ban",
    "ChannelModerateCondition",
    "ChannelModerateEvent",
    "ChannelModerateEventSub",
    "ChannelModerateNotification",
    "ChannelModerateSubscription",
    "Delete",
    "Followers",
    "ModerateDetail",
    "Raid",
    "Slow",
    "Timeout",
    "UnbanRequest",
    "User",
    "Warn",
    "EventSubModel",
    "NotificationMetadata",
    "Subscription",
    "Transport",
    "WebsocketMessage",
]
