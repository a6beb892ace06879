import os
from typing import Literal, TypedDict

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
SENTRY_DSN = os.getenv("SENTRY_DSN")
REDACT_RAW_JSON = os.getenv("EVENTSUB_REDACT_RAW_JSON", "false").lower() in {
    "1",
    "true",
    "yes",
}

CHANNEL_MODERATE = "channel.moderate"

CHANNEL_MODERATE_EVENT = "ChannelModerate"
ERROR_OCCURRED_EVENT = "ErrorOccurred"

NOTIFICATION_MESSAGE_TYPE = "notification"
SESSION_MESSAGE_TYPES = {
    "session_welcome",
    "session_keepalive",
    "session_reconnect",
    "revocation",
}

ModerateAction = Literal[
    "ban",
    "timeout",
    "unban",
    "untimeout",
    "clear",
    "emoteonly",
    "emoteonlyoff",
    "followers",
    "followersoff",
    "uniquechat",
    "uniquechatoff",
    "slow",
    "slowoff",
    "subscribers",
    "subscribersoff",
    "unraid",
    "delete",
    "unvip",
    "vip",
    "raid",
    "add_blocked_term",
    "add_permitted_term",
    "remove_blocked_term",
    "remove_permitted_term",
    "mod",
    "unmod",
    "approve_unban_request",
    "deny_unban_request",
    "warn",
    "shared_chat_ban",
    "shared_chat_timeout",
    "shared_chat_unban",
    "shared_chat_untimeout",
    "shared_chat_delete",
]

# Event field carrying the metadata for each action.
# Parameterless actions (clear, slowoff, ...) have no entry and no field.
ACTION_DETAIL_FIELDS: dict[str, str] = {
    "ban": "ban",
    "timeout": "timeout",
    "unban": "unban",
    "untimeout": "untimeout",
    "followers": "followers",
    "slow": "slow",
    "vip": "vip",
    "unvip": "unvip",
    "mod": "mod",
    "unmod": "unmod",
    "raid": "raid",
    "unraid": "unraid",
    "delete": "delete",
    "add_blocked_term": "automod_terms",
    "add_permitted_term": "automod_terms",
    "remove_blocked_term": "automod_terms",
    "remove_permitted_term": "automod_terms",
    "approve_unban_request": "unban_request",
    "deny_unban_request": "unban_request",
    "warn": "warn",
    "shared_chat_ban": "shared_chat_ban",
    "shared_chat_timeout": "shared_chat_timeout",
    "shared_chat_unban": "shared_chat_unban",
    "shared_chat_untimeout": "shared_chat_untimeout",
    "shared_chat_delete": "shared_chat_delete",
}


class ErrorDetails(TypedDict):
    type: str
    message: str
    args: tuple
    traceback: str
