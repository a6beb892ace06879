from typing import Literal, Optional, Union

from pendulum import DateTime

from eventsub_websockets.constants import ACTION_DETAIL_FIELDS, ModerateAction
from eventsub_websockets.services.helper import parse_rfc3339

from .common import EventSubModel, NotificationMetadata, Subscription


class ChannelModerateCondition(EventSubModel):
    broadcaster_user_id: str
    moderator_user_id: str


class ChannelModerateSubscription(Subscription):
    condition: ChannelModerateCondition


class Followers(EventSubModel):
    follow_duration_minutes: int = 0


class Slow(EventSubModel):
    wait_time_seconds: int = 0


class User(EventSubModel):
    user_id: Optional[str] = None
    user_login: Optional[str] = None
    user_name: Optional[str] = None


class Ban(User):
    reason: Optional[str] = None


class Timeout(User):
    reason: Optional[str] = None
    expires_at: Optional[str] = None

    def expires_at_datetime(self) -> Optional[DateTime]:
        """Timeout expiry as a timezone-aware DateTime, if Twitch sent one."""
        if not self.expires_at:
            return None
        return parse_rfc3339(self.expires_at)


class Raid(User):
    viewer_count: int = 0


class Delete(User):
    message_id: Optional[str] = None
    message_body: Optional[str] = None


class AutomodTerms(EventSubModel):
    action: Literal["add", "remove"]
    list: Literal["blocked", "permitted"]
    terms: list[str] = []
    from_automod: bool = False


class UnbanRequest(User):
    is_approved: bool = False
    moderator_message: Optional[str] = None


class Warn(User):
    reason: Optional[str] = None
    chat_rules_cited: Optional[list[str]] = None


ModerateDetail = Union[
    Followers, Slow, User, Ban, Timeout, Raid, Delete, AutomodTerms, UnbanRequest, Warn
]


class ChannelModerateEvent(EventSubModel):
    broadcaster_user_id: str = ""
    broadcaster_user_login: str = ""
    broadcaster_user_name: str = ""
    source_broadcaster_user_id: Optional[str] = None
    source_broadcaster_user_login: Optional[str] = None
    source_broadcaster_user_name: Optional[str] = None
    moderator_user_id: str = ""
    moderator_user_login: str = ""
    moderator_user_name: str = ""
    action: ModerateAction
    followers: Optional[Followers] = None
    slow: Optional[Slow] = None
    vip: Optional[User] = None
    unvip: Optional[User] = None
    mod: Optional[User] = None
    unmod: Optional[User] = None
    ban: Optional[Ban] = None
    unban: Optional[User] = None
    timeout: Optional[Timeout] = None
    untimeout: Optional[User] = None
    raid: Optional[Raid] = None
    unraid: Optional[User] = None
    delete: Optional[Delete] = None
    automod_terms: Optional[AutomodTerms] = None
    unban_request: Optional[UnbanRequest] = None
    warn: Optional[Warn] = None
    shared_chat_ban: Optional[Ban] = None
    shared_chat_unban: Optional[User] = None
    shared_chat_timeout: Optional[Timeout] = None
    shared_chat_untimeout: Optional[User] = None
    shared_chat_delete: Optional[Delete] = None

    @property
    def detail(self) -> Optional[ModerateDetail]:
        """
        The metadata field matching ``action``.

        None for parameterless actions (clear, slowoff, ...) and when Twitch
        left the matching field empty. Other populated fields are not checked.
        """
        field_name = ACTION_DETAIL_FIELDS.get(self.action)
        if field_name is None:
            return None
        return getattr(self, field_name)


class ChannelModerateEventSub(EventSubModel):
    subscription: ChannelModerateSubscription
    event: ChannelModerateEvent


class ChannelModerateNotification(EventSubModel):
    metadata: NotificationMetadata
    payload: ChannelModerateEventSub
