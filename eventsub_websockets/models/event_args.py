from pydantic import BaseModel, ConfigDict

from .twitch_event_subs.channel_moderate import ChannelModerateNotification


class ChannelModerateArgs(BaseModel):
    model_config = ConfigDict(frozen=True)

    notification: ChannelModerateNotification


class ErrorOccurredArgs(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    exception: Exception
    message: str
