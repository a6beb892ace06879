import logging
from typing import Any

import sentry_sdk

from eventsub_websockets.constants import CHANNEL_MODERATE, CHANNEL_MODERATE_EVENT
from eventsub_websockets.handlers.base import NotificationHandler
from eventsub_websockets.models import ChannelModerateArgs, ChannelModerateNotification
from eventsub_websockets.services import SerializerOptions, validate

logger = logging.getLogger(__name__)


class ChannelModerateHandler(NotificationHandler):
    """Handler for 'channel.moderate' notifications"""

    subscription_type = CHANNEL_MODERATE

    @sentry_sdk.trace()
    def handle_parsed(
        self, data: Any, json_string: str | bytes, options: SerializerOptions
    ) -> None:
        try:
            notification = validate(data, ChannelModerateNotification, options)
            logger.debug(
                f"{self.subscription_type} {notification.payload.event.action} in {notification.payload.event.broadcaster_user_login}"
            )
            self.dispatcher.notify(
                CHANNEL_MODERATE_EVENT,
                ChannelModerateArgs(notification=notification),
            )
        except Exception as e:
            self.raise_error(e, json_string)
