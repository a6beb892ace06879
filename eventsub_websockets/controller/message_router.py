import logging
from typing import Dict, Optional

from eventsub_websockets.constants import (
    NOTIFICATION_MESSAGE_TYPE,
    REDACT_RAW_JSON,
    SESSION_MESSAGE_TYPES,
)
from eventsub_websockets.handlers import (
    NotificationHandler,
    build_handlers,
    notify_error,
)
from eventsub_websockets.models import WebsocketMessage
from eventsub_websockets.services import (
    DEFAULT_SERIALIZER_OPTIONS,
    EventNotifier,
    SerializerOptions,
    load,
    validate,
)

logger = logging.getLogger(__name__)


class MessageRouter:
    """Hands EventSub WebSocket frames to the handler for their subscription type."""

    def __init__(
        self,
        dispatcher: EventNotifier,
        options: SerializerOptions = DEFAULT_SERIALIZER_OPTIONS,
        handlers: Optional[Dict[str, NotificationHandler]] = None,
        redact_raw_json: bool = REDACT_RAW_JSON,
    ) -> None:
        self.dispatcher = dispatcher
        self.options = options
        self.redact_raw_json = redact_raw_json
        self.handlers = (
            handlers
            if handlers is not None
            else build_handlers(dispatcher, redact_raw_json)
        )

    def route(self, json_string: str | bytes) -> bool:
        """Returns True when a notification handler was invoked."""
        try:
            data = load(json_string, self.options)
            message = validate(data, WebsocketMessage, self.options)
        except Exception as e:
            self._raise_error(
                e, "Error encountered while trying to read message", json_string
            )
            return False

        message_type = message.metadata.message_type
        if message_type != NOTIFICATION_MESSAGE_TYPE:
            if message_type in SESSION_MESSAGE_TYPES:
                logger.debug(
                    f"Ignoring {message_type} message {message.metadata.message_id}"
                )
            else:
                logger.warning(f"Unknown message type: {message_type}")
            return False

        subscription_type = message.metadata.subscription_type or ""
        handler = self.handlers.get(subscription_type)
        if handler is None:
            self._raise_error(
                LookupError(
                    f"No handler registered for subscription type: {subscription_type!r}"
                ),
                "Error encountered while trying to route notification",
                json_string,
            )
            return False

        handler.handle_parsed(data, json_string, self.options)
        return True

    def _raise_error(
        self, e: Exception, context: str, json_string: str | bytes
    ) -> None:
        notify_error(self.dispatcher, e, context, json_string, self.redact_raw_json)
