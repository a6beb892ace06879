import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

import sentry_sdk

from eventsub_websockets.constants import ERROR_OCCURRED_EVENT, REDACT_RAW_JSON
from eventsub_websockets.models import ErrorOccurredArgs
from eventsub_websockets.services import (
    DEFAULT_SERIALIZER_OPTIONS,
    EventNotifier,
    SerializerOptions,
    get_error_details,
    load,
    log_error,
    raw_text,
    redact,
)

logger = logging.getLogger(__name__)


def notify_error(
    dispatcher: EventNotifier,
    e: Exception,
    context: str,
    json_string: str | bytes,
    redact_raw_json: bool = REDACT_RAW_JSON,
) -> None:
    """Log and report ``e``, then raise ErrorOccurred without letting anything escape."""
    error_details = get_error_details(e)
    raw = raw_text(json_string)
    if redact_raw_json:
        raw = redact(raw)
    message = f"{context}! Type: {error_details['type']}, Message: {error_details['message']}, Raw Json: {raw}"
    log_error(message, error_details)
    sentry_sdk.capture_exception(e)
    try:
        dispatcher.notify(
            ERROR_OCCURRED_EVENT, ErrorOccurredArgs(exception=e, message=message)
        )
    except Exception as notify_error:
        logger.error(f"Failed to notify {ERROR_OCCURRED_EVENT}: {notify_error}")
        sentry_sdk.capture_exception(notify_error)


class NotificationHandler(ABC):
    """Turns one EventSub notification type into client events."""

    subscription_type: str

    def __init__(
        self, dispatcher: EventNotifier, redact_raw_json: bool = REDACT_RAW_JSON
    ) -> None:
        self.dispatcher = dispatcher
        self.redact_raw_json = redact_raw_json

    def handle(
        self, json_string: str | bytes, options: Optional[SerializerOptions] = None
    ) -> None:
        options = options or DEFAULT_SERIALIZER_OPTIONS
        try:
            data = load(json_string, options)
        except Exception as e:
            self.raise_error(e, json_string)
            return
        self.handle_parsed(data, json_string, options)

    @abstractmethod
    def handle_parsed(
        self, data: Any, json_string: str | bytes, options: SerializerOptions
    ) -> None:
        """Handle a frame the router has already loaded and normalized."""

    def raise_error(self, e: Exception, json_string: str | bytes) -> None:
        notify_error(
            self.dispatcher,
            e,
            f"Error encountered while trying to handle {self.subscription_type} notification",
            json_string,
            self.redact_raw_json,
        )
