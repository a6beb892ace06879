from .constants import CHANNEL_MODERATE, CHANNEL_MODERATE_EVENT, ERROR_OCCURRED_EVENT
from .controller import MessageRouter
from .handlers import ChannelModerateHandler, NotificationHandler, build_handlers
from .models import ChannelModerateArgs, ErrorOccurredArgs
from .services import EventDispatcher, EventNotifier, SerializerOptions

__version__ = "0.1.0"

__all__ = [
    "CHANNEL_MODERATE",
    "CHANNEL_MODERATE_EVENT",
    "ERROR_OCCURRED_EVENT",
    "MessageRouter",
    "ChannelModerateHandler",
    "NotificationHandler",
    "build_handlers",
    "ChannelModerateArgs",
    "ErrorOccurredArgs",
    "EventDispatcher",
    "EventNotifier",
    "SerializerOptions",
]
