from .event_dispatcher import EventCallback, EventDispatcher, EventNotifier
from .helper import get_error_details, log_error, parse_rfc3339, raw_text, redact
from .json_mapper import (
    DEFAULT_SERIALIZER_OPTIONS,
    SerializerOptions,
    decode,
    encode,
    load,
    normalize_keys,
    validate,
)

__all__ = [
    "EventCallback",
    "EventDispatcher",
    "EventNotifier",
    "get_error_details",
    "log_error",
    "parse_rfc3339",
    "raw_text",
    "redact",
    "DEFAULT_SERIALIZER_OPTIONS",
    "SerializerOptions",
    "decode",
    "encode",
    "load",
    "normalize_keys",
    "validate",
]
