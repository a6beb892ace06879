import logging
import traceback

import pendulum
from pendulum import DateTime

from eventsub_websockets.constants import ErrorDetails

logger = logging.getLogger(__name__)


def parse_rfc3339(date_str: str) -> DateTime:
    """
    Parse an RFC3339 / ISO-8601 timestamp (e.g. '2025-05-31T12:34:56Z')
    and return a timezone-aware DateTime.
    """
    parsed = pendulum.parse(date_str)
    if not isinstance(parsed, DateTime):
        raise ValueError(f"Expected DateTime string, got: {date_str}")
    return parsed


def get_error_details(e: BaseException) -> ErrorDetails:
    return {
        "type": type(e).__name__,
        "message": str(e),
        "args": e.args,
        "traceback": "".join(traceback.format_exception(e)),
    }


def log_error(message: str, error_details: ErrorDetails) -> None:
    logger.error(f"{message}\nTraceback:\n{error_details['traceback']}")


def redact(raw: str) -> str:
    return f"<redacted {len(raw)} chars>"


def raw_text(json_string: str | bytes) -> str:
    if isinstance(json_string, bytes):
        return json_string.decode("utf-8", errors="replace")
    return json_string
