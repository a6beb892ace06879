import logging
from pathlib import Path

import click

from eventsub_websockets.constants import (
    CHANNEL_MODERATE_EVENT,
    ERROR_OCCURRED_EVENT,
    REDACT_RAW_JSON,
)
from eventsub_websockets.controller import MessageRouter
from eventsub_websockets.init import init_sentry, setup_logging
from eventsub_websockets.models import ChannelModerateArgs, ErrorOccurredArgs
from eventsub_websockets.services import EventDispatcher, SerializerOptions

logger = logging.getLogger(__name__)


def read_frames(path: Path) -> list[str]:
    """A .jsonl file holds one frame per line, anything else is a single frame."""
    text = path.read_text(encoding="utf-8")
    if path.suffix == ".jsonl":
        return [line for line in text.splitlines() if line.strip()]
    return [text]


def log_channel_moderate(args: ChannelModerateArgs) -> None:
    event = args.notification.payload.event
    logger.info(
        f"{event.moderator_user_login} performed {event.action} in {event.broadcaster_user_login}: {event.detail}"
    )


@click.command()
@click.argument(
    "files", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path)
)
@click.option("--camel-case", is_flag=True, help="Frames use camelCase keys")
@click.option(
    "--case-sensitive", is_flag=True, help="Match keys exactly as written"
)
@click.option("--strict", is_flag=True, help="Validate without type coercion")
@click.option(
    "--redact/--no-redact",
    default=REDACT_RAW_JSON,
    help="Hide raw JSON in error messages",
)
def main(
    files: tuple[Path, ...],
    camel_case: bool,
    case_sensitive: bool,
    strict: bool,
    redact: bool,
) -> None:
    """Replay captured EventSub WebSocket frames through the notification handlers."""
    setup_logging()
    init_sentry()

    errors: list[ErrorOccurredArgs] = []
    dispatcher = EventDispatcher()
    dispatcher.register(CHANNEL_MODERATE_EVENT, log_channel_moderate)
    dispatcher.register(ERROR_OCCURRED_EVENT, errors.append)

    options = SerializerOptions(
        case_insensitive=not case_sensitive,
        naming_policy="camel_case" if camel_case else "snake_case",
        strict=strict,
    )
    router = MessageRouter(dispatcher, options, redact_raw_json=redact)

    handled = 0
    for path in files:
        for frame in read_frames(path):
            if router.route(frame):
                handled += 1

    logger.info(f"Handled {handled} notification(s), {len(errors)} error(s)")
    if errors:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
