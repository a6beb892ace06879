import logging
from typing import Optional

import sentry_sdk

from eventsub_websockets.constants import SENTRY_DSN

logger = logging.getLogger(__name__)


def init_sentry(dsn: Optional[str] = SENTRY_DSN) -> bool:
    if not dsn:
        logger.info("SENTRY_DSN is not set, error reporting disabled")
        return False
    sentry_sdk.init(dsn=dsn, traces_sample_rate=1.0)
    logger.info("Sentry initialized")
    return True
