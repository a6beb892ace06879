from .logging_init import setup_logging
from .sentry_init import init_sentry

__all__ = ["setup_logging", "init_sentry"]
