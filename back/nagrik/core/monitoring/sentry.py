# Standard library imports
import logging

# Third-party imports
import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

# Local application imports
from nagrik.settings import settings


def setup_sentry() -> bool:
    """
    Initialise Sentry once, in production only, with logging and FastAPI integrations.

    Warnings become breadcrumbs and errors become events. Returns True when
    Sentry was initialised by this call.
    """
    if settings.ENVIRONMENT != "production" or not settings.SENTRY_DSN:
        return False

    if sentry_sdk.get_client().is_active():
        return False

    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        integrations=[
            LoggingIntegration(level=logging.WARNING, event_level=logging.ERROR),
            FastApiIntegration(),
        ],
        environment=settings.ENVIRONMENT,
        traces_sample_rate=1.0,  # tweak for performance
    )
    return True
