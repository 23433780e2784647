"""
Sentry error monitoring for the puzzle engine.

Monitoring is opt-in: nothing is sent unless a DSN is configured, either
passed explicitly or through ``SENTRY_DSN`` (a ``.env`` file is read
first). Events are tagged with the seed and level of the puzzle being
played so a failure can be regenerated locally with ``mathit generate``.

Usage:
    from mathit.sentry_config import init_sentry, tag_level

    if init_sentry():
        tag_level(session.context)
"""

import os

import sentry_sdk
from dotenv import load_dotenv

from . import __version__


def init_sentry(dsn: str = None, environment: str = None) -> bool:
    """Initialize Sentry error monitoring.

    Args:
        dsn: Sentry DSN. Falls back to the SENTRY_DSN environment variable.
        environment: Deployment environment. Falls back to ENVIRONMENT.

    Returns:
        True if Sentry was initialized, False if no DSN is configured.
    """
    load_dotenv()

    dsn = dsn or os.getenv("SENTRY_DSN")
    if not dsn:
        return False

    sentry_sdk.init(
        dsn=dsn,
        environment=environment or os.getenv("ENVIRONMENT", "development"),
        release=f"mathit@{__version__}",
        send_default_pii=False,
        traces_sample_rate=0.1,
        attach_stacktrace=True,
    )
    return True


def tag_level(context):
    """Attach the seed and level index of ``context`` to later events."""
    sentry_sdk.set_tag("mathit.seed", str(context.seed))
    sentry_sdk.set_tag("mathit.level", str(context.level_index))


def capture_exception(exception: Exception = None):
    """Capture an exception and send to Sentry.

    A no-op when Sentry was never initialized.
    """
    sentry_sdk.capture_exception(exception)


__all__ = ['init_sentry', 'tag_level', 'capture_exception']
