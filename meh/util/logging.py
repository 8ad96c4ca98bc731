"""Standard library logging setup.

Our own code logs through logfire. uvicorn, SQLAlchemy and alembic use the
logging module, their records are printed and forwarded to Logfire too.
"""

import logging
import sys

import logfire

from meh.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Chatty libraries, their detail is in the traces already
QUIET_LOGGERS = ("sqlalchemy.engine", "uvicorn.access")


def setup_logging(settings: Settings) -> None:
    """Route library logging to stdout and Logfire."""
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout), logfire.LogfireLoggingHandler()],
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
