"""Logging configuration for the application."""

import logging
import sys

from crm_templates.core.config import get_settings

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging() -> None:
    """Configure application-wide logging once, at startup.

    Root level is DEBUG when settings.debug is True, otherwise INFO; output
    goes to stdout. SQLAlchemy engine logs stay at WARNING unless
    settings.database_echo is set, so debug mode does not dump every query.
    """
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format=_LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    engine_level = logging.INFO if settings.database_echo else logging.WARNING
    logging.getLogger("sqlalchemy.engine").setLevel(engine_level)
