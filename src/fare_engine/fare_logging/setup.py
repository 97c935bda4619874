"""Root logger configuration driven by LoggingSettings."""

import logging
import sys

from ..settings import LoggingSettings, get_settings
from .context import ContextFilter
from .filters import DefaultCorrelationFilter, PIIFilter
from .formatters import DevFormatter, JSONFormatter

QUIET_LOGGERS = ("shapely",)


def _build_formatter(settings: LoggingSettings) -> logging.Formatter:
    if settings.format == "json":
        return JSONFormatter(settings.environment)
    return DevFormatter()


def setup_logging(settings: LoggingSettings | None = None) -> None:
    """Install a single stdout handler on the root logger.

    Without explicit settings the ``LOG_*`` environment variables apply.
    Calling it again replaces the previous handler.
    """
    settings = settings or get_settings().logging

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_build_formatter(settings))
    # Context fields must be on the record before masking and formatting
    for log_filter in (ContextFilter(), PIIFilter(), DefaultCorrelationFilter()):
        handler.addFilter(log_filter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(settings.level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
