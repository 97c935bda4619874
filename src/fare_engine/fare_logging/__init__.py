"""Logging with structured formatters, PII filtering and per-quote context."""

from .context import ContextFilter, get_log_context, log_context, log_quote_context
from .filters import DefaultCorrelationFilter, PIIFilter
from .formatters import DevFormatter, JSONFormatter
from .setup import setup_logging

__all__ = [
    "setup_logging",
    "log_context",
    "log_quote_context",
    "get_log_context",
    "JSONFormatter",
    "DevFormatter",
    "PIIFilter",
    "DefaultCorrelationFilter",
    "ContextFilter",
]
