"""Log filters for PII masking and correlation ID defaults."""

import logging
import re


class PIIFilter(logging.Filter):
    """Masks e-mail addresses and phone numbers.

    Pickup and dropoff addresses are free text typed by customers and
    regularly carry contact details.
    """

    EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+")
    PHONE_PATTERN = re.compile(r"(?:\+?1[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")

    def filter(self, record: logging.LogRecord) -> bool:
        if record.args:
            record.msg = record.getMessage()
            record.args = None
        if isinstance(record.msg, str):
            record.msg = self.mask(record.msg)
        return True

    @classmethod
    def mask(cls, text: str) -> str:
        if "@" in text:
            text = cls.EMAIL_PATTERN.sub("[EMAIL]", text)
        if any(c.isdigit() for c in text):
            text = cls.PHONE_PATTERN.sub("[PHONE]", text)
        return text


class DefaultCorrelationFilter(logging.Filter):
    """Adds a placeholder correlation_id when no quote context is active."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "correlation_id"):
            record.correlation_id = "-"
        return True
