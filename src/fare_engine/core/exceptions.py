"""Exception hierarchy for the fare engine.

All errors are permanent: pricing is deterministic, so retrying a failed
calculation reproduces the same error. The calling layer maps them to
HTTP status codes.
"""

from typing import Any


class FareEngineError(Exception):
    """Base exception for all fare engine errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class MissingParameterError(FareEngineError):
    """A required numeric or location input is absent."""

    @classmethod
    def for_parameters(cls, names: list[str]) -> "MissingParameterError":
        return cls(
            f"Missing required parameters: {', '.join(names)}",
            details={"missing": list(names)},
        )


class NotFoundError(FareEngineError):
    """Referenced vehicle type or area does not exist in the configuration."""

    pass


class InvalidConfigurationError(FareEngineError):
    """Pricing configuration is inconsistent (tier gaps/overlaps, degenerate polygons)."""

    pass
