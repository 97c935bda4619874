"""Core utilities for the fare engine."""

from .exceptions import (
    FareEngineError,
    InvalidConfigurationError,
    MissingParameterError,
    NotFoundError,
)
from .money import round_money

__all__ = [
    "FareEngineError",
    "MissingParameterError",
    "NotFoundError",
    "InvalidConfigurationError",
    "round_money",
]
