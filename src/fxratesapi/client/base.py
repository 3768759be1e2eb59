"""
Client Error Types and Conversion Helpers

Every failure the client reports is an ExchangeRatesError. Passing a
non-string currency is a programming mistake and raises TypeError instead.
"""

from decimal import Decimal
from typing import Any


class ErrorType:
    """Stable tags carried by ExchangeRatesError.error_type."""
    INVALID_CURRENCY = "INVALID_CURRENCY"
    INVALID_DATE = "INVALID_DATE"
    INVALID_RANGE = "INVALID_RANGE"
    OUT_OF_HISTORICAL_COVERAGE = "OUT_OF_HISTORICAL_COVERAGE"
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    TRANSPORT_ERROR = "TRANSPORT_ERROR"


class ExchangeRatesError(Exception):
    """Base exception for FX Rates API client errors."""

    def __init__(
        self,
        message: str,
        error_type: str = "UNKNOWN",
        details: dict[str, Any] | None = None
    ):
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.details = details or {}


def to_decimal(value: Any) -> Decimal:
    """
    Convert a JSON number to an exact Decimal.

    Floats go through str() so 1.1 stays Decimal('1.1').
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValueError(f"Rate value is not numeric: {value!r}")
    return Decimal(str(value))
