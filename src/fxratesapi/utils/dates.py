"""
Date Parsing and Formatting

Accepts date objects, ISO 8601 strings and free-form strings such as
"June 1, 2018". The service always receives YYYY-MM-DD.
"""

from datetime import date, datetime

from dateutil import parser as date_parser

from fxratesapi.client.base import ErrorType, ExchangeRatesError

DateInput = str | date


def parse_date(value: DateInput) -> date:
    """
    Parse a date-like value into a calendar date.

    Args:
        value: date, datetime (time part dropped) or string

    Raises:
        ExchangeRatesError: If the value cannot be parsed
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return date_parser.parse(text).date()
        except (ValueError, OverflowError) as e:
            raise ExchangeRatesError(
                message=f"Invalid date: {value!r}",
                error_type=ErrorType.INVALID_DATE,
                details={"value": value}
            ) from e

    raise ExchangeRatesError(
        message=f"Invalid date: {value!r}",
        error_type=ErrorType.INVALID_DATE,
        details={"value": repr(value)}
    )


def format_date(value: date) -> str:
    """Format a date as YYYY-MM-DD."""
    return value.isoformat()
