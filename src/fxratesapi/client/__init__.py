"""
FX Rates API Client Module
"""

from fxratesapi.client.base import ErrorType, ExchangeRatesError
from fxratesapi.client.query import QueryStringBuilder
from fxratesapi.client.request import CLIENT_MARKER, build_url, validate_state
from fxratesapi.client.exchange_rates import ExchangeRates
from fxratesapi.client.convert import convert

__all__ = [
    "CLIENT_MARKER",
    "ErrorType",
    "ExchangeRates",
    "ExchangeRatesError",
    "QueryStringBuilder",
    "build_url",
    "convert",
    "validate_state",
]
