"""
fxratesapi - fluent client for the FX Rates API
"""

__version__ = "1.0.0"

from fxratesapi.client import (
    ErrorType,
    ExchangeRates,
    ExchangeRatesError,
    convert,
)
from fxratesapi.models import Endpoint

__all__ = [
    "__version__",
    "Endpoint",
    "ErrorType",
    "ExchangeRates",
    "ExchangeRatesError",
    "convert",
]
