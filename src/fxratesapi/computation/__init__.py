"""
Rate Reduction Module
"""

from fxratesapi.computation.averaging import (
    average_rates,
    round_rate,
    unwrap_single,
    validate_decimal_places,
)

__all__ = [
    "average_rates",
    "round_rate",
    "unwrap_single",
    "validate_decimal_places",
]
