"""
FX Rates API Data Models

RequestState is frozen: every configuration call produces a new state via
model_copy(), so one configured request can be branched into several.
"""

from datetime import date as date_type
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, field_validator

from fxratesapi.client.base import to_decimal


# === Enums ===

class Endpoint(str, Enum):
    """Request shapes supported by the service."""
    LATEST = "latest"
    HISTORICAL = "historical"
    TIMESERIES = "timeseries"
    CONVERT = "convert"

    @property
    def is_history(self) -> bool:
        """True for endpoints that return dated observations."""
        return self in (Endpoint.HISTORICAL, Endpoint.TIMESERIES)


# === Request State ===

class RequestState(BaseModel):
    """
    Everything needed to build one request URL.

    ``endpoint`` is derived: at() selects HISTORICAL, from_()/to() select
    TIMESERIES. Currency codes are already normalized when stored.
    """
    endpoint: Endpoint = Endpoint.LATEST
    api_key: str | None = None

    base: str | None = None
    symbols: tuple[str, ...] | None = None

    # Pass-through values, not validated when set
    amount: Any = None
    places: Any = None
    format: Any = None
    accuracy: Any = None
    resolution: Any = None

    date: date_type | None = None
    start_date: date_type | None = None
    end_date: date_type | None = None

    model_config = {"frozen": True}

    def evolve(self, **changes: Any) -> "RequestState":
        """Return a copy with ``changes`` applied."""
        return self.model_copy(update=changes)


# === Service Response ===

class RatesResponse(BaseModel):
    """
    Body returned by the service.

    ``rates`` is flat ({"EUR": 0.91}) for latest/historical/convert and
    keyed by date ({"2018-06-01": {"EUR": 0.85}}) for timeseries.
    """
    success: bool = True
    base: str | None = None
    date: str | None = None
    rates: dict[str, Decimal | dict[str, Decimal]] | None = None
    error: str | None = None
    description: str | None = None

    @field_validator("rates", mode="before")
    @classmethod
    def convert_to_decimal(cls, v: Any) -> Any:
        """Convert rate values to exact Decimal, one level of nesting deep."""
        if not isinstance(v, dict):
            return v
        converted: dict[str, Any] = {}
        for key, value in v.items():
            if isinstance(value, dict):
                converted[key] = {code: to_decimal(rate) for code, rate in value.items()}
            else:
                converted[key] = to_decimal(value)
        return converted
