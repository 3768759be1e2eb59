"""
Amount Conversion Helper
"""

from decimal import Decimal
from typing import Any

import httpx

from fxratesapi.client.base import ErrorType, ExchangeRatesError, to_decimal
from fxratesapi.client.exchange_rates import ExchangeRates
from fxratesapi.config import Settings
from fxratesapi.currencies import normalize_currency
from fxratesapi.utils.dates import DateInput


async def convert(
    amount: Any,
    from_currency: str,
    to_currency: str,
    date: DateInput | None = None,
    *,
    api_key: str | None = None,
    settings: Settings | None = None,
    client: httpx.AsyncClient | None = None
) -> Decimal:
    """
    Convert ``amount`` of ``from_currency`` into ``to_currency``.

    Uses the latest rate, or the rate on ``date`` when given. Converting a
    currency into itself makes no request.

    Raises:
        TypeError: If a currency is not a string
        ExchangeRatesError: INVALID_ARGUMENT for a negative or non-numeric
            amount, INVALID_CURRENCY, or any error fetch() raises
    """
    if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)) or amount < 0:
        raise ExchangeRatesError(
            message="The amount has to be a non-negative number",
            error_type=ErrorType.INVALID_ARGUMENT,
            details={"amount": repr(amount)}
        )

    source = normalize_currency(from_currency, label="Base currency")
    target = normalize_currency(to_currency, label="Symbol currency")
    value = to_decimal(amount)

    if source == target:
        return value

    request = ExchangeRates(api_key, settings=settings, client=client).base(source).symbols(target)
    if date is not None:
        request = request.at(date)

    rate = await request.fetch()
    if not isinstance(rate, Decimal):
        raise ExchangeRatesError(
            message=f"Couldn't fetch the exchange rate, no {source}/{target} rate returned",
            error_type=ErrorType.TRANSPORT_ERROR,
            details={"base": source, "symbol": target}
        )

    return rate * value
