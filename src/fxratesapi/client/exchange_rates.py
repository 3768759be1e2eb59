"""
FX Rates API Client

Fluent request builder for https://api.fxratesapi.com.

    rates = await ExchangeRates().base("usd").symbols(["EUR", "GBP"]).fetch()
    avg = await ExchangeRates().from_("2018-06-01").to("2018-06-21").average(4)

Each configuration call returns a new ExchangeRates; the receiver is never
modified, so a partially configured request can be reused as a template.
"""

import copy
import logging
from decimal import Decimal
from typing import Any

import httpx

from fxratesapi.client.base import ErrorType, ExchangeRatesError
from fxratesapi.client.request import build_url, validate_state
from fxratesapi.computation.averaging import (
    average_rates,
    unwrap_single,
    validate_decimal_places,
)
from fxratesapi.config import Settings, get_settings
from fxratesapi.currencies import normalize_currency
from fxratesapi.models import Endpoint, RatesResponse, RequestState
from fxratesapi.utils.dates import DateInput, parse_date

logger = logging.getLogger(__name__)


class ExchangeRates:
    """
    Builder for a single rates request.

    Date methods pick the endpoint: at() selects historical, from_() and
    to() select timeseries. Without them the latest endpoint is used.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None
    ):
        """
        Args:
            api_key: Service credential. None falls back to FX_RATES_API_KEY
                as loaded by get_settings(); "" sends no key.
            settings: Explicit settings instead of the cached environment ones
            client: Shared AsyncClient. When omitted each fetch opens its own.
        """
        self.settings = settings or get_settings()
        self._client = client
        if api_key is None:
            api_key = self.settings.fx_rates_api_key
        self._state = RequestState(api_key=api_key or None)

    def __repr__(self) -> str:
        return f"ExchangeRates(endpoint={self._state.endpoint.value!r})"

    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def endpoint(self) -> Endpoint:
        return self._state.endpoint

    def _evolve(self, **changes: Any) -> "ExchangeRates":
        clone = copy.copy(self)
        clone._state = self._state.evolve(**changes)
        return clone

    # === Configuration ===

    def at(self, date: DateInput) -> "ExchangeRates":
        """Request rates for a single past date."""
        return self._evolve(date=parse_date(date), endpoint=Endpoint.HISTORICAL)

    def from_(self, date: DateInput) -> "ExchangeRates":
        """Set the first day of a timeseries."""
        return self._evolve(start_date=parse_date(date), endpoint=Endpoint.TIMESERIES)

    def to(self, date: DateInput) -> "ExchangeRates":
        """Set the last day of a timeseries."""
        return self._evolve(end_date=parse_date(date), endpoint=Endpoint.TIMESERIES)

    def base(self, currency: str) -> "ExchangeRates":
        """
        Set the currency the other rates are quoted against.

        Raises:
            TypeError: If currency is not a string
            ExchangeRatesError: If the currency is not supported
        """
        return self._evolve(base=normalize_currency(currency, label="Base currency"))

    def symbols(self, currencies: str | list[str] | tuple[str, ...]) -> "ExchangeRates":
        """
        Restrict the result to one or more currencies, keeping their order.

        Raises:
            TypeError: If any currency is not a string
            ExchangeRatesError: If any currency is not supported
        """
        if isinstance(currencies, (list, tuple)):
            items = list(currencies)
        else:
            items = [currencies]

        if not items:
            raise ExchangeRatesError(
                message="At least one symbol currency is required",
                error_type=ErrorType.INVALID_CURRENCY,
                details={"symbols": []}
            )

        normalized = tuple(
            normalize_currency(currency, label="Symbol currency") for currency in items
        )
        return self._evolve(symbols=normalized)

    def amount(self, value: Any) -> "ExchangeRates":
        return self._evolve(amount=value)

    def places(self, value: Any) -> "ExchangeRates":
        return self._evolve(places=value)

    def format(self, value: Any) -> "ExchangeRates":
        return self._evolve(format=value)

    def accuracy(self, value: Any) -> "ExchangeRates":
        return self._evolve(accuracy=value)

    def resolution(self, value: Any) -> "ExchangeRates":
        return self._evolve(resolution=value)

    # === Terminal Operations ===

    def url(self) -> str:
        """
        Validate the request and return its URL.

        Raises:
            ExchangeRatesError: If the selected endpoint is missing data or
                the dates are out of range
        """
        validate_state(self._state)
        return build_url(self._state, self.settings.fx_rates_api_base_url)

    async def fetch(self) -> dict[str, Any] | Decimal:
        """
        Fetch the rates.

        Returns:
            {code: rate} (or {date: {code: rate}} for timeseries). A single
            entry is unwrapped to its bare value.

        Raises:
            ExchangeRatesError: On validation failure, or TRANSPORT_ERROR for
                any network, status or parsing problem
        """
        rates = await self._fetch_rates()
        return unwrap_single(rates)

    async def average(self, decimal_places: int | None = None) -> dict[str, Any] | Decimal:
        """
        Fetch the rates and average each currency across the returned dates.

        Only historical and timeseries results are reduced; anything else is
        returned exactly as fetch() would return it.

        Args:
            decimal_places: Round each average (half-up) when given

        Raises:
            ExchangeRatesError: INVALID_ARGUMENT for a bad decimal_places, or
                any error fetch() raises
        """
        validate_decimal_places(decimal_places)

        rates = await self._fetch_rates()

        if not self._state.endpoint.is_history:
            return unwrap_single(rates)

        return unwrap_single(average_rates(rates, decimal_places))

    avg = average

    async def _get(self, url: str) -> httpx.Response:
        if self._client is not None:
            return await self._client.get(url)
        async with httpx.AsyncClient(timeout=self.settings.http_timeout) as client:
            return await client.get(url)

    async def _fetch_rates(self) -> dict[str, Any]:
        url = self.url()
        endpoint = self._state.endpoint.value

        logger.info(f"FX Rates API request: /{endpoint}")

        try:
            response = await self._get(url)

            if response.status_code != 200:
                raise ExchangeRatesError(
                    message=f"API returned a bad response (HTTP {response.status_code})",
                    error_type=ErrorType.TRANSPORT_ERROR,
                    details={"status_code": response.status_code}
                )

            body = RatesResponse.model_validate(response.json())

            if not body.success:
                raise ExchangeRatesError(
                    message=f"API error: {body.description or body.error or 'Unknown'}",
                    error_type=ErrorType.TRANSPORT_ERROR,
                    details={"error": body.error}
                )

            if body.rates is None:
                raise ExchangeRatesError(
                    message="Invalid response: missing 'rates' field",
                    error_type=ErrorType.TRANSPORT_ERROR
                )

        except httpx.TimeoutException as e:
            logger.error(f"FX Rates API timeout on /{endpoint}: {e!r}")
            raise ExchangeRatesError(
                message="Couldn't fetch the exchange rate, request timeout",
                error_type=ErrorType.TRANSPORT_ERROR,
                details={"endpoint": endpoint, "timeout_seconds": self.settings.http_timeout}
            ) from e

        except Exception as e:
            logger.error(f"FX Rates API request failed on /{endpoint}: {e!r}")
            details = dict(e.details) if isinstance(e, ExchangeRatesError) else {}
            details["endpoint"] = endpoint
            raise ExchangeRatesError(
                message=f"Couldn't fetch the exchange rate, {e}",
                error_type=ErrorType.TRANSPORT_ERROR,
                details=details
            ) from e

        logger.info(f"FX Rates API /{endpoint} returned {len(body.rates)} entries")
        return body.rates
