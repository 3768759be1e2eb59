"""
convert() Helper Tests
"""

from decimal import Decimal

import httpx
import pytest
import respx

from fxratesapi import convert
from fxratesapi.client.base import ErrorType, ExchangeRatesError

HOST = "api.fxratesapi.com"


class TestConvert:
    """Tests for convert()."""

    @pytest.mark.asyncio
    async def test_latest_rate(self):
        with respx.mock:
            route = respx.get(host=HOST, path="/latest").mock(
                return_value=httpx.Response(200, json={"rates": {"EUR": 0.9}})
            )

            result = await convert(100, "usd", "eur", api_key="")

        assert result == Decimal("90.0")
        assert route.calls.last.request.url.params["base"] == "USD"
        assert route.calls.last.request.url.params["currencies"] == "EUR"

    @pytest.mark.asyncio
    async def test_historical_rate(self):
        with respx.mock:
            route = respx.get(host=HOST, path="/historical").mock(
                return_value=httpx.Response(200, json={"rates": {"GBP": 0.8}})
            )

            result = await convert(Decimal("12.5"), "EUR", "GBP", "2022-11-12", api_key="")

        assert result == Decimal("10.00")
        assert route.calls.last.request.url.params["date"] == "2022-11-12"

    @pytest.mark.asyncio
    async def test_same_currency_makes_no_request(self):
        with respx.mock(assert_all_called=False) as router:
            route = router.get(host=HOST).mock(return_value=httpx.Response(500))

            result = await convert(7.25, "usd", "USD", api_key="")

        assert result == Decimal("7.25")
        assert not route.called

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", [-1, "10", None, True])
    async def test_invalid_amount(self, amount):
        with pytest.raises(ExchangeRatesError) as exc_info:
            await convert(amount, "USD", "EUR", api_key="")

        assert exc_info.value.error_type == ErrorType.INVALID_ARGUMENT

    @pytest.mark.asyncio
    async def test_invalid_currency(self):
        with pytest.raises(ExchangeRatesError) as exc_info:
            await convert(1, "USD", "ZZZ", api_key="")

        assert exc_info.value.error_type == ErrorType.INVALID_CURRENCY

    @pytest.mark.asyncio
    async def test_missing_rate_in_response(self):
        with respx.mock:
            respx.get(host=HOST, path="/latest").mock(
                return_value=httpx.Response(200, json={"rates": {"EUR": 0.9, "GBP": 0.8}})
            )

            with pytest.raises(ExchangeRatesError) as exc_info:
                await convert(1, "USD", "EUR", api_key="")

        assert exc_info.value.error_type == ErrorType.TRANSPORT_ERROR
