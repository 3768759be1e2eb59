"""
Currency Registry Tests
"""

import pytest

from fxratesapi.client.base import ErrorType, ExchangeRatesError
from fxratesapi.currencies import CURRENCIES, is_valid_currency, normalize_currency


class TestRegistry:
    """Tests for the currency registry."""

    def test_codes_are_three_letter_uppercase(self):
        for code in CURRENCIES:
            assert len(code) == 3
            assert code == code.upper()

    @pytest.mark.parametrize("code", ["USD", "EUR", "GBP", "JPY", "CNY", "RUB"])
    def test_common_codes_present(self, code):
        assert is_valid_currency(code)

    def test_lookup_is_case_sensitive(self):
        """Normalization happens in normalize_currency, not in the lookup."""
        assert not is_valid_currency("usd")

    def test_unknown_code(self):
        assert not is_valid_currency("XYZ")


class TestNormalizeCurrency:
    """Tests for normalize_currency."""

    @pytest.mark.parametrize("code", ["usd", "Usd", "USD", "uSd"])
    def test_uppercases_valid_codes(self, code):
        assert normalize_currency(code) == "USD"

    def test_invalid_code_raises_domain_error(self):
        with pytest.raises(ExchangeRatesError) as exc_info:
            normalize_currency("xyz")

        assert exc_info.value.error_type == ErrorType.INVALID_CURRENCY
        assert str(exc_info.value) == "XYZ is not a valid currency"

    @pytest.mark.parametrize("code", [None, 840, ["USD"]])
    def test_non_string_raises_type_error(self, code):
        with pytest.raises(TypeError):
            normalize_currency(code)
