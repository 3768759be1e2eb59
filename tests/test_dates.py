"""
Date Utility Tests
"""

from datetime import date, datetime

import pytest

from fxratesapi.client.base import ErrorType, ExchangeRatesError
from fxratesapi.utils.dates import format_date, parse_date


class TestParseDate:
    """Tests for parse_date."""

    def test_date_object_passes_through(self):
        assert parse_date(date(2018, 6, 1)) == date(2018, 6, 1)

    def test_datetime_drops_time(self):
        result = parse_date(datetime(2018, 6, 1, 23, 59))

        assert result == date(2018, 6, 1)
        assert type(result) is date

    @pytest.mark.parametrize("value", [
        "2018-06-01",
        " 2018-06-01 ",
        "June 1, 2018",
        "1 June 2018",
        "2018/06/01",
    ])
    def test_string_forms(self, value):
        assert parse_date(value) == date(2018, 6, 1)

    @pytest.mark.parametrize("value", ["not a date", "", "2018-13-45"])
    def test_unparseable_string_fails(self, value):
        with pytest.raises(ExchangeRatesError) as exc_info:
            parse_date(value)

        assert exc_info.value.error_type == ErrorType.INVALID_DATE

    @pytest.mark.parametrize("value", [None, 20180601, 1.5, ["2018-06-01"]])
    def test_non_date_types_fail(self, value):
        with pytest.raises(ExchangeRatesError) as exc_info:
            parse_date(value)

        assert exc_info.value.error_type == ErrorType.INVALID_DATE


class TestFormatDate:
    """Tests for format_date."""

    def test_iso_format(self):
        assert format_date(date(2018, 6, 1)) == "2018-06-01"

    def test_zero_padding(self):
        assert format_date(date(1999, 1, 4)) == "1999-01-04"
