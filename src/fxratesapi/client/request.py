"""
Request Validation and URL Assembly

The parameter order is part of the wire contract and must not change:
endpoint-specific parameters, then base/currencies/amount/places/format,
then api_key, then the client marker.
"""

from typing import Callable

from fxratesapi.client.base import ErrorType, ExchangeRatesError
from fxratesapi.client.query import QueryStringBuilder
from fxratesapi.models import Endpoint, RequestState
from fxratesapi.utils.dates import format_date

# Earliest year with guaranteed rate data
FIRST_HISTORICAL_YEAR = 1999

CLIENT_MARKER = "python"


# === Validation ===

def _check_coverage(year: int) -> None:
    if year < FIRST_HISTORICAL_YEAR:
        raise ExchangeRatesError(
            message=f"Cannot get historical rates before {FIRST_HISTORICAL_YEAR}",
            error_type=ErrorType.OUT_OF_HISTORICAL_COVERAGE,
            details={"year": year}
        )


def _validate_latest(state: RequestState) -> None:
    pass


def _validate_timeseries(state: RequestState) -> None:
    if state.start_date and state.end_date and state.start_date > state.end_date:
        raise ExchangeRatesError(
            message="The 'start_date' cannot be after the 'end_date'",
            error_type=ErrorType.INVALID_RANGE,
            details={
                "start_date": format_date(state.start_date),
                "end_date": format_date(state.end_date),
            }
        )
    if state.start_date is not None:
        _check_coverage(state.start_date.year)


def _validate_convert(state: RequestState) -> None:
    if state.amount is None:
        raise ExchangeRatesError(
            message="The 'amount' parameter is required for the convert endpoint",
            error_type=ErrorType.MISSING_REQUIRED_FIELD,
            details={"field": "amount"}
        )


def _validate_historical(state: RequestState) -> None:
    if state.date is None:
        raise ExchangeRatesError(
            message="The 'date' parameter is required for the historical endpoint",
            error_type=ErrorType.MISSING_REQUIRED_FIELD,
            details={"field": "date"}
        )
    _check_coverage(state.date.year)


_VALIDATORS: dict[Endpoint, Callable[[RequestState], None]] = {
    Endpoint.LATEST: _validate_latest,
    Endpoint.HISTORICAL: _validate_historical,
    Endpoint.TIMESERIES: _validate_timeseries,
    Endpoint.CONVERT: _validate_convert,
}


def validate_state(state: RequestState) -> None:
    """
    Check the fields the selected endpoint requires.

    Raises:
        ExchangeRatesError: INVALID_RANGE, OUT_OF_HISTORICAL_COVERAGE or
            MISSING_REQUIRED_FIELD
    """
    _VALIDATORS[state.endpoint](state)


# === URL Assembly ===

def _latest_params(state: RequestState, qs: QueryStringBuilder) -> None:
    if state.resolution:
        qs.add_param("resolution", state.resolution)


def _historical_params(state: RequestState, qs: QueryStringBuilder) -> None:
    if state.date:
        qs.add_param("date", format_date(state.date))


def _timeseries_params(state: RequestState, qs: QueryStringBuilder) -> None:
    if state.start_date:
        qs.add_param("start_date", format_date(state.start_date))
    if state.end_date:
        qs.add_param("end_date", format_date(state.end_date))
    if state.accuracy:
        qs.add_param("accuracy", state.accuracy)


def _convert_params(state: RequestState, qs: QueryStringBuilder) -> None:
    if state.amount:
        qs.add_param("amount", state.amount)


_ENDPOINT_PARAMS: dict[Endpoint, Callable[[RequestState, QueryStringBuilder], None]] = {
    Endpoint.LATEST: _latest_params,
    Endpoint.HISTORICAL: _historical_params,
    Endpoint.TIMESERIES: _timeseries_params,
    Endpoint.CONVERT: _convert_params,
}


def build_url(state: RequestState, base_url: str) -> str:
    """Render ``state`` into a request URL. Falsy values are omitted."""
    url = f"{base_url.rstrip('/')}/{state.endpoint.value}"
    qs = QueryStringBuilder()

    _ENDPOINT_PARAMS[state.endpoint](state, qs)

    if state.base:
        qs.add_param("base", state.base)
    if state.symbols:
        qs.add_param("currencies", ",".join(state.symbols), encode=False)
    # On convert, amount is emitted again here after the endpoint block
    if state.amount:
        qs.add_param("amount", state.amount)
    if state.places:
        qs.add_param("places", state.places)
    if state.format:
        qs.add_param("format", state.format)

    if state.api_key:
        qs.add_param("api_key", state.api_key)

    qs.add_param("p", CLIENT_MARKER)

    return url + qs.build()
