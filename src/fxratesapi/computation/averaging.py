"""
Rate Reduction

Averages dated observations per currency and unwraps single-rate results.
All arithmetic is done in Decimal.
"""

from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

from fxratesapi.client.base import ErrorType, ExchangeRatesError


def validate_decimal_places(decimal_places: Any) -> None:
    """
    Raises:
        ExchangeRatesError: If the value is neither None nor a non-negative int
    """
    if decimal_places is None:
        return
    if (
        isinstance(decimal_places, bool)
        or not isinstance(decimal_places, int)
        or decimal_places < 0
    ):
        raise ExchangeRatesError(
            message="The decimal places parameter has to be a non-negative integer",
            error_type=ErrorType.INVALID_ARGUMENT,
            details={"decimal_places": repr(decimal_places)}
        )


def round_rate(value: Decimal, decimal_places: int) -> Decimal:
    """Round half-up to ``decimal_places``, widening precision as needed."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + decimal_places + 2)
        return value.quantize(Decimal(1).scaleb(-decimal_places), rounding=ROUND_HALF_UP)


def unwrap_single(rates: Mapping[str, Any]) -> Any:
    """Return the bare value when ``rates`` holds exactly one entry."""
    if len(rates) == 1:
        return next(iter(rates.values()))
    return rates


def average_rates(
    rates: Mapping[str, Any],
    decimal_places: int | None = None
) -> dict[str, Decimal]:
    """
    Compute the unweighted mean of every currency across observations.

    Args:
        rates: {date: {code: rate}}. A flat {code: rate} mapping counts as a
            single observation.
        decimal_places: Round each mean when given

    Returns:
        {code: mean}, in first-seen order. A code missing from some dates is
        averaged over the dates that contain it.
    """
    validate_decimal_places(decimal_places)

    observations: dict[str, list[Decimal]] = {}
    for key, value in rates.items():
        if isinstance(value, Mapping):
            for code, rate in value.items():
                observations.setdefault(code, []).append(rate)
        else:
            observations.setdefault(key, []).append(value)

    averages: dict[str, Decimal] = {}
    for code, values in observations.items():
        mean = sum(values, Decimal(0)) / len(values)
        averages[code] = mean if decimal_places is None else round_rate(mean, decimal_places)

    return averages
