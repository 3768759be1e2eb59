from fxratesapi.utils.dates import DateInput, format_date, parse_date

__all__ = [
    "DateInput",
    "format_date",
    "parse_date",
]
