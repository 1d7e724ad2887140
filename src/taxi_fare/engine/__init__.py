"""Engine — fare calculation and form parsing."""

from taxi_fare.engine.fare import calculate, is_valid_positive, round_currency, to_fixed
from taxi_fare.engine.parsing import estimate_from_form, parse_number, parse_trip_form

__all__ = [
    "calculate",
    "is_valid_positive",
    "round_currency",
    "to_fixed",
    "estimate_from_form",
    "parse_number",
    "parse_trip_form",
]
