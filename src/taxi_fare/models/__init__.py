"""Fare models — calculator input and output contracts."""

from taxi_fare.models.trip import TripInput
from taxi_fare.models.results import FareBreakdown, FareResult, InvalidInput

__all__ = [
    "TripInput",
    "FareBreakdown",
    "FareResult",
    "InvalidInput",
]
