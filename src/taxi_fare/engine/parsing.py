"""Form parsing — raw text fields to a ``TripInput``.

Numbers are read the way a browser's ``parseFloat`` reads them: leading
whitespace is skipped and the longest numeric prefix wins, so ``"12 km"``
is 12. Text with no numeric prefix is treated as absent. Parsing never
checks ranges; that is the calculator's job.
"""

from __future__ import annotations

import re

from taxi_fare.config.tariff import DEFAULT_TARIFF, TariffConfig
from taxi_fare.engine.fare import calculate
from taxi_fare.models.results import FareResult
from taxi_fare.models.trip import TripInput

_NUMBER_PREFIX = re.compile(
    r"""
    [+-]?
    (?:
        Infinity
      | (?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?
    )
    """,
    re.VERBOSE,
)


def parse_number(text: str | None) -> float | None:
    """Parse the leading number of ``text``; ``None`` if there is none."""
    if text is None:
        return None
    match = _NUMBER_PREFIX.match(text.lstrip())
    if match is None:
        return None
    token = match.group(0)
    if token.lstrip("+-") == "Infinity":
        return float("-inf") if token.startswith("-") else float("inf")
    return float(token)


def parse_trip_form(
    distance: str | None,
    waiting: str | None = None,
    baggage: str | None = None,
    night_rate: bool = False,
) -> TripInput:
    """Build a ``TripInput`` from the raw form fields."""
    return TripInput(
        distance_km=parse_number(distance),
        waiting_minutes=parse_number(waiting),
        baggage_count=parse_number(baggage),
        night_rate=night_rate,
    )


def estimate_from_form(
    distance: str | None,
    waiting: str | None = None,
    baggage: str | None = None,
    night_rate: bool = False,
    tariff: TariffConfig = DEFAULT_TARIFF,
) -> FareResult:
    """Parse the form fields, then price the trip."""
    trip = parse_trip_form(distance, waiting, baggage, night_rate)
    return calculate(trip, tariff)
