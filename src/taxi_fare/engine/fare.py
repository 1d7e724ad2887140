"""Fare calculation — base + distance + waiting, night surcharge, baggage.

  distance_cost = (km × 1000 / 79) × 0.046
  waiting_cost  = (min × 60 / 18) × 0.046
  subtotal      = (base + distance_cost + waiting_cost) × night multiplier
  total         = round3(subtotal + baggage × 1.000)

The night multiplier is applied to the combined subtotal, before baggage is
added.
"""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from taxi_fare.config.tariff import DEFAULT_TARIFF, TOTAL_DECIMALS, TariffConfig
from taxi_fare.models.results import FareBreakdown, FareResult, InvalidInput
from taxi_fare.models.trip import TripInput

logger = logging.getLogger(__name__)

# At and above this magnitude amounts are printed in plain float notation
FIXED_POINT_LIMIT = 1e21


def is_valid_positive(value: float | None) -> bool:
    """True for a finite number strictly greater than zero."""
    return value is not None and math.isfinite(value) and value > 0


def to_fixed(value: float, decimals: int = TOTAL_DECIMALS) -> str:
    """Fixed-point text for ``value``, rounded half-up on its exact binary value.

    ``Decimal(float)`` is exact, so ties are decided on the stored value and
    the result never depends on how the float prints. Non-finite values and
    magnitudes of ``FIXED_POINT_LIMIT`` or more are returned unrounded in
    float notation (``1e+30``, ``Infinity``).
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if abs(value) >= FIXED_POINT_LIMIT:
        return repr(value)
    quantum = Decimal(1).scaleb(-decimals)
    with localcontext() as ctx:
        ctx.prec = 50
        return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def round_currency(value: float, decimals: int = TOTAL_DECIMALS) -> float:
    """Round half-up to ``decimals`` places, as ``to_fixed`` does."""
    return float(to_fixed(value, decimals))


def calculate(trip: TripInput, tariff: TariffConfig = DEFAULT_TARIFF) -> FareResult:
    """Price a trip.

    Returns ``InvalidInput`` when the distance is missing, not finite or
    negative. Waiting time and baggage never block a result.
    """
    distance_km = trip.distance_km
    if distance_km is None or not math.isfinite(distance_km) or distance_km < 0:
        logger.debug("Rejected distance %r", distance_km)
        return InvalidInput()

    distance_cost = (distance_km * 1000 / tariff.distance_step_meters) * tariff.distance_rate

    waiting_cost = 0.0
    if is_valid_positive(trip.waiting_minutes):
        waiting_cost = (trip.waiting_minutes * 60 / tariff.waiting_step_seconds) * tariff.waiting_rate

    subtotal = tariff.base_fare + distance_cost + waiting_cost
    if trip.night_rate:
        subtotal = subtotal * tariff.night_multiplier

    baggage_cost = 0.0
    if is_valid_positive(trip.baggage_count):
        baggage_cost = trip.baggage_count * tariff.baggage_unit_cost

    total = round_currency(subtotal + baggage_cost)

    logger.debug(
        "Fare for %.3f km (waiting=%s, baggage=%s, night=%s): %.3f",
        distance_km, trip.waiting_minutes, trip.baggage_count, trip.night_rate, total,
    )
    return FareBreakdown(
        base_fare=tariff.base_fare,
        distance_cost=distance_cost,
        waiting_cost=waiting_cost,
        subtotal=subtotal,
        baggage_cost=baggage_cost,
        total=total,
        night_rate=trip.night_rate,
    )
