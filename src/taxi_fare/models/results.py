"""Result types — the contract between calculator, API and dashboard.

A calculation yields either a ``FareBreakdown`` or an ``InvalidInput``.
Neither carries state beyond the single call that produced it.
"""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict


class FareBreakdown(BaseModel):
    """Priced components of one trip."""

    model_config = ConfigDict(frozen=True)

    base_fare: float
    distance_cost: float
    waiting_cost: float

    subtotal: float
    """base + distance + waiting, already multiplied by the night rate when it
    is on. Display this directly as the surcharged amount."""

    baggage_cost: float
    """Never surcharged."""

    total: float
    """round3(subtotal + baggage_cost)."""

    night_rate: bool = False


class InvalidInput(BaseModel):
    """No-result state: the distance could not be priced."""

    model_config = ConfigDict(frozen=True)

    reason: Literal["invalid_distance"] = "invalid_distance"
    message: str = "Distance must be a number greater than or equal to 0"


FareResult = Union[FareBreakdown, InvalidInput]
