"""Trip input — parsed values handed to the calculator."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TripInput(BaseModel):
    """Numeric trip parameters.

    No range checks happen here: ``calculate`` decides what counts as a
    usable distance, and optional fields that are missing, NaN or not
    positive simply contribute nothing.
    """

    model_config = ConfigDict(frozen=True)

    distance_km: float | None = Field(default=None, description="Trip distance in km (required for a fare)")
    waiting_minutes: float | None = Field(default=None, description="Time spent waiting, minutes")
    baggage_count: float | None = Field(default=None, description="Number of big packages")
    night_rate: bool = Field(default=False, description="Night tariff (9PM - 5AM) toggle")
