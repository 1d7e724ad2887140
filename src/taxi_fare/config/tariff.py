"""Official meter tariff.

Amounts are in TND (1 TND = 1000 millimes):
  base fare          900 millimes
  distance            46 millimes per 79 m
  waiting time        46 millimes per 18 s
  night (9PM - 5AM)  +50% on base + distance + waiting
  big package        1.000 TND each, never surcharged
"""

from pydantic import BaseModel, ConfigDict, Field

CURRENCY = "TND"
TOTAL_DECIMALS = 3

BASE_FARE = 0.900
DISTANCE_RATE = 0.046
DISTANCE_STEP_METERS = 79
WAITING_RATE = 0.046
WAITING_STEP_SECONDS = 18
NIGHT_MULTIPLIER = 1.5
BAGGAGE_UNIT_COST = 1.00


class TariffConfig(BaseModel):
    """Tariff inputs for the fare formula."""

    model_config = ConfigDict(frozen=True)

    base_fare: float = Field(default=BASE_FARE, ge=0, description="Flag-fall charged on every trip")
    distance_rate: float = Field(
        default=DISTANCE_RATE, ge=0,
        description="Charge per distance step",
    )
    distance_step_meters: float = Field(
        default=DISTANCE_STEP_METERS, gt=0,
        description="Meters travelled per distance charge",
    )
    waiting_rate: float = Field(default=WAITING_RATE, ge=0, description="Charge per waiting step")
    waiting_step_seconds: float = Field(
        default=WAITING_STEP_SECONDS, gt=0,
        description="Seconds waited per waiting charge",
    )
    night_multiplier: float = Field(
        default=NIGHT_MULTIPLIER, ge=1.0,
        description="Applied to base + distance + waiting when the night rate is on. "
                    "Baggage is excluded.",
    )
    baggage_unit_cost: float = Field(default=BAGGAGE_UNIT_COST, ge=0, description="Per big package")


DEFAULT_TARIFF = TariffConfig()
