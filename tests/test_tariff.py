"""Pydantic validation tests for the tariff model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from taxi_fare.config import DEFAULT_TARIFF, TariffConfig
from taxi_fare.config.tariff import (
    BAGGAGE_UNIT_COST,
    BASE_FARE,
    DISTANCE_RATE,
    DISTANCE_STEP_METERS,
    NIGHT_MULTIPLIER,
    WAITING_RATE,
    WAITING_STEP_SECONDS,
)


class TestDefaults:
    """The default tariff is the official one."""

    def test_matches_constants(self):
        t = DEFAULT_TARIFF
        assert t.base_fare == BASE_FARE == 0.9
        assert t.distance_rate == DISTANCE_RATE == 0.046
        assert t.distance_step_meters == DISTANCE_STEP_METERS == 79
        assert t.waiting_rate == WAITING_RATE == 0.046
        assert t.waiting_step_seconds == WAITING_STEP_SECONDS == 18
        assert t.night_multiplier == NIGHT_MULTIPLIER == 1.5
        assert t.baggage_unit_cost == BAGGAGE_UNIT_COST == 1.0

    def test_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_TARIFF.base_fare = 2.0


class TestTariffValidation:
    """Field constraints."""

    @pytest.mark.parametrize("field", ["base_fare", "distance_rate", "waiting_rate", "baggage_unit_cost"])
    def test_negative_amount_rejected(self, field):
        with pytest.raises(ValidationError):
            TariffConfig(**{field: -0.01})

    @pytest.mark.parametrize("field", ["distance_step_meters", "waiting_step_seconds"])
    def test_zero_step_rejected(self, field):
        with pytest.raises(ValidationError):
            TariffConfig(**{field: 0})

    def test_discount_multiplier_rejected(self):
        with pytest.raises(ValidationError):
            TariffConfig(night_multiplier=0.9)

    def test_free_rides_allowed(self):
        t = TariffConfig(base_fare=0, distance_rate=0, waiting_rate=0, baggage_unit_cost=0)
        assert t.base_fare == 0
