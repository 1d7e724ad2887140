"""Shared test fixtures — sample trips from the tariff worked examples."""

from __future__ import annotations

import pytest

from taxi_fare.config import TariffConfig
from taxi_fare.models import TripInput


@pytest.fixture
def tariff() -> TariffConfig:
    return TariffConfig()


@pytest.fixture
def flag_fall_trip() -> TripInput:
    return TripInput(distance_km=0)


@pytest.fixture
def city_trip() -> TripInput:
    """7.9 km = exactly 100 distance steps of 79 m."""
    return TripInput(distance_km=7.9)


@pytest.fixture
def full_night_trip() -> TripInput:
    return TripInput(distance_km=7.9, waiting_minutes=3, baggage_count=2, night_rate=True)
