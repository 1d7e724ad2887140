"""Configuration — tariff constants and runtime settings."""

from taxi_fare.config.tariff import DEFAULT_TARIFF, TariffConfig
from taxi_fare.config.settings import APISettings, Settings, get_settings

__all__ = [
    "DEFAULT_TARIFF",
    "TariffConfig",
    "APISettings",
    "Settings",
    "get_settings",
]
