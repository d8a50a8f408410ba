"""Configuration models — calculation inputs and service settings."""

from rental_pricing.config.vehicle import VehicleDepositConfig, DepositMode
from rental_pricing.config.host import HostDepositSettings
from rental_pricing.config.tiers import CommissionTier, DEFAULT_TIERS
from rental_pricing.config.revenue import RevenueSelection, RevenuePath, RevenueTier
from rental_pricing.config.booking import BookingRequest
from rental_pricing.config.settings import Settings, get_settings

__all__ = [
    "VehicleDepositConfig",
    "DepositMode",
    "HostDepositSettings",
    "CommissionTier",
    "DEFAULT_TIERS",
    "RevenueSelection",
    "RevenuePath",
    "RevenueTier",
    "BookingRequest",
    "Settings",
    "get_settings",
]
