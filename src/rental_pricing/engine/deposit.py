"""Deposit resolution — the single authoritative deposit for a vehicle.

The guest checkout and the host dashboard both call :func:`get_effective_deposit`,
so the amount a guest pre-authorizes is always the amount the host sees.

Resolution order (first match wins):

  individual mode
    1. vehicle.require_deposit is False   → 0
    2. vehicle.deposit_amount is set      → deposit_amount (verbatim)
    3. otherwise                          → rate-based deposit
  global mode
    1. host.require_deposit is False      → 0
    2. host.make_deposits[vehicle.make]   → make override
    3. host.default_amount is nonzero     → host default
    4. otherwise                          → rate-based deposit

No rounding happens here.  Amounts are normalized when they are saved
(see ``engine/normalization.py``).
"""

from __future__ import annotations

from rental_pricing.config.host import HostDepositSettings
from rental_pricing.config.vehicle import VehicleDepositConfig
from rental_pricing.models.results import (
    CarClass,
    DepositResolution,
    FleetDepositSummary,
)

# Each threshold is the first daily rate of the next class up.
LUXURY_RATE_THRESHOLD = 150.0
EXOTIC_RATE_THRESHOLD = 500.0

ECONOMY_DEPOSIT = 250.0
LUXURY_DEPOSIT = 700.0
EXOTIC_DEPOSIT = 1000.0


def car_class(daily_rate: float) -> CarClass:
    """Classify a vehicle by its daily rate."""
    if daily_rate < LUXURY_RATE_THRESHOLD:
        return "economy"
    if daily_rate < EXOTIC_RATE_THRESHOLD:
        return "luxury"
    return "exotic"


def rate_based_deposit(daily_rate: float) -> float:
    """Fallback deposit derived purely from the daily rate."""
    return {
        "economy": ECONOMY_DEPOSIT,
        "luxury": LUXURY_DEPOSIT,
        "exotic": EXOTIC_DEPOSIT,
    }[car_class(daily_rate)]


def resolve_deposit(
    vehicle: VehicleDepositConfig,
    host: HostDepositSettings,
) -> DepositResolution:
    """Resolve the effective deposit and record which rule produced it."""
    if vehicle.vehicle_deposit_mode == "individual":
        if not vehicle.require_deposit:
            amount, source = 0.0, "individual_disabled"
        elif vehicle.deposit_amount is not None:
            amount, source = vehicle.deposit_amount, "individual_custom"
        else:
            amount, source = rate_based_deposit(vehicle.daily_rate), "individual_rate_based"
    else:
        if not host.require_deposit:
            amount, source = 0.0, "host_disabled"
        elif vehicle.make in host.make_deposits:
            amount, source = host.make_deposits[vehicle.make], "make_override"
        elif host.default_amount:
            amount, source = host.default_amount, "host_default"
        else:
            amount, source = rate_based_deposit(vehicle.daily_rate), "rate_based"

    return DepositResolution(
        vehicle_id=vehicle.id,
        mode=vehicle.vehicle_deposit_mode,
        amount=amount,
        source=source,
        car_class=car_class(vehicle.daily_rate),
    )


def get_effective_deposit(vehicle: VehicleDepositConfig, host: HostDepositSettings) -> float:
    """Deposit amount a guest must pre-authorize for ``vehicle``."""
    return resolve_deposit(vehicle, host).amount


def summarize_fleet_deposits(
    vehicles: list[VehicleDepositConfig],
    host: HostDepositSettings,
) -> FleetDepositSummary:
    """Resolve every vehicle of a host, in input order."""
    rows = [resolve_deposit(v, host) for v in vehicles]
    return FleetDepositSummary(
        vehicles=rows,
        global_count=sum(1 for r in rows if r.mode == "global"),
        individual_count=sum(1 for r in rows if r.mode == "individual"),
        no_deposit_count=sum(1 for r in rows if r.amount == 0),
    )
