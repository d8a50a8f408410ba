"""Booking quote — trip length, guest price and the deposit to pre-authorize.

  days        = max(ceil(end − start in days) or 1, minimum trip days)
  base        = daily_rate × days
  service_fee = round(base × 15%)
  taxes       = round((base + service_fee) × 8.6%)
  total       = base + service_fee + taxes

The deposit is held separately and is not part of ``total``.
"""

from __future__ import annotations

import math

from rental_pricing.config.booking import BookingRequest
from rental_pricing.config.host import HostDepositSettings
from rental_pricing.config.vehicle import VehicleDepositConfig
from rental_pricing.engine.deposit import resolve_deposit
from rental_pricing.models.results import BookingQuote

RIDESHARE_MIN_DAYS = 3


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def min_trip_days(request: BookingRequest) -> int:
    """Rideshare vehicles always need 3+ days regardless of the host minimum."""
    return RIDESHARE_MIN_DAYS if request.is_rideshare else request.min_trip_days


def trip_days(request: BookingRequest) -> int:
    """Whole days between the requested dates; a same-day trip counts as 1."""
    return (request.end_date - request.start_date).days or 1


def quote_booking(
    request: BookingRequest,
    vehicle: VehicleDepositConfig,
    host: HostDepositSettings,
) -> BookingQuote:
    """Price a trip and attach the vehicle's effective deposit."""
    requested = trip_days(request)
    minimum = min_trip_days(request)
    days = max(requested, minimum)

    base_price = vehicle.daily_rate * days
    service_fee = _round_half_up(base_price * request.service_fee_pct)
    taxes = _round_half_up((base_price + service_fee) * request.tax_rate)

    return BookingQuote(
        days=days,
        requested_days=requested,
        min_days=minimum,
        daily_rate=vehicle.daily_rate,
        base_price=base_price,
        service_fee=service_fee,
        taxes=taxes,
        total=base_price + service_fee + taxes,
        deposit=resolve_deposit(vehicle, host),
    )
