"""Save-time deposit normalization and bulk deposit-mode changes.

Deposit amounts are only ever rounded when a host saves them:

  normalized = max(25, round_half_up(amount / 25) × 25)

so every persisted amount is a multiple of 25 and at least 25.  Reads
(``engine/deposit.py``) never round.

A vehicle saved with ``require_deposit=True`` but no usable amount is
silently switched to "no deposit" instead of being rejected.  That keeps
old clients working but can turn protection off without the host noticing,
so it is logged as a warning every time it happens.
"""

from __future__ import annotations

import logging
import math

from rental_pricing.config.host import HostDepositSettings
from rental_pricing.config.vehicle import DepositMode, VehicleDepositConfig
from rental_pricing.engine.deposit import get_effective_deposit

logger = logging.getLogger(__name__)

DEPOSIT_STEP = 25
MIN_DEPOSIT = 25


def normalize_deposit_amount(amount: float) -> float:
    """Round to the nearest multiple of 25 (halves round up), floor at 25."""
    steps = math.floor(amount / DEPOSIT_STEP + 0.5)
    return float(max(MIN_DEPOSIT, steps * DEPOSIT_STEP))


def normalize_host_settings(settings: HostDepositSettings) -> HostDepositSettings:
    """Normalize the default amount and every make override before saving.

    A ``default_amount`` of 0 means "not set" and is kept as 0.  Blank make
    names are dropped; surrounding whitespace is stripped.
    """
    make_deposits: dict[str, float] = {}
    for make, amount in settings.make_deposits.items():
        name = make.strip()
        if not name:
            continue
        make_deposits[name] = normalize_deposit_amount(amount)

    default_amount = (
        normalize_deposit_amount(settings.default_amount)
        if settings.default_amount > 0 else 0.0
    )

    return settings.model_copy(update={
        "default_amount": default_amount,
        "make_deposits": make_deposits,
    })


def normalize_vehicle_deposit(vehicle: VehicleDepositConfig) -> VehicleDepositConfig:
    """Normalize an individual vehicle's deposit before saving.

    ``require_deposit=True`` with a missing or non-positive amount is saved as
    ``require_deposit=False, deposit_amount=None``.  Global-mode vehicles are
    returned unchanged.
    """
    if vehicle.vehicle_deposit_mode != "individual":
        return vehicle

    amount = vehicle.deposit_amount
    if amount is not None and amount > 0:
        amount = normalize_deposit_amount(amount)
    else:
        amount = None

    if vehicle.require_deposit and amount is None:
        logger.warning(
            f"Vehicle {vehicle.id or '<new>'} saved with require_deposit but no valid amount; "
            f"deposit disabled"
        )
        return vehicle.model_copy(update={"require_deposit": False, "deposit_amount": None})

    if not vehicle.require_deposit:
        amount = None

    return vehicle.model_copy(update={"deposit_amount": amount})


def _set_mode(
    vehicles: list[VehicleDepositConfig],
    vehicle_ids: set[str],
    mode: DepositMode,
    host: HostDepositSettings | None = None,
) -> list[VehicleDepositConfig]:
    updated: list[VehicleDepositConfig] = []
    moved = 0
    for v in vehicles:
        if v.id not in vehicle_ids or v.vehicle_deposit_mode == mode:
            updated.append(v)
            continue

        changes: dict = {"vehicle_deposit_mode": mode}
        if mode == "individual" and host is not None:
            # Seed from what the guest currently pays so the move is invisible to them.
            current = get_effective_deposit(v, host)
            changes["require_deposit"] = current > 0
            changes["deposit_amount"] = current if current > 0 else None
        updated.append(v.model_copy(update=changes))
        moved += 1

    logger.info(f"Moved {moved} of {len(vehicle_ids)} requested vehicles to {mode} deposit mode")
    return updated


def move_to_global(
    vehicles: list[VehicleDepositConfig],
    vehicle_ids: set[str],
) -> list[VehicleDepositConfig]:
    """Return ``vehicles`` with the selected ones deferring to host settings.

    Individual fields are kept so a later move back restores them.
    """
    return _set_mode(vehicles, vehicle_ids, "global")


def move_to_individual(
    vehicles: list[VehicleDepositConfig],
    vehicle_ids: set[str],
    host: HostDepositSettings,
) -> list[VehicleDepositConfig]:
    """Return ``vehicles`` with the selected ones carrying their own deposit.

    Each moved vehicle starts from its current effective deposit.
    """
    return _set_mode(vehicles, vehicle_ids, "individual", host)
