"""Engine — pure deposit, commission, revenue-path and pricing calculations."""

from rental_pricing.engine.deposit import (
    car_class,
    get_effective_deposit,
    rate_based_deposit,
    resolve_deposit,
    summarize_fleet_deposits,
)
from rental_pricing.engine.normalization import (
    move_to_global,
    move_to_individual,
    normalize_deposit_amount,
    normalize_host_settings,
    normalize_vehicle_deposit,
)
from rental_pricing.engine.commission import commission_split, resolve_tier, tier_for_commission_rate
from rental_pricing.engine.revenue import (
    RevenuePathEditor,
    can_save,
    has_unsaved_changes,
    payout_percent,
    selection_status,
)
from rental_pricing.engine.earnings import estimate_earnings
from rental_pricing.engine.booking import quote_booking

__all__ = [
    "car_class",
    "get_effective_deposit",
    "rate_based_deposit",
    "resolve_deposit",
    "summarize_fleet_deposits",
    # Save-time
    "normalize_deposit_amount",
    "normalize_host_settings",
    "normalize_vehicle_deposit",
    "move_to_global",
    "move_to_individual",
    # Commission
    "resolve_tier",
    "tier_for_commission_rate",
    "commission_split",
    # Revenue path
    "payout_percent",
    "has_unsaved_changes",
    "can_save",
    "selection_status",
    "RevenuePathEditor",
    # Pricing
    "estimate_earnings",
    "quote_booking",
]
