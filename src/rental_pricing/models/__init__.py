"""Result models — calculation output contracts."""

from rental_pricing.models.results import (
    BookingQuote,
    CommissionSplit,
    DepositResolution,
    EarningsEstimate,
    FleetDepositSummary,
    SelectionStatus,
    TierProgress,
)

__all__ = [
    "BookingQuote",
    "CommissionSplit",
    "DepositResolution",
    "EarningsEstimate",
    "FleetDepositSummary",
    "SelectionStatus",
    "TierProgress",
]
