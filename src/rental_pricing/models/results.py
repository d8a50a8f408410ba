"""Result types — the contract between engine, API, and dashboard.

Every engine function returns one of these.  They are plain pydantic models
so that the HTTP layer can ``model_dump()`` them without any translation.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from rental_pricing.config.tiers import CommissionTier
from rental_pricing.config.vehicle import DepositMode

DepositSource = Literal[
    "individual_disabled",
    "individual_custom",
    "individual_rate_based",
    "host_disabled",
    "make_override",
    "host_default",
    "rate_based",
]

CarClass = Literal["economy", "luxury", "exotic"]


# ═══════════════════════════════════════════════════════════════════════════
# Deposits
# ═══════════════════════════════════════════════════════════════════════════

class DepositResolution(BaseModel):
    """Effective deposit for one vehicle and the rule that produced it."""

    vehicle_id: str
    mode: DepositMode
    amount: float
    """Amount the guest pre-authorizes. 0 = no deposit."""
    source: DepositSource
    """Which branch of the resolution order matched first."""
    car_class: CarClass
    """Rate-based class of the vehicle, reported even when not used."""


class FleetDepositSummary(BaseModel):
    """Host discounts-page view: every vehicle with its effective deposit."""

    vehicles: list[DepositResolution]
    global_count: int
    individual_count: int
    no_deposit_count: int
    """Vehicles whose effective deposit is 0."""


# ═══════════════════════════════════════════════════════════════════════════
# Commission
# ═══════════════════════════════════════════════════════════════════════════

class TierProgress(BaseModel):
    """A partner's current tier and how far they are from the next one."""

    fleet_size: int
    current: CommissionTier
    next: CommissionTier | None
    """None when already at the top tier."""
    progress_percent: int
    """0–100. 100 at the top tier."""
    units_to_next: int
    """Vehicles still needed to reach ``next``. 0 at the top tier."""


class CommissionSplit(BaseModel):
    """Gross booking revenue split between platform and partner."""

    gross: float
    commission_percent: int
    platform_commission: float
    partner_payout: float


# ═══════════════════════════════════════════════════════════════════════════
# Revenue path & earnings
# ═══════════════════════════════════════════════════════════════════════════

class SelectionStatus(BaseModel):
    """Saved-vs-draft comparison used to gate the save control."""

    payout_percent: int | None
    """Payout for the draft selection. None = no complete selection yet."""
    has_unsaved_changes: bool
    is_complete: bool
    can_save: bool


class EarningsEstimate(BaseModel):
    """Monthly host earnings for a rate / booking volume / payout (whole dollars)."""

    daily_rate: float
    monthly_bookings: int
    payout_percent: int
    total_revenue: float
    host_earnings: int
    platform_fee: int
    annual_earnings: int
    competitor_earnings: int
    """Earnings on a typical competitor payout."""
    monthly_savings: int
    annual_savings: int
    tax_savings: int
    """Flat yearly tax benefit of listing as a business."""
    total_benefit: int


# ═══════════════════════════════════════════════════════════════════════════
# Booking
# ═══════════════════════════════════════════════════════════════════════════

class BookingQuote(BaseModel):
    """Guest-facing price breakdown for a trip."""

    days: int
    """Billable trip days (at least the minimum trip duration)."""
    requested_days: int
    """Days between the requested dates, before the minimum is applied."""
    min_days: int
    daily_rate: float
    base_price: float
    service_fee: int
    taxes: int
    total: float
    deposit: DepositResolution
    """Pre-authorized separately; not part of ``total``."""
