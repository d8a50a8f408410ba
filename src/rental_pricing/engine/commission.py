"""Commission tiers — fleet size → platform commission.

  current  = highest tier with min_fleet_size ≤ fleet_size
  next     = the tier right after current (None at the top)
  progress = clamp(round((fleet − current.min) / (next.min − current.min) × 100), 0, 100)

The tier table must be non-empty and ordered ascending by ``min_fleet_size``.
That is a precondition; it is not checked here.
"""

from __future__ import annotations

import math

from rental_pricing.config.tiers import DEFAULT_TIERS, CommissionTier
from rental_pricing.models.results import CommissionSplit, TierProgress

# At the top tier there is nothing left to progress toward.
TOP_TIER_PROGRESS = 100


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def resolve_tier(
    fleet_size: int,
    tiers: list[CommissionTier] | None = None,
) -> TierProgress:
    """Current tier, next tier and progress for a partner's active fleet."""
    table = tiers if tiers is not None else DEFAULT_TIERS

    idx = 0
    for i, tier in enumerate(table):
        if tier.min_fleet_size <= fleet_size:
            idx = i
    current = table[idx]
    nxt = table[idx + 1] if idx + 1 < len(table) else None

    if nxt is None:
        return TierProgress(
            fleet_size=fleet_size,
            current=current,
            next=None,
            progress_percent=TOP_TIER_PROGRESS,
            units_to_next=0,
        )

    span = nxt.min_fleet_size - current.min_fleet_size
    raw = (fleet_size - current.min_fleet_size) * 100 / span if span > 0 else 100.0
    progress = min(100, max(0, _round_half_up(raw)))

    return TierProgress(
        fleet_size=fleet_size,
        current=current,
        next=nxt,
        progress_percent=progress,
        units_to_next=nxt.min_fleet_size - fleet_size,
    )


def tier_for_commission_rate(
    rate: float,
    tiers: list[CommissionTier] | None = None,
) -> CommissionTier:
    """Badge tier for an explicit commission rate (fraction, e.g. 0.15).

    Used for partners whose rate was set by hand: the best tier whose
    commission is at least the partner's rate.
    """
    table = tiers if tiers is not None else DEFAULT_TIERS
    percent = round(rate * 100, 6)
    # Best tier last; walk from the top down.
    for tier in reversed(table):
        if percent <= tier.commission_percent:
            return tier
    return table[0]


def commission_split(gross: float, tier: CommissionTier) -> CommissionSplit:
    """Split gross booking revenue between platform and partner."""
    platform = round(gross * tier.commission_percent / 100, 2)
    return CommissionSplit(
        gross=gross,
        commission_percent=tier.commission_percent,
        platform_commission=platform,
        partner_payout=round(gross - platform, 2),
    )
