"""Host earnings estimator — what a listing makes per month on a payout path.

  total_revenue  = daily_rate × monthly_bookings
  host_earnings  = total_revenue × payout%
  platform_fee   = total_revenue − host_earnings
  competitor     = total_revenue × competitor_payout%
  total_benefit  = host_earnings × 12 + TAX_SAVINGS

Money outputs are rounded to whole dollars (halves up).
"""

from __future__ import annotations

import math

from rental_pricing.config.settings import get_settings
from rental_pricing.models.results import EarningsEstimate

TAX_SAVINGS = 8000


def _whole_dollars(x: float) -> int:
    return int(math.floor(x + 0.5))


def estimate_earnings(
    daily_rate: float,
    monthly_bookings: int,
    payout_percent: int,
    competitor_payout_pct: int | None = None,
) -> EarningsEstimate:
    """Estimate monthly and annual host earnings."""
    if competitor_payout_pct is None:
        competitor_payout_pct = get_settings().competitor_payout_pct

    total_revenue = daily_rate * monthly_bookings
    host_earnings = total_revenue * payout_percent / 100
    platform_fee = total_revenue - host_earnings
    competitor_earnings = total_revenue * competitor_payout_pct / 100
    monthly_savings = host_earnings - competitor_earnings

    return EarningsEstimate(
        daily_rate=daily_rate,
        monthly_bookings=monthly_bookings,
        payout_percent=payout_percent,
        total_revenue=total_revenue,
        host_earnings=_whole_dollars(host_earnings),
        platform_fee=_whole_dollars(platform_fee),
        annual_earnings=_whole_dollars(host_earnings * 12),
        competitor_earnings=_whole_dollars(competitor_earnings),
        monthly_savings=_whole_dollars(monthly_savings),
        annual_savings=_whole_dollars(monthly_savings * 12),
        tax_savings=TAX_SAVINGS,
        total_benefit=_whole_dollars(host_earnings * 12 + TAX_SAVINGS),
    )
