"""Narrative generator — plain-English explanation of calculation results.

Turns ``FleetDepositSummary`` and ``TierProgress`` into short text blocks
a host (or an LLM acting for one) can read without knowing the rules.
"""

from __future__ import annotations

from rental_pricing.models.results import DepositResolution, FleetDepositSummary, TierProgress

_SOURCE_TEXT = {
    "individual_disabled": "deposit turned off for this vehicle",
    "individual_custom": "vehicle's own deposit amount",
    "individual_rate_based": "vehicle-level, no amount set, rate-based default",
    "host_disabled": "deposits turned off in global settings",
    "make_override": "global per-make override",
    "host_default": "global default amount",
    "rate_based": "global, no amount set, rate-based default",
}


def explain_deposit(row: DepositResolution) -> str:
    """One line: amount and why."""
    label = row.vehicle_id or "vehicle"
    if row.amount == 0:
        return f"{label}: no deposit ({_SOURCE_TEXT[row.source]})"
    return f"{label}: ${row.amount:,.0f} ({_SOURCE_TEXT[row.source]}; {row.car_class} class)"


def generate_deposit_narrative(summary: FleetDepositSummary) -> str:
    """Fleet-wide deposit overview for the host discounts page."""
    total = len(summary.vehicles)
    sections: list[str] = []

    sections.append("=" * 60)
    sections.append("SECURITY DEPOSITS")
    sections.append("=" * 60)
    sections.append(
        f"Vehicles: {total}\n"
        f"Using global settings: {summary.global_count}\n"
        f"Using individual settings: {summary.individual_count}\n"
        f"No deposit: {summary.no_deposit_count}"
    )

    if summary.vehicles:
        sections.append("")
        for row in summary.vehicles:
            sections.append(f"  {explain_deposit(row)}")

    fallbacks = [
        r for r in summary.vehicles
        if r.source in ("rate_based", "individual_rate_based")
    ]
    if fallbacks:
        sections.append(
            f"\n{len(fallbacks)} vehicle(s) use the rate-based default "
            f"($250 economy / $700 luxury / $1,000 exotic). "
            f"Set a global default or a per-make amount to control these."
        )

    return "\n".join(sections)


def generate_tier_narrative(progress: TierProgress) -> str:
    """Current tier and what it takes to reach the next one."""
    cur = progress.current
    lines = [
        f"Active fleet: {progress.fleet_size} vehicle(s)",
        f"Current tier: {cur.name} ({cur.commission_percent}% commission)",
    ]
    if progress.next is None:
        lines.append("Top tier reached.")
    else:
        nxt = progress.next
        lines.append(
            f"Next tier: {nxt.name} ({nxt.commission_percent}% commission) at "
            f"{nxt.min_fleet_size} vehicles; {progress.units_to_next} more needed "
            f"({progress.progress_percent}% of the way)."
        )
    return "\n".join(lines)
