"""Pre-built tool/function definitions for LLM integration frameworks.

Generates tool schemas in OpenAI and Anthropic formats so an assistant
can call the pricing API on a host's behalf.

Usage:
    from rental_pricing.api.tools import get_openai_tools, get_anthropic_tools
"""

from __future__ import annotations

from typing import Any


def _function(name: str, description: str, properties: dict[str, Any], required: list[str]) -> dict[str, Any]:
    return {
        "type": "function",
        "function": {
            "name": name,
            "description": description,
            "parameters": {"type": "object", "properties": properties, "required": required},
        },
    }


def get_openai_tools() -> list[dict[str, Any]]:
    """Return tool definitions in OpenAI function-calling format."""
    vehicle = {
        "type": "object",
        "description": (
            "Vehicle: {id, make, model, year, daily_rate, vehicle_deposit_mode "
            "('global'|'individual'), require_deposit, deposit_amount}"
        ),
    }
    host = {
        "type": "object",
        "description": "Host deposit settings: {require_deposit, default_amount, make_deposits: {make: amount}}",
    }
    return [
        _function(
            "get_pricing_context",
            "Get the full description of the pricing API: deposit rules, commission tiers, "
            "payout paths and every input schema. Call this FIRST if unsure.",
            {"detail_level": {"type": "string", "enum": ["compact", "full"]}},
            [],
        ),
        _function(
            "resolve_deposit",
            "Compute the deposit a guest must pre-authorize for one vehicle, and which rule produced it.",
            {"vehicle": vehicle, "host": host},
            ["vehicle"],
        ),
        _function(
            "summarize_fleet_deposits",
            "Compute effective deposits for every vehicle of a host, with a plain-English summary.",
            {"vehicles": {"type": "array", "items": vehicle}, "host": host},
            ["vehicles"],
        ),
        _function(
            "get_commission_tier",
            "Get a partner's commission tier and progress toward the next tier from active fleet size.",
            {"fleet_size": {"type": "integer", "minimum": 0}},
            ["fleet_size"],
        ),
        _function(
            "get_payout_percent",
            "Get the partner payout percent for a revenue path ('insurance' or 'tiers') "
            "and, for 'tiers', an insurance type ('p2p', 'commercial', 'self_manage').",
            {
                "path": {"type": "string", "enum": ["insurance", "tiers"]},
                "tier": {"type": "string", "enum": ["p2p", "commercial", "self_manage"]},
            },
            ["path"],
        ),
        _function(
            "estimate_earnings",
            "Estimate monthly and annual host earnings for a daily rate, bookings per month and payout percent.",
            {
                "daily_rate": {"type": "number"},
                "monthly_bookings": {"type": "integer"},
                "payout_percent": {"type": "integer"},
            },
            ["daily_rate", "monthly_bookings", "payout_percent"],
        ),
    ]


def get_anthropic_tools() -> list[dict[str, Any]]:
    """Return tool definitions in Anthropic tool-use format."""
    anthropic_tools: list[dict[str, Any]] = []
    for tool in get_openai_tools():
        func = tool["function"]
        anthropic_tools.append({
            "name": func["name"],
            "description": func["description"],
            "input_schema": func["parameters"],
        })
    return anthropic_tools


def get_system_prompt(base_url: str = "http://localhost:8000") -> str:
    """System prompt for an assistant that has access to the pricing API."""
    return f"""You are an assistant helping vehicle rental hosts and fleet partners.

You can call the rental pricing API at {base_url}:
1. get_pricing_context — rules and schemas (call this first if unsure)
2. resolve_deposit — deposit for one vehicle and why
3. summarize_fleet_deposits — deposits for a whole fleet
4. get_commission_tier — commission tier and progress from fleet size
5. get_payout_percent — payout for an insurance path
6. estimate_earnings — monthly / annual earnings estimate

Deposits resolve in a fixed order. A vehicle in 'individual' mode uses its own
setting; a vehicle in 'global' mode uses the host's per-make override, then the
host default, then a rate-based amount ($250 under $150/day, $700 under $500/day,
$1,000 otherwise).

Explain results in terms the host can act on, not just numbers.
"""
