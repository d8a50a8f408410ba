"""Context manifest generator — makes the pricing API self-describing.

Produces structured context at two detail levels:
  - ``compact``: parameter schemas + descriptions
  - ``full``:    adds the pricing rules, formulas and example queries

A client reads ``GET /context?detail_level=full`` once and then knows
what it can send and how to read what comes back.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from rental_pricing.config import (
    BookingRequest,
    CommissionTier,
    HostDepositSettings,
    RevenueSelection,
    VehicleDepositConfig,
)

API_NAME = "Rental Pricing API"
API_VERSION = "1.0"


# ═══════════════════════════════════════════════════════════════════════════
# Public response models
# ═══════════════════════════════════════════════════════════════════════════

class ParameterInfo(BaseModel):
    """One configurable parameter, machine-readable."""
    name: str
    type: str
    default: Any
    description: str
    constraints: dict[str, Any] = Field(default_factory=dict)


class SectionSchema(BaseModel):
    """Schema for one input model (e.g. vehicle, host)."""
    section: str
    description: str
    parameters: list[ParameterInfo]


class EndpointInfo(BaseModel):
    """Description of one API endpoint."""
    method: str
    path: str
    description: str


class PricingContext(BaseModel):
    """Full self-describing context."""
    name: str
    version: str
    description: str
    rules: str
    key_formulas: list[dict[str, str]]
    input_sections: list[SectionSchema]
    endpoints: list[EndpointInfo]
    example_queries: list[dict[str, str]]


# ═══════════════════════════════════════════════════════════════════════════
# Schema extraction from Pydantic models
# ═══════════════════════════════════════════════════════════════════════════

def _extract_params(model_cls: type[BaseModel]) -> list[ParameterInfo]:
    """Extract parameter info from a Pydantic model class."""
    params: list[ParameterInfo] = []
    for name, field_info in model_cls.model_fields.items():
        constraints: dict[str, Any] = {}
        for attr in ("ge", "gt", "le", "lt"):
            meta_val = _get_field_metadata(field_info, attr)
            if meta_val is not None:
                constraints[attr] = meta_val

        default_val = None if field_info.is_required() else field_info.get_default(call_default_factory=True)

        type_str = str(field_info.annotation) if field_info.annotation else "Any"
        type_str = type_str.replace("typing.", "").replace("<class '", "").replace("'>", "")

        params.append(ParameterInfo(
            name=name,
            type=type_str,
            default=default_val,
            description=field_info.description or "",
            constraints=constraints,
        ))
    return params


def _get_field_metadata(field_info: Any, attr: str) -> Any:
    """Extract constraint metadata from Pydantic field info."""
    for m in getattr(field_info, "metadata", []):
        if hasattr(m, attr):
            return getattr(m, attr)
    return None


# ═══════════════════════════════════════════════════════════════════════════
# Context builders
# ═══════════════════════════════════════════════════════════════════════════

_RULES = """
DEPOSITS
Each vehicle is in one of two modes:
  - global (default): the host's settings apply.
      host deposits off → 0; per-make override → it; host default → it; else rate-based.
  - individual: the vehicle's own settings apply.
      vehicle deposit off → 0; vehicle amount → it; else rate-based.
Rate-based: daily rate < $150 → $250 (economy), < $500 → $700 (luxury), else $1,000 (exotic).
Amounts are rounded to multiples of $25 (minimum $25) only when they are saved.

COMMISSION TIERS
Standard (0+ vehicles, 25%), Gold (10+, 20%), Platinum (50+, 15%), Diamond (100+, 10%).
The current tier is the highest tier the active fleet qualifies for.

REVENUE PATHS
insurance → partner keeps 40%.
tiers (partner brings insurance) → p2p 75%, commercial 90%, self_manage 75%.
"""

_KEY_FORMULAS = [
    {
        "name": "Tier progress",
        "formula": "round((fleet_size - current.min_fleet_size) / (next.min_fleet_size - current.min_fleet_size) × 100), clamped to 0–100",
        "meaning": "How far a partner is between their current and next tier. 100 at the top tier.",
    },
    {
        "name": "Deposit normalization",
        "formula": "max(25, round(amount / 25) × 25)",
        "meaning": "Applied when a host saves a deposit amount.",
    },
    {
        "name": "Host earnings",
        "formula": "daily_rate × monthly_bookings × payout_percent / 100",
        "meaning": "Monthly earnings on a revenue path, before expenses.",
    },
    {
        "name": "Booking total",
        "formula": "base + round(base × 15%) + round((base + service_fee) × 8.6%)",
        "meaning": "Guest price for a trip. The deposit is held separately.",
    },
]

_EXAMPLE_QUERIES = [
    {
        "query": "What deposit does a guest pay for my Tesla?",
        "action": "POST /deposit/resolve with the vehicle and host settings",
    },
    {
        "query": "How many more cars do I need for Platinum?",
        "action": "POST /commission/tier with fleet_size",
    },
    {
        "query": "How much more would I earn with commercial insurance?",
        "action": "POST /earnings/estimate twice, payout_percent 40 and 90",
    },
]

_ENDPOINTS = [
    EndpointInfo(method="GET", path="/context", description="This manifest."),
    EndpointInfo(method="GET", path="/schema", description="JSON Schema of every input model."),
    EndpointInfo(method="GET", path="/tiers", description="Default commission tier table."),
    EndpointInfo(method="POST", path="/deposit/resolve", description="Effective deposit for one vehicle."),
    EndpointInfo(method="POST", path="/deposit/fleet", description="Effective deposits for a fleet + narrative."),
    EndpointInfo(method="POST", path="/deposit/normalize", description="Save-time normalization of host and vehicle deposits."),
    EndpointInfo(method="POST", path="/deposit/mode", description="Bulk move vehicles to global or individual mode."),
    EndpointInfo(method="POST", path="/commission/tier", description="Tier, next tier and progress from fleet size."),
    EndpointInfo(method="POST", path="/revenue/payout", description="Payout percent for a revenue path."),
    EndpointInfo(method="POST", path="/revenue/changes", description="Draft vs saved comparison for the save control."),
    EndpointInfo(method="POST", path="/earnings/estimate", description="Monthly / annual host earnings."),
    EndpointInfo(method="POST", path="/booking/quote", description="Trip price breakdown plus deposit."),
]

_INPUT_SECTIONS = [
    ("vehicle", VehicleDepositConfig, "Deposit-relevant vehicle fields"),
    ("host", HostDepositSettings, "Host-level global deposit settings"),
    ("tier", CommissionTier, "One commission tier"),
    ("revenue_selection", RevenueSelection, "Revenue path and insurance tier"),
    ("booking", BookingRequest, "Trip dates and fee rates"),
]


# ═══════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════

def build_context(detail_level: Literal["compact", "full"] = "full") -> PricingContext:
    """Build the self-describing context manifest."""
    sections = [
        SectionSchema(section=name, description=desc, parameters=_extract_params(cls))
        for name, cls, desc in _INPUT_SECTIONS
    ]
    full = detail_level == "full"
    return PricingContext(
        name=API_NAME,
        version=API_VERSION,
        description=(
            "Deposit resolution, commission tiers, payout paths, earnings estimates "
            "and booking quotes for a peer-to-peer vehicle rental marketplace."
        ),
        rules=_RULES.strip() if full else "",
        key_formulas=_KEY_FORMULAS if full else [],
        input_sections=sections,
        endpoints=_ENDPOINTS,
        example_queries=_EXAMPLE_QUERIES if full else [],
    )


def get_input_schemas() -> dict[str, dict]:
    """JSON Schema for every input model, keyed by section name."""
    return {name: cls.model_json_schema() for name, cls, _ in _INPUT_SECTIONS}
