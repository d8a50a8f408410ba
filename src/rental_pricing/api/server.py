"""FastAPI server — HTTP surface over the pricing calculations.

Run with:
    uvicorn rental_pricing.api.server:app --reload --port 8000

Or:
    rental-pricing-api

Endpoints:
    GET  /context              — self-describing manifest (rules + schemas)
    GET  /schema               — JSON Schema for every input model
    GET  /tiers                — default commission tier table
    POST /deposit/resolve      — effective deposit for one vehicle
    POST /deposit/fleet        — effective deposits for a fleet + narrative
    POST /deposit/normalize    — save-time normalization
    POST /deposit/mode         — bulk move vehicles between deposit modes
    POST /commission/tier      — tier + progress from fleet size
    POST /revenue/payout       — payout percent for a revenue path
    POST /revenue/changes      — draft vs saved comparison
    POST /earnings/estimate    — host earnings estimate
    POST /booking/quote        — trip price breakdown + deposit

Every endpoint is stateless: callers send the records they already fetched.
"""

from __future__ import annotations

import logging
from typing import Annotated, Literal

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from rental_pricing.config import (
    DEFAULT_TIERS,
    BookingRequest,
    CommissionTier,
    HostDepositSettings,
    RevenueSelection,
    VehicleDepositConfig,
    get_settings,
)
from rental_pricing.config.revenue import RevenuePath, RevenueTier
from rental_pricing.config.vehicle import DepositMode
from rental_pricing.engine.booking import quote_booking
from rental_pricing.engine.commission import commission_split, resolve_tier
from rental_pricing.engine.deposit import resolve_deposit, summarize_fleet_deposits
from rental_pricing.engine.earnings import estimate_earnings
from rental_pricing.engine.normalization import (
    move_to_global,
    move_to_individual,
    normalize_host_settings,
    normalize_vehicle_deposit,
)
from rental_pricing.engine.revenue import payout_percent, selection_status
from rental_pricing.models.results import (
    BookingQuote,
    CommissionSplit,
    DepositResolution,
    EarningsEstimate,
    FleetDepositSummary,
    SelectionStatus,
    TierProgress,
)
from rental_pricing.api.context import API_NAME, API_VERSION, build_context, get_input_schemas
from rental_pricing.api.narrative import generate_deposit_narrative, generate_tier_narrative
from rental_pricing.api.tools import get_anthropic_tools, get_openai_tools, get_system_prompt

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title=API_NAME,
    version=API_VERSION,
    description=(
        "Deposit resolution, commission tiers, payout paths, earnings estimates "
        "and booking quotes for a peer-to-peer vehicle rental marketplace. "
        "Start by calling GET /context."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class DepositRequest(BaseModel):
    """Request body for /deposit/resolve."""
    vehicle: VehicleDepositConfig
    host: HostDepositSettings = Field(default_factory=HostDepositSettings)


class FleetDepositRequest(BaseModel):
    """Request body for /deposit/fleet."""
    vehicles: list[VehicleDepositConfig] = Field(default_factory=list)
    host: HostDepositSettings = Field(default_factory=HostDepositSettings)


class FleetDepositResponse(BaseModel):
    summary: FleetDepositSummary
    narrative: str


class NormalizeRequest(BaseModel):
    """Request body for /deposit/normalize. Either part may be omitted."""
    host: HostDepositSettings | None = None
    vehicles: list[VehicleDepositConfig] = Field(default_factory=list)


class NormalizeResponse(BaseModel):
    host: HostDepositSettings | None
    vehicles: list[VehicleDepositConfig]
    disabled_vehicle_ids: list[str]
    """Vehicles whose deposit was switched off because no valid amount was given."""


class ModeChangeRequest(BaseModel):
    """Request body for /deposit/mode."""
    mode: DepositMode
    vehicle_ids: list[str] = Field(min_length=1)
    vehicles: list[VehicleDepositConfig]
    host: HostDepositSettings = Field(default_factory=HostDepositSettings)


class TierRequest(BaseModel):
    """Request body for /commission/tier."""
    fleet_size: int = Field(ge=0, description="Active vehicles")
    tiers: Annotated[list[CommissionTier], Field(min_length=1)] | None = Field(
        default=None,
        description="Custom tier table, ascending by min_fleet_size. Omit for the default table.",
    )
    gross_revenue: float | None = Field(
        default=None, ge=0,
        description="Optional gross booking revenue to split at the current tier.",
    )


class TierResponse(BaseModel):
    progress: TierProgress
    split: CommissionSplit | None = None
    narrative: str


class PayoutRequest(BaseModel):
    path: RevenuePath | None = None
    tier: RevenueTier | None = None


class PayoutResponse(BaseModel):
    payout_percent: int | None
    display: str
    """'75%', or '--' when no complete selection exists."""


class ChangesRequest(BaseModel):
    draft: RevenueSelection
    saved: RevenueSelection = Field(default_factory=RevenueSelection)


class EarningsRequest(BaseModel):
    daily_rate: float = Field(ge=0)
    monthly_bookings: int = Field(ge=0)
    payout_percent: int = Field(ge=0, le=100)
    competitor_payout_pct: int | None = Field(default=None, ge=0, le=100)


class QuoteRequest(BaseModel):
    booking: BookingRequest
    vehicle: VehicleDepositConfig
    host: HostDepositSettings = Field(default_factory=HostDepositSettings)


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — returns a welcome message and pointer to /context."""
    return {
        "name": API_NAME,
        "version": API_VERSION,
        "start_here": "GET /context?detail_level=full",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/context")
def get_context(
    detail_level: Literal["compact", "full"] = Query(
        default="full",
        description="'compact' for schemas only, 'full' for rules + formulas + examples",
    ),
):
    """Self-describing context manifest."""
    return build_context(detail_level)


@app.get("/schema")
def get_schema():
    """JSON Schema for every input model."""
    return get_input_schemas()


@app.get("/tiers", response_model=list[CommissionTier])
def get_tiers():
    """Default commission tier table, ascending by fleet size."""
    return DEFAULT_TIERS


@app.post("/deposit/resolve", response_model=DepositResolution)
def deposit_resolve(req: DepositRequest):
    """Effective deposit for one vehicle and the rule that produced it."""
    return resolve_deposit(req.vehicle, req.host)


@app.post("/deposit/fleet", response_model=FleetDepositResponse)
def deposit_fleet(req: FleetDepositRequest):
    """Effective deposits for every vehicle of a host."""
    summary = summarize_fleet_deposits(req.vehicles, req.host)
    return FleetDepositResponse(summary=summary, narrative=generate_deposit_narrative(summary))


@app.post("/deposit/normalize", response_model=NormalizeResponse)
def deposit_normalize(req: NormalizeRequest):
    """Apply save-time normalization to host settings and vehicle deposits."""
    host = normalize_host_settings(req.host) if req.host is not None else None
    vehicles: list[VehicleDepositConfig] = []
    disabled: list[str] = []
    for v in req.vehicles:
        normalized = normalize_vehicle_deposit(v)
        if v.require_deposit and not normalized.require_deposit:
            disabled.append(v.id)
        vehicles.append(normalized)
    return NormalizeResponse(host=host, vehicles=vehicles, disabled_vehicle_ids=disabled)


@app.post("/deposit/mode", response_model=list[VehicleDepositConfig])
def deposit_mode(req: ModeChangeRequest):
    """Move the selected vehicles to global or individual deposit mode."""
    known = {v.id for v in req.vehicles}
    missing = sorted(set(req.vehicle_ids) - known)
    if missing:
        raise HTTPException(status_code=404, detail=f"Unknown vehicle ids: {', '.join(missing)}")

    ids = set(req.vehicle_ids)
    if req.mode == "global":
        return move_to_global(req.vehicles, ids)
    return move_to_individual(req.vehicles, ids, req.host)


@app.post("/commission/tier", response_model=TierResponse)
def commission_tier(req: TierRequest):
    """Commission tier, next tier and progress for a fleet size."""
    progress = resolve_tier(req.fleet_size, req.tiers)
    split = (
        commission_split(req.gross_revenue, progress.current)
        if req.gross_revenue is not None else None
    )
    return TierResponse(progress=progress, split=split, narrative=generate_tier_narrative(progress))


@app.post("/revenue/payout", response_model=PayoutResponse)
def revenue_payout(req: PayoutRequest):
    """Payout percent for a revenue path ('--' until the selection is complete)."""
    pct = payout_percent(req.path, req.tier)
    return PayoutResponse(payout_percent=pct, display=f"{pct}%" if pct is not None else "--")


@app.post("/revenue/changes", response_model=SelectionStatus)
def revenue_changes(req: ChangesRequest):
    """Whether the draft differs from the saved selection and can be saved."""
    return selection_status(req.draft, req.saved)


@app.post("/earnings/estimate", response_model=EarningsEstimate)
def earnings_estimate(req: EarningsRequest):
    """Monthly and annual host earnings."""
    return estimate_earnings(
        req.daily_rate, req.monthly_bookings, req.payout_percent, req.competitor_payout_pct,
    )


@app.post("/booking/quote", response_model=BookingQuote)
def booking_quote(req: QuoteRequest):
    """Trip price breakdown plus the deposit to pre-authorize."""
    return quote_booking(req.booking, req.vehicle, req.host)


@app.get("/tools/openai")
def get_openai_tool_definitions():
    """Pre-built tool definitions in OpenAI function-calling format."""
    return {"tools": get_openai_tools(), "system_prompt": get_system_prompt()}


@app.get("/tools/anthropic")
def get_anthropic_tool_definitions():
    """Pre-built tool definitions in Anthropic tool-use format."""
    return {"tools": get_anthropic_tools(), "system_prompt": get_system_prompt()}


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn
    logger.info(f"Starting {API_NAME} on {settings.api_host}:{settings.api_port}")
    uvicorn.run(
        "rental_pricing.api.server:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )


if __name__ == "__main__":
    main()
