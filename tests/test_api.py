"""Tests for the HTTP layer, context manifest, narratives and tool definitions."""

from __future__ import annotations

from fastapi.testclient import TestClient

from rental_pricing.api.server import app
from rental_pricing.api.context import build_context, get_input_schemas, _extract_params
from rental_pricing.api.narrative import (
    explain_deposit,
    generate_deposit_narrative,
    generate_tier_narrative,
)
from rental_pricing.api.tools import get_anthropic_tools, get_openai_tools, get_system_prompt
from rental_pricing.config import VehicleDepositConfig
from rental_pricing.engine.commission import resolve_tier
from rental_pricing.engine.deposit import summarize_fleet_deposits


client = TestClient(app)

TESLA = {"id": "v1", "make": "Tesla", "model": "Model 3", "year": 2023, "daily_rate": 300}
HOST = {"require_deposit": True, "default_amount": 500, "make_deposits": {"Tesla": 800}}


# ═══════════════════════════════════════════════════════════════════════════
# Context manifest
# ═══════════════════════════════════════════════════════════════════════════

class TestContext:

    def test_build_context_full(self):
        ctx = build_context("full")
        assert ctx.name == "Rental Pricing API"
        assert "DEPOSITS" in ctx.rules
        assert len(ctx.key_formulas) >= 3
        assert len(ctx.input_sections) == 5
        assert len(ctx.example_queries) >= 3

    def test_build_context_compact(self):
        ctx = build_context("compact")
        assert ctx.rules == ""
        assert ctx.key_formulas == []
        assert ctx.example_queries == []
        assert len(ctx.input_sections) == 5

    def test_extract_params(self):
        params = {p.name: p for p in _extract_params(VehicleDepositConfig)}
        assert "daily_rate" in params
        assert params["daily_rate"].constraints == {"ge": 0}
        assert params["vehicle_deposit_mode"].default == "global"

    def test_input_schemas(self):
        schemas = get_input_schemas()
        assert "daily_rate" in schemas["vehicle"]["properties"]
        assert "make_deposits" in schemas["host"]["properties"]


# ═══════════════════════════════════════════════════════════════════════════
# Narratives
# ═══════════════════════════════════════════════════════════════════════════

class TestNarrative:

    def test_deposit_narrative(self, fleet, host):
        text = generate_deposit_narrative(summarize_fleet_deposits(fleet, host))
        assert "Vehicles: 3" in text
        assert "v-tesla: $800 (global per-make override" in text

    def test_rate_based_hint(self, tesla, bare_host):
        text = generate_deposit_narrative(summarize_fleet_deposits([tesla], bare_host))
        assert "rate-based default" in text

    def test_explain_no_deposit(self, host):
        v = VehicleDepositConfig(id="off", vehicle_deposit_mode="individual", require_deposit=False)
        row = summarize_fleet_deposits([v], host).vehicles[0]
        assert explain_deposit(row) == "off: no deposit (deposit turned off for this vehicle)"

    def test_tier_narrative(self):
        text = generate_tier_narrative(resolve_tier(30))
        assert "Current tier: Gold (20% commission)" in text
        assert "20 more needed" in text

    def test_tier_narrative_top(self):
        assert "Top tier reached." in generate_tier_narrative(resolve_tier(120))


# ═══════════════════════════════════════════════════════════════════════════
# Tool definitions
# ═══════════════════════════════════════════════════════════════════════════

class TestTools:

    def test_openai_and_anthropic_match(self):
        openai = get_openai_tools()
        anthropic = get_anthropic_tools()
        assert [t["function"]["name"] for t in openai] == [t["name"] for t in anthropic]
        for t in anthropic:
            assert t["input_schema"]["type"] == "object"

    def test_system_prompt_mentions_base_url(self):
        assert "https://example.test" in get_system_prompt("https://example.test")


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

class TestEndpoints:

    def test_health(self):
        r = client.get("/health")
        assert r.status_code == 200
        assert r.json() == {"status": "ok"}

    def test_root(self):
        assert client.get("/").json()["start_here"].startswith("GET /context")

    def test_context_compact(self):
        r = client.get("/context", params={"detail_level": "compact"})
        assert r.status_code == 200
        assert r.json()["rules"] == ""

    def test_schema(self):
        assert "vehicle" in client.get("/schema").json()

    def test_tiers(self):
        names = [t["name"] for t in client.get("/tiers").json()]
        assert names == ["Standard", "Gold", "Platinum", "Diamond"]

    def test_deposit_resolve(self):
        r = client.post("/deposit/resolve", json={"vehicle": TESLA, "host": HOST})
        assert r.status_code == 200
        body = r.json()
        assert body["amount"] == 800
        assert body["source"] == "make_override"

    def test_deposit_resolve_rate_fallback(self):
        host = {"require_deposit": True, "default_amount": 0, "make_deposits": {}}
        r = client.post("/deposit/resolve", json={"vehicle": TESLA, "host": host})
        assert r.json()["amount"] == 700

    def test_deposit_resolve_rejects_negative_rate(self):
        r = client.post("/deposit/resolve", json={"vehicle": {**TESLA, "daily_rate": -5}})
        assert r.status_code == 422

    def test_deposit_fleet(self):
        vehicles = [TESLA, {**TESLA, "id": "v2", "make": "Honda", "daily_rate": 60}]
        r = client.post("/deposit/fleet", json={"vehicles": vehicles, "host": HOST})
        body = r.json()
        assert [v["amount"] for v in body["summary"]["vehicles"]] == [800, 500]
        assert "SECURITY DEPOSITS" in body["narrative"]

    def test_deposit_normalize(self):
        r = client.post("/deposit/normalize", json={
            "host": {"default_amount": 510, "make_deposits": {"Tesla": 790}},
            "vehicles": [
                {"id": "a", "vehicle_deposit_mode": "individual", "require_deposit": True, "deposit_amount": 612},
                {"id": "b", "vehicle_deposit_mode": "individual", "require_deposit": True},
            ],
        })
        body = r.json()
        assert body["host"]["default_amount"] == 500
        assert body["host"]["make_deposits"] == {"Tesla": 800}
        assert body["vehicles"][0]["deposit_amount"] == 600
        assert body["vehicles"][1]["require_deposit"] is False
        assert body["disabled_vehicle_ids"] == ["b"]

    def test_deposit_mode_individual(self):
        r = client.post("/deposit/mode", json={
            "mode": "individual", "vehicle_ids": ["v1"], "vehicles": [TESLA], "host": HOST,
        })
        assert r.status_code == 200
        (v,) = r.json()
        assert v["vehicle_deposit_mode"] == "individual"
        assert v["deposit_amount"] == 800

    def test_deposit_mode_unknown_id(self):
        r = client.post("/deposit/mode", json={
            "mode": "global", "vehicle_ids": ["nope"], "vehicles": [TESLA],
        })
        assert r.status_code == 404

    def test_commission_tier(self):
        r = client.post("/commission/tier", json={"fleet_size": 30, "gross_revenue": 1000})
        body = r.json()
        assert body["progress"]["current"]["name"] == "Gold"
        assert body["progress"]["next"]["name"] == "Platinum"
        assert body["progress"]["progress_percent"] == 50
        assert body["split"]["platform_commission"] == 200

    def test_commission_tier_top(self):
        body = client.post("/commission/tier", json={"fleet_size": 150}).json()
        assert body["progress"]["next"] is None
        assert body["split"] is None

    def test_commission_tier_rejects_negative_fleet(self):
        assert client.post("/commission/tier", json={"fleet_size": -1}).status_code == 422

    def test_commission_tier_rejects_empty_table(self):
        r = client.post("/commission/tier", json={"fleet_size": 5, "tiers": []})
        assert r.status_code == 422

    def test_revenue_payout(self):
        assert client.post("/revenue/payout", json={"path": "tiers", "tier": "commercial"}).json() == {
            "payout_percent": 90, "display": "90%",
        }

    def test_revenue_payout_incomplete(self):
        body = client.post("/revenue/payout", json={"path": "tiers"}).json()
        assert body["payout_percent"] is None
        assert body["display"] == "--"

    def test_revenue_changes(self):
        body = client.post("/revenue/changes", json={
            "draft": {"path": "tiers", "tier": None},
            "saved": {"path": "insurance"},
        }).json()
        assert body["has_unsaved_changes"] is True
        assert body["can_save"] is False

    def test_earnings(self):
        body = client.post("/earnings/estimate", json={
            "daily_rate": 150, "monthly_bookings": 15, "payout_percent": 75, "competitor_payout_pct": 65,
        }).json()
        assert body["host_earnings"] == 1688

    def test_booking_quote(self):
        r = client.post("/booking/quote", json={
            "booking": {"start_date": "2026-03-01", "end_date": "2026-03-04"},
            "vehicle": {**TESLA, "daily_rate": 100},
            "host": HOST,
        })
        body = r.json()
        assert body["total"] == 375
        assert body["deposit"]["amount"] == 800

    def test_booking_quote_rejects_reversed_dates(self):
        r = client.post("/booking/quote", json={
            "booking": {"start_date": "2026-03-04", "end_date": "2026-03-01"},
            "vehicle": TESLA,
        })
        assert r.status_code == 422

    def test_tool_endpoints(self):
        assert client.get("/tools/openai").json()["tools"]
        assert client.get("/tools/anthropic").json()["tools"]
