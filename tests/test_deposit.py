"""Tests for engine/deposit.py — resolution order and rate-based thresholds."""

from __future__ import annotations

import pytest

from rental_pricing.config import HostDepositSettings, VehicleDepositConfig
from rental_pricing.engine.deposit import (
    car_class,
    get_effective_deposit,
    rate_based_deposit,
    resolve_deposit,
    summarize_fleet_deposits,
)


# ═══════════════════════════════════════════════════════════════════════════
# Rate-based deposit
# ═══════════════════════════════════════════════════════════════════════════

class TestRateBased:

    @pytest.mark.parametrize("rate, expected", [
        (0, 250),
        (149.99, 250),
        (150.00, 700),
        (499.99, 700),
        (500.00, 1000),
        (1495, 1000),
    ])
    def test_thresholds(self, rate, expected):
        assert rate_based_deposit(rate) == expected

    def test_car_class_matches_deposit_bands(self):
        assert car_class(149.99) == "economy"
        assert car_class(150) == "luxury"
        assert car_class(500) == "exotic"


# ═══════════════════════════════════════════════════════════════════════════
# Individual mode
# ═══════════════════════════════════════════════════════════════════════════

class TestIndividualMode:

    @pytest.mark.parametrize("amount", [None, 0, 400, 2500])
    @pytest.mark.parametrize("rate", [50, 300, 900])
    def test_disabled_is_zero_regardless_of_amount_and_rate(self, host, amount, rate):
        v = VehicleDepositConfig(
            daily_rate=rate, vehicle_deposit_mode="individual",
            require_deposit=False, deposit_amount=amount,
        )
        assert get_effective_deposit(v, host) == 0

    def test_custom_amount_returned_verbatim(self, host):
        # Not a multiple of 25: reads never round.
        v = VehicleDepositConfig(
            make="Tesla", daily_rate=300, vehicle_deposit_mode="individual",
            require_deposit=True, deposit_amount=333.33,
        )
        r = resolve_deposit(v, host)
        assert r.amount == 333.33
        assert r.source == "individual_custom"

    def test_ignores_host_settings(self, tesla):
        off = HostDepositSettings(require_deposit=False)
        v = tesla.model_copy(update={
            "vehicle_deposit_mode": "individual", "require_deposit": True, "deposit_amount": 450,
        })
        assert get_effective_deposit(v, off) == 450

    def test_missing_amount_falls_back_to_rate(self, host):
        v = VehicleDepositConfig(
            daily_rate=600, vehicle_deposit_mode="individual", require_deposit=True,
        )
        r = resolve_deposit(v, host)
        assert r.amount == 1000
        assert r.source == "individual_rate_based"


# ═══════════════════════════════════════════════════════════════════════════
# Global mode
# ═══════════════════════════════════════════════════════════════════════════

class TestGlobalMode:

    @pytest.mark.parametrize("make", ["Tesla", "Toyota", ""])
    @pytest.mark.parametrize("rate", [50, 300, 900])
    def test_host_disabled_is_zero(self, make, rate):
        off = HostDepositSettings(require_deposit=False, default_amount=500, make_deposits={"Tesla": 800})
        v = VehicleDepositConfig(make=make, daily_rate=rate)
        r = resolve_deposit(v, off)
        assert r.amount == 0
        assert r.source == "host_disabled"

    def test_make_override_beats_default(self, tesla, host):
        """Scenario: Tesla at $300/day, default 500, Tesla override 800 → 800."""
        r = resolve_deposit(tesla, host)
        assert r.amount == 800
        assert r.source == "make_override"

    def test_host_default_when_no_override(self, camry, host):
        r = resolve_deposit(camry, host)
        assert r.amount == 500
        assert r.source == "host_default"

    def test_falls_through_to_rate_based(self, tesla, bare_host):
        """Scenario: no overrides, default 0 → rate-based 700 ($300 is luxury)."""
        r = resolve_deposit(tesla, bare_host)
        assert r.amount == 700
        assert r.source == "rate_based"

    def test_make_match_is_exact(self, host):
        v = VehicleDepositConfig(make="tesla", daily_rate=300)
        assert get_effective_deposit(v, host) == 500

    def test_individual_fields_ignored(self, tesla, host):
        v = tesla.model_copy(update={"require_deposit": False, "deposit_amount": 99})
        assert get_effective_deposit(v, host) == 800


# ═══════════════════════════════════════════════════════════════════════════
# Fleet summary
# ═══════════════════════════════════════════════════════════════════════════

def test_fleet_summary_counts(fleet, host):
    s = summarize_fleet_deposits(fleet, host)
    assert [r.vehicle_id for r in s.vehicles] == ["v-tesla", "v-camry", "v-lambo"]
    assert [r.amount for r in s.vehicles] == [800, 500, 2500]
    assert s.global_count == 2
    assert s.individual_count == 1
    assert s.no_deposit_count == 0


def test_fleet_summary_matches_single_resolution(fleet, host):
    """Host page and guest checkout must agree vehicle by vehicle."""
    s = summarize_fleet_deposits(fleet, host)
    for v, row in zip(fleet, s.vehicles):
        assert row.amount == get_effective_deposit(v, host)


def test_empty_fleet(host):
    s = summarize_fleet_deposits([], host)
    assert s.vehicles == []
    assert s.global_count == s.individual_count == s.no_deposit_count == 0
