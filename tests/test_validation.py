"""Pydantic validation tests — out-of-domain inputs are rejected at construction."""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from rental_pricing.config import (
    BookingRequest,
    CommissionTier,
    HostDepositSettings,
    RevenueSelection,
    Settings,
    VehicleDepositConfig,
)


class TestVehicleValidation:

    def test_defaults_are_valid(self):
        v = VehicleDepositConfig()
        assert v.vehicle_deposit_mode == "global"
        assert v.deposit_amount is None

    def test_negative_rate_rejected(self):
        with pytest.raises(ValidationError):
            VehicleDepositConfig(daily_rate=-1)

    def test_unknown_mode_rejected(self):
        with pytest.raises(ValidationError):
            VehicleDepositConfig(vehicle_deposit_mode="hybrid")

    def test_negative_deposit_rejected(self):
        with pytest.raises(ValidationError):
            VehicleDepositConfig(deposit_amount=-25)

    def test_edge_valid_values(self):
        v = VehicleDepositConfig(daily_rate=0, deposit_amount=0)
        assert v.daily_rate == 0


class TestHostValidation:

    def test_defaults_are_valid(self):
        h = HostDepositSettings()
        assert h.require_deposit is True
        assert h.make_deposits == {}

    def test_negative_default_rejected(self):
        with pytest.raises(ValidationError):
            HostDepositSettings(default_amount=-100)

    def test_negative_make_override_rejected(self):
        with pytest.raises(ValidationError):
            HostDepositSettings(default_amount=500, make_deposits={"Tesla": -100})

    def test_zero_make_override_rejected(self):
        with pytest.raises(ValidationError):
            HostDepositSettings(make_deposits={"Tesla": 0})


class TestTierValidation:

    def test_negative_min_rejected(self):
        with pytest.raises(ValidationError):
            CommissionTier(name="X", min_fleet_size=-1, commission_percent=10)

    def test_percent_above_100_rejected(self):
        with pytest.raises(ValidationError):
            CommissionTier(name="X", min_fleet_size=0, commission_percent=101)


class TestRevenueValidation:

    def test_unknown_path_rejected(self):
        with pytest.raises(ValidationError):
            RevenueSelection(path="lease")

    def test_unknown_tier_rejected(self):
        with pytest.raises(ValidationError):
            RevenueSelection(path="tiers", tier="gold")


class TestBookingValidation:

    def test_end_before_start_rejected(self):
        with pytest.raises(ValidationError):
            BookingRequest(start_date=date(2026, 3, 5), end_date=date(2026, 3, 1))

    def test_zero_min_days_rejected(self):
        with pytest.raises(ValidationError):
            BookingRequest(start_date=date(2026, 3, 1), end_date=date(2026, 3, 2), min_trip_days=0)


class TestSettings:

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("RENTAL_PRICING_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("RENTAL_PRICING_API_PORT", "9001")
        s = Settings()
        assert s.log_level == "DEBUG"
        assert s.api_port == 9001

    def test_competitor_payout_bounds(self):
        with pytest.raises(ValidationError):
            Settings(competitor_payout_pct=120)
