"""Shared test fixtures — a small host fleet and its global settings."""

from __future__ import annotations

import pytest

from rental_pricing.config import (
    DEFAULT_TIERS,
    CommissionTier,
    HostDepositSettings,
    VehicleDepositConfig,
)


@pytest.fixture
def host() -> HostDepositSettings:
    return HostDepositSettings(
        require_deposit=True,
        default_amount=500,
        make_deposits={"Tesla": 800},
    )


@pytest.fixture
def bare_host() -> HostDepositSettings:
    """Deposits on, but no default and no make overrides."""
    return HostDepositSettings(require_deposit=True, default_amount=0, make_deposits={})


@pytest.fixture
def tesla() -> VehicleDepositConfig:
    return VehicleDepositConfig(
        id="v-tesla",
        make="Tesla",
        model="Model 3",
        year=2023,
        daily_rate=300,
        vehicle_deposit_mode="global",
    )


@pytest.fixture
def camry() -> VehicleDepositConfig:
    return VehicleDepositConfig(
        id="v-camry",
        make="Toyota",
        model="Camry",
        year=2022,
        daily_rate=85,
        vehicle_deposit_mode="global",
    )


@pytest.fixture
def lambo() -> VehicleDepositConfig:
    return VehicleDepositConfig(
        id="v-lambo",
        make="Lamborghini",
        model="Huracan",
        year=2021,
        daily_rate=1495,
        vehicle_deposit_mode="individual",
        require_deposit=True,
        deposit_amount=2500,
    )


@pytest.fixture
def fleet(tesla, camry, lambo) -> list[VehicleDepositConfig]:
    return [tesla, camry, lambo]


@pytest.fixture
def tiers() -> list[CommissionTier]:
    return DEFAULT_TIERS
