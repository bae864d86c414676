"""Shared test fixtures for the solar design engine and API tests."""

from __future__ import annotations

import numpy as np
import pytest

from solar_engine import presets
from solar_engine.constants import DAYS_IN_MONTH
from solar_engine.equipment import EconomicConfig, Inverter, PVModule, SystemConfig
from solar_engine.weather.tmy_parser import IrradianceRecord

HOURS_PER_YEAR = 8760


# ======================================================================
# Equipment fixtures
# ======================================================================

@pytest.fixture
def module() -> PVModule:
    """585 W bifacial module (Hanwha Q.PEAK DUO XL-G11.7)."""
    return presets.DEFAULT_MODULE


@pytest.fixture
def inverter() -> Inverter:
    """100 kW string inverter (Hanwha Q.VOLT P100K)."""
    return presets.DEFAULT_INVERTER


@pytest.fixture
def system_config() -> SystemConfig:
    return presets.DEFAULT_SYSTEM_CONFIG


@pytest.fixture
def economic_config() -> EconomicConfig:
    return presets.DEFAULT_ECONOMIC_CONFIG


@pytest.fixture
def simple_econ() -> EconomicConfig:
    """All-equity, untaxed, non-degrading project with round numbers.

    100 kW at 4 h/day and PR 80 % yields 116 800 kWh/yr; at 100/kWh
    that is 11.68 M revenue against 1 M O&M, for 10.68 M net per year
    on a 100 M investment.
    """
    return EconomicConfig(
        analysis_mode="flat",
        daily_insolation=4.0,
        system_efficiency=80.0,
        annual_degradation=0.0,
        smp=100.0,
        rec_price=0.0,
        installation_cost_per_kw=1_000_000.0,
        maintenance_cost_per_kw=10_000.0,
        lease_cost_per_kw=0.0,
        discount_rate=5.0,
    )


# ======================================================================
# Weather fixtures
# ======================================================================

@pytest.fixture
def synthetic_tmy() -> tuple[IrradianceRecord, ...]:
    """8760 hourly records with a clear-sky bell between 06:00 and 18:00."""
    hours = np.arange(HOURS_PER_YEAR)
    hour_of_day = hours % 24
    months = np.repeat(np.arange(1, 13), np.asarray(DAYS_IN_MONTH) * 24)
    day_of_year = hours // 24

    ghi = np.where(
        (hour_of_day >= 6) & (hour_of_day <= 18),
        np.sin(np.pi * (hour_of_day - 6) / 12) * 800.0,
        0.0,
    )
    ghi = np.clip(ghi, 0.0, None)

    return tuple(
        IrradianceRecord(
            year=2023,
            month=int(months[i]),
            day=int(day_of_year[i]) + 1,
            hour=int(hour_of_day[i]),
            wind_speed=3.0,
            ghi=float(ghi[i]),
        )
        for i in range(HOURS_PER_YEAR)
    )
