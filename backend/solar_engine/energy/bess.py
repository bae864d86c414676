"""Battery energy storage: simplified daily-cycle estimate.

The battery charges from midday PV output (hours 10..16, limited by the
converter power and the usable capacity) and discharges once in the
evening.  No state-of-charge time series is kept; this is a sizing-level
estimate over the 20-year analysis horizon.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from ..constants import ANALYSIS_YEARS, DAYS_PER_YEAR
from ..equipment import BessConfig

logger = logging.getLogger(__name__)

CHARGE_FIRST_HOUR: int = 10
CHARGE_LAST_HOUR: int = 16
PEAK_SHAVING_VALUE_PER_KWH: float = 100.0


@dataclass(frozen=True)
class BessResult:
    stored_energy_total_20y: float      # (MWh)
    discharged_energy_total_20y: float  # (MWh)
    self_consumption_increase: float    # (%)
    peak_shaving_benefit: float
    bess_capex: float

    @property
    def is_active(self) -> bool:
        return self.stored_energy_total_20y > 0


_EMPTY = BessResult(0.0, 0.0, 0.0, 0.0, 0.0)


def simulate_bess(hourly_generation, bess: BessConfig | None) -> BessResult:
    """Estimate storage throughput from an average-day generation profile.

    Parameters
    ----------
    hourly_generation : sequence of float
        24 average-day hourly generation values (kWh).
    bess : BessConfig or None
        Disabled, missing or zero-capacity storage yields an all-zero result.
    """
    if bess is None or not bess.enabled or bess.capacity_kwh <= 0:
        return _EMPTY

    hourly = np.asarray(hourly_generation, dtype=np.float64)
    usable_kwh = bess.capacity_kwh * bess.dod / 100.0

    window = hourly[CHARGE_FIRST_HOUR:CHARGE_LAST_HOUR + 1]
    daily_stored = min(float(np.minimum(window, bess.power_kw).sum()), usable_kwh)
    daily_discharged = daily_stored * bess.efficiency / 100.0

    daily_total = float(hourly.sum()) or 1.0
    result = BessResult(
        stored_energy_total_20y=daily_stored * DAYS_PER_YEAR * ANALYSIS_YEARS / 1000.0,
        discharged_energy_total_20y=daily_discharged * DAYS_PER_YEAR / 1000.0 * ANALYSIS_YEARS,
        self_consumption_increase=daily_discharged / daily_total * 100.0,
        peak_shaving_benefit=daily_discharged * DAYS_PER_YEAR * ANALYSIS_YEARS * PEAK_SHAVING_VALUE_PER_KWH,
        bess_capex=bess.capacity_kwh * bess.cost_per_kwh,
    )
    logger.debug("BESS: %.1f kWh/day stored, %.1f kWh/day discharged", daily_stored, daily_discharged)
    return result
