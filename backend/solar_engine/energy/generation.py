"""Energy-yield estimation.

Three precision modes produce the base (year-1) annual generation plus the
monthly and average-day hourly profiles used by the cash-flow simulator
and the reporting layer:

* ``flat``    -- one daily peak-sun-hours figure for the whole year,
* ``monthly`` -- twelve monthly peak-sun-hours figures,
* ``hourly``  -- a TMY series of hourly GHI records (>= 8000 records).

A request that lacks the data for its mode falls back to the next
coarser mode instead of failing; the mode actually used is reported.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from ..constants import (
    BELL_CURVE_FIRST_HOUR,
    BELL_CURVE_LAST_HOUR,
    DAYS_IN_MONTH,
    DAYS_PER_YEAR,
    HOURS_PER_DAY,
)
from ..equipment import EconomicConfig
from ..weather.tmy_parser import has_hourly_coverage, records_to_arrays

logger = logging.getLogger(__name__)

_DAYS = np.asarray(DAYS_IN_MONTH, dtype=np.float64)


@dataclass(frozen=True)
class GenerationProfile:
    """Year-1 generation (kWh) and the profiles behind it."""

    mode_used: str
    annual_kwh: float
    monthly_kwh: list[float]             # 12 values
    hourly_kwh: list[float]              # 24 values, average day
    monthly_avg_insolation: list[float]  # 12 values (h/day)


# ======================================================================
# Helpers
# ======================================================================

def performance_ratio(econ: EconomicConfig) -> float:
    """Declared PR as a fraction, derated by the clipping loss."""
    clipping_factor = 1.0 - (econ.clipping_loss or 0.0) / 100.0
    return (econ.system_efficiency / 100.0) * clipping_factor


def bell_curve_profile(daily_kwh: float) -> NDArray[np.float64]:
    """Spread *daily_kwh* over a half-sine daylight window.

    The shape is ``sin((h - 6) / 13 * pi)`` for hours 6..19 and zero
    elsewhere, scaled so the 24 values sum to *daily_kwh*.
    """
    hours = np.arange(HOURS_PER_DAY, dtype=np.float64)
    span = BELL_CURVE_LAST_HOUR - BELL_CURVE_FIRST_HOUR
    shape = np.where(
        (hours >= BELL_CURVE_FIRST_HOUR) & (hours <= BELL_CURVE_LAST_HOUR),
        np.sin((hours - BELL_CURVE_FIRST_HOUR) / span * np.pi),
        0.0,
    )
    total = shape.sum()
    if total <= 0 or daily_kwh <= 0:
        return np.zeros(HOURS_PER_DAY)
    return shape / total * daily_kwh


def resolve_mode(econ: EconomicConfig) -> str:
    """Mode that can actually run with the data supplied."""
    requested = econ.analysis_mode
    has_monthly = len(econ.monthly_insolation) == 12

    if requested == "hourly":
        if has_hourly_coverage(econ.tmy_records):
            return "hourly"
        fallback = "monthly" if has_monthly else "flat"
        logger.warning(
            "Hourly analysis needs TMY coverage (%d records supplied); falling back to %s",
            len(econ.tmy_records),
            fallback,
        )
        return fallback

    if requested == "monthly" and not has_monthly:
        logger.warning(
            "Monthly analysis needs 12 insolation values (%d supplied); falling back to flat",
            len(econ.monthly_insolation),
        )
        return "flat"

    return requested


# ======================================================================
# Modes
# ======================================================================

def _flat(capacity_kw: float, econ: EconomicConfig, pr: float) -> GenerationProfile:
    annual = capacity_kw * econ.daily_insolation * DAYS_PER_YEAR * pr
    monthly = annual / DAYS_PER_YEAR * _DAYS
    return GenerationProfile(
        mode_used="flat",
        annual_kwh=float(annual),
        monthly_kwh=monthly.tolist(),
        hourly_kwh=bell_curve_profile(annual / DAYS_PER_YEAR).tolist(),
        monthly_avg_insolation=[float(econ.daily_insolation)] * 12,
    )


def _monthly(capacity_kw: float, econ: EconomicConfig, pr: float) -> GenerationProfile:
    hours = np.asarray(econ.monthly_insolation, dtype=np.float64)
    monthly = capacity_kw * hours * _DAYS * pr
    annual = float(monthly.sum())
    return GenerationProfile(
        mode_used="monthly",
        annual_kwh=annual,
        monthly_kwh=monthly.tolist(),
        hourly_kwh=bell_curve_profile(annual / DAYS_PER_YEAR).tolist(),
        monthly_avg_insolation=hours.tolist(),
    )


def _hourly(capacity_kw: float, econ: EconomicConfig, pr: float) -> GenerationProfile:
    cols = records_to_arrays(econ.tmy_records)
    gen = capacity_kw * (cols["ghi"] / 1000.0) * pr

    in_year = (cols["month"] >= 1) & (cols["month"] <= 12)
    month_idx = cols["month"][in_year] - 1
    monthly = np.bincount(month_idx, weights=gen[in_year], minlength=12)
    ghi_sum = np.bincount(month_idx, weights=cols["ghi"][in_year], minlength=12)

    hour_idx = np.mod(cols["hour"][in_year], HOURS_PER_DAY)
    hourly = np.bincount(hour_idx, weights=gen[in_year], minlength=HOURS_PER_DAY) / DAYS_PER_YEAR

    return GenerationProfile(
        mode_used="hourly",
        annual_kwh=float(monthly.sum()),
        monthly_kwh=monthly.tolist(),
        hourly_kwh=hourly.tolist(),
        monthly_avg_insolation=(ghi_sum / 1000.0 / _DAYS).tolist(),
    )


_MODES = {"flat": _flat, "monthly": _monthly, "hourly": _hourly}


def estimate_generation(capacity_kw: float, econ: EconomicConfig) -> GenerationProfile:
    """Year-1 generation for *capacity_kw* of DC capacity.

    Parameters
    ----------
    capacity_kw : float
        Built (bifacial-adjusted) DC capacity.
    econ : EconomicConfig
        Supplies the analysis mode, insolation data, PR and clipping loss.

    Returns
    -------
    GenerationProfile
        ``annual_kwh`` always equals the sum of ``monthly_kwh``.
    """
    pr = performance_ratio(econ)
    mode = resolve_mode(econ)
    profile = _MODES[mode](capacity_kw, econ, pr)
    logger.debug(
        "Generation (%s): %.0f kWh/yr for %.2f kW at PR %.3f",
        mode,
        profile.annual_kwh,
        capacity_kw,
        pr,
    )
    return profile
