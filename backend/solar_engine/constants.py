"""Physical and economic constants shared by the design engine."""

from __future__ import annotations

# ======================================================================
# Calendar
# ======================================================================

DAYS_IN_MONTH: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
DAYS_PER_YEAR: int = 365
HOURS_PER_DAY: int = 24

# ======================================================================
# Electrical
# ======================================================================

STC_TEMPERATURE_C: float = 25.0

# Conductor resistivity at 20 degC (Ohm*mm^2/m)
CABLE_RESISTIVITY: dict[str, float] = {
    "copper": 0.0172,
    "aluminum": 0.0282,
}
RESISTIVITY_REFERENCE_TEMP_C: float = 20.0
TEMP_COEFF_RESISTANCE: float = 0.00393  # 1/degC

DEFAULT_CABLE_TEMP_C: float = 70.0
VOLTAGE_DROP_LIMIT_PCT: float = 3.0

# Bifacial rear-side model
BIFACIALITY_FACTOR: float = 0.7
MAX_HEIGHT_FACTOR: float = 1.2

# ======================================================================
# Energy yield
# ======================================================================

MIN_TMY_RECORDS: int = 8000
BELL_CURVE_FIRST_HOUR: int = 6
BELL_CURVE_LAST_HOUR: int = 19

# ======================================================================
# Economics
# ======================================================================

ANALYSIS_YEARS: int = 20
DEFAULT_DISCOUNT_RATE: float = 0.045
SENSITIVITY_PRICE_FACTORS: tuple[float, ...] = (0.9, 1.0, 1.1)

# ======================================================================
# Environmental impact
# ======================================================================

CO2_T_PER_MWH: float = 0.4594
CO2_T_PER_PINE_TREE: float = 0.0066
OIL_TOE_PER_MWH: float = 0.215
