"""Immutable input records for the design engine.

Datasheet values are at Standard Test Conditions (STC): irradiance
1000 W/m^2, cell temperature 25 degC.  Percentages are expressed in
percent (``2.0`` means 2 %), matching the way datasheets and financing
term sheets quote them.

Every record is frozen: a design run treats its inputs as a snapshot and
recomputation always starts from a fresh set of records.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from .weather.tmy_parser import IrradianceRecord

CableMaterial = Literal["copper", "aluminum"]
AnalysisMode = Literal["flat", "monthly", "hourly"]


# ======================================================================
# Equipment datasheets
# ======================================================================

@dataclass(frozen=True)
class TempCoefficients:
    """Module temperature coefficients (%/degC)."""

    voc: float = -0.26
    pmax: float = -0.34
    isc: float = 0.04


@dataclass(frozen=True)
class PVModule:
    """PV module datasheet."""

    manufacturer: str
    model: str
    pmax: float                 # rated power (W)
    voc: float                  # open-circuit voltage (V)
    isc: float                  # short-circuit current (A)
    vmp: float                  # max-power voltage (V)
    imp: float                  # max-power current (A)
    efficiency: float = 0.0     # (%)
    temp_coefficients: TempCoefficients = field(default_factory=TempCoefficients)
    width: float = 0.0          # (mm)
    height: float = 0.0         # (mm)
    weight: float = 0.0         # (kg)


@dataclass(frozen=True)
class Inverter:
    """String inverter datasheet."""

    manufacturer: str
    model: str
    max_input_voltage: float         # absolute DC ceiling (V)
    min_mppt_voltage: float          # (V)
    max_mppt_voltage: float          # (V)
    startup_voltage: float           # (V)
    max_input_current: float         # per MPPT (A)
    max_short_circuit_current: float # per MPPT (A)
    rated_output_power: float        # AC (kW)
    max_output_power: float = 0.0    # AC (kW)
    rated_output_voltage: float = 380.0
    efficiency: float = 98.0         # (%)
    mppt_count: int = 1


# ======================================================================
# Site / system configuration
# ======================================================================

@dataclass(frozen=True)
class BessConfig:
    """Battery energy storage sub-configuration."""

    enabled: bool = False
    capacity_kwh: float = 0.0
    power_kw: float = 0.0
    efficiency: float = 90.0       # round trip (%)
    dod: float = 90.0              # depth of discharge (%)
    cost_per_kwh: float = 500_000.0
    cycles_per_year: int = 350


@dataclass(frozen=True)
class SystemConfig:
    """Array sizing target and site conditions."""

    target_capacity: float = 500.0          # (kW)
    cable_length: float = 50.0              # one way (m)
    cable_cross_section: float = 6.0        # (mm^2)
    cable_material: CableMaterial = "copper"
    cable_temp: float = 70.0                # conductor operating temp (degC)
    ambient_temp_winter: float = -10.0      # (degC)
    ambient_temp_summer: float = 70.0       # module surface (degC)
    bifacial_gain: float = 0.0              # direct gain (%)
    albedo: float | None = None             # overrides bifacial_gain when set
    mounting_height: float | None = None    # (m)
    bess: BessConfig | None = None


# ======================================================================
# Economics
# ======================================================================

@dataclass(frozen=True)
class LossFactors:
    """Granular loss factors used by the loss waterfall (%)."""

    soiling: float = 2.0
    shading: float = 3.0
    iam_loss: float = 2.0
    mismatch: float = 2.0
    lid: float = 1.5
    dc_wiring: float = 1.5
    ac_wiring: float = 1.0
    inverter_efficiency: float = 98.0
    availability: float = 0.5


@dataclass(frozen=True)
class EconomicConfig:
    """Energy-yield, revenue, cost, financing and tax assumptions."""

    analysis_mode: AnalysisMode = "flat"
    daily_insolation: float = 3.51                   # (h/day)
    monthly_insolation: tuple[float, ...] = ()       # 12 values (h/day)
    tmy_records: tuple[IrradianceRecord, ...] = ()
    system_efficiency: float = 80.0                  # PR (%)
    loss_factors: LossFactors | None = None
    clipping_loss: float = 0.0                       # (%)
    annual_degradation: float = 0.33                 # (%/yr)

    # Revenue
    smp: float = 130.0                               # energy price (per kWh)
    rec_price: float = 60_000.0                      # per REC (1 MWh)
    rec_weight: float = 1.0
    ppa_enabled: bool = False
    ppa_rate: float = 0.0                            # (per kWh)
    ppa_escalation: float = 0.0                      # (%/yr)
    itc_percent: float = 0.0

    # Costs
    installation_cost_per_kw: float = 1_200_000.0
    maintenance_cost_per_kw: float = 25_000.0        # per year
    lease_cost_per_kw: float = 40_000.0              # per year
    inflation_rate: float = 0.0                      # (%)

    # Financing
    equity_percent: float = 100.0
    loan_interest_rate: float = 0.0                  # (%)
    loan_term: int = 0                               # (years)
    loan_grace_period: int = 0                       # (years)
    discount_rate: float | None = None               # (%)

    # Tax
    corporate_tax_rate: float = 0.0                  # (%)
    depreciation_period: int = 20                    # (years)
