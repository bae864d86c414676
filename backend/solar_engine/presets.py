"""Factory default equipment and project assumptions.

A 500 kW commercial rooftop/ground-mount reference design using a 585 W
bifacial module and a 100 kW string inverter, with Korean market price
and financing assumptions (prices in KRW).
"""

from __future__ import annotations

from .equipment import (
    BessConfig,
    EconomicConfig,
    Inverter,
    LossFactors,
    PVModule,
    SystemConfig,
    TempCoefficients,
)

# ======================================================================
# Equipment
# ======================================================================

HANWHA_Q_PEAK_585 = PVModule(
    manufacturer="Hanwha Q CELLS",
    model="Q.PEAK DUO XL-G11.7 585",
    pmax=585.0,
    voc=53.68,
    isc=13.95,
    vmp=44.88,
    imp=13.04,
    efficiency=21.7,
    temp_coefficients=TempCoefficients(voc=-0.26, pmax=-0.34, isc=0.04),
    width=1134.0,
    height=2416.0,
    weight=30.7,
)

HANWHA_Q_VOLT_P100K = Inverter(
    manufacturer="Hanwha Q CELLS",
    model="Q.VOLT P100K",
    max_input_voltage=1100.0,
    min_mppt_voltage=200.0,
    max_mppt_voltage=1000.0,
    startup_voltage=250.0,
    max_input_current=26.0,
    max_short_circuit_current=40.0,
    rated_output_power=100.0,
    max_output_power=110.0,
    rated_output_voltage=380.0,
    efficiency=98.7,
    mppt_count=10,
)

DEFAULT_MODULE = HANWHA_Q_PEAK_585
DEFAULT_INVERTER = HANWHA_Q_VOLT_P100K

# ======================================================================
# Site and project
# ======================================================================

DEFAULT_SYSTEM_CONFIG = SystemConfig(
    target_capacity=500.0,
    cable_length=50.0,
    cable_cross_section=6.0,
    ambient_temp_winter=-10.0,
    ambient_temp_summer=70.0,  # module surface temperature
    bifacial_gain=0.0,
    albedo=0.2,
    mounting_height=1.0,
    bess=BessConfig(),
)

# Peak-sun hours per day, January..December
DEFAULT_MONTHLY_INSOLATION: tuple[float, ...] = (
    2.8, 3.2, 3.8, 4.2, 4.5, 4.2, 3.5, 3.8, 3.6, 3.5, 2.9, 2.7,
)

DEFAULT_ECONOMIC_CONFIG = EconomicConfig(
    analysis_mode="flat",
    daily_insolation=3.51,
    monthly_insolation=DEFAULT_MONTHLY_INSOLATION,
    system_efficiency=80.0,
    loss_factors=LossFactors(),
    annual_degradation=0.33,
    smp=130.0,
    rec_price=60_000.0,
    rec_weight=1.0,
    ppa_enabled=False,
    ppa_rate=150.0,
    ppa_escalation=1.0,
    itc_percent=0.0,
    discount_rate=4.5,
    installation_cost_per_kw=1_200_000.0,
    maintenance_cost_per_kw=25_000.0,
    lease_cost_per_kw=40_000.0,
    inflation_rate=2.5,
    equity_percent=20.0,
    loan_interest_rate=1.75,
    loan_term=15,
    loan_grace_period=5,
    corporate_tax_rate=10.0,
    depreciation_period=20,
)
