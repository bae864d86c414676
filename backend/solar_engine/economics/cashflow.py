"""20-year economic simulation of a PV plant.

Ties together the generation estimate, the loss waterfall, the
cash-flow projection, the price sensitivity scenarios, the environmental
benefit and the optional storage estimate into one
:class:`SimulationResult`.

Notes
-----
Generation uses the declared ``system_efficiency`` as performance ratio.
The loss waterfall's ``final_pr`` is reported alongside it for
comparison but does not feed the yield.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..constants import ANALYSIS_YEARS
from ..equipment import BessConfig, EconomicConfig, LossFactors
from ..energy.bess import BessResult, simulate_bess
from ..energy.generation import estimate_generation
from ..energy.losses import LossStep, loss_waterfall
from .environment import EnvironmentalImpact, environmental_impact
from .financing import loan_amortization
from .metrics import lcoe, npv, payback_period, resolve_discount_rate, roi
from .projection import YearlyPrediction, build_plan, project_cash_flows
from .sensitivity import SensitivityResult, price_sensitivity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationResult:
    system_capacity_kw: float
    dc_ac_ratio: float
    analysis_mode_used: str
    yearly_data: list[YearlyPrediction]

    # Totals over the analysis horizon
    total_generation_20y: float          # (MWh)
    total_gross_revenue: float
    total_net_profit: float              # final cumulative cash flow
    total_construction_cost: float       # after ITC
    equity_amount: float
    loan_amount: float
    total_loan_interest: float
    total_tax: float
    total_maintenance_cost: float

    roi: float                           # (%)
    payback_period: float                # years, 0 when never reached
    npv: float
    lcoe: float                          # per kWh
    discount_rate: float                 # (%)

    performance_ratio: float             # declared PR used for yield (%)
    final_pr: float                      # loss waterfall result (%)
    clipping_loss_pct: float
    iam_loss_pct: float

    monthly_generation: list[float]      # year 1 (kWh)
    monthly_avg_insolation: list[float]  # (h/day)
    hourly_generation: list[float]       # average day (kWh)

    environmental_impact: EnvironmentalImpact
    sensitivity: list[SensitivityResult]
    loss_waterfall: list[LossStep] = field(default_factory=list)
    bess_result: BessResult | None = None
    loan_schedule: list[dict[str, float]] = field(default_factory=list)


def compute_economics(
    design_capacity_kw: float,
    dc_ac_ratio: float,
    econ: EconomicConfig,
    bess: BessConfig | None = None,
) -> SimulationResult:
    """Run the full economic simulation for a built DC capacity.

    Parameters
    ----------
    design_capacity_kw : float
        Built (bifacial-adjusted) DC capacity from the array design.
    dc_ac_ratio : float
        Passed through for reporting.
    econ : EconomicConfig
        Yield, price, cost, financing and tax assumptions.
    bess : BessConfig, optional
        Storage sub-configuration; disabled or missing storage is skipped.

    Returns
    -------
    SimulationResult
    """
    profile = estimate_generation(design_capacity_kw, econ)
    waterfall = loss_waterfall(econ.loss_factors)
    iam_loss = (econ.loss_factors or LossFactors()).iam_loss

    plan = build_plan(design_capacity_kw, profile.annual_kwh, econ)
    projection = project_cash_flows(plan)

    equity = plan.capital.equity
    rate = resolve_discount_rate(econ.discount_rate, econ.loan_interest_rate or 0.0)

    storage = simulate_bess(profile.hourly_kwh, bess)

    result = SimulationResult(
        system_capacity_kw=design_capacity_kw,
        dc_ac_ratio=dc_ac_ratio,
        analysis_mode_used=profile.mode_used,
        yearly_data=projection.rows,
        total_generation_20y=projection.total_generation / 1000.0,
        total_gross_revenue=projection.total_revenue,
        total_net_profit=projection.final_cumulative,
        total_construction_cost=plan.capital.construction_cost,
        equity_amount=equity,
        loan_amount=plan.capital.loan,
        total_loan_interest=projection.total_interest,
        total_tax=projection.total_tax,
        total_maintenance_cost=projection.total_om,
        roi=roi(projection.final_cumulative, equity, plan.capital.construction_cost),
        payback_period=payback_period(projection.net_cashflows, equity),
        npv=npv(projection.net_cashflows, rate, equity),
        lcoe=lcoe(
            plan.capital.construction_cost,
            projection.total_om,
            projection.total_interest,
            projection.total_tax,
            projection.total_generation,
        ),
        discount_rate=round(rate * 100.0, 4),
        performance_ratio=econ.system_efficiency,
        final_pr=round(waterfall.final_pr, 2),
        clipping_loss_pct=round(econ.clipping_loss or 0.0, 2),
        iam_loss_pct=iam_loss,
        monthly_generation=[round(v, 2) for v in profile.monthly_kwh],
        monthly_avg_insolation=[round(v, 2) for v in profile.monthly_avg_insolation],
        hourly_generation=[round(v, 2) for v in profile.hourly_kwh],
        environmental_impact=environmental_impact(projection.total_generation / 1000.0 / ANALYSIS_YEARS),
        sensitivity=price_sensitivity(plan),
        loss_waterfall=waterfall.steps,
        bess_result=storage if storage.is_active else None,
        loan_schedule=loan_amortization(plan.loan),
    )

    logger.info(
        "Economics (%s): %.2f kW, ROI %.1f%%, payback %.2f yr, NPV %.0f, LCOE %.2f",
        profile.mode_used,
        design_capacity_kw,
        result.roi,
        result.payback_period,
        result.npv,
        result.lcoe,
    )
    return result
