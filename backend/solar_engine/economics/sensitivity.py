"""Energy-price sensitivity.

Re-runs the cash-flow projection with every energy price term scaled by
-10 %, 0 and +10 %.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..constants import SENSITIVITY_PRICE_FACTORS
from .metrics import payback_period
from .projection import CashFlowPlan, project_cash_flows

logger = logging.getLogger(__name__)

SCENARIO_NAMES: dict[float, str] = {
    0.9: "Pessimistic (-10%)",
    1.0: "Base Case",
    1.1: "Optimistic (+10%)",
}


@dataclass(frozen=True)
class SensitivityResult:
    scenario_name: str
    price_variation_pct: float
    net_profit: float           # final cumulative cash flow + equity
    roi: float                  # (%), one decimal
    payback_period: float


def _scenario_name(factor: float) -> str:
    if factor in SCENARIO_NAMES:
        return SCENARIO_NAMES[factor]
    return f"Price {(factor - 1.0) * 100.0:+.0f}%"


def run_scenario(plan: CashFlowPlan, price_factor: float) -> SensitivityResult:
    projection = project_cash_flows(plan, price_factor=price_factor, keep_rows=False)
    base = plan.investment_base
    roi = projection.final_cumulative / base * 100.0 if base > 0 else 0.0
    return SensitivityResult(
        scenario_name=_scenario_name(price_factor),
        price_variation_pct=round((price_factor - 1.0) * 100.0, 2),
        net_profit=round(projection.final_cumulative + plan.capital.equity, 2),
        roi=round(roi, 1),
        payback_period=round(payback_period(projection.net_cashflows, plan.capital.equity), 2),
    )


def price_sensitivity(
    plan: CashFlowPlan,
    factors: tuple[float, ...] = SENSITIVITY_PRICE_FACTORS,
) -> list[SensitivityResult]:
    """One result per price factor, in the order given (pessimistic first by default)."""
    results = [run_scenario(plan, f) for f in factors]
    logger.debug(
        "Sensitivity ROI: %s",
        ", ".join(f"{r.scenario_name}={r.roi}" for r in results),
    )
    return results
