"""Economic analysis module."""

from .cashflow import SimulationResult, compute_economics
from .environment import EnvironmentalImpact, environmental_impact
from .financing import LoanTerms, capital_structure, level_payment, loan_amortization, loan_year
from .metrics import lcoe, npv, payback_period, resolve_discount_rate, roi
from .projection import CashFlowPlan, YearlyPrediction, build_plan, project_cash_flows
from .sensitivity import SensitivityResult, price_sensitivity

__all__ = [
    "SimulationResult",
    "compute_economics",
    "EnvironmentalImpact",
    "environmental_impact",
    "LoanTerms",
    "capital_structure",
    "level_payment",
    "loan_amortization",
    "loan_year",
    "lcoe",
    "npv",
    "payback_period",
    "resolve_discount_rate",
    "roi",
    "CashFlowPlan",
    "YearlyPrediction",
    "build_plan",
    "project_cash_flows",
    "SensitivityResult",
    "price_sensitivity",
]
