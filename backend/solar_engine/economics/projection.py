"""Year-by-year cash-flow projection.

A :class:`CashFlowPlan` holds everything that is fixed for the life of
the project (capital structure, loan terms, base-year generation, cost
base).  :func:`project_cash_flows` walks the analysis horizon in strict
year order, since each year's loan balance and cumulative cash flow
depend on the year before.  The same loop serves the base case and the
price-sensitivity scenarios; only the price factor differs.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from ..constants import ANALYSIS_YEARS
from ..equipment import EconomicConfig
from .financing import CapitalStructure, LoanTerms, capital_structure, level_payment, loan_year


@dataclass(frozen=True)
class CashFlowPlan:
    capacity_kw: float
    base_generation_kwh: float     # year 1
    capital: CapitalStructure
    loan: LoanTerms
    annual_payment: float          # level payment after the grace period
    annual_depreciation: float
    fixed_cost_base: float         # O&M + lease, year 1
    econ: EconomicConfig
    years: int = ANALYSIS_YEARS

    @property
    def investment_base(self) -> float:
        """Denominator for ROI: the equity, or the full cost when fully debt financed."""
        return self.capital.equity if self.capital.equity > 0 else self.capital.construction_cost


@dataclass(frozen=True)
class YearlyPrediction:
    """One projected year.  Monetary values in project currency, energy in kWh."""

    year: int
    efficiency_rate: float         # remaining output after degradation (%)
    annual_generation: float
    monthly_avg_generation: float
    gross_revenue: float
    maintenance_cost: float
    loan_payment: float
    interest_payment: float
    principal_payment: float
    remaining_principal: float
    depreciation: float
    taxable_income: float
    corporate_tax: float
    net_revenue: float
    cumulative_cash_flow: float


@dataclass
class CashFlowProjection:
    net_cashflows: list[float] = field(default_factory=list)
    rows: list[YearlyPrediction] = field(default_factory=list)
    final_cumulative: float = 0.0
    total_generation: float = 0.0
    total_revenue: float = 0.0
    total_om: float = 0.0
    total_interest: float = 0.0
    total_tax: float = 0.0


def build_plan(capacity_kw: float, base_generation_kwh: float, econ: EconomicConfig) -> CashFlowPlan:
    """Derive the fixed project quantities from the economic assumptions."""
    capital = capital_structure(
        capacity_kw,
        econ.installation_cost_per_kw,
        econ.itc_percent,
        econ.equity_percent,
    )
    loan = LoanTerms(
        principal=capital.loan,
        rate=(econ.loan_interest_rate or 0.0) / 100.0,
        term=econ.loan_term or 0,
        grace_period=econ.loan_grace_period or 0,
    )
    period = econ.depreciation_period
    return CashFlowPlan(
        capacity_kw=capacity_kw,
        base_generation_kwh=base_generation_kwh,
        capital=capital,
        loan=loan,
        annual_payment=level_payment(loan.principal, loan.rate, loan.amortization_years),
        annual_depreciation=capital.construction_cost / period if period > 0 else 0.0,
        fixed_cost_base=capacity_kw * (econ.maintenance_cost_per_kw + econ.lease_cost_per_kw),
        econ=econ,
    )


def _gross_revenue(generation: float, year: int, econ: EconomicConfig, price_factor: float) -> float:
    if econ.ppa_enabled and econ.ppa_rate:
        rate = econ.ppa_rate * (1.0 + (econ.ppa_escalation or 0.0) / 100.0) ** (year - 1)
        return generation * rate * price_factor
    energy = generation * econ.smp * price_factor
    certificates = (generation / 1000.0) * econ.rec_price * econ.rec_weight * price_factor
    return energy + certificates


def project_cash_flows(
    plan: CashFlowPlan,
    price_factor: float = 1.0,
    keep_rows: bool = True,
) -> CashFlowProjection:
    """Run the yearly loop over the analysis horizon.

    Parameters
    ----------
    plan : CashFlowPlan
        Fixed project quantities from :func:`build_plan`.
    price_factor : float
        Multiplier on every energy price term (SMP, REC, PPA rate).
    keep_rows : bool
        Build the per-year :class:`YearlyPrediction` rows.  Scenario runs
        only need the aggregates.

    Returns
    -------
    CashFlowProjection
        ``final_cumulative`` always equals ``-equity + sum(net_cashflows)``.
    """
    econ = plan.econ
    tax_rate = (econ.corporate_tax_rate or 0.0) / 100.0
    inflation = (econ.inflation_rate or 0.0) / 100.0

    out = CashFlowProjection()
    cumulative = -plan.capital.equity
    balance = plan.loan.principal

    for yr in range(1, plan.years + 1):
        efficiency = 1.0 - (econ.annual_degradation / 100.0) * (yr - 1)
        generation = plan.base_generation_kwh * efficiency
        revenue = _gross_revenue(generation, yr, econ, price_factor)
        cost = plan.fixed_cost_base * (1.0 + inflation) ** (yr - 1)

        debt = loan_year(plan.loan, yr, balance, plan.annual_payment)
        balance = debt.balance

        depreciation = plan.annual_depreciation if yr <= econ.depreciation_period else 0.0
        taxable = max(0.0, revenue - cost - debt.interest - depreciation)
        tax = taxable * tax_rate
        net = revenue - cost - debt.interest - debt.principal - tax
        cumulative += net

        out.net_cashflows.append(net)
        out.total_generation += generation
        out.total_revenue += revenue
        out.total_om += cost
        out.total_interest += debt.interest
        out.total_tax += tax

        if keep_rows:
            out.rows.append(YearlyPrediction(
                year=yr,
                efficiency_rate=round(efficiency * 100.0, 2),
                annual_generation=round(generation, 2),
                monthly_avg_generation=round(generation / 12.0, 2),
                gross_revenue=round(revenue, 2),
                maintenance_cost=round(cost, 2),
                loan_payment=round(debt.payment, 2),
                interest_payment=round(debt.interest, 2),
                principal_payment=round(debt.principal, 2),
                remaining_principal=round(balance, 2),
                depreciation=round(depreciation, 2),
                taxable_income=round(taxable, 2),
                corporate_tax=round(tax, 2),
                net_revenue=round(net, 2),
                cumulative_cash_flow=round(cumulative, 2),
            ))

    out.final_cumulative = cumulative
    return out
