"""Core investment metrics over a yearly cash-flow series.

All series are indexed by project year starting at 1; the equity outlay
is treated as the year-0 cash flow.
"""

from __future__ import annotations

from typing import Sequence

from ..constants import DEFAULT_DISCOUNT_RATE


# ======================================================================
# Internal helpers
# ======================================================================

def _discount_factor(rate: float, year: int) -> float:
    """Return ``1 / (1 + rate) ** year``."""
    return 1.0 / (1.0 + rate) ** year


# ======================================================================
# Metrics
# ======================================================================

def resolve_discount_rate(discount_rate_pct: float | None, loan_rate_pct: float = 0.0) -> float:
    """Discount rate as a fraction.

    An explicit rate wins; otherwise the loan rate is used when positive,
    and the 4.5 % default when not.
    """
    if discount_rate_pct is not None:
        return discount_rate_pct / 100.0
    if loan_rate_pct > 0:
        return loan_rate_pct / 100.0
    return DEFAULT_DISCOUNT_RATE


def payback_period(net_cashflows: Sequence[float], equity: float) -> float:
    """Years until the cumulative cash flow (starting at ``-equity``) turns non-negative.

    The crossing year is interpolated linearly from that year's net cash
    flow.  Returns 0.0 when the investment is never recovered.
    """
    cumulative = -equity
    for year, net in enumerate(net_cashflows, start=1):
        previous = cumulative
        cumulative += net
        if cumulative >= 0:
            fraction = -previous / net if net > 0 else 0.0
            return (year - 1) + fraction
    return 0.0


def npv(net_cashflows: Sequence[float], rate: float, equity: float) -> float:
    """Net present value of the yearly net cash flows less the equity outlay."""
    return sum(net * _discount_factor(rate, yr) for yr, net in enumerate(net_cashflows, start=1)) - equity


def lcoe(
    construction_cost: float,
    total_om: float,
    total_interest: float,
    total_tax: float,
    total_generation_kwh: float,
) -> float:
    """Undiscounted life-cycle cost per kWh generated (0 when nothing is generated)."""
    if total_generation_kwh <= 0:
        return 0.0
    return (construction_cost + total_om + total_interest + total_tax) / total_generation_kwh


def roi(final_cumulative: float, equity: float, construction_cost: float) -> float:
    """Return on the equity invested (%), or on the full cost when fully debt financed."""
    base = equity if equity > 0 else construction_cost
    if base <= 0:
        return 0.0
    return final_cumulative / base * 100.0
