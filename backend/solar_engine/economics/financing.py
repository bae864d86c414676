"""Project financing: equity/debt split and level-payment loan amortization.

The loan carries an optional grace period during which only interest is
paid; the principal is then repaid with a level annual payment over the
remaining ``loan_term - grace_period`` years.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CapitalStructure:
    construction_cost: float  # after ITC
    itc_amount: float
    equity: float
    loan: float


@dataclass(frozen=True)
class LoanTerms:
    principal: float
    rate: float               # fraction, e.g. 0.0175
    term: int                 # years
    grace_period: int = 0     # years

    @property
    def amortization_years(self) -> int:
        return max(0, self.term - self.grace_period)


@dataclass(frozen=True)
class LoanYear:
    """Debt service for one year, plus the balance left after it."""

    payment: float
    interest: float
    principal: float
    balance: float


def capital_structure(
    capacity_kw: float,
    cost_per_kw: float,
    itc_percent: float = 0.0,
    equity_percent: float = 100.0,
) -> CapitalStructure:
    """Split the net construction cost into equity and loan."""
    gross = capacity_kw * cost_per_kw
    itc = gross * (itc_percent or 0.0) / 100.0
    net = gross - itc
    equity_ratio = equity_percent / 100.0
    return CapitalStructure(
        construction_cost=net,
        itc_amount=itc,
        equity=net * equity_ratio,
        loan=net * (1.0 - equity_ratio),
    )


def level_payment(principal: float, rate: float, periods: int) -> float:
    """Annual annuity payment: ``P*r / (1 - (1+r)^-n)``, straight-line when r == 0."""
    if principal <= 0 or periods <= 0:
        return 0.0
    if rate == 0:
        return principal / periods
    return principal * rate / (1.0 - (1.0 + rate) ** -periods)


def loan_year(
    terms: LoanTerms,
    year: int,
    balance: float,
    payment: float,
) -> LoanYear:
    """Advance the loan by one year.

    Nothing is due once the balance is repaid, and any balance still
    outstanding after ``terms.term`` is written off.  During the grace
    period only interest is paid.  Afterwards the level payment is due;
    the final payment is trimmed to the outstanding balance plus
    interest, and a residual balance below 1 is written off.
    """
    if terms.principal <= 0 or balance <= 0:
        return LoanYear(0.0, 0.0, 0.0, balance)
    if year > terms.term:
        return LoanYear(0.0, 0.0, 0.0, 0.0)

    interest = balance * terms.rate
    if year <= terms.grace_period:
        return LoanYear(interest, interest, 0.0, balance)

    if balance + interest < payment + 1:
        payment = balance + interest
    principal = payment - interest
    balance -= principal
    if balance < 1:
        balance = 0.0
    return LoanYear(payment, interest, principal, balance)


def loan_amortization(terms: LoanTerms) -> list[dict[str, float]]:
    """Generate a loan amortization schedule.

    Returns a list of dicts with keys: year, payment, principal_payment,
    interest_payment, remaining_balance.  The schedule stops at the loan
    term or once the balance reaches zero, whichever comes first.
    """
    if terms.term <= 0 or terms.principal <= 0:
        return []

    payment = level_payment(terms.principal, terms.rate, terms.amortization_years)
    schedule = []
    balance = terms.principal
    for yr in range(1, terms.term + 1):
        step = loan_year(terms, yr, balance, payment)
        balance = step.balance
        schedule.append({
            "year": yr,
            "payment": round(step.payment, 2),
            "principal_payment": round(step.principal, 2),
            "interest_payment": round(step.interest, 2),
            "remaining_balance": round(balance, 2),
        })
        if balance <= 0:
            break

    return schedule
