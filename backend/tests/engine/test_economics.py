"""Tests for the 20-year cash-flow simulation, metrics and sensitivity."""
from dataclasses import replace

import pytest

from solar_engine.economics.cashflow import compute_economics
from solar_engine.economics.environment import environmental_impact
from solar_engine.economics.metrics import lcoe, npv, payback_period, resolve_discount_rate, roi
from solar_engine.economics.projection import build_plan, project_cash_flows
from solar_engine.economics.sensitivity import price_sensitivity
from solar_engine.equipment import BessConfig

NET_PER_YEAR = 11_680_000.0 - 1_000_000.0
INVESTMENT = 100_000_000.0


class TestMetrics:
    def test_payback_interpolates(self):
        assert payback_period([40.0, 40.0, 40.0], 100.0) == pytest.approx(2.5)

    def test_payback_never_reached(self):
        assert payback_period([1.0] * 20, 100.0) == 0.0

    def test_payback_with_no_equity(self):
        assert payback_period([5.0, 5.0], 0.0) == pytest.approx(0.0)

    def test_npv(self):
        assert npv([110.0], 0.10, 100.0) == pytest.approx(0.0)

    def test_lcoe_no_generation(self):
        assert lcoe(100.0, 10.0, 0.0, 0.0, 0.0) == 0.0

    def test_roi_falls_back_to_construction_cost(self):
        assert roi(50.0, 0.0, 200.0) == pytest.approx(25.0)

    @pytest.mark.parametrize(
        "discount, loan, expected",
        [(6.0, 3.0, 0.06), (None, 3.0, 0.03), (None, 0.0, 0.045), (0.0, 3.0, 0.0)],
    )
    def test_discount_rate_resolution(self, discount, loan, expected):
        assert resolve_discount_rate(discount, loan) == pytest.approx(expected)


class TestSimpleProject:
    def test_cash_flows(self, simple_econ):
        result = compute_economics(100.0, 1.0, simple_econ)
        assert len(result.yearly_data) == 20
        assert result.total_construction_cost == pytest.approx(INVESTMENT)
        assert result.equity_amount == pytest.approx(INVESTMENT)
        assert result.loan_amount == 0.0
        for row in result.yearly_data:
            assert row.net_revenue == pytest.approx(NET_PER_YEAR)
            assert row.loan_payment == 0.0

    def test_payback(self, simple_econ):
        result = compute_economics(100.0, 1.0, simple_econ)
        assert result.payback_period == pytest.approx(INVESTMENT / NET_PER_YEAR)

    def test_roi(self, simple_econ):
        result = compute_economics(100.0, 1.0, simple_econ)
        assert result.roi == pytest.approx((20 * NET_PER_YEAR - INVESTMENT) / INVESTMENT * 100)

    def test_npv(self, simple_econ):
        result = compute_economics(100.0, 1.0, simple_econ)
        expected = sum(NET_PER_YEAR / 1.05 ** y for y in range(1, 21)) - INVESTMENT
        assert result.npv == pytest.approx(expected)
        assert result.discount_rate == pytest.approx(5.0)

    def test_lcoe(self, simple_econ):
        result = compute_economics(100.0, 1.0, simple_econ)
        assert result.lcoe == pytest.approx((INVESTMENT + 20 * 1_000_000) / (20 * 116_800))

    def test_environmental_impact_uses_average_year(self, simple_econ):
        result = compute_economics(100.0, 1.0, simple_econ)
        assert result.environmental_impact == environmental_impact(116.8)

    def test_ppa_revenue(self, simple_econ):
        econ = replace(simple_econ, ppa_enabled=True, ppa_rate=150.0, ppa_escalation=2.0)
        result = compute_economics(100.0, 1.0, econ)
        assert result.yearly_data[0].gross_revenue == pytest.approx(116_800 * 150)
        assert result.yearly_data[1].gross_revenue == pytest.approx(116_800 * 150 * 1.02)

    def test_ppa_without_rate_uses_market_price(self, simple_econ):
        econ = replace(simple_econ, ppa_enabled=True, ppa_rate=0.0)
        result = compute_economics(100.0, 1.0, econ)
        assert result.yearly_data[0].gross_revenue == pytest.approx(11_680_000)


class TestFinancedProject:
    def test_conservation(self, economic_config):
        plan = build_plan(576.2016, 600_000.0, economic_config)
        projection = project_cash_flows(plan)
        assert projection.final_cumulative == pytest.approx(
            -plan.capital.equity + sum(projection.net_cashflows)
        )
        assert projection.rows[-1].cumulative_cash_flow == pytest.approx(projection.final_cumulative, abs=0.01)

    def test_loan_repaid_by_term(self, economic_config):
        result = compute_economics(576.2016, 1.15, economic_config)
        rows = result.yearly_data
        assert rows[14].remaining_principal == 0.0
        for row in rows[15:]:
            assert row.loan_payment == 0.0
            assert row.interest_payment == 0.0
        principal = sum(r.principal_payment for r in rows)
        assert principal == pytest.approx(result.loan_amount, abs=1.0)

    def test_grace_years_pay_interest_only(self, economic_config):
        result = compute_economics(576.2016, 1.15, economic_config)
        for row in result.yearly_data[:5]:
            assert row.principal_payment == 0.0
            assert row.interest_payment == pytest.approx(result.loan_amount * 0.0175, abs=0.01)

    def test_degradation(self, economic_config):
        result = compute_economics(576.2016, 1.15, economic_config)
        first, second = result.yearly_data[0], result.yearly_data[1]
        assert second.annual_generation == pytest.approx(first.annual_generation * (1 - 0.0033), abs=0.02)
        assert second.efficiency_rate == pytest.approx(99.67)

    def test_tax_never_negative(self, economic_config):
        result = compute_economics(576.2016, 1.15, economic_config)
        for row in result.yearly_data:
            assert row.taxable_income >= 0
            assert row.corporate_tax >= 0

    def test_reported_figures(self, economic_config):
        result = compute_economics(576.2016, 1.15, economic_config)
        assert result.analysis_mode_used == "flat"
        assert result.performance_ratio == 80.0
        assert 0 < result.final_pr < 100
        assert result.iam_loss_pct == 2.0
        assert len(result.monthly_generation) == 12
        assert len(result.hourly_generation) == 24
        assert result.total_net_profit == pytest.approx(result.yearly_data[-1].cumulative_cash_flow, abs=0.01)
        assert result.bess_result is None

    def test_loan_schedule_matches_yearly_rows(self, economic_config):
        result = compute_economics(576.2016, 1.15, economic_config)
        schedule = result.loan_schedule
        assert [e["year"] for e in schedule] == list(range(1, 16))
        for entry, row in zip(schedule, result.yearly_data):
            assert entry["interest_payment"] == pytest.approx(row.interest_payment, abs=0.01)
            assert entry["principal_payment"] == pytest.approx(row.principal_payment, abs=0.01)
            assert entry["remaining_balance"] == pytest.approx(row.remaining_principal, abs=0.01)

    def test_no_loan_schedule_when_all_equity(self, simple_econ):
        assert compute_economics(100.0, 1.0, simple_econ).loan_schedule == []

    def test_unamortized_balance_cleared_after_term(self, economic_config):
        econ = replace(economic_config, loan_term=5, loan_grace_period=5)
        rows = compute_economics(576.2016, 1.15, econ).yearly_data
        for row in rows[:5]:
            assert row.principal_payment == 0.0
            assert row.remaining_principal > 0
        for row in rows[5:]:
            assert row.remaining_principal == 0.0
            assert row.interest_payment == 0.0

    def test_bess_reported_when_enabled(self, economic_config):
        bess = BessConfig(enabled=True, capacity_kwh=200, power_kw=100)
        result = compute_economics(576.2016, 1.15, economic_config, bess=bess)
        assert result.bess_result is not None
        assert result.bess_result.bess_capex == pytest.approx(200 * 500_000)


class TestSensitivity:
    def test_three_ordered_scenarios(self, economic_config):
        plan = build_plan(576.2016, 600_000.0, economic_config)
        results = price_sensitivity(plan)
        assert [r.scenario_name for r in results] == ["Pessimistic (-10%)", "Base Case", "Optimistic (+10%)"]
        assert [r.price_variation_pct for r in results] == pytest.approx([-10.0, 0.0, 10.0])
        assert results[0].net_profit < results[1].net_profit < results[2].net_profit
        assert results[0].roi <= results[1].roi <= results[2].roi

    def test_base_case_matches_simulation(self, economic_config):
        result = compute_economics(576.2016, 1.15, economic_config)
        base = result.sensitivity[1]
        assert base.roi == pytest.approx(round(result.roi, 1))
        assert base.net_profit == pytest.approx(result.total_net_profit + result.equity_amount, abs=0.01)
        assert base.payback_period == pytest.approx(result.payback_period, abs=0.01)

    def test_ppa_rate_is_scaled(self, simple_econ):
        econ = replace(simple_econ, ppa_enabled=True, ppa_rate=150.0)
        plan = build_plan(100.0, 116_800.0, econ)
        low, base, high = price_sensitivity(plan)
        assert high.net_profit - base.net_profit == pytest.approx(20 * 116_800 * 15, rel=1e-6)


class TestEnvironmentalImpact:
    def test_factors(self):
        impact = environmental_impact(1000.0)
        assert impact.co2_reduction == pytest.approx(459.4)
        assert impact.pine_trees_planted == 69606
        assert impact.oil_substitution == pytest.approx(215.0)

    def test_zero(self):
        impact = environmental_impact(0.0)
        assert impact.co2_reduction == 0.0
        assert impact.pine_trees_planted == 0
