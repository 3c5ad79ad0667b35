"""Tests for the projection engine."""

import math
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from models.policy import DeductionPolicy
from models.scenario import Scenario
from engine.projection_engine import compute_year, project_scenario, current_year

REF_YEAR = 2025


def make_scenario(
    base=9000.0, point_value=20.0, points=100, vi_rate=15.0, days=20,
    dependents=0, basic_pct=0.0, gepi_cents=0.0, vi_reaj=0.0, years=None,
):
    return Scenario(
        scenario_id="test", name="Test",
        base_salary=base, gepi_point_value=point_value, gepi_points=points,
        vi_per_help_day=vi_rate, help_days=days, dependents=dependents,
        basic_annual_pct_reaj=basic_pct, gepi_cents_annual=gepi_cents,
        vi_reaj_annual=vi_reaj, years=years,
    )


class TestReferenceExample:
    def test_year_zero_values(self):
        result = project_scenario(make_scenario(), years=1, reference_year=REF_YEAR)
        r = result.records[0]

        assert len(result) == 2
        assert r.gross_monthly == pytest.approx(11300)
        assert r.gross_annual == pytest.approx(135600)
        assert r.social_contribution == pytest.approx(18984)
        assert r.taxable_base == pytest.approx(116616)
        assert r.income_tax == pytest.approx(17492.4)
        assert r.net_annual == pytest.approx(99123.6)

    def test_parallel_series(self):
        result = project_scenario(make_scenario(), years=1, reference_year=REF_YEAR)
        assert result.labels == ["2025", "2026"]
        assert result.gross_series == pytest.approx([135600, 135600])
        assert result.net_series == pytest.approx([99123.6, 99123.6])


class TestHorizon:
    def test_zero_years_single_point(self):
        result = project_scenario(make_scenario(), years=0, reference_year=REF_YEAR)
        assert len(result) == 1
        assert result.labels == ["2025"]

    def test_length_is_years_plus_one(self):
        result = project_scenario(make_scenario(), years=30, reference_year=REF_YEAR)
        assert len(result.labels) == len(result.gross_series) == len(result.net_series) == 31
        assert result.labels[-1] == "2055"

    def test_falls_back_to_scenario_years(self):
        result = project_scenario(make_scenario(years=5), reference_year=REF_YEAR)
        assert len(result) == 6

    def test_falls_back_to_default_years(self):
        result = project_scenario(make_scenario(), reference_year=REF_YEAR)
        assert len(result) == 31

    def test_default_reference_year_is_current(self):
        result = project_scenario(make_scenario(), years=0)
        assert result.labels == [str(current_year())]


class TestGrowth:
    def test_no_growth_is_flat(self):
        result = project_scenario(make_scenario(dependents=2), years=10, reference_year=REF_YEAR)
        first = result.records[0]
        for r in result.records:
            assert r.gross_annual == pytest.approx(first.gross_annual)
            assert r.net_annual == pytest.approx(first.net_annual)

    def test_compound_base_salary(self):
        r = compute_year(make_scenario(basic_pct=10.0), 2, REF_YEAR)
        assert r.basic_salary == pytest.approx(9000 * 1.1 ** 2)

    def test_linear_gepi(self):
        r = compute_year(make_scenario(gepi_cents=0.5), 4, REF_YEAR)
        assert r.gepi_point_value == pytest.approx(22.0)
        assert r.gepi_total == pytest.approx(2200.0)

    def test_vi_increment_applied_to_rate_and_flat(self):
        r = compute_year(make_scenario(vi_reaj=1.0), 3, REF_YEAR)
        assert r.vi_rate == pytest.approx(18.0)
        assert r.vi_total == pytest.approx(18.0 * 20 + 3.0)

    def test_vi_rate_only_mode(self):
        policy = DeductionPolicy(per_diem_growth="rate_only")
        r = compute_year(make_scenario(vi_reaj=1.0), 3, REF_YEAR, policy)
        assert r.vi_total == pytest.approx(18.0 * 20)

    def test_vi_flat_only_mode(self):
        policy = DeductionPolicy(per_diem_growth="flat_only")
        r = compute_year(make_scenario(vi_reaj=1.0), 3, REF_YEAR, policy)
        assert r.vi_rate == pytest.approx(15.0)
        assert r.vi_total == pytest.approx(15.0 * 20 + 3.0)

    def test_gross_non_decreasing_with_positive_growth(self):
        scenario = make_scenario(basic_pct=3.5, gepi_cents=0.25, vi_reaj=0.5, dependents=1)
        gross = project_scenario(scenario, years=20, reference_year=REF_YEAR).gross_series
        assert all(b >= a for a, b in zip(gross, gross[1:]))

    def test_net_never_exceeds_gross(self):
        scenario = make_scenario(basic_pct=5.0, gepi_cents=1.0, vi_reaj=2.0, dependents=3)
        for r in project_scenario(scenario, years=15, reference_year=REF_YEAR).records:
            assert r.net_annual <= r.gross_annual


class TestDeductions:
    def test_dependents_reduce_tax_not_net_directly(self):
        r = compute_year(make_scenario(dependents=2), 0, REF_YEAR)
        deduction = 2 * 189.59 * 12
        assert r.dependent_deduction == pytest.approx(deduction)
        assert r.taxable_base == pytest.approx(135600 - 18984 - deduction)
        assert r.net_annual == pytest.approx(135600 - 18984 - r.income_tax)

    def test_taxable_base_clamped_at_zero(self):
        r = compute_year(make_scenario(base=100, points=0, days=0, dependents=5), 0, REF_YEAR)
        assert r.taxable_base == 0.0
        assert r.income_tax == 0.0
        assert r.net_annual == pytest.approx(1200 * 0.86)

    def test_custom_policy(self):
        policy = DeductionPolicy(social_contribution_rate=0.10, income_tax_rate=0.20)
        r = compute_year(make_scenario(), 0, REF_YEAR, policy)
        assert r.social_contribution == pytest.approx(13560)
        assert r.income_tax == pytest.approx((135600 - 13560) * 0.20)

    def test_zero_inputs(self):
        r = compute_year(make_scenario(base=0, point_value=0, vi_rate=0), 0, REF_YEAR)
        assert r.gross_annual == 0
        assert r.net_annual == 0

    def test_nan_propagates(self):
        r = compute_year(make_scenario(base=float("nan")), 0, REF_YEAR)
        assert math.isnan(r.gross_annual)
        assert math.isnan(r.taxable_base)
        assert math.isnan(r.net_annual)

    def test_unknown_growth_mode_rejected(self):
        with pytest.raises(ValueError):
            DeductionPolicy(per_diem_growth="double")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
