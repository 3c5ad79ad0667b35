"""Tests for the scenario comparison engine and the explainer."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from models.scenario import Scenario
from engine.projection_engine import project_scenario
from engine.scenario_engine import (
    project_collection, net_series_frame, projection_frame,
    summarize_projection, compare_scenarios,
)
from engine.explainer import explain_year
from engine.formatting import format_brl

REF_YEAR = 2025


def make_scenario(sid="a", name="A", base=9000.0, basic_pct=0.0, color="#1f77b4", years=None):
    return Scenario(
        scenario_id=sid, name=name, color=color,
        base_salary=base, basic_annual_pct_reaj=basic_pct, years=years,
    )


class TestProjectCollection:
    def test_shared_horizon_overrides_scenario_years(self):
        scenarios = [make_scenario("a", years=3), make_scenario("b", "B", years=10)]
        results = project_collection(scenarios, 5, REF_YEAR)
        assert set(results) == {"a", "b"}
        assert len(results["a"]) == 6
        assert len(results["b"]) == 6

    def test_net_series_frame(self):
        scenarios = [make_scenario("a"), make_scenario("b", "B", color="#ff7f0e")]
        results = project_collection(scenarios, 2, REF_YEAR)
        frame = net_series_frame(scenarios, results)

        assert list(frame.columns) == ["Year", "Scenario", "Net (annual)", "Color"]
        assert len(frame) == 6
        assert set(frame["Scenario"]) == {"A", "B"}
        assert frame[frame["Scenario"] == "B"]["Color"].unique().tolist() == ["#ff7f0e"]

    def test_empty_collection(self):
        frame = net_series_frame([], {})
        assert frame.empty


class TestFramesAndSummary:
    def test_projection_frame(self):
        result = project_scenario(make_scenario(), 1, REF_YEAR)
        df = projection_frame(result)
        assert list(df.columns) == ["Year", "Gross (annual)", "Net (annual)"]
        assert df["Year"].tolist() == ["2025", "2026"]
        assert df["Net (annual)"].iloc[0] == pytest.approx(99123.6)

    def test_detailed_frame(self):
        result = project_scenario(make_scenario(), 0, REF_YEAR)
        df = projection_frame(result, detailed=True)
        assert df["GEPI"].iloc[0] == pytest.approx(2000)
        assert df["VI"].iloc[0] == pytest.approx(300)
        assert df["Gross (monthly)"].iloc[0] == pytest.approx(11300)

    def test_summary(self):
        result = project_scenario(make_scenario(), 1, REF_YEAR)
        summary = summarize_projection(result)
        assert summary["first_year"] == 2025
        assert summary["last_year"] == 2026
        assert summary["cumulative_gross"] == pytest.approx(271200)
        assert summary["cumulative_net"] == pytest.approx(198247.2)
        assert summary["total_deductions"] == pytest.approx(2 * (18984 + 17492.4))

    def test_summary_of_empty_projection(self):
        result = project_scenario(make_scenario(), -1, REF_YEAR)
        assert len(result) == 0
        assert summarize_projection(result)["cumulative_net"] == 0.0


class TestCompareScenarios:
    def test_net_change(self):
        a = project_scenario(make_scenario("a", "Current"), 2, REF_YEAR)
        b = project_scenario(make_scenario("b", "Raise", basic_pct=5.0), 2, REF_YEAR)
        diffs = compare_scenarios("Current", a, "Raise", b)

        assert len(diffs) == 3
        assert diffs[0]["Net Change"] == pytest.approx(0.0)
        assert diffs[2]["Net Change"] > diffs[1]["Net Change"] > 0
        assert diffs[1]["Raise Net"] == pytest.approx(b.net_series[1])

    def test_mismatched_horizons(self):
        a = project_scenario(make_scenario("a"), 1, REF_YEAR)
        b = project_scenario(make_scenario("b", "B"), 3, REF_YEAR)
        diffs = compare_scenarios("A", a, "B", b)
        assert len(diffs) == 4
        assert diffs[-1]["A Net"] is None
        assert diffs[-1]["Net Change"] is None

    def test_same_names_kept_apart(self):
        a = project_scenario(make_scenario("a", "Same"), 0, REF_YEAR)
        b = project_scenario(make_scenario("b", "Same", base=10000), 0, REF_YEAR)
        row = compare_scenarios("Same", a, "Same", b)[0]
        assert "Same (A) Net" in row and "Same (B) Net" in row
        assert row["Net Change"] > 0


class TestExplainYear:
    def test_steps(self):
        steps = explain_year(make_scenario(), 0, REF_YEAR)
        assert len(steps) == 9
        assert steps[0].endswith("2025")
        assert "R$ 135.600,00" in steps[4]
        assert "R$ 99.123,60" in steps[-1]

    def test_year_offset(self):
        steps = explain_year(make_scenario(basic_pct=10.0), 1, REF_YEAR)
        assert steps[0].endswith("2026")
        assert "R$ 9.900,00" in steps[1]

    def test_amounts_match_table_formatting(self):
        steps = explain_year(make_scenario(), 0, REF_YEAR)
        assert format_brl(135600) in steps[4]
        assert "135,600.00" not in steps[4]


class TestFormatBrl:
    def test_separators(self):
        assert format_brl(1234567.891) == "R$ 1.234.567,89"
        assert format_brl(-5.5) == "R$ -5,50"

    def test_missing_values(self):
        assert format_brl(None) == "—"
        assert format_brl(float("nan")) == "—"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
