"""Tests for scenario import/export and validation."""

import io
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pandas as pd
import pytest

from data.loader import (
    scenarios_to_df, parse_scenarios, load_file,
    projection_to_excel_bytes, scenarios_to_csv_bytes,
)
from data.validator import validate_scenarios
from data.sample_data import generate_sample_scenarios, generate_sample_scenarios_df
from engine.projection_engine import project_scenario
from models.scenario import Scenario


def make_scenarios():
    return [
        Scenario("atual", "Current", years=30),
        Scenario("c_1", "Promotion", level_id="B1", base_salary=13000.0, gepi_points=140,
                 basic_annual_pct_reaj=2.5, dependents=1, color="#ff7f0e"),
    ]


def make_upload(data: bytes, name: str):
    buffer = io.BytesIO(data)
    buffer.name = name
    return buffer


class TestScenarioFiles:
    def test_csv_round_trip(self):
        scenarios = make_scenarios()
        df = load_file(make_upload(scenarios_to_csv_bytes(scenarios), "scenarios.csv"))

        assert validate_scenarios(df).is_valid
        assert parse_scenarios(df) == scenarios

    def test_xlsx_upload(self):
        buffer = io.BytesIO()
        scenarios_to_df(make_scenarios()).to_excel(buffer, index=False, engine="openpyxl")
        df = load_file(make_upload(buffer.getvalue(), "scenarios.xlsx"))
        assert [s.scenario_id for s in parse_scenarios(df)] == ["atual", "c_1"]

    def test_unsupported_format(self):
        with pytest.raises(ValueError):
            load_file(make_upload(b"", "scenarios.txt"))

    def test_missing_growth_columns_default_to_zero(self):
        df = scenarios_to_df(make_scenarios()).drop(columns=[
            "Base Salary Adjustment (%/yr)", "Color",
        ])
        result = validate_scenarios(df)
        assert result.is_valid
        assert any("assuming no growth" in w for w in result.warnings)

        parsed = parse_scenarios(df)
        assert parsed[1].basic_annual_pct_reaj == 0.0
        assert parsed[1].color == "#ff7f0e"  # Palette by row index
        assert parsed[0].years == 30
        assert parsed[1].years is None


class TestValidateScenarios:
    def test_missing_columns(self):
        df = pd.DataFrame([{"Scenario ID": "a", "Name": "A"}])
        result = validate_scenarios(df)
        assert not result.is_valid
        assert "Missing required columns" in result.errors[0]

    def test_empty_file(self):
        df = scenarios_to_df([])
        result = validate_scenarios(df)
        assert not result.is_valid

    def test_negative_values(self):
        df = scenarios_to_df(make_scenarios())
        df.loc[0, "Dependents"] = -1
        result = validate_scenarios(df)
        assert not result.is_valid
        assert any("Dependents cannot be negative" in e for e in result.errors)

    def test_non_numeric_values(self):
        df = scenarios_to_df(make_scenarios())
        df["Base Salary"] = df["Base Salary"].astype(object)
        df.loc[1, "Base Salary"] = "lots"
        result = validate_scenarios(df)
        assert not result.is_valid
        assert any("Base Salary must be numeric" in e for e in result.errors)

    def test_duplicate_ids(self):
        df = scenarios_to_df(make_scenarios())
        df.loc[1, "Scenario ID"] = "atual"
        result = validate_scenarios(df)
        assert not result.is_valid
        assert any("Duplicate" in e for e in result.errors)

    @pytest.mark.parametrize("years", [-1, 80, 2.5])
    def test_horizon_out_of_range(self, years):
        df = scenarios_to_df(make_scenarios())
        df.loc[0, "Horizon (years)"] = years
        result = validate_scenarios(df)
        assert not result.is_valid
        assert any("Horizon (years)" in e for e in result.errors)

    def test_blank_horizon_allowed(self):
        df = scenarios_to_df(make_scenarios())
        assert pd.isna(df.loc[1, "Horizon (years)"])
        df.loc[0, "Horizon (years)"] = 50
        assert validate_scenarios(df).is_valid

    def test_unknown_level(self):
        df = scenarios_to_df(make_scenarios())
        df.loc[1, "Level"] = "Z9"
        result = validate_scenarios(df)
        assert not result.is_valid
        assert any("Unknown career levels: ['Z9']" in e for e in result.errors)


class TestProjectionExport:
    def test_one_sheet_per_scenario(self):
        scenarios = make_scenarios() + [Scenario("c_2", "Current")]
        named = [(s.name, project_scenario(s, 2, 2025)) for s in scenarios]
        data = projection_to_excel_bytes(named)

        sheets = pd.read_excel(io.BytesIO(data), sheet_name=None, engine="openpyxl")
        assert list(sheets) == ["Current", "Promotion", "Current (2)"]
        assert len(sheets["Promotion"]) == 3
        assert sheets["Current"]["Net (annual)"].iloc[0] == pytest.approx(99123.6)


class TestSampleScenarios:
    def test_one_per_level(self):
        scenarios = generate_sample_scenarios(years=10)
        assert len(scenarios) == 4
        assert scenarios[0].scenario_id == "atual"
        assert [s.level_id for s in scenarios] == ["A1", "A2", "B1", "B2"]
        assert all(s.years == 10 for s in scenarios)

    def test_sample_file_is_importable(self):
        df = generate_sample_scenarios_df()
        assert validate_scenarios(df).is_valid
        assert parse_scenarios(df) == generate_sample_scenarios()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
