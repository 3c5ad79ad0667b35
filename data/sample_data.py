"""Generate illustrative scenario sets for the SEF/MG Salary Simulator."""

import os
from typing import List

import pandas as pd

from config.defaults import DEFAULT_YEARS
from data.loader import scenarios_to_df
from data.scenario_collection import create_default_scenario, pick_color
from models.policy import career_levels
from models.scenario import Scenario


def generate_sample_scenarios(years: int = DEFAULT_YEARS) -> List[Scenario]:
    """Current scenario plus one promotion path per higher career level."""
    scenarios = [create_default_scenario(years)]
    adjustments = [
        # (base salary %/yr, GEPI R$/yr, VI R$/yr)
        (2.0, 0.10, 0.50),
        (3.0, 0.15, 0.75),
        (4.5, 0.25, 1.00),
    ]
    for idx, (level, (pct, gepi, vi)) in enumerate(zip(career_levels()[1:], adjustments), start=1):
        scenarios.append(Scenario(
            scenario_id=f"sample_{level.level_id.lower()}",
            name=f"{level.label} + {pct:g}%/yr",
            color=pick_color(idx),
            level_id=level.level_id,
            base_salary=level.base_salary,
            gepi_points=level.gepi_points,
            dependents=idx - 1,
            basic_annual_pct_reaj=pct,
            gepi_cents_annual=gepi,
            vi_reaj_annual=vi,
            years=years,
        ))
    return scenarios


def generate_sample_scenarios_df(years: int = DEFAULT_YEARS) -> pd.DataFrame:
    return scenarios_to_df(generate_sample_scenarios(years))


def generate_sample_csv(output_dir: str):
    """Write the sample scenario list as an importable CSV file."""
    os.makedirs(output_dir, exist_ok=True)
    generate_sample_scenarios_df().to_csv(os.path.join(output_dir, "scenarios.csv"), index=False)


def generate_sample_excel(output_dir: str):
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, "scenarios.xlsx")
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        generate_sample_scenarios_df().to_excel(writer, sheet_name="Scenarios", index=False)


if __name__ == "__main__":
    out = os.path.join(os.path.dirname(__file__), "..", "sample_files")
    generate_sample_csv(out)
    generate_sample_excel(out)
    print("Sample CSV and Excel files generated in sample_files/")
