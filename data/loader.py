"""File import/export — scenario lists and projection tables as CSV/XLSX."""

import io
import re
from typing import List, Tuple

import pandas as pd

from data.scenario_collection import pick_color
from engine.scenario_engine import projection_frame
from models.projection import ProjectionResult
from models.scenario import Scenario

# Column header -> Scenario field
SCENARIO_COLUMNS = {
    "Scenario ID": "scenario_id",
    "Name": "name",
    "Color": "color",
    "Level": "level_id",
    "Base Salary": "base_salary",
    "GEPI Point Value": "gepi_point_value",
    "GEPI Points": "gepi_points",
    "VI per Help Day": "vi_per_help_day",
    "Help Days": "help_days",
    "Dependents": "dependents",
    "Base Salary Adjustment (%/yr)": "basic_annual_pct_reaj",
    "GEPI Point Increment (R$/yr)": "gepi_cents_annual",
    "VI Increment (R$/yr)": "vi_reaj_annual",
    "Horizon (years)": "years",
}

INT_FIELDS = {"gepi_points", "help_days", "dependents"}
FLOAT_FIELDS = {
    "base_salary", "gepi_point_value", "vi_per_help_day",
    "basic_annual_pct_reaj", "gepi_cents_annual", "vi_reaj_annual",
}


def scenarios_to_df(scenarios: List[Scenario]) -> pd.DataFrame:
    """Flatten scenarios into a DataFrame with human-readable headers."""
    rows = []
    for s in scenarios:
        data = s.to_dict()
        rows.append({header: data[name] for header, name in SCENARIO_COLUMNS.items()})
    return pd.DataFrame(rows, columns=list(SCENARIO_COLUMNS))


def parse_scenarios(df: pd.DataFrame) -> List[Scenario]:
    """Convert a validated scenarios DataFrame into Scenario objects."""
    scenarios = []
    for idx, (_, row) in enumerate(df.iterrows()):
        kwargs = {}
        for header, name in SCENARIO_COLUMNS.items():
            if header not in df.columns or pd.isna(row.get(header)):
                continue
            value = row[header]
            if name in INT_FIELDS or name == "years":
                value = int(value)
            elif name in FLOAT_FIELDS:
                value = float(value)
            else:
                value = str(value).strip()
            kwargs[name] = value
        kwargs.setdefault("color", pick_color(idx))
        for name in ("basic_annual_pct_reaj", "gepi_cents_annual", "vi_reaj_annual"):
            kwargs.setdefault(name, 0.0)
        scenarios.append(Scenario(**kwargs))
    return scenarios


def load_file(uploaded_file) -> pd.DataFrame:
    """Load an uploaded file (CSV or XLSX) into a DataFrame."""
    name = uploaded_file.name.lower()
    if name.endswith(".csv"):
        return pd.read_csv(uploaded_file)
    elif name.endswith(".xlsx") or name.endswith(".xls"):
        return pd.read_excel(uploaded_file, engine="openpyxl")
    else:
        raise ValueError(f"Unsupported file format: {name}. Use CSV or XLSX.")


def _sheet_name(name: str, used: set) -> str:
    """Excel sheet names: max 31 chars, no []:*?/\\ and unique."""
    base = re.sub(r"[\[\]:*?/\\]", "_", name).strip() or "Scenario"
    base = base[:31]
    candidate = base
    n = 2
    while candidate.lower() in used:
        suffix = f" ({n})"
        candidate = base[:31 - len(suffix)] + suffix
        n += 1
    used.add(candidate.lower())
    return candidate


def projection_to_excel_bytes(named_results: List[Tuple[str, ProjectionResult]]) -> bytes:
    """Write one detailed sheet per (scenario name, projection) pair."""
    buffer = io.BytesIO()
    used = set()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        for name, result in named_results:
            projection_frame(result, detailed=True).to_excel(
                writer, sheet_name=_sheet_name(name, used), index=False,
            )
    return buffer.getvalue()


def scenarios_to_csv_bytes(scenarios: List[Scenario]) -> bytes:
    return scenarios_to_df(scenarios).to_csv(index=False).encode("utf-8")
