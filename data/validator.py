"""Schema validation for imported scenario files."""

from dataclasses import dataclass, field
from typing import List
import pandas as pd

from config.defaults import CAREER_LEVELS, MAX_YEARS


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


SCENARIO_REQUIRED_COLUMNS = [
    "Scenario ID",
    "Name",
    "Base Salary",
    "GEPI Point Value",
    "GEPI Points",
    "VI per Help Day",
    "Help Days",
    "Dependents",
]

# Blank cells here are read as zero
SCENARIO_GROWTH_COLUMNS = [
    "Base Salary Adjustment (%/yr)",
    "GEPI Point Increment (R$/yr)",
    "VI Increment (R$/yr)",
]

HORIZON_COLUMN = "Horizon (years)"
LEVEL_COLUMN = "Level"

NON_NEGATIVE_COLUMNS = [
    "Base Salary",
    "GEPI Point Value",
    "GEPI Points",
    "VI per Help Day",
    "Help Days",
    "Dependents",
]


def _check_required_columns(df: pd.DataFrame, required: List[str], file_label: str) -> ValidationResult:
    result = ValidationResult()
    missing = [col for col in required if col not in df.columns]
    if missing:
        result.is_valid = False
        result.errors.append(f"{file_label}: Missing required columns: {', '.join(missing)}")
    if df.empty:
        result.is_valid = False
        result.errors.append(f"{file_label}: File contains no data rows.")
    return result


def validate_scenarios(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, SCENARIO_REQUIRED_COLUMNS, "Scenarios")
    if not result.is_valid:
        return result

    for col in NON_NEGATIVE_COLUMNS:
        values = pd.to_numeric(df[col], errors="coerce")
        if values.isna().any():
            result.is_valid = False
            result.errors.append(f"Scenarios: {col} must be numeric.")
        elif (values < 0).any():
            result.is_valid = False
            result.errors.append(f"Scenarios: {col} cannot be negative.")

    dupes = df.duplicated(subset=["Scenario ID"], keep=False)
    if dupes.any():
        result.is_valid = False
        result.errors.append(
            f"Scenarios: Duplicate scenario ids: {df[dupes]['Scenario ID'].unique().tolist()}"
        )

    if HORIZON_COLUMN in df.columns:
        present = df[HORIZON_COLUMN].dropna()
        years = pd.to_numeric(present, errors="coerce")
        if years.isna().any() or (years % 1 != 0).any():
            result.is_valid = False
            result.errors.append(f"Scenarios: {HORIZON_COLUMN} must be a whole number of years.")
        elif ((years < 0) | (years > MAX_YEARS)).any():
            result.is_valid = False
            result.errors.append(f"Scenarios: {HORIZON_COLUMN} must be between 0 and {MAX_YEARS}.")

    if LEVEL_COLUMN in df.columns:
        known = {lvl["level_id"] for lvl in CAREER_LEVELS}
        levels = df[LEVEL_COLUMN].dropna().astype(str).str.strip()
        unknown = sorted(set(levels) - known)
        if unknown:
            result.is_valid = False
            result.errors.append(
                f"Scenarios: Unknown career levels: {unknown}. Expected one of: {sorted(known)}"
            )

    for col in SCENARIO_GROWTH_COLUMNS:
        if col not in df.columns:
            result.warnings.append(f"Scenarios: Column '{col}' not found, assuming no growth.")
        elif df[col].isna().any():
            result.warnings.append(f"Scenarios: Blank values in '{col}' are treated as 0.")

    return result
