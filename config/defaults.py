"""Default configuration constants for the SEF/MG Salary Simulator."""

import os

# Projection horizon (years after the current one)
DEFAULT_YEARS = 30
MIN_YEARS = 1
MAX_YEARS = 50

# Seed values for new scenarios (replace with official tables)
DEFAULT_HELP_DAYS = 20           # Days used for the VI (ajuda de custo)
DEFAULT_GEPI_POINT_VALUE = 20.0  # R$ per GEPI point
DEFAULT_VI_PER_HELP_DAY = 15.0   # R$ per help day

# Deduction policy (placeholder rates, not legal values)
SOCIAL_CONTRIBUTION_RATE = 0.14
INCOME_TAX_RATE = 0.15
DEPENDENT_MONTHLY_DEDUCTION = 189.59

# How the yearly VI increment is applied:
#   "rate_and_flat" - grows the daily rate and is added again as a flat amount
#   "rate_only"     - grows the daily rate only
#   "flat_only"     - added once as a flat monthly amount
PER_DIEM_GROWTH_MODES = ["rate_and_flat", "rate_only", "flat_only"]
DEFAULT_PER_DIEM_GROWTH = "rate_and_flat"

MONTHS_PER_YEAR = 12

# Career levels: (id, label, base salary, GEPI points)
CAREER_LEVELS = [
    {"level_id": "A1", "label": "Level A1", "base_salary": 9000, "gepi_points": 100},
    {"level_id": "A2", "label": "Level A2", "base_salary": 11000, "gepi_points": 120},
    {"level_id": "B1", "label": "Level B1", "base_salary": 13000, "gepi_points": 140},
    {"level_id": "B2", "label": "Level B2", "base_salary": 16000, "gepi_points": 165},
]

# Protected scenario that always exists
DEFAULT_SCENARIO_ID = "atual"
DEFAULT_SCENARIO_NAME = "Current Scenario"

# Chart series palette, assigned by scenario index
SCENARIO_COLORS = [
    "#1f77b4",
    "#ff7f0e",
    "#2ca02c",
    "#d62728",
    "#9467bd",
    "#8c564b",
    "#e377c2",
    "#7f7f7f",
]

# Persistence
STORAGE_KEY = "sim_scenarios_v1"
STORAGE_ENV_VAR = "SEF_SIMULATOR_STORAGE"
DEFAULT_STORAGE_PATH = os.path.join(os.path.expanduser("~"), ".sef_simulator", "scenarios.json")


def storage_path() -> str:
    """Storage file, overridable through SEF_SIMULATOR_STORAGE at call time."""
    return os.environ.get(STORAGE_ENV_VAR, DEFAULT_STORAGE_PATH)


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
