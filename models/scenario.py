from dataclasses import dataclass, asdict, fields, replace
from typing import Optional

from config.defaults import (
    DEFAULT_HELP_DAYS,
    DEFAULT_GEPI_POINT_VALUE,
    DEFAULT_VI_PER_HELP_DAY,
    SCENARIO_COLORS,
)


@dataclass(frozen=True)
class Scenario:
    scenario_id: str
    name: str
    color: str = SCENARIO_COLORS[0]
    level_id: str = "A1"
    # Compensation inputs (R$ per month unless noted)
    base_salary: float = 9000.0
    gepi_point_value: float = DEFAULT_GEPI_POINT_VALUE
    gepi_points: int = 100
    vi_per_help_day: float = DEFAULT_VI_PER_HELP_DAY
    help_days: int = DEFAULT_HELP_DAYS
    dependents: int = 0
    # Growth parameters (per year)
    basic_annual_pct_reaj: float = 0.0  # compound %, e.g. 3.5 for 3.5%
    gepi_cents_annual: float = 0.0      # R$ added to the point value
    vi_reaj_annual: float = 0.0         # R$ added to the daily VI rate
    years: Optional[int] = None         # None = use the global horizon

    @classmethod
    def field_names(cls) -> list:
        return [f.name for f in fields(cls)]

    def with_changes(self, **patch) -> "Scenario":
        """Return a copy with the given fields replaced. Identity cannot change."""
        unknown = sorted(set(patch) - set(self.field_names()))
        if unknown:
            raise ValueError(f"Unknown scenario fields: {', '.join(unknown)}")
        if "scenario_id" in patch and patch["scenario_id"] != self.scenario_id:
            raise ValueError(f"Scenario id is immutable: {self.scenario_id}")
        return replace(self, **patch)

    def horizon(self, global_years: int) -> int:
        return self.years if self.years is not None else global_years

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Scenario":
        """Rebuild a scenario from a stored record; missing fields take defaults."""
        known = set(cls.field_names())
        return cls(**{k: v for k, v in data.items() if k in known})
