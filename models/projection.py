from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class YearProjection:
    offset: int              # years after the reference year
    year: int
    basic_salary: float      # grown monthly base salary
    gepi_point_value: float
    gepi_total: float
    vi_rate: float           # grown daily VI rate
    vi_total: float
    gross_monthly: float
    gross_annual: float
    social_contribution: float
    dependent_deduction: float
    taxable_base: float
    income_tax: float
    net_annual: float

    @property
    def label(self) -> str:
        return str(self.year)

    @property
    def total_deductions(self) -> float:
        return self.social_contribution + self.income_tax


@dataclass(frozen=True)
class ProjectionResult:
    """Year-by-year projection for one scenario. Rebuilt, never mutated."""
    scenario_id: str
    records: List[YearProjection] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)

    @property
    def labels(self) -> List[str]:
        return [r.label for r in self.records]

    @property
    def gross_series(self) -> List[float]:
        return [r.gross_annual for r in self.records]

    @property
    def net_series(self) -> List[float]:
        return [r.net_annual for r in self.records]
