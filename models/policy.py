from dataclasses import dataclass
from typing import Optional

from config.defaults import (
    SOCIAL_CONTRIBUTION_RATE,
    INCOME_TAX_RATE,
    DEPENDENT_MONTHLY_DEDUCTION,
    DEFAULT_PER_DIEM_GROWTH,
    PER_DIEM_GROWTH_MODES,
    CAREER_LEVELS,
)


@dataclass(frozen=True)
class DeductionPolicy:
    social_contribution_rate: float = SOCIAL_CONTRIBUTION_RATE  # e.g. 0.14 for 14%
    income_tax_rate: float = INCOME_TAX_RATE                    # flat rate on the taxable base
    dependent_monthly_deduction: float = DEPENDENT_MONTHLY_DEDUCTION
    per_diem_growth: str = DEFAULT_PER_DIEM_GROWTH

    def __post_init__(self):
        if self.per_diem_growth not in PER_DIEM_GROWTH_MODES:
            raise ValueError(
                f"Unknown per-diem growth mode: {self.per_diem_growth}. "
                f"Expected one of: {PER_DIEM_GROWTH_MODES}"
            )

    @classmethod
    def from_config(cls, config: Optional[dict]) -> "DeductionPolicy":
        """Build a policy from the rule-config dict kept in session state."""
        config = config or {}
        return cls(
            social_contribution_rate=config.get("social_contribution_rate", SOCIAL_CONTRIBUTION_RATE),
            income_tax_rate=config.get("income_tax_rate", INCOME_TAX_RATE),
            dependent_monthly_deduction=config.get("dependent_monthly_deduction", DEPENDENT_MONTHLY_DEDUCTION),
            per_diem_growth=config.get("per_diem_growth", DEFAULT_PER_DIEM_GROWTH),
        )

    def to_config(self) -> dict:
        return {
            "social_contribution_rate": self.social_contribution_rate,
            "income_tax_rate": self.income_tax_rate,
            "dependent_monthly_deduction": self.dependent_monthly_deduction,
            "per_diem_growth": self.per_diem_growth,
        }


@dataclass(frozen=True)
class CareerLevel:
    level_id: str
    label: str
    base_salary: float
    gepi_points: int


def career_levels() -> list:
    return [CareerLevel(**lvl) for lvl in CAREER_LEVELS]


def get_career_level(level_id: str) -> CareerLevel:
    """Look up a career level by id. Raises ValueError when unknown."""
    for level in career_levels():
        if level.level_id == level_id:
            return level
    raise ValueError(f"Unknown career level: {level_id}")
