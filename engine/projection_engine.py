"""Projection engine — grows the salary components year by year and applies deductions."""

from datetime import date
from typing import Optional

from config.defaults import DEFAULT_YEARS, MONTHS_PER_YEAR
from models.policy import DeductionPolicy
from models.projection import ProjectionResult, YearProjection
from models.scenario import Scenario


def current_year() -> int:
    """Wall-clock calendar year. Callers read it once and pass it down."""
    return date.today().year


def grow_basic_salary(base_salary: float, annual_pct: float, t: int) -> float:
    """Compound growth of the base salary after t years."""
    return base_salary * (1 + annual_pct / 100) ** t


def grow_linear(value: float, annual_increment: float, t: int) -> float:
    return value + annual_increment * t


def compute_vi_total(scenario: Scenario, t: int, policy: DeductionPolicy) -> tuple:
    """Return (daily rate, monthly VI total) for year offset t."""
    increment = scenario.vi_reaj_annual * t
    if policy.per_diem_growth == "flat_only":
        rate = scenario.vi_per_help_day
        return rate, rate * scenario.help_days + increment
    rate = grow_linear(scenario.vi_per_help_day, scenario.vi_reaj_annual, t)
    if policy.per_diem_growth == "rate_only":
        return rate, rate * scenario.help_days
    return rate, rate * scenario.help_days + increment


def compute_year(
    scenario: Scenario,
    t: int,
    reference_year: int,
    policy: Optional[DeductionPolicy] = None,
) -> YearProjection:
    """Compute gross and net compensation for year offset t."""
    policy = policy or DeductionPolicy()

    basic = grow_basic_salary(scenario.base_salary, scenario.basic_annual_pct_reaj, t)

    point_value = grow_linear(scenario.gepi_point_value, scenario.gepi_cents_annual, t)
    gepi_total = point_value * scenario.gepi_points

    vi_rate, vi_total = compute_vi_total(scenario, t, policy)

    gross_monthly = basic + gepi_total + vi_total
    gross_annual = gross_monthly * MONTHS_PER_YEAR

    social = gross_annual * policy.social_contribution_rate
    dependent_deduction = scenario.dependents * policy.dependent_monthly_deduction * MONTHS_PER_YEAR

    # Clamp without max() so NaN inputs stay NaN
    taxable = gross_annual - social - dependent_deduction
    if taxable < 0:
        taxable = 0.0
    income_tax = taxable * policy.income_tax_rate

    # Dependents only lower the tax base, they are not paid out
    net_annual = gross_annual - social - income_tax

    return YearProjection(
        offset=t,
        year=reference_year + t,
        basic_salary=basic,
        gepi_point_value=point_value,
        gepi_total=gepi_total,
        vi_rate=vi_rate,
        vi_total=vi_total,
        gross_monthly=gross_monthly,
        gross_annual=gross_annual,
        social_contribution=social,
        dependent_deduction=dependent_deduction,
        taxable_base=taxable,
        income_tax=income_tax,
        net_annual=net_annual,
    )


def project_scenario(
    scenario: Scenario,
    years: Optional[int] = None,
    reference_year: Optional[int] = None,
    policy: Optional[DeductionPolicy] = None,
) -> ProjectionResult:
    """Project a scenario over years + 1 calendar years starting at reference_year.

    years falls back to the scenario's own horizon, then to DEFAULT_YEARS.
    """
    if years is None:
        years = scenario.horizon(DEFAULT_YEARS)
    if reference_year is None:
        reference_year = current_year()
    policy = policy or DeductionPolicy()

    records = [compute_year(scenario, t, reference_year, policy) for t in range(years + 1)]
    return ProjectionResult(scenario_id=scenario.scenario_id, records=records)
