"""Generates human-readable explanations for a projected year."""

from typing import List, Optional

from models.policy import DeductionPolicy
from models.scenario import Scenario
from engine.formatting import format_brl as _brl
from engine.projection_engine import compute_year


def explain_year(
    scenario: Scenario,
    t: int,
    reference_year: int,
    policy: Optional[DeductionPolicy] = None,
) -> List[str]:
    """Produce step-by-step explanation for year offset t of a scenario."""
    policy = policy or DeductionPolicy()
    r = compute_year(scenario, t, reference_year, policy)
    steps = []

    steps.append(
        f"Step 1 - Year: {reference_year} + {t} => {r.year}"
    )

    steps.append(
        f"Step 2 - Base salary: {_brl(scenario.base_salary)} x "
        f"(1 + {scenario.basic_annual_pct_reaj}%)^{t} = {_brl(r.basic_salary)}"
    )

    steps.append(
        f"Step 3 - GEPI: point value {_brl(scenario.gepi_point_value)} + "
        f"{_brl(scenario.gepi_cents_annual)} x {t} = {_brl(r.gepi_point_value)}; "
        f"x {scenario.gepi_points} points = {_brl(r.gepi_total)}"
    )

    if policy.per_diem_growth == "rate_only":
        vi_detail = f"{_brl(r.vi_rate)} x {scenario.help_days} days"
    elif policy.per_diem_growth == "flat_only":
        vi_detail = (
            f"{_brl(r.vi_rate)} x {scenario.help_days} days + "
            f"{_brl(scenario.vi_reaj_annual)} x {t}"
        )
    else:
        vi_detail = (
            f"({_brl(scenario.vi_per_help_day)} + {_brl(scenario.vi_reaj_annual)} x {t}) "
            f"x {scenario.help_days} days + {_brl(scenario.vi_reaj_annual)} x {t}"
        )
    steps.append(f"Step 4 - VI: {vi_detail} = {_brl(r.vi_total)}")

    steps.append(
        f"Step 5 - Gross: {_brl(r.gross_monthly)}/month x 12 = {_brl(r.gross_annual)}/year"
    )

    steps.append(
        f"Step 6 - Social contribution: {_brl(r.gross_annual)} x "
        f"{policy.social_contribution_rate:.1%} = {_brl(r.social_contribution)}"
    )

    steps.append(
        f"Step 7 - Dependents: {scenario.dependents} x "
        f"{_brl(policy.dependent_monthly_deduction)} x 12 = {_brl(r.dependent_deduction)}"
    )

    steps.append(
        f"Step 8 - Income tax: taxable base {_brl(r.taxable_base)} x "
        f"{policy.income_tax_rate:.1%} = {_brl(r.income_tax)}"
    )

    steps.append(
        f"Step 9 - Net: {_brl(r.gross_annual)} - {_brl(r.social_contribution)} - "
        f"{_brl(r.income_tax)} = {_brl(r.net_annual)}"
    )

    return steps
