"""Scenario comparison engine — project a collection, build frames, diff against a baseline."""

from typing import Dict, List, Optional

import pandas as pd

from models.policy import DeductionPolicy
from models.projection import ProjectionResult
from models.scenario import Scenario
from engine.projection_engine import project_scenario


def project_collection(
    scenarios: List[Scenario],
    years: int,
    reference_year: int,
    policy: Optional[DeductionPolicy] = None,
) -> Dict[str, ProjectionResult]:
    """Project every scenario at the same horizon, keyed by scenario id."""
    return {
        s.scenario_id: project_scenario(s, years, reference_year, policy)
        for s in scenarios
    }


def net_series_frame(
    scenarios: List[Scenario],
    results: Dict[str, ProjectionResult],
) -> pd.DataFrame:
    """Long-format frame of net annual income, one row per scenario and year."""
    rows = []
    for s in scenarios:
        result = results.get(s.scenario_id)
        if result is None:
            continue
        for r in result.records:
            rows.append({
                "Year": r.label,
                "Scenario": s.name,
                "Net (annual)": r.net_annual,
                "Color": s.color,
            })
    return pd.DataFrame(rows, columns=["Year", "Scenario", "Net (annual)", "Color"])


def projection_frame(result: ProjectionResult, detailed: bool = False) -> pd.DataFrame:
    """Year / gross / net table for a single projection."""
    rows = []
    for r in result.records:
        row = {
            "Year": r.label,
            "Gross (annual)": r.gross_annual,
            "Net (annual)": r.net_annual,
        }
        if detailed:
            row.update({
                "Base salary": r.basic_salary,
                "GEPI": r.gepi_total,
                "VI": r.vi_total,
                "Gross (monthly)": r.gross_monthly,
                "Social contribution": r.social_contribution,
                "Taxable base": r.taxable_base,
                "Income tax": r.income_tax,
            })
        rows.append(row)
    columns = ["Year", "Gross (annual)", "Net (annual)"]
    if detailed:
        columns += [
            "Base salary", "GEPI", "VI", "Gross (monthly)",
            "Social contribution", "Taxable base", "Income tax",
        ]
    return pd.DataFrame(rows, columns=columns)


def summarize_projection(result: ProjectionResult) -> dict:
    """Headline figures for a projection."""
    if not result.records:
        return {
            "first_year": None, "last_year": None,
            "first_net": 0.0, "last_net": 0.0,
            "cumulative_gross": 0.0, "cumulative_net": 0.0,
            "total_deductions": 0.0,
        }
    first, last = result.records[0], result.records[-1]
    return {
        "first_year": first.year,
        "last_year": last.year,
        "first_net": first.net_annual,
        "last_net": last.net_annual,
        "cumulative_gross": sum(result.gross_series),
        "cumulative_net": sum(result.net_series),
        "total_deductions": sum(r.total_deductions for r in result.records),
    }


def compare_scenarios(
    name_a: str,
    result_a: ProjectionResult,
    name_b: str,
    result_b: ProjectionResult,
) -> List[dict]:
    """Compare two projections year by year on net annual income."""
    if name_a == name_b:
        name_a, name_b = f"{name_a} (A)", f"{name_b} (B)"
    a_map = {r.year: r for r in result_a.records}
    b_map = {r.year: r for r in result_b.records}

    all_years = sorted(set(a_map) | set(b_map))
    diffs = []
    for year in all_years:
        a = a_map.get(year)
        b = b_map.get(year)
        diffs.append({
            "Year": str(year),
            f"{name_a} Net": a.net_annual if a else None,
            f"{name_b} Net": b.net_annual if b else None,
            "Net Change": (b.net_annual - a.net_annual) if a and b else None,
        })
    return diffs
