"""Tab 2: Edit Scenario — compensation inputs and growth parameters of the selected scenario."""

import streamlit as st

from config.defaults import MAX_YEARS
from data.session_store import get_collection
from models.policy import career_levels


def _on_level_change(collection, sid: str):
    """Reseed salary and points only when the user picks another level."""
    level_id = st.session_state[f"edit_level_{sid}"]
    if level_id not in {lvl.level_id for lvl in career_levels()}:
        return
    collection.apply_level(sid, level_id)
    # Widgets keep their own state; drop it so they pick up the seeded values
    for key in (f"edit_base_{sid}", f"edit_gepi_points_{sid}"):
        st.session_state.pop(key, None)


def render(sidebar_state):
    """Render the Edit Scenario tab."""
    st.header("Edit Scenario")

    collection = get_collection()
    scenario = collection.active
    if scenario is None:
        st.info("No scenario selected. Add one from the sidebar.")
        return

    sid = scenario.scenario_id
    st.subheader(f"Editing — {scenario.name}")

    # --- Identity & career level ---
    col1, col2 = st.columns(2)
    with col1:
        name = st.text_input("Scenario name", value=scenario.name, key=f"edit_name_{sid}")
    with col2:
        levels = career_levels()
        level_ids = [lvl.level_id for lvl in levels]
        level_labels = {lvl.level_id: lvl.label for lvl in levels}
        # A stored level outside the table stays selectable as-is
        if scenario.level_id not in level_ids:
            level_ids.append(scenario.level_id)
        st.selectbox(
            "Career level",
            options=level_ids,
            format_func=lambda x: level_labels.get(x, f"{x} (not in table)"),
            index=level_ids.index(scenario.level_id),
            key=f"edit_level_{sid}",
            on_change=_on_level_change,
            args=(collection, sid),
        )

    # --- Compensation inputs ---
    st.markdown("**Compensation**")
    col1, col2, col3 = st.columns(3)
    with col1:
        base_salary = st.number_input(
            "Base salary (R$)", min_value=0.0,
            value=float(scenario.base_salary), step=100.0, key=f"edit_base_{sid}",
        )
        dependents = st.number_input(
            "Dependents (income tax)", min_value=0,
            value=int(scenario.dependents), step=1, key=f"edit_deps_{sid}",
        )
    with col2:
        gepi_point_value = st.number_input(
            "GEPI point value (R$)", min_value=0.0,
            value=float(scenario.gepi_point_value), step=0.01, format="%.2f",
            key=f"edit_gepi_value_{sid}",
        )
        gepi_points = st.number_input(
            "GEPI points", min_value=0,
            value=int(scenario.gepi_points), step=1, key=f"edit_gepi_points_{sid}",
        )
    with col3:
        vi_per_help_day = st.number_input(
            "VI — ajuda de custo (R$ per day)", min_value=0.0,
            value=float(scenario.vi_per_help_day), step=0.01, format="%.2f",
            key=f"edit_vi_rate_{sid}",
        )
        help_days = st.number_input(
            "Help days", min_value=0,
            value=int(scenario.help_days), step=1, key=f"edit_help_days_{sid}",
        )

    # --- Growth parameters ---
    st.markdown("**Annual adjustments**")
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        basic_pct = st.number_input(
            "Base salary (% per year)",
            value=float(scenario.basic_annual_pct_reaj), step=0.01, format="%.2f",
            key=f"edit_basic_pct_{sid}",
        )
    with col2:
        gepi_cents = st.number_input(
            "GEPI point (R$ per year)",
            value=float(scenario.gepi_cents_annual), step=0.01, format="%.2f",
            key=f"edit_gepi_cents_{sid}",
        )
    with col3:
        vi_reaj = st.number_input(
            "VI (R$ per year)",
            value=float(scenario.vi_reaj_annual), step=0.01, format="%.2f",
            key=f"edit_vi_reaj_{sid}",
        )
    with col4:
        horizon = int(scenario.horizon(sidebar_state.years_global))
        # Bounds widen to the stored value so rendering never rewrites it
        years = st.number_input(
            "Horizon for this scenario (years)",
            min_value=min(0, horizon), max_value=max(MAX_YEARS, horizon),
            value=horizon, step=1,
            key=f"edit_years_{sid}",
        )

    color = st.color_picker("Chart colour", value=scenario.color, key=f"edit_color_{sid}")

    # --- Merge changed fields ---
    candidate = {
        "name": name,
        "base_salary": float(base_salary),
        "dependents": int(dependents),
        "gepi_point_value": float(gepi_point_value),
        "gepi_points": int(gepi_points),
        "vi_per_help_day": float(vi_per_help_day),
        "help_days": int(help_days),
        "basic_annual_pct_reaj": float(basic_pct),
        "gepi_cents_annual": float(gepi_cents),
        "vi_reaj_annual": float(vi_reaj),
        "years": int(years),
        "color": color,
    }
    if scenario.years is None and int(years) == sidebar_state.years_global:
        del candidate["years"]

    current = scenario.to_dict()
    patch = {k: v for k, v in candidate.items() if current.get(k) != v}
    if patch:
        collection.update(sid, **patch)
        st.rerun()
