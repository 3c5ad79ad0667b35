"""Tab 4: Settings — deduction policy, scenario import/export and reset."""

import logging

import streamlit as st
import pandas as pd

from config.defaults import PER_DIEM_GROWTH_MODES, CAREER_LEVELS
from data.loader import load_file, parse_scenarios, scenarios_to_csv_bytes, scenarios_to_df
from data.validator import validate_scenarios
from data.sample_data import generate_sample_scenarios
from data.session_store import (
    get_collection, get_rule_config, set_rule_config, get_years_global,
    clear_editor_state,
)
from models.policy import DeductionPolicy
from components.tables import render_money_table

logger = logging.getLogger(__name__)

PER_DIEM_GROWTH_LABELS = {
    "rate_and_flat": "Daily rate grows and the increment is added again (reference behaviour)",
    "rate_only": "Daily rate grows only",
    "flat_only": "Increment added once as a flat amount",
}


def _render_policy():
    st.subheader("Deduction Policy")
    st.caption("Placeholder rates. Replace with the official tables when available.")

    policy = DeductionPolicy.from_config(get_rule_config())

    col1, col2, col3 = st.columns(3)
    with col1:
        social_pct = st.number_input(
            "Social contribution (%)", min_value=0.0, max_value=100.0,
            value=policy.social_contribution_rate * 100, step=0.5,
            key="cfg_social_pct",
        )
    with col2:
        tax_pct = st.number_input(
            "Flat income tax (%)", min_value=0.0, max_value=100.0,
            value=policy.income_tax_rate * 100, step=0.5,
            key="cfg_tax_pct",
        )
    with col3:
        dependent = st.number_input(
            "Deduction per dependent (R$/month)", min_value=0.0,
            value=float(policy.dependent_monthly_deduction), step=0.01, format="%.2f",
            key="cfg_dependent",
        )

    growth_mode = st.radio(
        "VI annual increment",
        PER_DIEM_GROWTH_MODES,
        index=PER_DIEM_GROWTH_MODES.index(policy.per_diem_growth),
        format_func=lambda x: PER_DIEM_GROWTH_LABELS.get(x, x),
        key="cfg_per_diem_growth",
    )

    col_save, col_reset = st.columns(2)
    with col_save:
        if st.button("Apply Policy", type="primary", key="btn_apply_policy"):
            new_policy = DeductionPolicy(
                social_contribution_rate=social_pct / 100.0,
                income_tax_rate=tax_pct / 100.0,
                dependent_monthly_deduction=dependent,
                per_diem_growth=growth_mode,
            )
            set_rule_config(new_policy.to_config())
            st.success("Policy updated.")
            st.rerun()
    with col_reset:
        if st.button("Restore Defaults", key="btn_reset_policy"):
            set_rule_config(DeductionPolicy().to_config())
            for key in ("cfg_social_pct", "cfg_tax_pct", "cfg_dependent", "cfg_per_diem_growth"):
                st.session_state.pop(key, None)
            st.rerun()

    with st.expander("Career levels", expanded=False):
        levels_df = pd.DataFrame(CAREER_LEVELS).rename(columns={
            "level_id": "Level", "label": "Label",
            "base_salary": "Base Salary", "gepi_points": "GEPI Points",
        })
        render_money_table(levels_df, ["Base Salary"])


def _render_import_export():
    st.subheader("Import / Export Scenarios")
    collection = get_collection()

    st.download_button(
        "Download scenarios (CSV)",
        data=scenarios_to_csv_bytes(collection.scenarios),
        file_name="scenarios.csv",
        mime="text/csv",
        key="dl_scenarios_csv",
    )

    uploaded = st.file_uploader("Scenario file", type=["csv", "xlsx"], key="upload_scenarios")

    col_import, col_sample = st.columns(2)
    with col_sample:
        if st.button("Load Sample Scenarios", key="btn_sample_scenarios"):
            collection.replace_all(generate_sample_scenarios(get_years_global()))
            clear_editor_state()
            st.success("Sample scenarios loaded.")
            st.rerun()

    with col_import:
        import_clicked = st.button("Import & Replace", type="primary", key="btn_import_scenarios")

    if import_clicked:
        if not uploaded:
            st.warning("Please upload a scenario file.")
            return
        try:
            df = load_file(uploaded)
        except Exception as e:
            logger.warning("Scenario import failed: %s", e)
            st.error(f"Error loading file: {e}")
            return

        result = validate_scenarios(df)
        if not result.is_valid:
            for e in result.errors:
                st.error(e)
            return
        for w in result.warnings:
            st.warning(w)

        try:
            scenarios = parse_scenarios(df)
            collection.replace_all(scenarios)
            clear_editor_state()
        except (ValueError, TypeError) as e:
            st.error(f"Error importing scenarios: {e}")
            return
        st.success(f"Imported {len(scenarios)} scenario(s).")
        st.dataframe(scenarios_to_df(scenarios), use_container_width=True, hide_index=True)


def _render_reset():
    st.subheader("Reset")
    st.caption("Removes every scenario and restores the single current scenario.")
    confirm = st.checkbox("I understand all scenarios will be lost", key="confirm_reset")
    if st.button("Reset Scenarios", disabled=not confirm, key="btn_reset_scenarios"):
        get_collection().reset(get_years_global())
        clear_editor_state()
        st.success("Scenarios reset.")
        st.rerun()


def render(sidebar_state):
    """Render the Settings tab."""
    st.header("Settings")
    _render_policy()
    st.divider()
    _render_import_export()
    st.divider()
    _render_reset()
