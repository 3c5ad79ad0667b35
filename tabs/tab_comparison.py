"""Tab 3: Compare — net income of one scenario against the current scenario."""

import streamlit as st
import pandas as pd

from config.defaults import DEFAULT_SCENARIO_ID
from data.session_store import get_collection, get_policy
from engine.scenario_engine import project_collection, compare_scenarios, summarize_projection
from components.charts import comparison_bar
from components.tables import render_comparison_table
from engine.formatting import format_brl


def render(sidebar_state):
    """Render the Compare tab."""
    st.header("Compare Scenarios")

    collection = get_collection()
    scenarios = collection.scenarios
    if len(scenarios) < 2:
        st.info("Add a second scenario from the sidebar to compare.")
        return

    ids = [s.scenario_id for s in scenarios]
    names = {s.scenario_id: s.name for s in scenarios}

    col1, col2 = st.columns(2)
    with col1:
        base_default = DEFAULT_SCENARIO_ID if DEFAULT_SCENARIO_ID in ids else ids[0]
        base_id = st.selectbox(
            "Baseline", options=ids, index=ids.index(base_default),
            format_func=lambda x: names.get(x, x), key="compare_base",
        )
    with col2:
        others = [i for i in ids if i != base_id]
        selected = collection.selected_id
        other_idx = others.index(selected) if selected in others else 0
        other_id = st.selectbox(
            "Compare with", options=others, index=other_idx,
            format_func=lambda x: names.get(x, x), key="compare_other",
        )

    results = project_collection(
        [collection.get(base_id), collection.get(other_id)],
        sidebar_state.years_global, sidebar_state.reference_year, get_policy(),
    )
    base_result, other_result = results[base_id], results[other_id]

    diffs = compare_scenarios(names[base_id], base_result, names[other_id], other_result)
    diff_df = pd.DataFrame(diffs)

    base_summary = summarize_projection(base_result)
    other_summary = summarize_projection(other_result)
    total_change = other_summary["cumulative_net"] - base_summary["cumulative_net"]
    better_years = sum(1 for d in diffs if (d["Net Change"] or 0) > 0)
    worse_years = sum(1 for d in diffs if (d["Net Change"] or 0) < 0)

    st.markdown(
        f"Over **{len(diffs)} years**, **{names[other_id]}** earns more than "
        f"**{names[base_id]}** in **{better_years} years** and less in "
        f"**{worse_years} years**. Cumulative net difference: "
        f"**{format_brl(total_change)}**."
    )

    render_comparison_table(diff_df)
    st.plotly_chart(comparison_bar(diff_df), use_container_width=True)
