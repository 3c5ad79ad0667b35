"""Tab 1: Projection — net income chart for all scenarios and detail for the selected one."""

import streamlit as st

from data.session_store import get_collection, get_policy
from data.loader import projection_to_excel_bytes
from engine.projection_engine import project_scenario
from engine.scenario_engine import (
    project_collection, net_series_frame, projection_frame, summarize_projection,
)
from engine.explainer import explain_year
from components.charts import net_income_line, gross_vs_net_bar
from components.metrics_cards import render_metric_row, render_disclaimer
from components.tables import render_money_table
from engine.formatting import format_brl


def render(sidebar_state):
    """Render the Projection tab."""
    st.header("Projection")

    collection = get_collection()
    scenarios = collection.scenarios
    policy = get_policy()
    ref_year = sidebar_state.reference_year

    # --- Chart: every scenario at the global horizon ---
    results = project_collection(scenarios, sidebar_state.years_global, ref_year, policy)
    frame = net_series_frame(scenarios, results)
    st.plotly_chart(net_income_line(frame), use_container_width=True)

    scenario = collection.active
    if scenario is None:
        st.info("No scenario selected. Add one from the sidebar.")
        return

    st.divider()

    # --- Detail: selected scenario at its own horizon ---
    years = scenario.horizon(sidebar_state.years_global)
    detail = project_scenario(scenario, years, ref_year, policy)
    summary = summarize_projection(detail)

    st.subheader(f"Detail — {scenario.name}")
    st.caption(
        f"Horizon: {years + 1} years ({ref_year} — {ref_year + years})"
    )

    render_metric_row([
        {"label": f"Net {summary['first_year']}", "value": format_brl(summary["first_net"])},
        {
            "label": f"Net {summary['last_year']}",
            "value": format_brl(summary["last_net"]),
            "delta": format_brl(summary["last_net"] - summary["first_net"]),
        },
        {"label": "Cumulative Net", "value": format_brl(summary["cumulative_net"])},
        {"label": "Total Deductions", "value": format_brl(summary["total_deductions"])},
    ])

    table = projection_frame(detail)
    col_table, col_chart = st.columns(2)
    with col_table:
        render_money_table(table, ["Gross (annual)", "Net (annual)"], height=420)
    with col_chart:
        st.plotly_chart(gross_vs_net_bar(table, f"Gross vs Net — {scenario.name}"),
                        use_container_width=True)

    # --- Step-by-step explanation ---
    with st.expander("How is a year calculated?", expanded=False):
        year_label = st.selectbox(
            "Year", options=detail.labels, key="explain_year",
        )
        t = detail.labels.index(year_label) if year_label in detail.labels else 0
        for step in explain_year(scenario, t, ref_year, policy):
            st.markdown(f"- {step}")

    render_disclaimer()

    # --- Downloads ---
    with st.expander("Export", expanded=False):
        st.download_button(
            "Download selected scenario (CSV)",
            data=projection_frame(detail, detailed=True).to_csv(index=False).encode("utf-8"),
            file_name=f"projection_{scenario.scenario_id}.csv",
            mime="text/csv",
            key="dl_projection_csv",
        )
        if scenarios:
            named = [(s.name, results[s.scenario_id]) for s in scenarios]
            st.download_button(
                "Download all scenarios (XLSX)",
                data=projection_to_excel_bytes(named),
                file_name="projections.xlsx",
                mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
                key="dl_projection_xlsx",
            )
