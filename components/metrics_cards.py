"""Reusable KPI metric card widgets."""

import streamlit as st


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally delta, delta_color.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            st.metric(
                label=m["label"],
                value=m["value"],
                delta=m.get("delta"),
                delta_color=m.get("delta_color", "normal"),
            )


def render_disclaimer():
    st.caption(
        "Note: figures use simplifications (flat rates, fixed per-dependent deduction, "
        "compound growth on the base salary). For full compliance with SEF/MG rules, "
        "replace the constants with the official tables on the Settings tab."
    )
