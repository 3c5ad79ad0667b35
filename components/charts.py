"""Plotly chart builders for the salary simulator."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd


def net_income_line(
    frame: pd.DataFrame,
    title: str = "Net Compensation (annual)",
) -> go.Figure:
    """One line per scenario, net annual income keyed by year."""
    color_map = (
        dict(zip(frame["Scenario"], frame["Color"])) if not frame.empty else {}
    )
    fig = px.line(
        frame, x="Year", y="Net (annual)", color="Scenario",
        markers=True,
        color_discrete_map=color_map,
        labels={"Net (annual)": "Net (R$/year)", "Year": "Year"},
        title=title,
    )
    fig.update_traces(line_shape="spline", line_smoothing=0.4)
    fig.update_layout(
        height=450,
        hovermode="x unified",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, x=0),
        xaxis_type="category",
        yaxis_tickprefix="R$ ",
        yaxis_tickformat=",.0f",
    )
    return fig


def gross_vs_net_bar(table: pd.DataFrame, title: str = "Gross vs Net") -> go.Figure:
    """Grouped bars of gross and net annual income for one scenario."""
    fig = px.bar(
        table, x="Year", y=["Gross (annual)", "Net (annual)"],
        barmode="group",
        labels={"value": "R$/year", "variable": ""},
        title=title,
        color_discrete_map={"Gross (annual)": "#4A90D9", "Net (annual)": "#E8734A"},
    )
    fig.update_layout(legend_title_text="", height=400, xaxis_type="category")
    return fig


def comparison_bar(comparison_df: pd.DataFrame) -> go.Figure:
    """Bar chart of the yearly net difference between two scenarios."""
    values = comparison_df["Net Change"].fillna(0)
    fig = go.Figure(data=[go.Bar(
        x=comparison_df["Year"],
        y=values,
        marker_color=["#2ca02c" if v >= 0 else "#d62728" for v in values],
    )])
    fig.update_layout(
        title="Net Change per Year",
        xaxis_title="Year",
        yaxis_title="R$/year",
        xaxis_type="category",
        height=400,
    )
    return fig
