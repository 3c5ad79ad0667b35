"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd
from typing import List, Optional

from engine.formatting import format_brl


def render_money_table(
    df: pd.DataFrame,
    money_columns: List[str],
    title: Optional[str] = None,
    height: Optional[int] = None,
):
    """Render a non-editable dataframe with currency columns formatted."""
    if title:
        st.subheader(title)
    styled = df.style.format({col: format_brl for col in money_columns if col in df.columns})
    kwargs = {"height": height} if height else {}
    st.dataframe(styled, use_container_width=True, hide_index=True, **kwargs)


def render_comparison_table(df: pd.DataFrame, change_column: str = "Net Change"):
    """Render a comparison table with positive/negative highlighting."""
    def color_change(val):
        try:
            v = float(val)
            if v > 0:
                return "color: #155724; font-weight: bold"
            elif v < 0:
                return "color: #cc0000; font-weight: bold"
        except (ValueError, TypeError):
            pass
        return ""

    money_columns = [c for c in df.columns if c != "Year"]
    styled = df.style.format({col: format_brl for col in money_columns})
    if change_column in df.columns:
        styled = styled.map(color_change, subset=[change_column])
    st.dataframe(styled, use_container_width=True, hide_index=True)
