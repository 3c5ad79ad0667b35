"""SEF/MG Tax Auditor Salary Simulator — Streamlit entry point."""

import logging
import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config.defaults import LOG_FORMAT
from components.sidebar import render_sidebar
from data.session_store import initialize_session_state
from tabs import (
    tab_projection,
    tab_scenario_editor,
    tab_comparison,
    tab_settings,
    tab_legislation,
)


def main():
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    st.set_page_config(
        page_title="SEF/MG Salary Simulator",
        page_icon="💰",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    initialize_session_state()
    sidebar_state = render_sidebar()

    tab1, tab2, tab3, tab4, tab5 = st.tabs([
        "📈 Projection",
        "✏️ Edit Scenario",
        "⚖️ Compare",
        "⚙️ Settings",
        "📚 Legislation & About",
    ])

    with tab1:
        tab_projection.render(sidebar_state)
    with tab2:
        tab_scenario_editor.render(sidebar_state)
    with tab3:
        tab_comparison.render(sidebar_state)
    with tab4:
        tab_settings.render(sidebar_state)
    with tab5:
        tab_legislation.render(sidebar_state)


if __name__ == "__main__":
    main()
