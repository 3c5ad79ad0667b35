"""Tab 5: Legislation & About — links to the rules behind the figures."""

import streamlit as st

from config.legislation import LEGISLATION_LINKS


def render(sidebar_state):
    """Render the Legislation & About tab."""
    st.header("Legislation and Sources")
    st.markdown(
        "Official links (Diário Oficial de MG, laws and decrees) that define the base "
        "salary, GEPI, VI and the career rules."
    )
    for link in LEGISLATION_LINKS:
        st.markdown(f"- [{link['title']}]({link['url']})")

    st.divider()

    st.header("About")
    st.markdown(
        "Prototype simulator for comparing annual compensation scenarios of SEF/MG tax "
        "auditors. For full legal accuracy, load the official tables and rates on the "
        "Settings tab and review the income-tax formula."
    )
    st.caption("Prototype — adjust the parameters to the official SEF/MG legislation.")
