"""Global sidebar controls for scenario selection and horizon."""

import streamlit as st
from dataclasses import dataclass
from typing import Optional

from config.defaults import DEFAULT_SCENARIO_ID, MIN_YEARS, MAX_YEARS
from config.legislation import LEGISLATION_LINKS
from data.session_store import get_collection, get_years_global, set_years_global
from data.storage import StorageError
from engine.projection_engine import current_year


@dataclass
class SidebarState:
    scenario_id: Optional[str]
    years_global: int
    reference_year: int


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    collection = get_collection()

    with st.sidebar:
        st.title("SEF/MG Salary Simulator")
        st.divider()

        st.subheader("Scenarios")
        for sc in collection.scenarios:
            is_selected = sc.scenario_id == collection.selected_id
            col_swatch, col_name, col_remove = st.columns([1, 6, 3])
            with col_swatch:
                st.markdown(
                    f"<div style='width:14px;height:14px;margin-top:10px;"
                    f"background:{sc.color};border-radius:4px'></div>",
                    unsafe_allow_html=True,
                )
            with col_name:
                if st.button(
                    sc.name,
                    key=f"select_{sc.scenario_id}",
                    type="primary" if is_selected else "secondary",
                    use_container_width=True,
                ):
                    collection.select(sc.scenario_id)
                    st.rerun()
            with col_remove:
                if sc.scenario_id != DEFAULT_SCENARIO_ID:
                    if st.button("Remove", key=f"remove_{sc.scenario_id}"):
                        try:
                            collection.remove(sc.scenario_id)
                        except StorageError as e:
                            st.error(f"Could not save scenarios: {e}")
                        else:
                            st.rerun()

        if st.button("+ Add scenario", key="btn_add_scenario", use_container_width=True):
            try:
                collection.add(get_years_global())
            except StorageError as e:
                st.error(f"Could not save scenarios: {e}")
            else:
                st.rerun()

        years = st.number_input(
            "Horizon (years)",
            min_value=MIN_YEARS, max_value=MAX_YEARS,
            value=min(max(get_years_global(), MIN_YEARS), MAX_YEARS),
            step=1,
            key="sidebar_years",
        )
        if int(years) != get_years_global():
            set_years_global(int(years))

        st.divider()

        st.markdown("**Legislation links**")
        for link in LEGISLATION_LINKS[:2]:
            st.markdown(f"- [{link['title']}]({link['url']})")

    return SidebarState(
        scenario_id=collection.selected_id,
        years_global=get_years_global(),
        reference_year=current_year(),
    )
