"""Typed wrapper around st.session_state for application data."""

import streamlit as st
from typing import List, Optional

from config.defaults import DEFAULT_YEARS, STORAGE_KEY
from data.scenario_collection import ScenarioCollection
from data.storage import JsonFileStorage
from models.policy import DeductionPolicy
from models.scenario import Scenario


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    if "collection" not in st.session_state:
        storage = JsonFileStorage(key=STORAGE_KEY)
        st.session_state["collection"] = ScenarioCollection(storage).load()

    defaults = {
        "years_global": DEFAULT_YEARS,
        "rule_config": DeductionPolicy().to_config(),
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


# --- Getters ---

def get_collection() -> ScenarioCollection:
    return st.session_state["collection"]


def get_scenarios() -> List[Scenario]:
    return get_collection().scenarios


def get_active_scenario() -> Optional[Scenario]:
    return get_collection().active


def get_years_global() -> int:
    return st.session_state.get("years_global", DEFAULT_YEARS)


def get_rule_config() -> dict:
    return st.session_state.get("rule_config", {})


def get_policy() -> DeductionPolicy:
    return DeductionPolicy.from_config(get_rule_config())


# --- Setters ---

def set_years_global(years: int):
    st.session_state["years_global"] = years


def set_rule_config(config: dict):
    st.session_state["rule_config"] = config


def clear_editor_state():
    """Drop cached editor widget values after the collection is replaced."""
    for key in [k for k in st.session_state.keys() if str(k).startswith("edit_")]:
        del st.session_state[key]
