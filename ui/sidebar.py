import json
import logging

import streamlit as st
from homequote.presets import BASE_RATE_BY_CREDIT_TIER, PMI_ANNUAL_PCT, PROGRAM_RATE_ADJUSTMENT

logger = logging.getLogger(__name__)

# (table key, text area key, label)
POLICY_TABLES = [
    ("base_rates_table", "base_rates_json", "Credit Tier Base Rates"),
    ("rate_adjustments_table", "rate_adjustments_json", "Program Rate Adjustments"),
]


def _parse_table(text: str):
    table = json.loads(text)
    if not isinstance(table, dict):
        raise ValueError("expected a JSON object")
    return {str(k): float(v) for k, v in table.items()}


def render_policy_sidebar():
    """Sidebar with editable rate tables and the PMI rate."""
    st.session_state.setdefault("base_rates_table", dict(BASE_RATE_BY_CREDIT_TIER))
    st.session_state.setdefault("rate_adjustments_table", dict(PROGRAM_RATE_ADJUSTMENT))
    st.session_state["pmi_annual_pct"] = float(st.session_state.get("pmi_annual_pct", PMI_ANNUAL_PCT))

    st.sidebar.header("Rate & PMI Policy")
    for table_key, text_key, label in POLICY_TABLES:
        st.session_state.setdefault(text_key, json.dumps(st.session_state[table_key], indent=2))
        text = st.sidebar.text_area(label, key=text_key)
        try:
            st.session_state[table_key] = _parse_table(text)
        except (ValueError, TypeError) as exc:
            logger.warning("Ignoring invalid %s: %s", label, exc)
            st.sidebar.warning(f"{label}: invalid table, keeping previous values.")
    st.sidebar.number_input(
        "PMI Annual %", min_value=0.0, step=0.05, key="pmi_annual_pct"
    )
