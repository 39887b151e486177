import json
import logging
import os
from typing import Any

import streamlit as st

logger = logging.getLogger(__name__)

SESSION_FILE = os.environ.get("HOMEQUOTE_SESSION_FILE", "session_data.json")

# Only persist a curated subset of ``st.session_state`` keys. Streamlit
# widgets with explicit keys (e.g. ``view_mode``'s radio) inject their own
# entries into ``session_state``; restoring keys of widgets that disallow
# manual assignment raises ``StreamlitAPIException`` on the next run.
PERSISTED_KEYS = {
    "loan_inputs",
    "prequal_inputs",
    "seller_sheet",
    "buyer_sheet",
    "base_rates_table",
    "rate_adjustments_table",
    "pmi_annual_pct",
}


def _serializable(value: Any) -> bool:
    return isinstance(value, (int, float, str, bool, list, dict))


def load_state() -> None:
    """Restore Streamlit session state from ``SESSION_FILE`` if it exists."""
    if not os.path.exists(SESSION_FILE):
        return
    try:
        with open(SESSION_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Could not restore session from %s: %s", SESSION_FILE, exc)
        return
    if not isinstance(data, dict):
        logger.warning("Ignoring session file %s: expected a JSON object", SESSION_FILE)
        return
    for key, val in data.items():
        if key in PERSISTED_KEYS:
            st.session_state.setdefault(key, val)


def save_state() -> None:
    """Persist serializable session state to ``SESSION_FILE``."""
    data = {
        k: v
        for k, v in st.session_state.items()
        if k in PERSISTED_KEYS and _serializable(v)
    }
    try:
        with open(SESSION_FILE, "w", encoding="utf-8") as f:
            json.dump(data, f)
    except OSError as exc:
        logger.warning("Could not save session to %s: %s", SESSION_FILE, exc)
