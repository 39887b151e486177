import json
from streamlit.testing.v1 import AppTest


def sidebar_app():
    from ui.prequal import render_prequal_view
    from ui.sidebar import render_policy_sidebar

    render_policy_sidebar()
    render_prequal_view()


def test_base_rate_table_editable():
    at = AppTest.from_function(sidebar_app)
    at.run()
    assert at.session_state["prequal_calc"]["estimated_rate_pct"] == 6.75

    ta = next(w for w in at.sidebar.text_area if w.label == "Credit Tier Base Rates")
    tbl = dict(at.session_state["base_rates_table"])
    tbl["good"] = 5.5
    ta.set_value(json.dumps(tbl, indent=2))
    at.run()
    assert at.session_state["base_rates_table"]["good"] == 5.5
    assert at.session_state["prequal_calc"]["estimated_rate_pct"] == 5.5


def test_invalid_table_keeps_previous_values():
    at = AppTest.from_function(sidebar_app)
    at.run()
    ta = next(w for w in at.sidebar.text_area if w.label == "Program Rate Adjustments")
    ta.set_value("{not json")
    at.run()
    assert not at.exception
    assert at.sidebar.warning
    assert at.session_state["rate_adjustments_table"]["fha"] == 0.25
