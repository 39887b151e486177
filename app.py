import logging
import os

import streamlit as st
from core.state import load_state, save_state
from homequote.presets import DISCLAIMER
from ui.net_sheet import render_net_sheet_view
from ui.payment import render_payment_view
from ui.prequal import render_prequal_view
from ui.sidebar import render_policy_sidebar
from ui.topbar import render_topbar

VIEW_RENDERERS = {
    "mortgage": render_payment_view,
    "prequal": render_prequal_view,
    "net_sheet": render_net_sheet_view,
}


def configure_logging():
    logging.basicConfig(
        level=os.environ.get("HOMEQUOTE_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    configure_logging()
    st.set_page_config(page_title="HOMEQUOTE PAYMENT & PRE-QUALIFICATION", layout="wide")
    load_state()
    render_policy_sidebar()
    view_mode = render_topbar()
    VIEW_RENDERERS[view_mode]()
    st.caption(DISCLAIMER)
    save_state()


if __name__ == "__main__":
    main()
