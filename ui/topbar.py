import streamlit as st
from core.version import __version__

VIEWS = {
    "mortgage": "Payment",
    "prequal": "Pre-Qualification",
    "net_sheet": "Net Sheet",
}


def render_topbar():
    """Render the sticky top bar and return the selected view."""
    st.markdown(
        """
        <style>
        .homequote-topbar {position:sticky; top:0; background-color:white; z-index:100; padding:4px 8px; border-bottom:1px solid #ddd;}
        </style>
        """,
        unsafe_allow_html=True,
    )
    with st.container():
        st.markdown('<div class="homequote-topbar">', unsafe_allow_html=True)
        left, right = st.columns([1, 3])
        with left:
            st.markdown(f"**HOMEQUOTE v{__version__}**")
        with right:
            view_mode = st.radio(
                "View",
                list(VIEWS.keys()),
                format_func=VIEWS.get,
                horizontal=True,
                key="view_mode",
            )
        st.markdown("</div>", unsafe_allow_html=True)
    return view_mode
