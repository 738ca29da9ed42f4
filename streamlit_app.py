"""
Feedback Analyzer - Streamlit Interactive Dashboard
Filter, chart and summarize customer feedback from every channel.

Run: streamlit run streamlit_app.py
"""

import asyncio
import logging
from pathlib import Path
import sys

import nest_asyncio
import streamlit as st

# Streamlit runs inside an existing event loop; nest_asyncio makes
# asyncio.run() safe to call from within it (avoids RuntimeError).
# Streamlit Cloud uses uvloop which nest_asyncio can't patch, so fall back
# to the default asyncio event loop in that case.
try:
    nest_asyncio.apply()
except ValueError:
    asyncio.set_event_loop_policy(asyncio.DefaultEventLoopPolicy())
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    nest_asyncio.apply(loop)

# Add app to path
sys.path.insert(0, str(Path(__file__).parent))

from app.config import get_settings
from app.dashboard import FeedbackDashboard
from app.ui.sidebar import render_sidebar
from app.ui.styles import apply_custom_styles
from app.ui.visualizations import (
    render_charts, render_feedback_table, render_high_priority,
    render_insights, render_metric_cards,
)

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)

# Suppress noisy loggers
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)

# Page config
st.set_page_config(page_title="Feedback Analyzer", page_icon="💬", layout="wide")
apply_custom_styles()


def init_session_state():
    """Create the dashboard once per browser session and load its records."""
    if 'dashboard' not in st.session_state:
        with st.spinner("Loading feedback data..."):
            dashboard = FeedbackDashboard(settings=settings)
            dashboard.load()
        st.session_state.dashboard = dashboard


def _on_reset():
    st.session_state.dashboard.reset()
    logger.info("Dashboard data reset by user")


def _render_insights_section(dashboard: FeedbackDashboard):
    head_col, button_col = st.columns([4, 1])
    with head_col:
        st.markdown("### ✨ AI-Powered Insights")
    with button_col:
        clicked = st.button("✨ Generate Insights", type="primary", use_container_width=True)
    # asyncio.run blocks this script run, and Streamlit serializes reruns per
    # session, so a click during a request is queued; FeedbackDashboard's
    # in-flight guard covers callers that overlap inside one loop.
    if clicked:
        with st.spinner("Analyzing feedback..."):
            asyncio.run(dashboard.generate_insights())
    render_insights(dashboard.last_result)


def main():
    init_session_state()
    dashboard: FeedbackDashboard = st.session_state.dashboard

    filter_fields = render_sidebar(on_reset=_on_reset)
    dashboard.set_filters(**filter_fields)
    view = dashboard.view()

    st.title("Feedback Analysis Dashboard")
    st.caption("Aggregate insights from all your feedback channels")

    render_metric_cards(view.summary)
    st.markdown("")
    render_charts(view.summary)
    st.markdown("---")
    _render_insights_section(dashboard)
    st.markdown("---")
    render_high_priority(view.summary.high_priority, settings.high_priority_threshold)
    render_feedback_table(view.filtered)


if __name__ == "__main__":
    main()
