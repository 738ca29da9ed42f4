"""
Sidebar component for the Feedback Analyzer Streamlit app.
Holds the filter controls, the data reset button and provider status.
"""

import streamlit as st

from app.config import CHANNELS, SENTIMENTS, THEMES, get_settings
from app.schemas import WILDCARD


def _render_provider_status(settings) -> None:
    """Show where insight requests will go."""
    llm = settings.get_llm_config()
    if llm["provider"] == "mock":
        st.caption("🧪 **Mock mode**: insights are canned, no network")
    else:
        st.caption(f"✅ Insights: {llm['model']}")
        st.caption(f"Endpoint: {llm['base_url']}")
    st.caption(f"Data slot: {settings.data_dir}/{settings.storage_key}.json")


def _select(label: str, options: list, key: str) -> str:
    # "All" first so it is the initial selection
    return st.selectbox(label, [WILDCARD] + options, key=key)


def render_sidebar(on_reset) -> dict:
    """Render filters + controls. Returns the filter fields chosen this run."""
    settings = get_settings()
    with st.sidebar:
        st.markdown("## Filters")
        filters = {
            "channel": _select("Channel", CHANNELS, "filter_channel"),
            "sentiment": _select("Sentiment", SENTIMENTS, "filter_sentiment"),
            "theme": _select("Theme", THEMES, "filter_theme"),
            "search": st.text_input("Search", key="filter_search", placeholder="Search feedback..."),
        }

        st.markdown("---")
        st.button(
            "🔄 Reset Data", use_container_width=True, on_click=on_reset,
            help="Replace all feedback with a fresh sample set and clear insights.",
        )

        st.markdown("---")
        st.markdown("#### Status")
        _render_provider_status(settings)

    return filters
