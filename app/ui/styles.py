"""
CSS styles for the Feedback Analyzer Streamlit app.
"""

import streamlit as st


def apply_custom_styles():
    """Apply custom CSS styles to the Streamlit app."""
    st.markdown("""
<style>
    /* Metric cards */
    .stat-box {
        background: #ffffff;
        border-radius: 10px;
        padding: 18px 20px;
        box-shadow: 0 1px 3px rgba(0, 0, 0, 0.08);
        display: flex;
        justify-content: space-between;
        align-items: center;
    }

    .stat-number {
        font-size: 2.1em;
        font-weight: bold;
        color: #111827;
    }

    .stat-label {
        color: #6b7280;
        font-size: 0.9em;
    }

    .stat-icon {
        font-size: 2em;
    }

    /* Feedback cards */
    .feedback-card {
        border: 1px solid #e5e7eb;
        border-radius: 10px;
        padding: 14px 16px;
        margin: 8px 0;
        background: #ffffff;
    }

    .feedback-card:hover {
        border-color: #93c5fd;
    }

    .feedback-text {
        color: #111827;
        margin: 8px 0;
    }

    .feedback-meta {
        color: #4b5563;
        font-size: 13px;
    }

    .feedback-meta .urgency { color: #dc2626; font-weight: bold; }
    .feedback-meta .value { color: #059669; font-weight: bold; }

    /* Badges */
    .badge {
        color: white;
        padding: 3px 10px;
        border-radius: 12px;
        font-size: 11px;
        font-weight: bold;
        margin-right: 4px;
    }

    .badge-channel {
        background: #f3f4f6;
        color: #374151;
    }

    /* Insights panel */
    .insight-heading {
        font-weight: 600;
        color: #111827;
        margin-bottom: 6px;
    }

    .insight-item {
        color: #374151;
        margin: 4px 0;
    }

    .insights-empty {
        text-align: center;
        color: #6b7280;
        padding: 24px 0;
    }
</style>
""", unsafe_allow_html=True)
