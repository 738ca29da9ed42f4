"""
Helper utility functions for the Feedback Analyzer Streamlit app.
"""

import html
from datetime import datetime


def escape_for_html(text: str) -> str:
    """Escape text for safe HTML embedding, handling both HTML and markdown patterns."""
    if not text:
        return text
    text = html.escape(text)
    # Backticks and emphasis markers would otherwise be picked up by st.markdown
    text = text.replace('`', '&#96;')
    text = text.replace('**', '&#42;&#42;')
    text = text.replace('__', '&#95;&#95;')
    text = text.replace('\n', ' ').replace('\r', ' ')
    return text


def format_day(ts: datetime) -> str:
    """Short date for record cards, e.g. 'Oct 19, 2026'."""
    return ts.strftime("%b %d, %Y")


def sentiment_icon(score: float) -> str:
    return "👍" if score > 0 else "👎"
