"""
Dashboard panels for the Feedback Analyzer: metric cards, charts,
insights, high-priority list and the raw feedback table.

Everything here only renders values it is given; all numbers come from
the AggregateSummary / InsightsResult computed by the caller.
"""

from typing import List, Optional

import streamlit as st

from app.analytics import records_to_csv, records_to_dataframe
from app.config import COLORS
from app.schemas import AggregateSummary, FeedbackRecord, InsightsResult
from app.shared import charts
from app.shared.helpers import escape_for_html, format_day, sentiment_icon


# ══════════════════════════════════════════════════════════════════════════════
# METRIC CARDS
# ══════════════════════════════════════════════════════════════════════════════

def _stat_box(label: str, value: str, icon: str) -> str:
    return (
        f'<div class="stat-box"><div>'
        f'<div class="stat-label">{label}</div>'
        f'<div class="stat-number">{value}</div>'
        f'</div><div class="stat-icon">{icon}</div></div>'
    )


def render_metric_cards(summary: AggregateSummary):
    cols = st.columns(4)
    cards = [
        ("Total Feedback", str(summary.total), "💬"),
        ("Avg Sentiment", f"{summary.avg_sentiment:.2f}", sentiment_icon(summary.avg_sentiment)),
        ("Avg Urgency", f"{summary.avg_urgency:.1f}/10", "📈"),
        ("High Priority", str(len(summary.high_priority)), "🚨"),
    ]
    for col, (label, value, icon) in zip(cols, cards):
        with col:
            st.markdown(_stat_box(label, value, icon), unsafe_allow_html=True)


# ══════════════════════════════════════════════════════════════════════════════
# CHARTS
# ══════════════════════════════════════════════════════════════════════════════

def render_charts(summary: AggregateSummary):
    left, right = st.columns(2)
    with left:
        st.markdown("#### Feedback by Channel")
        st.plotly_chart(charts.channel_bar(summary), use_container_width=True, key="channel_bar")
    with right:
        st.markdown("#### Sentiment Distribution")
        if summary.total:
            st.plotly_chart(charts.sentiment_pie(summary), use_container_width=True, key="sentiment_pie")
        else:
            st.info("No feedback matches the current filters.")

    st.markdown("#### Themes by Volume & Urgency")
    if summary.by_theme:
        st.plotly_chart(charts.theme_bars(summary), use_container_width=True, key="theme_bars")
    else:
        st.info("No themes to show.")

    if summary.daily_volume:
        with st.expander("Feedback Volume Over Time", expanded=False):
            st.plotly_chart(charts.volume_line(summary), use_container_width=True, key="volume_line")


# ══════════════════════════════════════════════════════════════════════════════
# INSIGHTS
# ══════════════════════════════════════════════════════════════════════════════

_INSIGHT_SECTIONS = [
    ("Top Themes", "themes", None),
    ("Urgent Issues", "urgent_issues", "⚠️"),
    ("High-Value Opportunities", "opportunities", "📈"),
    ("Recommended Actions", "recommendations", None),
]


def _render_list(items: List[str], icon: Optional[str]):
    lines = []
    for i, item in enumerate(items, 1):
        marker = icon or f"<strong>{i}.</strong>"
        lines.append(f'<div class="insight-item">{marker} {escape_for_html(item)}</div>')
    if lines:
        st.markdown("".join(lines), unsafe_allow_html=True)


def render_insights(result: Optional[InsightsResult]):
    """Four insight lists in a 2x2 grid; a hint before the first request."""
    if result is None:
        st.markdown(
            '<div class="insights-empty">Click "Generate Insights" to get AI-powered analysis '
            'of your feedback</div>',
            unsafe_allow_html=True,
        )
        return

    insights = result.insights
    rows = [_INSIGHT_SECTIONS[:2], _INSIGHT_SECTIONS[2:]]
    for row in rows:
        cols = st.columns(2)
        for col, (title, attr, icon) in zip(cols, row):
            with col:
                st.markdown(f'<div class="insight-heading">{title}</div>', unsafe_allow_html=True)
                _render_list(getattr(insights, attr), icon)

    if result.ok:
        st.caption(f"{result.model} · {result.record_count} records · {result.latency_ms} ms")


# ══════════════════════════════════════════════════════════════════════════════
# RECORD LISTS
# ══════════════════════════════════════════════════════════════════════════════

def _badge(label: str, color: Optional[str] = None) -> str:
    if color is None:
        return f'<span class="badge badge-channel">{escape_for_html(label)}</span>'
    return f'<span class="badge" style="background:{color};">{escape_for_html(label)}</span>'


def feedback_card_html(record: FeedbackRecord) -> str:
    sentiment = record.sentiment.value
    theme = record.theme.value
    return (
        '<div class="feedback-card">'
        f'{_badge(record.channel.value)}'
        f'{_badge(sentiment, COLORS.get(sentiment))}'
        f'{_badge(theme, COLORS.get(theme))}'
        f'<div class="feedback-text">{escape_for_html(record.text)}</div>'
        '<div class="feedback-meta">'
        f'Urgency: <span class="urgency">{record.urgency}/10</span> &nbsp; '
        f'Value: <span class="value">{record.value}/10</span> &nbsp; '
        f'{format_day(record.timestamp)} &nbsp; @{escape_for_html(record.author)}'
        '</div></div>'
    )


def render_high_priority(records: List[FeedbackRecord], threshold: int):
    st.markdown(f"### High Priority Feedback (Urgency ≥{threshold}, Value ≥{threshold})")
    if not records:
        st.info("No high priority items match current filters")
        return
    st.markdown("".join(feedback_card_html(r) for r in records), unsafe_allow_html=True)


def render_feedback_table(records: List[FeedbackRecord]):
    with st.expander(f"All Filtered Feedback ({len(records)})", expanded=False):
        st.dataframe(records_to_dataframe(records), use_container_width=True, hide_index=True)
        st.download_button(
            "📥 Download CSV",
            data=records_to_csv(records),
            file_name="feedback.csv",
            mime="text/csv",
            disabled=not records,
        )
