"""
Plotly figure builders for the dashboard charts.

Pure functions of an AggregateSummary: no Streamlit calls, so they can be
built (and inspected) outside a running app.
"""

from typing import List

import plotly.graph_objects as go

from app.config import COLORS
from app.schemas import AggregateSummary

PRIMARY = "#3b82f6"
ACCENT = "#f59e0b"

_BASE_LAYOUT = dict(
    margin=dict(t=20, l=40, r=20, b=20),
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
)


def channel_bar(summary: AggregateSummary) -> go.Figure:
    """Feedback count per channel (every channel, zeros included)."""
    fig = go.Figure(go.Bar(
        x=[e.name for e in summary.by_channel],
        y=[e.count for e in summary.by_channel],
        marker_color=PRIMARY,
        name="Count",
    ))
    fig.update_layout(height=280, xaxis=dict(tickangle=-45), **_BASE_LAYOUT)
    return fig


def sentiment_pie(summary: AggregateSummary) -> go.Figure:
    """Sentiment share; empty subsets show an empty pie rather than failing."""
    names = [e.name for e in summary.by_sentiment]
    fig = go.Figure(go.Pie(
        labels=names,
        values=[e.count for e in summary.by_sentiment],
        marker=dict(colors=[COLORS[n] for n in names]),
        textinfo="label+percent",
        sort=False,
    ))
    fig.update_layout(height=280, showlegend=False, **_BASE_LAYOUT)
    return fig


def theme_bars(summary: AggregateSummary) -> go.Figure:
    """Count (left axis) and mean urgency (right axis) per present theme."""
    names: List[str] = [t.name for t in summary.by_theme]
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=names, y=[t.count for t in summary.by_theme],
        name="Count", marker_color=PRIMARY, offsetgroup=0, yaxis="y",
    ))
    fig.add_trace(go.Bar(
        x=names, y=[round(t.avg_urgency, 2) for t in summary.by_theme],
        name="Avg Urgency", marker_color=ACCENT, offsetgroup=1, yaxis="y2",
    ))
    fig.update_layout(
        height=320,
        barmode="group",
        xaxis=dict(tickangle=-45),
        yaxis=dict(title="Count"),
        yaxis2=dict(title="Avg Urgency", overlaying="y", side="right", range=[0, 10]),
        legend=dict(orientation="h", y=1.1),
        **_BASE_LAYOUT,
    )
    return fig


def volume_line(summary: AggregateSummary) -> go.Figure:
    """Records per day across the subset's time span."""
    fig = go.Figure(go.Scatter(
        x=[d.day for d in summary.daily_volume],
        y=[d.count for d in summary.daily_volume],
        mode="lines+markers",
        line=dict(color=PRIMARY, width=2),
        name="Feedback",
    ))
    fig.update_layout(height=240, **_BASE_LAYOUT)
    return fig
