"""
Schemas package: all data models for the Feedback Analyzer.

Models are organized in submodules:
  - base.py: Channel, Sentiment, Theme enums and the "All" wildcard
  - feedback.py: FeedbackRecord, FilterSpec, AggregateSummary, Insights
"""

# base.py: enums
from app.schemas.base import WILDCARD, Channel, Sentiment, Theme

# feedback.py: records, aggregates, insights
from app.schemas.feedback import (
    FeedbackRecord, FilterSpec,
    CountEntry, ThemeSummary, DailyVolume, AggregateSummary,
    INSIGHT_KEYS, Insights, InsightsResult, FALLBACK_INSIGHTS,
)

__all__ = [
    # base
    "WILDCARD", "Channel", "Sentiment", "Theme",
    # feedback
    "FeedbackRecord", "FilterSpec",
    "CountEntry", "ThemeSummary", "DailyVolume", "AggregateSummary",
    "INSIGHT_KEYS", "Insights", "InsightsResult", "FALLBACK_INSIGHTS",
]
