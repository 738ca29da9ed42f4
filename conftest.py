"""Shared fixtures for the Feedback Analyzer tests."""

import logging
from datetime import datetime, timedelta, timezone

import pytest

from app.config import Settings
from app.schemas import FeedbackRecord

logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)

BASE_TIME = datetime(2026, 10, 1, 12, 0, tzinfo=timezone.utc)


def make_record(n: int = 1, **overrides) -> FeedbackRecord:
    fields = dict(
        id=f"feedback-{n}",
        channel="Discord",
        text=f"Feedback number {n}",
        sentiment="Neutral",
        theme="Other",
        urgency=5,
        value=5,
        timestamp=BASE_TIME + timedelta(hours=n),
        author=f"user{n}",
    )
    fields.update(overrides)
    return FeedbackRecord(**fields)


@pytest.fixture
def settings(tmp_path):
    """Settings isolated to a temp data dir, live (non-mock) insights."""
    return Settings(
        DATA_DIR=str(tmp_path / "data"),
        MOCK_MODE=False,
        INSIGHTS_API_URL="https://insights.test/v1/messages",
    )


@pytest.fixture
def mixed_records():
    """Twelve records spanning channels, sentiments, themes and scores."""
    rows = [
        ("Discord", "App crashes when uploading files over 50MB", "Negative", "Bug Report", 10, 9),
        ("GitHub", "Would be great to have dark mode support", "Positive", "Feature Request", 3, 6),
        ("Email", "Search functionality could be faster", "Neutral", "Performance", 6, 7),
        ("Discord", "Mobile app needs significant improvements", "Negative", "UX/UI", 7, 8),
        ("Twitter", "The pricing seems fair for what we get", "Positive", "Pricing", 1, 3),
        ("Forum", "API documentation is unclear about rate limits", "Negative", "Documentation", 5, 7),
        ("Support Ticket", "Getting frequent timeouts when exporting large datasets", "Negative", "Bug Report", 9, 8),
        ("Email", "Integration with Slack would save us hours every week", "Positive", "Integration", 6, 9),
        ("GitHub", "Love the new collaboration features!", "Positive", "Feature Request", 2, 5),
        ("Discord", "The new dashboard is amazing!", "Positive", "UX/UI", 2, 4),
        ("Forum", "Export button is hidden on small screens", "Neutral", "UX/UI", 7, 6),
        ("Support Ticket", "SEARCH returns stale results", "Negative", "Performance", 8, 7),
    ]
    return [
        make_record(i + 1, channel=c, text=t, sentiment=s, theme=th, urgency=u, value=v,
                    timestamp=BASE_TIME + timedelta(days=i % 4))
        for i, (c, t, s, th, u, v) in enumerate(rows)
    ]
