"""
Sample feedback generator (used when no persisted data exists, and on reset).

Ten fixed templates cover every sentiment and most themes, with a spread
of urgency/value so the high-priority list is never trivially empty.
Channel, template, timestamp and author are drawn independently per record.
"""

import random
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from app.schemas import Channel, FeedbackRecord

SAMPLE_TEMPLATES = [
    # (text, sentiment, theme, urgency, value)
    ("The new dashboard is amazing! Love the clean interface and quick load times.",
     "Positive", "UX/UI", 2, 4),
    ("Getting frequent timeouts when exporting large datasets. This is blocking our workflow.",
     "Negative", "Bug Report", 9, 8),
    ("Would be great to have dark mode support",
     "Positive", "Feature Request", 3, 6),
    ("API documentation is unclear about rate limits",
     "Negative", "Documentation", 5, 7),
    ("Integration with Slack would save us hours every week",
     "Positive", "Integration", 6, 9),
    ("App crashes when uploading files over 50MB",
     "Negative", "Bug Report", 10, 9),
    ("The pricing seems fair for what we get",
     "Positive", "Pricing", 1, 3),
    ("Search functionality could be faster",
     "Neutral", "Performance", 6, 7),
    ("Love the new collaboration features!",
     "Positive", "Feature Request", 2, 5),
    ("Mobile app needs significant improvements",
     "Negative", "UX/UI", 7, 8),
]

SAMPLE_WINDOW_DAYS = 30
AUTHOR_POOL = 100


def generate_sample_feedback(
    size: int = 50,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> List[FeedbackRecord]:
    """Build `size` randomized records with ids feedback-1..feedback-N."""
    rng = rng or random.Random()
    now = now or datetime.now(timezone.utc)
    channels = list(Channel)
    window = timedelta(days=SAMPLE_WINDOW_DAYS)

    records = []
    for i in range(size):
        text, sentiment, theme, urgency, value = rng.choice(SAMPLE_TEMPLATES)
        records.append(FeedbackRecord(
            id=f"feedback-{i + 1}",
            channel=rng.choice(channels),
            text=text,
            sentiment=sentiment,
            theme=theme,
            urgency=urgency,
            value=value,
            timestamp=now - window * rng.random(),
            author=f"user{rng.randrange(AUTHOR_POOL)}",
        ))
    return records
