"""
Aggregator: chart-ready summaries of a filtered record set.

Every figure here is a pure function of the subset passed in:
  - per-channel and per-sentiment counts (every enum value, zeros kept)
  - per-theme count + mean urgency (only themes that occur)
  - mean sentiment score (Positive=+1, Neutral=0, Negative=-1)
  - mean urgency
  - high-priority subset (urgency and value both at or above the threshold)
  - per-day volume for the timeline chart

Empty input yields zero scalars rather than a division error.
"""

from collections import Counter, defaultdict
from typing import Dict, List, Optional, Sequence

from app.config import SENTIMENT_SCORES, get_settings
from app.schemas import (
    AggregateSummary, Channel, CountEntry, DailyVolume,
    FeedbackRecord, Sentiment, Theme, ThemeSummary,
)


def count_by_channel(records: Sequence[FeedbackRecord]) -> List[CountEntry]:
    counts = Counter(r.channel for r in records)
    return [CountEntry(name=c.value, count=counts.get(c, 0)) for c in Channel]


def count_by_sentiment(records: Sequence[FeedbackRecord]) -> List[CountEntry]:
    counts = Counter(r.sentiment for r in records)
    return [CountEntry(name=s.value, count=counts.get(s, 0)) for s in Sentiment]


def summarize_themes(records: Sequence[FeedbackRecord]) -> List[ThemeSummary]:
    """Count + mean urgency per theme, in enum order, omitting absent themes."""
    urgencies: Dict[Theme, List[int]] = defaultdict(list)
    for r in records:
        urgencies[r.theme].append(r.urgency)

    return [
        ThemeSummary(
            name=t.value,
            count=len(urgencies[t]),
            avg_urgency=sum(urgencies[t]) / len(urgencies[t]),
        )
        for t in Theme
        if urgencies.get(t)
    ]


def average_sentiment(records: Sequence[FeedbackRecord]) -> float:
    if not records:
        return 0.0
    return sum(SENTIMENT_SCORES[r.sentiment.value] for r in records) / len(records)


def average_urgency(records: Sequence[FeedbackRecord]) -> float:
    if not records:
        return 0.0
    return sum(r.urgency for r in records) / len(records)


def _threshold(threshold: Optional[int]) -> int:
    return get_settings().high_priority_threshold if threshold is None else threshold


def is_high_priority(record: FeedbackRecord, threshold: Optional[int] = None) -> bool:
    threshold = _threshold(threshold)
    return record.urgency >= threshold and record.value >= threshold


def high_priority(
    records: Sequence[FeedbackRecord],
    threshold: Optional[int] = None,
) -> List[FeedbackRecord]:
    """High-priority records in their original relative order.

    threshold defaults to HIGH_PRIORITY_THRESHOLD from settings.
    """
    threshold = _threshold(threshold)
    return [r for r in records if is_high_priority(r, threshold)]


def daily_volume(records: Sequence[FeedbackRecord]) -> List[DailyVolume]:
    """Record count per calendar day (timestamp's own date), ascending."""
    counts = Counter(r.timestamp.date() for r in records)
    return [DailyVolume(day=d, count=n) for d, n in sorted(counts.items())]


def summarize(
    records: Sequence[FeedbackRecord],
    threshold: Optional[int] = None,
) -> AggregateSummary:
    """Compute the full AggregateSummary for a filtered subset."""
    return AggregateSummary(
        total=len(records),
        by_channel=count_by_channel(records),
        by_sentiment=count_by_sentiment(records),
        by_theme=summarize_themes(records),
        avg_sentiment=average_sentiment(records),
        avg_urgency=average_urgency(records),
        high_priority=high_priority(records, threshold),
        daily_volume=daily_volume(records),
    )
