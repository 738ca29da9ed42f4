"""
Filter Engine + Aggregator tests.
Run: pytest test_analytics.py
"""

import itertools
import random

import pytest

from app.analytics import apply, high_priority, is_high_priority, matches, summarize
from app.config import CHANNELS, SENTIMENTS, THEMES, get_settings
from app.schemas import WILDCARD, FilterSpec
from app.store import generate_sample_feedback
from conftest import make_record


# ════════════════════════════════════════════════════════════════════
# Filter Engine
# ════════════════════════════════════════════════════════════════════

def test_wildcard_filter_returns_copy_of_everything(mixed_records):
    out = apply(mixed_records, FilterSpec())
    assert out == mixed_records
    assert out is not mixed_records


def test_channel_filter_keeps_only_that_channel(mixed_records):
    out = apply(mixed_records, FilterSpec(channel="Discord"))
    assert [r.id for r in out] == ["feedback-1", "feedback-4", "feedback-10"]


def test_predicates_are_anded(mixed_records):
    out = apply(mixed_records, FilterSpec(channel="Discord", sentiment="Negative", theme="UX/UI"))
    assert [r.id for r in out] == ["feedback-4"]


def test_search_is_case_insensitive_substring_on_text_only(mixed_records):
    out = apply(mixed_records, FilterSpec(search="search"))
    assert [r.text for r in out] == ["Search functionality could be faster", "SEARCH returns stale results"]
    # author/channel are not searched
    assert apply(mixed_records, FilterSpec(search="Discord")) == []


def test_filter_does_not_mutate_input(mixed_records):
    before = list(mixed_records)
    apply(mixed_records, FilterSpec(sentiment="Positive", search="the"))
    assert mixed_records == before


def test_filter_result_is_order_preserving_subset_for_all_specs():
    records = generate_sample_feedback(50, rng=random.Random(7))
    specs = itertools.product([WILDCARD] + CHANNELS, [WILDCARD] + SENTIMENTS, [WILDCARD] + THEMES, ["", "app"])
    for channel, sentiment, theme, search in specs:
        spec = FilterSpec(channel=channel, sentiment=sentiment, theme=theme, search=search)
        out = apply(records, spec)
        positions = [records.index(r) for r in out]
        assert positions == sorted(positions)
        assert all(matches(r, spec) for r in out)
        assert len(out) == sum(1 for r in records if matches(r, spec))


# ════════════════════════════════════════════════════════════════════
# Aggregator
# ════════════════════════════════════════════════════════════════════

def test_channel_and_sentiment_counts_cover_every_value(mixed_records):
    summary = summarize(mixed_records)
    assert [e.name for e in summary.by_channel] == CHANNELS
    assert [e.name for e in summary.by_sentiment] == SENTIMENTS
    assert sum(e.count for e in summary.by_channel) == 12
    assert sum(e.count for e in summary.by_sentiment) == 12
    assert {e.name: e.count for e in summary.by_channel}["Discord"] == 3


def test_theme_summary_only_lists_present_themes_with_mean_urgency(mixed_records):
    summary = summarize(mixed_records)
    themes = {t.name: t for t in summary.by_theme}
    assert "Other" not in themes
    assert themes["Bug Report"].count == 2
    assert themes["Bug Report"].avg_urgency == pytest.approx(9.5)
    assert themes["UX/UI"].avg_urgency == pytest.approx((7 + 2 + 7) / 3)
    assert sum(t.count for t in summary.by_theme) == summary.total
    # enum order
    assert [t.name for t in summary.by_theme] == [t for t in THEMES if t in themes]


def test_scalar_means(mixed_records):
    summary = summarize(mixed_records)
    # 5 positive, 2 neutral, 5 negative
    assert summary.avg_sentiment == pytest.approx(0.0)
    assert summary.avg_urgency == pytest.approx(sum(r.urgency for r in mixed_records) / 12)

    negative_only = summarize(apply(mixed_records, FilterSpec(sentiment="Negative")))
    assert negative_only.avg_sentiment == pytest.approx(-1.0)


def test_empty_subset_has_zero_scalars_and_no_themes():
    summary = summarize([])
    assert summary.total == 0
    assert summary.avg_sentiment == 0
    assert summary.avg_urgency == 0
    assert summary.by_theme == []
    assert summary.high_priority == []
    assert all(e.count == 0 for e in summary.by_channel)
    assert len(summary.by_channel) == len(CHANNELS)


def test_empty_channel_filter_example():
    records = [make_record(i, channel="Email") for i in range(1, 6)]
    filtered = apply(records, FilterSpec(channel="Discord", sentiment="All", theme="All", search=""))
    summary = summarize(filtered)
    assert filtered == []
    assert summary.avg_sentiment == 0 and summary.avg_urgency == 0
    assert summary.high_priority == []


def test_high_priority_threshold_boundaries():
    assert is_high_priority(make_record(urgency=9, value=8))
    assert is_high_priority(make_record(urgency=7, value=7))
    assert not is_high_priority(make_record(urgency=7, value=6))
    assert not is_high_priority(make_record(urgency=6, value=10))


def test_default_threshold_follows_settings(monkeypatch):
    monkeypatch.setenv("HIGH_PRIORITY_THRESHOLD", "9")
    get_settings.cache_clear()
    try:
        assert not is_high_priority(make_record(urgency=8, value=8))
        assert is_high_priority(make_record(urgency=9, value=9))
        assert summarize([make_record(urgency=8, value=8)]).high_priority == []
    finally:
        get_settings.cache_clear()


def test_high_priority_preserves_filtered_order(mixed_records):
    hp = summarize(mixed_records).high_priority
    assert hp == [r for r in mixed_records if r.urgency >= 7 and r.value >= 7]
    assert [r.id for r in hp] == ["feedback-1", "feedback-4", "feedback-7", "feedback-12"]
    assert high_priority(mixed_records, threshold=9) == [mixed_records[0]]


def test_daily_volume_is_sorted_and_totals_match(mixed_records):
    volume = summarize(mixed_records).daily_volume
    days = [d.day for d in volume]
    assert days == sorted(days)
    assert len(volume) == 4
    assert sum(d.count for d in volume) == 12
