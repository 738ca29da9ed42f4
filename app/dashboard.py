"""
Dashboard session: the explicit owner of what the dashboard shows.

Holds the current record set, the active FilterSpec and the most recent
Insights. Nothing recomputes implicitly: after any change the caller asks
for `view()`, which runs the Filter Engine then the Aggregator.

One insight request at a time: while one is outstanding, further calls
return None without touching the network.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from app.analytics import apply, summarize
from app.config import Settings, get_settings
from app.schemas import AggregateSummary, FeedbackRecord, FilterSpec, Insights, InsightsResult
from app.store import RecordStore
from app.tools import InsightRequester

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardView:
    """Filtered subset plus its summary, computed together."""
    filters: FilterSpec
    filtered: List[FeedbackRecord]
    summary: AggregateSummary


class FeedbackDashboard:
    """State + operations behind the feedback dashboard."""

    def __init__(
        self,
        store: Optional[RecordStore] = None,
        requester: Optional[InsightRequester] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.store = store or RecordStore(settings=self.settings)
        self.requester = requester or InsightRequester(settings=self.settings)
        self.records: List[FeedbackRecord] = []
        self.filters = FilterSpec()
        self.last_result: Optional[InsightsResult] = None
        self.is_generating = False

    @property
    def insights(self) -> Optional[Insights]:
        """Most recent insights (parsed or fallback), None until first request."""
        return self.last_result.insights if self.last_result else None

    # ── Records ─────────────────────────────────────────────────────

    def load(self) -> List[FeedbackRecord]:
        self.records = self.store.load()
        return self.records

    def reset(self) -> List[FeedbackRecord]:
        """New sample data; previous insights no longer describe it."""
        self.records = self.store.reset()
        self.last_result = None
        return self.records

    def replace_records(self, records: Sequence[FeedbackRecord]) -> None:
        self.records = list(records)
        self.store.save(self.records)

    # ── Filters + derived view ──────────────────────────────────────

    def set_filters(self, **fields) -> FilterSpec:
        """Update some filter fields; raises ValidationError on bad values."""
        self.filters = FilterSpec(**{**self.filters.model_dump(), **fields})
        return self.filters

    def view(self) -> DashboardView:
        filtered = apply(self.records, self.filters)
        summary = summarize(filtered, threshold=self.settings.high_priority_threshold)
        return DashboardView(filters=self.filters, filtered=filtered, summary=summary)

    # ── Insights ────────────────────────────────────────────────────

    async def generate_insights(self) -> Optional[InsightsResult]:
        """Summarize the currently filtered records.

        Returns None (and issues nothing) if a request is already running.
        """
        if self.is_generating:
            logger.warning("Insight request already in flight; ignoring trigger")
            return None

        self.is_generating = True
        try:
            filtered = apply(self.records, self.filters)
            result = await self.requester.request_insights(filtered)
        finally:
            self.is_generating = False

        self.last_result = result
        return result
