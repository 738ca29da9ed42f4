"""
Feedback data models.

FeedbackRecord is the unit of data; FilterSpec selects a subset;
AggregateSummary is derived from a subset; Insights is what the
summarization service returns about a subset.

Records and filter specs are frozen: the only way to change the working
set is to replace it wholesale.
"""

import logging
from datetime import date, datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .base import WILDCARD, Channel, Sentiment, Theme

logger = logging.getLogger(__name__)


def _coerce_to_str_list(v: Any, field_name: str) -> List[str]:
    """Coerce value to List[str]: None→[], str→[str], filter empties.

    Anything else (numbers, objects, lists holding non-strings) is a shape
    error and raises ValueError.
    """
    if v is None:
        return []
    if isinstance(v, str):
        v = v.strip()
        if v:
            logger.debug(f"Coerced {field_name} from string to [string]")
            return [v]
        return []
    if not isinstance(v, (list, tuple)):
        raise ValueError(f"{field_name} must be a list of strings, got {type(v).__name__}")
    bad = [type(item).__name__ for item in v if item is not None and not isinstance(item, str)]
    if bad:
        raise ValueError(f"{field_name} must hold only strings, got {sorted(set(bad))}")
    return [item.strip() for item in v if item is not None and item.strip()]


# ══════════════════════════════════════════════════════════════════════════════
# RECORDS + FILTERS
# ══════════════════════════════════════════════════════════════════════════════

class FeedbackRecord(BaseModel):
    """One feedback entry from one channel."""
    model_config = ConfigDict(frozen=True)

    id: str
    channel: Channel
    text: str
    sentiment: Sentiment
    theme: Theme
    urgency: int = Field(ge=1, le=10)
    value: int = Field(ge=1, le=10)
    timestamp: datetime
    author: str

    @property
    def priority_score(self) -> int:
        """Ranking key for insight requests."""
        return self.urgency + self.value


class FilterSpec(BaseModel):
    """Active channel/sentiment/theme/search constraints.

    Each enumerated field is either one of its enum values or "All".
    """
    model_config = ConfigDict(frozen=True)

    channel: str = WILDCARD
    sentiment: str = WILDCARD
    theme: str = WILDCARD
    search: str = ""

    @field_validator('channel', mode='before')
    @classmethod
    def _check_channel(cls, v):
        return _check_enum_or_wildcard(v, Channel, "channel")

    @field_validator('sentiment', mode='before')
    @classmethod
    def _check_sentiment(cls, v):
        return _check_enum_or_wildcard(v, Sentiment, "sentiment")

    @field_validator('theme', mode='before')
    @classmethod
    def _check_theme(cls, v):
        return _check_enum_or_wildcard(v, Theme, "theme")

    @field_validator('search', mode='before')
    @classmethod
    def _none_search(cls, v):
        return v or ""

    @property
    def is_wildcard(self) -> bool:
        """True when no predicate is active."""
        return (
            self.channel == WILDCARD and self.sentiment == WILDCARD
            and self.theme == WILDCARD and not self.search
        )


def _check_enum_or_wildcard(v: Any, enum_cls, field_name: str) -> str:
    if v is None or v == WILDCARD:
        return WILDCARD
    if isinstance(v, enum_cls):
        return v.value
    allowed = {e.value for e in enum_cls}
    if v not in allowed:
        raise ValueError(f"{field_name} must be '{WILDCARD}' or one of {sorted(allowed)}, got {v!r}")
    return v


# ══════════════════════════════════════════════════════════════════════════════
# AGGREGATES
# ══════════════════════════════════════════════════════════════════════════════

class CountEntry(BaseModel):
    """Count of records carrying one enumerated value."""
    name: str
    count: int = 0


class ThemeSummary(BaseModel):
    """Volume and mean urgency for a theme present in the subset."""
    name: str
    count: int
    avg_urgency: float


class DailyVolume(BaseModel):
    """Records created on one calendar day."""
    day: date
    count: int


class AggregateSummary(BaseModel):
    """Chart-ready summary of a filtered record set.

    Always recomputed from (records, filters); never stored on its own.
    """
    total: int = 0
    by_channel: List[CountEntry] = Field(default_factory=list)
    by_sentiment: List[CountEntry] = Field(default_factory=list)
    by_theme: List[ThemeSummary] = Field(default_factory=list)
    avg_sentiment: float = 0.0
    avg_urgency: float = 0.0
    high_priority: List[FeedbackRecord] = Field(default_factory=list)
    daily_volume: List[DailyVolume] = Field(default_factory=list)


# ══════════════════════════════════════════════════════════════════════════════
# INSIGHTS
# ══════════════════════════════════════════════════════════════════════════════

INSIGHT_KEYS = ("themes", "urgentIssues", "opportunities", "recommendations")


class Insights(BaseModel):
    """Four-list summary produced by the summarization service.

    Wire keys are camelCase (``urgentIssues``); Python attributes are
    snake_case. Missing or null lists come through as empty lists.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    themes: List[str] = Field(default_factory=list)
    urgent_issues: List[str] = Field(default_factory=list, alias="urgentIssues")
    opportunities: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)

    @field_validator('themes', 'urgent_issues', 'opportunities', 'recommendations', mode='before')
    @classmethod
    def _coerce_lists(cls, v, info):
        return _coerce_to_str_list(v, info.field_name)

    @property
    def is_empty(self) -> bool:
        return not (self.themes or self.urgent_issues or self.opportunities or self.recommendations)


FALLBACK_INSIGHTS = Insights(
    themes=["Unable to generate insights", "Please try again"],
    urgent_issues=["Error occurred"],
    opportunities=["Error occurred"],
    recommendations=["Check logs for details"],
)


class InsightsResult(BaseModel):
    """Outcome of one summarization request.

    ``ok`` is False when ``insights`` is the fallback value; ``error`` then
    carries the underlying cause.
    """
    insights: Insights
    ok: bool = True
    error: Optional[str] = None
    model: str = ""
    latency_ms: int = 0
    record_count: int = 0

    @classmethod
    def fallback(cls, error: str, **kwargs) -> "InsightsResult":
        return cls(insights=FALLBACK_INSIGHTS, ok=False, error=error, **kwargs)
