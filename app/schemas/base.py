"""
Common enums used across the entire application.

These define the fixed vocabulary of a feedback record: where it came
from, how the customer felt, and what it is about.
"""

from enum import Enum


# Filter value meaning "no constraint on this field"
WILDCARD = "All"


class Channel(str, Enum):
    """Source channel of a feedback record."""
    SUPPORT_TICKET = "Support Ticket"
    DISCORD = "Discord"
    GITHUB = "GitHub"
    EMAIL = "Email"
    TWITTER = "Twitter"
    FORUM = "Forum"


class Sentiment(str, Enum):
    """Customer sentiment."""
    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    NEGATIVE = "Negative"


class Theme(str, Enum):
    """What the feedback is about."""
    FEATURE_REQUEST = "Feature Request"
    BUG_REPORT = "Bug Report"
    PERFORMANCE = "Performance"
    UX_UI = "UX/UI"
    DOCUMENTATION = "Documentation"
    INTEGRATION = "Integration"
    PRICING = "Pricing"
    OTHER = "Other"
