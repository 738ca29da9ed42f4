"""
Analytics over the feedback working set.

- filters.py: apply(records, spec): the filtered subset
- aggregator.py: summarize(records): counts, means, high-priority list
- export.py: DataFrame / CSV views of a subset
"""

from .filters import apply, matches
from .aggregator import high_priority, is_high_priority, summarize
from .export import records_to_csv, records_to_dataframe

__all__ = [
    "apply",
    "matches",
    "summarize",
    "high_priority",
    "is_high_priority",
    "records_to_dataframe",
    "records_to_csv",
]
