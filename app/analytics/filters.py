"""
Filter Engine: selects the subset every downstream view works from.

All active predicates are ANDed. "All" disables a predicate; an empty
search string disables the text predicate. Input order is preserved and
the input list is never modified.
"""

from typing import Iterable, List

from app.schemas import WILDCARD, FeedbackRecord, FilterSpec


def matches(record: FeedbackRecord, spec: FilterSpec) -> bool:
    """True if `record` passes every non-wildcard predicate of `spec`."""
    if spec.channel != WILDCARD and record.channel != spec.channel:
        return False
    if spec.sentiment != WILDCARD and record.sentiment != spec.sentiment:
        return False
    if spec.theme != WILDCARD and record.theme != spec.theme:
        return False
    if spec.search and spec.search.lower() not in record.text.lower():
        return False
    return True


def apply(records: Iterable[FeedbackRecord], spec: FilterSpec) -> List[FeedbackRecord]:
    """Return the records matching `spec`, in input order, as a new list."""
    if spec.is_wildcard:
        return list(records)
    return [r for r in records if matches(r, spec)]
