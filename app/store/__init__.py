"""Feedback persistence: the record snapshot and its sample-data seeding."""

from .record_store import RecordStore
from .sample_data import SAMPLE_TEMPLATES, generate_sample_feedback

__all__ = ["RecordStore", "SAMPLE_TEMPLATES", "generate_sample_feedback"]
