"""
Tabular export of feedback records (dashboard table + CSV download).
"""

from typing import Sequence

import pandas as pd

from app.schemas import FeedbackRecord

EXPORT_COLUMNS = [
    "id", "timestamp", "channel", "sentiment", "theme",
    "urgency", "value", "author", "text",
]


def records_to_dataframe(records: Sequence[FeedbackRecord]) -> pd.DataFrame:
    """One row per record, enum fields as their display strings."""
    rows = [r.model_dump(mode="json") for r in records]
    df = pd.DataFrame(rows, columns=EXPORT_COLUMNS)
    if not df.empty:
        df["timestamp"] = pd.to_datetime(df["timestamp"], utc=True)
    return df


def records_to_csv(records: Sequence[FeedbackRecord]) -> bytes:
    """UTF-8 CSV bytes for st.download_button."""
    return records_to_dataframe(records).to_csv(index=False).encode("utf-8")
