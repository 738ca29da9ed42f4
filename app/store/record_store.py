"""
Record Store: owns the working set's persisted snapshot.

The snapshot lives in a single named slot: a JSON file `<storage_key>.json`
inside the data directory, holding an array of FeedbackRecord objects.
Nothing else writes to that file.

Reads are best-effort: a missing slot is seeded with sample data, and an
unreadable or invalid slot is answered with a fresh sample set (logged,
never raised). The unreadable file is left in place for inspection.

Usage:
    store = RecordStore()
    records = store.load()      # persisted set, or seeded sample set
    records = store.reset()     # new sample set, persisted
"""

import json
import logging
import os
import random
import tempfile
from pathlib import Path
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from app.config import Settings, get_settings
from app.schemas import FeedbackRecord
from app.store.sample_data import generate_sample_feedback

logger = logging.getLogger(__name__)

_RECORD_LIST = TypeAdapter(List[FeedbackRecord])


class RecordStore:
    """Persisted feedback snapshot with sample-data seeding."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        data_dir: Optional[Path] = None,
        rng: Optional[random.Random] = None,
    ):
        self.settings = settings or get_settings()
        self.data_dir = Path(data_dir or self.settings.data_dir)
        self.path = self.data_dir / f"{self.settings.storage_key}.json"
        self.sample_size = self.settings.sample_size
        self._rng = rng or random.Random()

    def load(self) -> List[FeedbackRecord]:
        """Return the persisted set, seeding the slot on first use."""
        if not self.path.exists():
            records = self._generate()
            self.save(records)
            logger.info(f"RecordStore: seeded {len(records)} sample records at {self.path}")
            return records

        try:
            records = self._read()
        except (OSError, ValueError, ValidationError) as e:
            logger.warning(f"RecordStore: unreadable snapshot {self.path} ({type(e).__name__}: {e}); "
                           f"using fresh sample data")
            return self._generate()

        logger.info(f"RecordStore: loaded {len(records)} records from {self.path}")
        return records

    def save(self, records: List[FeedbackRecord]) -> None:
        """Overwrite the slot with `records`. Failures are logged, not raised."""
        payload = _RECORD_LIST.dump_json(list(records), indent=2)
        tmp_name = None
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=self.data_dir)
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
            os.replace(tmp_name, self.path)
            tmp_name = None
            logger.debug(f"RecordStore: saved {len(records)} records")
        except OSError as e:
            logger.warning(f"RecordStore: failed to save snapshot to {self.path}: {e}")
        finally:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)

    def reset(self) -> List[FeedbackRecord]:
        """Discard the current snapshot and persist a new sample set."""
        records = self._generate()
        self.save(records)
        logger.info(f"RecordStore: reset with {len(records)} sample records")
        return records

    def _read(self) -> List[FeedbackRecord]:
        raw = self.path.read_text(encoding="utf-8")
        data = json.loads(raw)
        if not isinstance(data, list):
            raise ValueError(f"expected a JSON array, got {type(data).__name__}")
        return _RECORD_LIST.validate_python(data)

    def _generate(self) -> List[FeedbackRecord]:
        return generate_sample_feedback(self.sample_size, rng=self._rng)
