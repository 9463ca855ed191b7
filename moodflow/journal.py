# moodflow/journal.py
"""In-memory mood log kept by the app; the scorer itself never touches it."""
import logging
import uuid
from dataclasses import dataclass
from datetime import datetime

import pandas as pd

from .scorer import ScoreResult, analyze

logger = logging.getLogger(__name__)

COLUMNS = ["id", "timestamp", "text", "title", "score", "color", "emoji", "insight"]


class EmptyMoodError(ValueError):
    def __init__(self, message="Please enter some text about your mood"):
        super().__init__(message)


@dataclass(frozen=True)
class Entry:
    id: str
    text: str
    timestamp: datetime
    sentiment: ScoreResult


class Journal:
    def __init__(self, clock=datetime.now, analyzer=analyze, limit=0):
        self._clock = clock
        self._analyzer = analyzer
        self._limit = limit
        self._entries = []

    def add(self, text):
        """Analyze ``text`` and record it as the newest entry.

        Blank text is refused with EmptyMoodError before any analysis runs.
        """
        if not text or not text.strip():
            raise EmptyMoodError()
        sentiment = self._analyzer(text)
        entry = Entry(id=uuid.uuid4().hex, text=text, timestamp=self._clock(), sentiment=sentiment)
        self._entries.insert(0, entry)
        if self._limit and len(self._entries) > self._limit:
            del self._entries[self._limit:]
        logger.info("Logged mood entry %s: %s (score %d)", entry.id, sentiment.title, sentiment.score)
        return entry

    @property
    def entries(self):
        return tuple(self._entries)

    @property
    def latest(self):
        return self._entries[0] if self._entries else None

    def clear(self):
        logger.info("Clearing %d mood entries", len(self._entries))
        self._entries = []

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self.entries)

    def to_frame(self):
        rows = [
            {
                "id": e.id,
                "timestamp": e.timestamp.isoformat(),
                "text": e.text,
                "title": e.sentiment.title,
                "score": e.sentiment.score,
                "color": e.sentiment.color,
                "emoji": e.sentiment.emoji,
                "insight": e.sentiment.insight,
            }
            for e in self._entries
        ]
        return pd.DataFrame(rows, columns=COLUMNS)

    def to_csv(self):
        return self.to_frame().to_csv(index=False).encode("utf-8")


def band_color_styles(row):
    """Row styler for ``to_frame()`` output: tint every cell with its band color."""
    return [f"color: {row['color']}"] * len(row)
