"""
Alternate submission target: keeps the most recent submissions in memory.
Capacity is bounded and everything is lost on restart; submission ids keep counting
across evictions so they stay unique for the life of the process.
"""
from __future__ import annotations

import logging
from collections import deque
from datetime import datetime, timezone
from typing import Any

logger = logging.getLogger(__name__)


class EchoStore:
    def __init__(self, max_submissions: int = 500):
        if max_submissions < 1:
            raise ValueError("max_submissions must be at least 1")
        self._submissions: deque[dict[str, Any]] = deque(maxlen=max_submissions)
        self._count = 0

    def __len__(self) -> int:
        return len(self._submissions)

    @property
    def total_received(self) -> int:
        return self._count

    def add(self, record: dict[str, Any]) -> int:
        """Stamp `record` with submittedAt, keep it, and return its 1-based submission id."""
        record = {**record, "submittedAt": datetime.now(timezone.utc).isoformat()}
        self._submissions.append(record)
        self._count += 1
        logger.info("Form submission %s received", self._count)
        logger.debug("Submission %s: %s", self._count, record)
        return self._count

    def recent(self) -> list[dict[str, Any]]:
        return list(self._submissions)
