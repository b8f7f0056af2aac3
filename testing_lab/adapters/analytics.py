from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class InMemoryAnalyticsTracker:
    """Page view tracker that keeps counts in memory. Satisfies AnalyticsTrackerPort."""

    views: Counter[str] = field(default_factory=Counter)

    def track_page_view(self, path: str) -> None:
        self.views[path] += 1
        logger.info(f"Page view path={path} total={self.views[path]}")

    def count(self, path: str) -> int:
        return self.views[path]

    def clear(self) -> None:
        self.views.clear()
