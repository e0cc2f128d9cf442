from collections import Counter
from typing import Dict, Optional

RIDE = 'ride'
DIAGNOSTICS = 'diagnostics'
INSTALL = 'install'
CATEGORIES = (RIDE, DIAGNOSTICS, INSTALL)

ESCALATIONS = 'escalations'


def requests(category: str) -> str:
    return f"{category}_requests"


def request_queue(category: str) -> str:
    return f"{category}_request_queue"


def service_queue(category: str) -> str:
    return f"{category}_queue"


class Statistics:
    """Named counters bumped by actors and read once the run is over."""

    def __init__(self):
        self._counters: Counter = Counter()

    def increment(self, name: str, by: int = 1) -> None:
        self._counters[name] += by

    def decrement(self, name: str, by: int = 1) -> None:
        self._counters[name] -= by

    def __getitem__(self, name: str) -> int:
        return self._counters[name]

    def snapshot(self) -> Dict[str, int]:
        return dict(self._counters)

    # derived figures
    def total_requests(self) -> int:
        return sum(self[requests(c)] for c in CATEGORIES)

    def still_queued(self) -> int:
        return sum(self[service_queue(c)] for c in CATEGORIES)

    def success_rate(self) -> Optional[float]:
        """Share of accepted requests that were not left waiting for service
        when the day ended, or None when nothing was accepted."""
        total = self.total_requests()
        if total == 0:
            return None
        return (total - self.still_queued()) / total
