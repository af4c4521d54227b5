import threading
from typing import List

MAX_RECENT = 6


class RecentSearchStore:
    """Most-recent-first list of unique station codes, capped at MAX_RECENT."""

    def __init__(self, limit: int = MAX_RECENT):
        self.limit = limit
        self._stations: List[str] = []
        self._lock = threading.Lock()

    def add(self, station: str) -> List[str]:
        with self._lock:
            self._stations = [station] + [s for s in self._stations if s != station]
            self._stations = self._stations[: self.limit]
            return list(self._stations)

    def get(self) -> List[str]:
        with self._lock:
            return list(self._stations)

    def clear(self) -> None:
        with self._lock:
            self._stations = []


recent_searches = RecentSearchStore()
