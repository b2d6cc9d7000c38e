"""Bounded newest-first log of recent utterances."""

from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional

DEFAULT_HISTORY_CAPACITY = 10


@dataclass(frozen=True)
class HistoryEntry:
    """A handled utterance as shown in the history list."""

    text: str
    accepted: bool
    phrase: Optional[str] = None

    def display(self) -> str:
        """Render for list display; accepted entries show their phrase."""
        if self.accepted and self.phrase:
            return f"{self.text}  ->  {self.phrase}"
        return self.text


class HistoryTracker:
    """Keeps the most recent entries, newest first, evicting the oldest."""

    def __init__(self, capacity: int = DEFAULT_HISTORY_CAPACITY):
        if capacity < 1:
            raise ValueError(f"History capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._entries: Deque[HistoryEntry] = deque(maxlen=capacity)

    def record(self, entry: HistoryEntry) -> None:
        # appendleft on a bounded deque drops from the right (oldest) end.
        self._entries.appendleft(entry)

    def clear(self) -> None:
        self._entries.clear()

    def list(self) -> List[HistoryEntry]:
        """Current entries, newest first."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
