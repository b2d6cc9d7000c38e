"""Session shell: stateful orchestration around the stateless matcher.

This module provides:
- HistoryTracker / HistoryEntry: Bounded newest-first utterance history
- MediaDecision: What the presentation layer should show for an utterance
- SessionController: Listening state, matching, media resolution, history
"""

from .controller import SessionController
from .history import DEFAULT_HISTORY_CAPACITY, HistoryEntry, HistoryTracker
from .models import NO_MATCH_MESSAGE, MediaDecision

__all__ = [
    "SessionController",
    "HistoryTracker",
    "HistoryEntry",
    "MediaDecision",
    "DEFAULT_HISTORY_CAPACITY",
    "NO_MATCH_MESSAGE",
]
