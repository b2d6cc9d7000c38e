"""Phrase matching engine for finalized speech utterances.

This module provides:
- levenshtein / similarity: Edit-distance scoring
- select_best: Strict-improvement best-of-N selection over an ordered catalog
- MatchEngine: Normalize, score and apply the acceptance threshold
- MatchResult: Immutable outcome of a single match
"""

from .distance import levenshtein, similarity
from .engine import DEFAULT_THRESHOLD, MatchEngine
from .models import MatchResult
from .selector import NO_MATCH_SCORE, candidate_text, select_best

__all__ = [
    "MatchEngine",
    "MatchResult",
    "DEFAULT_THRESHOLD",
    "NO_MATCH_SCORE",
    "levenshtein",
    "similarity",
    "select_best",
    "candidate_text",
]
