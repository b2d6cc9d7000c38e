"""Data models for the matching engine."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .selector import candidate_text


@dataclass(frozen=True)
class MatchResult:
    """Outcome of matching one finalized utterance against a catalog.

    ``best_candidate`` stays populated on rejection so callers can log what
    came closest.

    Attributes:
        raw_input: Utterance exactly as received
        normalized_input: Normalized, variant-corrected input
        best_candidate: Highest-scoring catalog entry (None only for an empty catalog)
        score: Similarity of best_candidate in [0, 1]; -1.0 when there was no candidate
        accepted: best_candidate is set and score >= threshold
    """

    raw_input: str
    normalized_input: str
    best_candidate: Optional[Any]
    score: float
    accepted: bool

    @property
    def phrase(self) -> Optional[str]:
        """Text of the best candidate, or None."""
        if self.best_candidate is None:
            return None
        return candidate_text(self.best_candidate)

    def to_log_dict(self) -> Dict[str, Any]:
        """Flat representation suitable for structured log extras."""
        return {
            "normalized_input": self.normalized_input,
            "best_candidate": self.phrase,
            "score": round(self.score, 4),
            "accepted": self.accepted,
        }
