"""Data models handed from the session controller to the presentation layer."""

from dataclasses import dataclass
from typing import Optional

from signmatch.assets.models import AudioSample, VideoSegment
from signmatch.matching.models import MatchResult

NO_MATCH_MESSAGE = "No preset sign for this sentence yet"


@dataclass(frozen=True)
class MediaDecision:
    """What to show for one finalized utterance.

    Attributes:
        result: MatchResult against the phrase catalog
        badge: "matched" or "no match"
        toast: Short status message for the user
        asset: Avatar asset of the accepted phrase, if any
        video: Hosted video segment of the accepted phrase, if any
        fallback_audio: Closest TTS sample when the phrase was rejected, if any
    """

    result: MatchResult
    badge: str
    toast: str
    asset: Optional[str] = None
    video: Optional[VideoSegment] = None
    fallback_audio: Optional[AudioSample] = None

    @property
    def matched(self) -> bool:
        return self.result.accepted

    @property
    def phrase(self) -> Optional[str]:
        """Accepted phrase text, or None."""
        return self.result.phrase if self.result.accepted else None
