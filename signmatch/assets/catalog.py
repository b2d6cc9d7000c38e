"""Phrase -> media asset lookups for the presentation layer."""

from typing import Any, Dict, List, Optional, Sequence, Tuple

from .models import VideoSegment

# Built-in catalog; order is tie-break priority.
DEFAULT_PHRASES: Tuple[Dict[str, Any], ...] = (
    {"text": "how are you?", "asset": "/assets/avatar/how_are_you.json"},
    {"text": "what are you doing?", "asset": "/assets/avatar/what_are_you_doing.json"},
    {"text": "what is your name?", "asset": "/assets/avatar/what_is_your_name.json"},
    {"text": "my name is om.", "asset": "/assets/avatar/my_name_is_om.json"},
    {"text": "nice to meet you.", "asset": "/assets/avatar/nice_to_meet_you.json"},
    {"text": "please wait a moment.", "asset": "/assets/avatar/please_wait_a_moment.json"},
    {"text": "can you help me?", "asset": "/assets/avatar/can_you_help_me.json"},
    {"text": "i don’t understand.", "asset": "/assets/avatar/i_dont_understand.json"},
    {"text": "thank you very much.", "asset": "/assets/avatar/thank_you_very_much.json"},
    {"text": "see you tomorrow.", "asset": "/assets/avatar/see_you_tomorrow.json"},
)


class AssetCatalog:
    """Read-only mapping from catalog phrase text to its visual assets.

    Built from any sequence of entries exposing ``text``, ``asset`` and
    ``video`` (the phrase entries of AppConfig).
    """

    def __init__(self, phrases: Sequence[Any]):
        self._phrases: Tuple[str, ...] = tuple(p.text for p in phrases)
        self._assets: Dict[str, Optional[str]] = {p.text: p.asset for p in phrases}
        self._videos: Dict[str, Optional[VideoSegment]] = {p.text: p.video for p in phrases}

    @property
    def phrases(self) -> Tuple[str, ...]:
        """Catalog phrase texts in priority order."""
        return self._phrases

    def asset_for(self, phrase: Optional[str]) -> Optional[str]:
        """Avatar asset path for a phrase, or None."""
        if phrase is None:
            return None
        return self._assets.get(phrase)

    def segment_for(self, phrase: Optional[str]) -> Optional[VideoSegment]:
        """Hosted video segment for a phrase, or None."""
        if phrase is None:
            return None
        return self._videos.get(phrase)

    def missing_media(self) -> List[str]:
        """Phrases with neither an avatar asset nor a video segment."""
        return [
            text for text in self._phrases
            if not self._assets.get(text) and self._videos.get(text) is None
        ]

    def __len__(self) -> int:
        return len(self._phrases)
