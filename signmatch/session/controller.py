"""Session orchestration for the live recognition loop.

The controller owns every piece of mutable state of a session (listening
flag, history, last decision) so the matching engine itself stays stateless.
Finalized utterances must be passed to handle_finalized() in the order the
recognizer finalized them; history reflects that order.
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence
from uuid import uuid4

from signmatch.assets.catalog import AssetCatalog
from signmatch.assets.manifest import ManifestError, load_tts_manifest
from signmatch.assets.models import AudioSample
from signmatch.config.environment import EnvironmentConfig
from signmatch.config.models import AppConfig
from signmatch.logging import get_logger
from signmatch.logging.context import log_context
from signmatch.matching.engine import DEFAULT_THRESHOLD, MatchEngine
from signmatch.matching.models import MatchResult

from .history import HistoryEntry, HistoryTracker
from .models import NO_MATCH_MESSAGE, MediaDecision

logger = get_logger(__name__, component="session")


class SessionController:
    """Turns finalized utterances into media decisions and history entries.

    Responsibilities:
    - Track whether the session is listening
    - Match each utterance against the phrase catalog
    - Resolve the avatar asset or video segment of an accepted phrase
    - Pick the closest fallback audio sample for rejected utterances
    - Record every handled utterance in the bounded history
    """

    def __init__(
        self,
        engine: MatchEngine,
        assets: AssetCatalog,
        audio_samples: Sequence[AudioSample] = (),
        history: Optional[HistoryTracker] = None,
        fallback_threshold: float = DEFAULT_THRESHOLD,
        session_id: Optional[str] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize SessionController.

        Args:
            engine: MatchEngine configured with the phrase catalog
            assets: Phrase -> media lookups
            audio_samples: TTS manifest entries for no-match fallback
            history: History tracker (defaults to a 10-entry tracker)
            fallback_threshold: Minimum similarity for a fallback audio sample
            session_id: Identifier attached to log records (random by default)
            logger_instance: Optional logger (defaults to module logger)
        """
        self.engine = engine
        self.assets = assets
        self.audio_samples = tuple(audio_samples)
        self.history = history if history is not None else HistoryTracker()
        self.fallback_threshold = fallback_threshold
        self.session_id = session_id or uuid4().hex
        self.logger = logger_instance or logger

        self.listening = False
        self.last_decision: Optional[MediaDecision] = None
        self._utterance_seq = 0

    @classmethod
    def from_config(
        cls,
        app_config: AppConfig,
        env_config: Optional[EnvironmentConfig] = None,
        manifest_path: Optional[Path] = None,
    ) -> "SessionController":
        """Build a controller from validated configuration.

        The manifest path is taken from manifest_path, then the environment,
        then the config file. A manifest that cannot be loaded disables the
        audio fallback instead of failing the session.
        """
        engine = MatchEngine(
            catalog=app_config.phrase_texts(),
            rules=app_config.rules(),
            threshold=app_config.matching.threshold,
        )

        path = manifest_path
        if path is None and env_config is not None and env_config.tts_manifest:
            path = Path(env_config.tts_manifest)
        if path is None and app_config.tts_manifest:
            path = Path(app_config.tts_manifest)

        audio_samples = []
        if path is not None:
            try:
                audio_samples = load_tts_manifest(path)
            except ManifestError as e:
                logger.warning(
                    f"Audio fallback disabled: {e}",
                    extra={"event": "session.manifest.unavailable", "path": str(path)},
                )

        return cls(
            engine=engine,
            assets=AssetCatalog(app_config.phrases),
            audio_samples=audio_samples,
            history=HistoryTracker(app_config.history.capacity),
            fallback_threshold=app_config.matching.fallback_threshold,
        )

    @property
    def status(self) -> str:
        return "Listening" if self.listening else "Paused"

    def start(self) -> None:
        """Start or resume listening."""
        self.listening = True
        self.logger.info(
            "Listening started",
            extra={"event": "session.listening.started", "session_id": self.session_id},
        )

    def pause(self) -> None:
        self.listening = False
        self.logger.info(
            "Listening paused",
            extra={"event": "session.listening.paused", "session_id": self.session_id},
        )

    def handle_finalized(self, raw_text: Optional[str]) -> MediaDecision:
        """Handle one finalized utterance.

        Interim recognizer text must never be passed here.

        Args:
            raw_text: Finalized utterance text

        Returns:
            MediaDecision for the presentation layer
        """
        self._utterance_seq += 1
        text = (raw_text or "").strip()

        with log_context(session_id=self.session_id, utterance_seq=self._utterance_seq):
            result = self.engine.match(raw_text)

            if result.accepted:
                decision = self._matched_decision(result)
            else:
                decision = MediaDecision(
                    result=result,
                    badge="no match",
                    toast=NO_MATCH_MESSAGE,
                    fallback_audio=self._closest_audio(raw_text),
                )

            self.history.record(
                HistoryEntry(text=text, accepted=result.accepted, phrase=result.phrase)
            )
            self.last_decision = decision

            self.logger.info(
                "Utterance handled",
                extra={
                    "event": "session.utterance.handled",
                    "fallback_audio": decision.fallback_audio.audio if decision.fallback_audio else None,
                    **result.to_log_dict(),
                },
            )

        return decision

    def clear(self) -> None:
        """Forget history and the last decision."""
        self.history.clear()
        self.last_decision = None
        self.logger.info(
            "Session cleared",
            extra={"event": "session.history.cleared", "session_id": self.session_id},
        )

    def history_lines(self) -> List[str]:
        """History rendered for display, newest first."""
        return [entry.display() for entry in self.history.list()]

    def _matched_decision(self, result: MatchResult) -> MediaDecision:
        phrase = result.phrase
        asset = self.assets.asset_for(phrase)
        video = self.assets.segment_for(phrase)

        if asset is None and video is None:
            self.logger.warning(
                f"No media configured for phrase: {phrase}",
                extra={"event": "session.media.missing", "phrase": phrase},
            )

        return MediaDecision(
            result=result,
            badge="matched",
            toast=f'Showing sign for: "{phrase}"',
            asset=asset,
            video=video,
        )

    def _closest_audio(self, raw_text: Optional[str]) -> Optional[AudioSample]:
        if not self.audio_samples:
            return None

        fallback = self.engine.match(
            raw_text, catalog=self.audio_samples, threshold=self.fallback_threshold
        )
        sample = fallback.best_candidate
        if fallback.accepted and sample is not None and sample.audio:
            return sample
        return None
