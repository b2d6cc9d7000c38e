"""Unit tests for the session controller.

Tests SessionController for:
- Listening state transitions
- Media decisions for accepted and rejected utterances
- Fallback audio selection through the same engine
- History recording order and clearing
- Construction from configuration and manifest handling
"""

import json
import logging

import pytest

from signmatch.assets import AssetCatalog, AudioSample
from signmatch.config.environment import EnvironmentConfig
from signmatch.config.models import AppConfig
from signmatch.matching import MatchEngine
from signmatch.session import NO_MATCH_MESSAGE, HistoryTracker, SessionController


def _engine_for(config: AppConfig) -> MatchEngine:
    return MatchEngine(catalog=config.phrase_texts(), rules=config.rules())


@pytest.fixture
def app_config():
    """Built-in configuration."""
    return AppConfig()


@pytest.fixture
def audio_samples():
    """Fallback audio samples."""
    return [
        AudioSample(text="good morning", audio="/assets/tts/good_morning.mp3"),
        AudioSample(text="see you later alligator", audio=None),
    ]


@pytest.fixture
def controller(engine, app_config, audio_samples):
    """Controller over the built-in catalog with a small audio manifest."""
    return SessionController(
        engine=engine,
        assets=AssetCatalog(app_config.phrases),
        audio_samples=audio_samples,
        session_id="test-session",
    )


class TestListeningState:
    """Tests for start/pause."""

    def test_starts_paused(self, controller):
        """Test a new session is not listening."""
        assert controller.listening is False
        assert controller.status == "Paused"

    def test_start_and_pause(self, controller):
        """Test start() and pause() toggle listening."""
        controller.start()
        assert controller.listening is True
        assert controller.status == "Listening"

        controller.pause()
        assert controller.listening is False


class TestHandleFinalized:
    """Tests for handle_finalized()."""

    def test_accepted_utterance(self, controller):
        """Test an accepted phrase resolves its avatar asset."""
        decision = controller.handle_finalized("  How are you  ")

        assert decision.matched is True
        assert decision.badge == "matched"
        assert decision.phrase == "how are you?"
        assert decision.asset == "/assets/avatar/how_are_you.json"
        assert decision.toast == 'Showing sign for: "how are you?"'
        assert decision.fallback_audio is None
        assert controller.last_decision is decision

    def test_rejected_utterance_without_fallback(self, controller):
        """Test a rejected utterance with no close audio sample."""
        decision = controller.handle_finalized("xyz completely unrelated gibberish")

        assert decision.matched is False
        assert decision.badge == "no match"
        assert decision.toast == NO_MATCH_MESSAGE
        assert decision.asset is None
        assert decision.phrase is None
        assert decision.fallback_audio is None

    def test_rejected_utterance_plays_closest_audio(self, controller, audio_samples):
        """Test the manifest is searched when the catalog rejects the input."""
        decision = controller.handle_finalized("Good morning!")

        assert decision.matched is False
        assert decision.fallback_audio is audio_samples[0]

    def test_fallback_sample_needs_audio(self, controller):
        """Test a matching sample without an audio path is ignored."""
        decision = controller.handle_finalized("see you later alligator")

        assert decision.matched is False
        assert decision.fallback_audio is None

    def test_accepted_utterance_skips_fallback(self, engine, app_config):
        """Test fallback audio is only consulted after a rejection."""
        samples = [AudioSample(text="how are you", audio="/assets/tts/how_are_you.mp3")]
        controller = SessionController(engine, AssetCatalog(app_config.phrases), samples)

        decision = controller.handle_finalized("how are you")

        assert decision.matched is True
        assert decision.fallback_audio is None

    def test_video_segment_resolved(self):
        """Test phrases configured with a hosted video expose the segment."""
        config = AppConfig.model_validate(
            {
                "phrases": [
                    {
                        "text": "see you tomorrow.",
                        "video": {"video_id": "abc123", "start_seconds": 68, "end_seconds": 74},
                    }
                ]
            }
        )
        controller = SessionController(_engine_for(config), AssetCatalog(config.phrases))

        decision = controller.handle_finalized("see you tomorrow")

        assert decision.asset is None
        assert decision.video.video_id == "abc123"
        assert decision.video.start_seconds == 68

    def test_missing_media_logs_warning(self, caplog):
        """Test an accepted phrase without media is reported."""
        config = AppConfig.model_validate({"phrases": [{"text": "hello there"}]})
        controller = SessionController(_engine_for(config), AssetCatalog(config.phrases))

        with caplog.at_level(logging.WARNING):
            decision = controller.handle_finalized("hello there")

        assert decision.matched is True
        assert "No media configured for phrase: hello there" in caplog.text


class TestHistory:
    """Tests for history recording."""

    def test_history_follows_utterance_order(self, controller):
        """Test every handled utterance is recorded newest first."""
        controller.handle_finalized("How are you")
        controller.handle_finalized("xyz completely unrelated gibberish")
        controller.handle_finalized("see you tomorrow")

        entries = controller.history.list()
        assert [e.text for e in entries] == [
            "see you tomorrow",
            "xyz completely unrelated gibberish",
            "How are you",
        ]
        assert [e.accepted for e in entries] == [True, False, True]

    def test_history_lines(self, controller):
        """Test display rendering of the history."""
        controller.handle_finalized("How are you")
        controller.handle_finalized("xyz completely unrelated gibberish")

        assert controller.history_lines() == [
            "xyz completely unrelated gibberish",
            "How are you  ->  how are you?",
        ]

    def test_history_is_bounded(self, engine, app_config):
        """Test the controller uses the tracker's capacity."""
        controller = SessionController(
            engine, AssetCatalog(app_config.phrases), history=HistoryTracker(capacity=3)
        )
        for i in range(5):
            controller.handle_finalized(f"utterance {i}")

        assert len(controller.history) == 3

    def test_clear(self, controller):
        """Test clear() forgets history and the last decision."""
        controller.handle_finalized("How are you")
        controller.clear()

        assert controller.history.list() == []
        assert controller.last_decision is None


class TestFromConfig:
    """Tests for SessionController.from_config()."""

    def test_builds_from_defaults(self, app_config):
        """Test the built-in configuration produces a working controller."""
        controller = SessionController.from_config(app_config)

        assert len(controller.assets) == 10
        assert controller.engine.threshold == 0.8
        assert controller.history.capacity == 10
        assert controller.audio_samples == ()
        assert controller.handle_finalized("what are doing").phrase == "what are you doing?"

    def test_loads_manifest(self, app_config, tmp_path):
        """Test an explicit manifest path is loaded."""
        manifest = tmp_path / "manifest.json"
        manifest.write_text(json.dumps([{"text": "good morning", "audio": "/tts/gm.mp3"}]))

        controller = SessionController.from_config(app_config, manifest_path=manifest)

        assert [s.text for s in controller.audio_samples] == ["good morning"]

    def test_environment_manifest_overrides_config(self, tmp_path):
        """Test SIGNMATCH_TTS_MANIFEST beats the config file path."""
        env_manifest = tmp_path / "env.json"
        env_manifest.write_text(json.dumps([{"text": "from env", "audio": "/tts/env.mp3"}]))
        config = AppConfig(tts_manifest=str(tmp_path / "config.json"))

        controller = SessionController.from_config(
            config, EnvironmentConfig(tts_manifest=str(env_manifest))
        )

        assert [s.text for s in controller.audio_samples] == ["from env"]

    def test_unavailable_manifest_disables_fallback(self, tmp_path, caplog):
        """Test a missing manifest is logged and ignored."""
        config = AppConfig(tts_manifest=str(tmp_path / "missing.json"))

        with caplog.at_level(logging.WARNING):
            controller = SessionController.from_config(config)

        assert controller.audio_samples == ()
        assert "Audio fallback disabled" in caplog.text

    def test_configured_thresholds_and_capacity(self):
        """Test thresholds and history capacity come from configuration."""
        config = AppConfig.model_validate(
            {"matching": {"threshold": 0.9, "fallback_threshold": 0.7}, "history": {"capacity": 4}}
        )

        controller = SessionController.from_config(config)

        assert controller.engine.threshold == 0.9
        assert controller.fallback_threshold == 0.7
        assert controller.history.capacity == 4
