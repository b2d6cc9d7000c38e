"""Configuration schema models using Pydantic."""

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from signmatch.assets.catalog import DEFAULT_PHRASES
from signmatch.assets.models import VideoSegment
from signmatch.normalization import DEFAULT_VARIANT_RULES, VariantRule


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class PhraseConfig(BaseModel):
    """A canonical phrase and the media shown when it is recognized."""

    text: str = Field(..., min_length=1, description="Canonical phrase text")
    asset: Optional[str] = Field(None, description="Avatar animation/video asset path")
    video: Optional[VideoSegment] = Field(None, description="Hosted video segment")

    @field_validator("text")
    @classmethod
    def strip_text(cls, v: str) -> str:
        """Strip whitespace from phrase text."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("Phrase text cannot be empty or whitespace-only")
        return stripped

    @field_validator("asset")
    @classmethod
    def strip_asset(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        stripped = v.strip()
        return stripped or None


class VariantRuleConfig(BaseModel):
    """Pattern -> replacement correction applied to normalized text."""

    pattern: str = Field(..., min_length=1, description="Text to replace (case-insensitive)")
    replacement: str = Field(..., description="Canonical replacement text")
    whole_word: bool = Field(True, description="Match only at word boundaries")

    def to_rule(self) -> VariantRule:
        return VariantRule(self.pattern, self.replacement, self.whole_word)


def _default_phrases() -> List[PhraseConfig]:
    return [PhraseConfig.model_validate(entry) for entry in DEFAULT_PHRASES]


def _default_variant_rules() -> List[VariantRuleConfig]:
    return [
        VariantRuleConfig(
            pattern=rule.pattern, replacement=rule.replacement, whole_word=rule.whole_word
        )
        for rule in DEFAULT_VARIANT_RULES
    ]


class MatchingConfig(BaseModel):
    """Acceptance thresholds."""

    threshold: float = Field(
        0.8, ge=0.0, le=1.0, description="Minimum similarity to accept a catalog phrase"
    )
    fallback_threshold: float = Field(
        0.8, ge=0.0, le=1.0, description="Minimum similarity to play a fallback audio sample"
    )


class HistoryConfig(BaseModel):
    """Recent-utterance history settings."""

    capacity: int = Field(10, ge=1, le=100, description="Entries kept, newest first")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True}


class AppConfig(BaseModel):
    """Root configuration object for the phrase matcher."""

    phrases: List[PhraseConfig] = Field(
        default_factory=_default_phrases,
        min_length=1,
        description="Ordered phrase catalog; earlier phrases win ties",
    )
    variant_rules: List[VariantRuleConfig] = Field(
        default_factory=_default_variant_rules,
        description="Ordered variant corrections",
    )
    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    history: HistoryConfig = Field(default_factory=HistoryConfig)
    tts_manifest: Optional[str] = Field(None, description="Path to the TTS audio manifest")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def validate_unique_phrases(self):
        """Reject phrases that appear more than once."""
        seen = set()
        duplicates = []
        for phrase in self.phrases:
            if phrase.text in seen:
                duplicates.append(phrase.text)
            seen.add(phrase.text)
        if duplicates:
            raise ValueError(f"Duplicate phrases in catalog: {', '.join(duplicates)}")
        return self

    def phrase_texts(self) -> Tuple[str, ...]:
        """Catalog phrase texts in priority order."""
        return tuple(phrase.text for phrase in self.phrases)

    def rules(self) -> Tuple[VariantRule, ...]:
        """Variant rules as value objects, in configured order."""
        return tuple(rule.to_rule() for rule in self.variant_rules)
