"""Media asset models referenced by phrases and the audio manifest."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class VideoSegment(BaseModel):
    """A clip inside a hosted sign-language video."""

    video_id: str = Field(..., min_length=1, description="Hosted video identifier")
    start_seconds: float = Field(0, ge=0, description="Segment start offset")
    end_seconds: Optional[float] = Field(None, ge=0, description="Segment end offset")

    @model_validator(mode="after")
    def validate_bounds(self):
        if self.end_seconds is not None and self.end_seconds <= self.start_seconds:
            raise ValueError(
                f"end_seconds ({self.end_seconds}) must be greater than "
                f"start_seconds ({self.start_seconds})"
            )
        return self


class AudioSample(BaseModel):
    """One entry of the TTS manifest: spoken text and its audio file.

    Exposes ``text`` so a list of samples can be searched by MatchEngine like
    any other catalog.
    """

    text: str = Field(..., description="Text spoken in the sample")
    audio: Optional[str] = Field(None, description="Path or URL of the audio file")

    @field_validator("text")
    @classmethod
    def strip_text(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            raise ValueError("text cannot be empty or whitespace-only")
        return stripped

    @field_validator("audio")
    @classmethod
    def strip_audio(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        stripped = v.strip()
        return stripped or None
