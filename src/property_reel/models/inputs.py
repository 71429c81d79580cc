"""
Input data models.

Defines the canonical shape of a timeline request after normalization:
the opener/outro assets, the voiceover, walkthrough footage, transcription
words, per-request timing constants and the issue records used for both
errors and warnings.
"""

from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class ValidationIssue(BaseModel):
    """Symbolic failure or warning tied to a location in the input/output tree."""
    code: str = Field(..., description="Machine readable code, e.g. MISSING_FIELD")
    path: str = Field(..., description="Dotted path of the offending field")
    message: str = Field(..., description="Human readable explanation")


class TimelineConstants(BaseModel):
    """Timing knobs for the fixed opener/walkthrough/outro layout.

    Keys are the upper-case names used on the wire; unknown keys are dropped.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    open_logo_length: float = Field(1.5, ge=0, alias="OPEN_LOGO_LENGTH", description="Opening logo length (seconds)")
    open_property_length: float = Field(3.0, ge=0, alias="OPEN_PROPERTY_LENGTH", description="Property image length (seconds)")
    open_overlap: float = Field(1.0, ge=0, alias="OPEN_OVERLAP", description="Crossfade overlap inside the opener")
    walk_xfade: float = Field(1.0, ge=0, alias="WALK_XFADE", description="Crossfade between walkthrough clips")
    cta_to_logo_overlap: float = Field(1.0, ge=0, alias="CTA_TO_LOGO_OVERLAP", description="Overlap of CTA and closing logo")
    close_logo_length: float = Field(3.0, ge=0, alias="CLOSE_LOGO_LENGTH", description="Closing logo length (seconds)")

    @classmethod
    def wire_keys(cls) -> List[str]:
        """Upper-case keys accepted in a request's constants object."""
        return [field.alias for field in cls.model_fields.values()]


class VideoAsset(BaseModel):
    """Talking-head clip (intro or CTA)."""
    url: Optional[str] = Field(None, description="Video URL")
    duration: float = Field(..., ge=0, description="Clip duration (seconds)")


class Voiceover(BaseModel):
    """Narration track that drives the walkthrough."""
    url: Optional[str] = Field(None, description="Source URL")
    public_url: Optional[str] = Field(None, description="URL placed on the audio track")
    audio_duration_seconds: float = Field(..., ge=0, description="Audio duration (seconds)")


class FootageItem(BaseModel):
    """Single walkthrough clip. Extra keys supplied by the caller are kept."""
    model_config = ConfigDict(extra="allow")

    id: Any = Field(None, description="Footage identifier; only string ids match alignment entries")
    video_url: Optional[str] = Field(None, description="Footage URL")
    duration: float = Field(5.0, ge=0, description="Native footage duration (seconds)")


class TranscriptWord(BaseModel):
    """Word-level transcription entry. Kept for future alignment strategies."""
    model_config = ConfigDict(extra="allow")

    start: float = Field(..., description="Word start")
    end: float = Field(..., description="Word end")


class CanonicalInputs(BaseModel):
    """Normalized request inputs."""
    brand_logo_url: Optional[str] = Field(None, description="Brand logo image URL")
    property_address_url: Optional[str] = Field(None, description="Property address image URL")
    avatar_intro_video: VideoAsset
    avatar_cta_video: VideoAsset
    walkthrough_voiceover: Voiceover
    walkthrough_footages: List[FootageItem] = Field(default_factory=list)
    transcription: List[TranscriptWord] = Field(default_factory=list)

    @property
    def audio_duration(self) -> float:
        """Voiceover duration in seconds."""
        return self.walkthrough_voiceover.audio_duration_seconds

    @property
    def footage_urls(self) -> List[Optional[str]]:
        """Footage URLs in original order."""
        return [f.video_url for f in self.walkthrough_footages]
