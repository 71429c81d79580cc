"""
Timeline data models.

Defines the multi-track edit payload: assets, transitions, clips,
tracks and output settings. Serialization uses the wire aliases
(``in``/``out`` for transitions) and omits unset optional keys.
"""

from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class AssetType(str, Enum):
    """Supported clip asset types."""
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"


class TransitionType(str, Enum):
    """Available transition markers."""
    FADE = "fade"


class Asset(BaseModel):
    """Media referenced by a clip."""
    type: AssetType = Field(..., description="Asset type")
    src: Optional[str] = Field(None, description="Asset URL")
    volume: Optional[float] = Field(None, ge=0, description="Playback volume, 0 mutes")
    speed: Optional[float] = Field(None, gt=0, description="Playback speed multiplier")


class Transition(BaseModel):
    """Fade markers on either edge of a clip."""
    model_config = ConfigDict(populate_by_name=True)

    fade_in: Optional[TransitionType] = Field(None, alias="in", description="Transition into the clip")
    fade_out: Optional[TransitionType] = Field(None, alias="out", description="Transition out of the clip")

    @classmethod
    def symmetric(cls) -> "Transition":
        """Fade in and fade out."""
        return cls(fade_in=TransitionType.FADE, fade_out=TransitionType.FADE)

    @classmethod
    def in_only(cls) -> "Transition":
        """Fade in, hard cut out."""
        return cls(fade_in=TransitionType.FADE)


class Clip(BaseModel):
    """Single clip placed on a track."""
    start: float = Field(..., description="Start time in timeline (seconds)")
    length: float = Field(..., description="Clip length (seconds)")
    asset: Asset
    transition: Optional[Transition] = None

    @property
    def end(self) -> float:
        """End time in timeline."""
        return self.start + self.length


class Track(BaseModel):
    """Ordered clips sharing one layer."""
    clips: List[Clip] = Field(default_factory=list)


class Timeline(BaseModel):
    """Complete layered timeline."""
    background: str = Field("#000000", description="Background colour")
    tracks: List[Track] = Field(default_factory=list, description="Tracks, top layer first")


class OutputSettings(BaseModel):
    """Render target requested from the downstream renderer."""
    format: str = Field("mp4", description="Container format")
    resolution: str = Field("hd", description="Resolution preset")


class EditPayload(BaseModel):
    """Timeline plus output settings, ready to hand to a renderer."""
    timeline: Timeline
    output: OutputSettings = Field(default_factory=OutputSettings)

    def to_wire(self) -> Dict[str, Any]:
        """Plain JSON-compatible dict using wire aliases."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
