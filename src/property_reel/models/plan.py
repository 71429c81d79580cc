"""
Plan data models.

Intermediate structures produced by the planning stages before the
timeline is compiled into tracks.
"""

from typing import Any, List, Optional
from pydantic import BaseModel, Field

from .timeline import Asset, Transition


class SegmentWindow(BaseModel):
    """Footage span relative to the start of the voiceover."""
    id: Any = Field(None, description="Footage identifier")
    segment_start_sec: float = Field(..., ge=0, description="Window start (seconds into voiceover)")
    segment_end_sec: float = Field(..., ge=0, description="Window end (seconds into voiceover)")


class ClipPlan(BaseModel):
    """Placement decision for one visual or audio element."""
    id: Any = Field(None, description="Footage identifier, when the clip is footage")
    track: int = Field(..., ge=1, le=3, description="Target track (1-based)")
    start: float = Field(..., description="Absolute start (seconds)")
    length: float = Field(..., description="Clip length (seconds)")
    asset: Asset
    transition: Optional[Transition] = None


class OpenerPlan(BaseModel):
    """Logo, property image and intro video."""
    logo: ClipPlan
    property: ClipPlan
    intro: ClipPlan
    intro_end: float = Field(..., description="Absolute end of the intro clip")
    vo_start: float = Field(..., description="Voiceover start, equal to intro end")


class WalkthroughPlan(BaseModel):
    """Footage clips spanning the voiceover."""
    clips: List[ClipPlan] = Field(default_factory=list)
    vo_end: float = Field(..., description="Voiceover end")
    last_track: int = Field(1, description="Track the walkthrough ended on")


class OutroPlan(BaseModel):
    """CTA video followed by the closing logo."""
    cta: ClipPlan
    closing_logo: ClipPlan
    cta_start: float = Field(..., description="CTA start, equal to voiceover end")
