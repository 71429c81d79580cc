"""
Data models for Property Reel.

This module provides Pydantic models for type safety and validation
throughout the planning pipeline.
"""

from .inputs import (
    CanonicalInputs,
    FootageItem,
    TimelineConstants,
    TranscriptWord,
    ValidationIssue,
    VideoAsset,
    Voiceover,
)
from .plan import (
    ClipPlan,
    OpenerPlan,
    OutroPlan,
    SegmentWindow,
    WalkthroughPlan,
)
from .timeline import (
    Asset,
    AssetType,
    Clip,
    EditPayload,
    OutputSettings,
    Timeline,
    Track,
    Transition,
    TransitionType,
)
from .result import AssembleResult

__all__ = [
    # Inputs
    "CanonicalInputs",
    "FootageItem",
    "TimelineConstants",
    "TranscriptWord",
    "ValidationIssue",
    "VideoAsset",
    "Voiceover",
    # Plan
    "ClipPlan",
    "OpenerPlan",
    "OutroPlan",
    "SegmentWindow",
    "WalkthroughPlan",
    # Timeline
    "Asset",
    "AssetType",
    "Clip",
    "EditPayload",
    "OutputSettings",
    "Timeline",
    "Track",
    "Transition",
    "TransitionType",
    # Result
    "AssembleResult",
]
