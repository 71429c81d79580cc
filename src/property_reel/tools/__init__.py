"""Pipeline stages for Property Reel."""

from .assembler import assemble
from .compiler import compile_timeline
from .normalizer import InputNormalizer, NormalizationResult, merge_constants, normalize_inputs
from .planner import plan_opener, plan_outro, plan_walkthrough
from .segment_windows import build_segment_windows
from .validator import TimelineValidator, ValidationReport, validate_timeline

__all__ = [
    "assemble",
    "build_segment_windows",
    "compile_timeline",
    "InputNormalizer",
    "merge_constants",
    "NormalizationResult",
    "normalize_inputs",
    "plan_opener",
    "plan_outro",
    "plan_walkthrough",
    "TimelineValidator",
    "validate_timeline",
    "ValidationReport",
]
