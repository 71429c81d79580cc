"""Input normalization: coerce a loosely-typed request into canonical inputs."""

import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ..models.inputs import CanonicalInputs, TimelineConstants, ValidationIssue
from ..utils.values import to_number, trim_url


logger = logging.getLogger(__name__)

REQUIRED_FIELDS = [
    "brand_logo_url",
    "property_address_url",
    "avatar_intro_video",
    "avatar_cta_video",
    "walkthrough_voiceover",
    "walkthrough_footages",
    "transcription",
]

DEFAULT_FOOTAGE_DURATION = 5.0


@dataclass
class NormalizationResult:
    """Canonical inputs, or the errors that prevented producing them."""
    inputs: Optional[CanonicalInputs]
    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors and self.inputs is not None


class InputNormalizer:
    """Validates and coerces raw request inputs.

    Errors are collected rather than raised, except that missing top-level
    fields stop processing before any nested validation.
    """

    def __init__(self):
        self.errors: List[ValidationIssue] = []
        self.warnings: List[ValidationIssue] = []

    def normalize(self, raw: Any) -> NormalizationResult:
        """Normalize raw inputs.
        
        Args:
            raw: The ``inputs`` object of a request body
            
        Returns:
            NormalizationResult with canonical inputs when no errors occurred
        """
        self.errors = []
        self.warnings = []

        data = copy.deepcopy(raw) if isinstance(raw, dict) else {}

        for key in REQUIRED_FIELDS:
            if key not in data:
                self._error("MISSING_FIELD", f"inputs.{key}", f"Missing {key}")
        if self.errors:
            return self._result(None)

        canonical = {
            "brand_logo_url": self._url(data["brand_logo_url"], "inputs.brand_logo_url"),
            "property_address_url": self._url(data["property_address_url"], "inputs.property_address_url"),
            "avatar_intro_video": self._video(data["avatar_intro_video"], "inputs.avatar_intro_video"),
            "avatar_cta_video": self._video(data["avatar_cta_video"], "inputs.avatar_cta_video"),
            "walkthrough_voiceover": self._voiceover(data["walkthrough_voiceover"]),
            "walkthrough_footages": self._footages(data["walkthrough_footages"]),
            "transcription": self._transcription(data["transcription"]),
        }

        if self.errors:
            return self._result(None)
        return self._result(CanonicalInputs(**canonical))

    def _result(self, inputs: Optional[CanonicalInputs]) -> NormalizationResult:
        return NormalizationResult(inputs=inputs, errors=list(self.errors), warnings=list(self.warnings))

    def _error(self, code: str, path: str, message: str) -> None:
        self.errors.append(ValidationIssue(code=code, path=path, message=message))

    def _warn(self, code: str, path: str, message: str) -> None:
        self.warnings.append(ValidationIssue(code=code, path=path, message=message))

    def _url(self, value: Any, path: str) -> Optional[str]:
        value = trim_url(value)
        if value is not None and not isinstance(value, str):
            self._error("BAD_TYPE", path, "Must be a string")
            return None
        return value

    def _duration(self, value: Any, path: str) -> float:
        number = to_number(value)
        if number is None or number < 0:
            self._error("BAD_NUMBER", path, "Must be a number")
            return 0.0
        return number

    def _video(self, value: Any, path: str) -> Dict[str, Any]:
        video = value if isinstance(value, dict) else {}
        return {
            "url": self._url(video.get("url"), f"{path}.url"),
            "duration": self._duration(video.get("duration"), f"{path}.duration"),
        }

    def _voiceover(self, value: Any) -> Dict[str, Any]:
        path = "inputs.walkthrough_voiceover"
        voiceover = value if isinstance(value, dict) else {}

        public_url = voiceover.get("public_url")
        if not public_url and voiceover.get("url"):
            public_url = voiceover["url"]
            self._warn("COPIED_PUBLIC_URL", f"{path}.public_url", "Copied from url")

        return {
            "url": self._url(voiceover.get("url"), f"{path}.url"),
            "public_url": self._url(public_url, f"{path}.public_url"),
            "audio_duration_seconds": self._duration(
                voiceover.get("audio_duration_seconds"), f"{path}.audio_duration_seconds"
            ),
        }

    def _footages(self, value: Any) -> List[Dict[str, Any]]:
        path = "inputs.walkthrough_footages"
        if not isinstance(value, list):
            self._error("BAD_TYPE", path, "Must be array")
            return []

        footages = []
        for i, item in enumerate(value):
            item_path = f"{path}[{i}]"
            if not isinstance(item, dict):
                self._error("BAD_TYPE", item_path, "Must be object")
                continue

            footage = dict(item)
            footage["video_url"] = self._url(item.get("video_url"), f"{item_path}.video_url")

            duration = to_number(item.get("duration"))
            footage["duration"] = duration if duration is not None and duration >= 0 else DEFAULT_FOOTAGE_DURATION

            if not item.get("id"):
                self._warn("MISSING_ID", f"{item_path}.id", "Missing id")
                footage["id"] = None

            footages.append(footage)
        return footages

    def _transcription(self, value: Any) -> List[Dict[str, Any]]:
        path = "inputs.transcription"
        if not isinstance(value, list):
            self._error("BAD_TYPE", path, "Must be array")
            return []

        words = []
        for i, item in enumerate(value):
            if not isinstance(item, dict):
                self._error("BAD_TYPE", f"{path}[{i}]", "Must be object")
                continue
            start = to_number(item.get("start"))
            end = to_number(item.get("end"))
            if start is None or end is None:
                self._error("BAD_NUMBER", f"{path}[{i}]", "start/end must be numbers (ms)")
                continue
            words.append({**item, "start": start, "end": end})
        return words


def normalize_inputs(raw: Any) -> NormalizationResult:
    """Normalize raw request inputs into CanonicalInputs."""
    result = InputNormalizer().normalize(raw)
    if result.warnings:
        logger.debug(f"Normalization warnings: {[w.code for w in result.warnings]}")
    return result


def merge_constants(overrides: Any) -> Tuple[Optional[TimelineConstants], List[ValidationIssue]]:
    """Merge per-request constant overrides over the defaults.

    Unknown keys and null values are ignored. Returns a
    ``(TimelineConstants | None, errors)`` pair.
    """
    errors: List[ValidationIssue] = []
    if not isinstance(overrides, dict):
        return TimelineConstants(), errors

    values: Dict[str, float] = {}
    for key in TimelineConstants.wire_keys():
        if overrides.get(key) is None:
            continue
        number = to_number(overrides[key])
        if number is None or number < 0:
            errors.append(ValidationIssue(
                code="BAD_NUMBER",
                path=f"constants.{key}",
                message="Must be a non-negative number"
            ))
            continue
        values[key] = number

    if errors:
        return None, errors
    return TimelineConstants(**values), errors
