"""Timeline validator.

Re-checks a compiled edit payload against the normalized inputs. It works
on the plain serialized payload and derives every expectation from the
inputs alone, so a planner or compiler bug cannot vouch for itself.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from ..models.inputs import CanonicalInputs, ValidationIssue
from ..models.timeline import EditPayload


logger = logging.getLogger(__name__)

DEFAULT_EPS_SECONDS = 0.001
VISUAL_TRACKS = 2


@dataclass
class LocatedClip:
    """A clip dict together with its track and position in that track."""
    clip: Dict[str, Any]
    track_index: int
    clip_index: int

    @property
    def asset(self) -> Dict[str, Any]:
        asset = self.clip.get("asset")
        return asset if isinstance(asset, dict) else {}

    @property
    def path(self) -> str:
        return f"payload.timeline.tracks[{self.track_index}].clips[{self.clip_index}]"


@dataclass
class ValidationReport:
    """Accumulated invariant errors; valid when empty."""
    errors: List[ValidationIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def codes(self) -> List[str]:
        return [e.code for e in self.errors]


def _number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _span(clip: Dict[str, Any]) -> Optional[Tuple[float, float]]:
    """(start, end) of a clip, or None when start/length are not numbers."""
    start = _number(clip.get("start"))
    length = _number(clip.get("length"))
    if start is None or length is None:
        return None
    return start, start + length


class TimelineValidator:
    """Checks structural invariants of a compiled timeline."""

    def __init__(self, inputs: CanonicalInputs, eps_seconds: float = DEFAULT_EPS_SECONDS):
        self.inputs = inputs
        self.eps = eps_seconds
        self.errors: List[ValidationIssue] = []

    def _add(self, code: str, path: str, message: str) -> None:
        self.errors.append(ValidationIssue(code=code, path=path, message=message))

    def _near(self, a: float, b: float) -> bool:
        return abs(a - b) <= self.eps

    def validate(self, payload: Union[EditPayload, Dict[str, Any], Any]) -> ValidationReport:
        """Run every check and return all issues found."""
        self.errors = []

        if isinstance(payload, EditPayload):
            payload = payload.to_wire()
        if not isinstance(payload, dict):
            self._add("SCHEMA_BAD_TYPE", "payload", "Payload must be object")
            return ValidationReport(list(self.errors))

        timeline = payload.get("timeline")
        tracks = timeline.get("tracks") if isinstance(timeline, dict) else None
        if not isinstance(tracks, list) or len(tracks) != 3:
            self._add("SCHEMA_BAD_TRACKS", "payload.timeline.tracks", "tracks must be array length 3")
            return ValidationReport(list(self.errors))

        clips = self._collect_clips(tracks)

        intro_url = self.inputs.avatar_intro_video.url
        cta_url = self.inputs.avatar_cta_video.url
        vo_url = self.inputs.walkthrough_voiceover.public_url

        intro = self._find(clips, "video", intro_url)
        cta = self._find(clips, "video", cta_url)
        audio = self._find(clips, "audio", vo_url)

        if intro is None:
            self._add("INTRO_NOT_FOUND", "inputs.avatar_intro_video.url",
                      "Intro clip not found in payload (exact URL match required)")
        if cta is None:
            self._add("CTA_NOT_FOUND", "inputs.avatar_cta_video.url",
                      "CTA clip not found in payload (exact URL match required)")
        if audio is None:
            self._add("AUDIO_NOT_FOUND", "inputs.walkthrough_voiceover.public_url",
                      "Audio clip not found in payload (exact URL match required)")

        self._check_anchors(intro, cta, audio)
        self._check_collisions(tracks)

        walk_clips = [
            c for c in clips
            if c.asset.get("type") == "video" and c.asset.get("src") not in (intro_url, cta_url)
        ]
        self._check_walkthrough_assets(walk_clips)
        if cta is not None:
            self._check_hard_cut(walk_clips, cta)

        return ValidationReport(list(self.errors))

    def _collect_clips(self, tracks: List[Any]) -> List[LocatedClip]:
        clips = []
        for ti, track in enumerate(tracks):
            track_clips = track.get("clips") if isinstance(track, dict) else None
            if not isinstance(track_clips, list):
                self._add("SCHEMA_BAD_TRACK", f"payload.timeline.tracks[{ti}]", "Track clips must be array")
                continue
            for ci, clip in enumerate(track_clips):
                if isinstance(clip, dict):
                    clips.append(LocatedClip(clip, ti, ci))
        return clips

    @staticmethod
    def _find(clips: List[LocatedClip], asset_type: str, src: Optional[str]) -> Optional[LocatedClip]:
        for c in clips:
            if c.asset.get("type") == asset_type and c.asset.get("src") == src:
                return c
        return None

    def _check_anchors(
        self,
        intro: Optional[LocatedClip],
        cta: Optional[LocatedClip],
        audio: Optional[LocatedClip]
    ) -> None:
        intro_span = _span(intro.clip) if intro else None
        audio_span = _span(audio.clip) if audio else None
        cta_span = _span(cta.clip) if cta else None

        if intro_span and audio_span and not self._near(audio_span[0], intro_span[1]):
            self._add("VO_START_MISMATCH", f"{audio.path}.start",
                      "VO_START must equal INTRO_END within tolerance")

        if audio_span and cta_span and not self._near(cta_span[0], audio_span[1]):
            self._add("CTA_START_MISMATCH", f"{cta.path}.start",
                      "CTA.start must equal VO_END within tolerance")

    def _check_collisions(self, tracks: List[Any]) -> None:
        for ti in range(VISUAL_TRACKS):
            track = tracks[ti]
            track_clips = track.get("clips") if isinstance(track, dict) else None
            if not isinstance(track_clips, list):
                continue

            spans = []
            for ci, clip in enumerate(track_clips):
                span = _span(clip) if isinstance(clip, dict) else None
                if span is None:
                    self._add("SCHEMA_BAD_CLIP", f"payload.timeline.tracks[{ti}].clips[{ci}]",
                              "Clip start and length must be numbers")
                    continue
                spans.append(span)

            spans.sort(key=lambda s: s[0])
            for prev, curr in zip(spans, spans[1:]):
                if curr[0] < prev[1] - self.eps:
                    self._add(f"COLLISION_TRACK_{ti + 1}", f"payload.timeline.tracks[{ti}]",
                              "Collision detected within same track")
                    break

    def _check_walkthrough_assets(self, walk_clips: List[LocatedClip]) -> None:
        footage_urls = self.inputs.footage_urls

        if len(walk_clips) != len(footage_urls):
            self._add("WALKTHROUGH_COUNT_MISMATCH", "inputs.walkthrough_footages",
                      f"Payload walkthrough clips={len(walk_clips)} but inputs={len(footage_urls)}")

        available = Counter(footage_urls)
        for c in walk_clips:
            src = c.asset.get("src")
            if available[src] > 0:
                available[src] -= 1
            else:
                self._add("WALKTHROUGH_URL_NOT_IN_INPUTS", f"{c.path}.asset.src",
                          "Walkthrough src not found in inputs.walkthrough_footages[].video_url")

        placed = Counter(c.asset.get("src") for c in walk_clips)
        for i, url in enumerate(footage_urls):
            if placed[url] > 0:
                placed[url] -= 1
            else:
                self._add("WALKTHROUGH_ASSET_NOT_FOUND", f"inputs.walkthrough_footages[{i}].video_url",
                          "Expected footage URL not found among walkthrough clips")

    def _check_hard_cut(self, walk_clips: List[LocatedClip], cta: LocatedClip) -> None:
        cta_span = _span(cta.clip)
        if cta_span is None:
            return

        last = None
        last_end = None
        for c in walk_clips:
            span = _span(c.clip)
            if span is None or span[0] >= cta_span[0]:
                continue
            if last is None or span[1] > last_end:
                last, last_end = c, span[1]

        if last is None:
            return
        transition = last.clip.get("transition")
        if isinstance(transition, dict) and transition.get("out"):
            self._add("LAST_WALK_HAS_FADE_OUT", f"{last.path}.transition.out",
                      "Last walkthrough must hard cut to CTA (no fade-out)")


def validate_timeline(
    inputs: CanonicalInputs,
    payload: Union[EditPayload, Dict[str, Any]],
    eps_seconds: float = DEFAULT_EPS_SECONDS
) -> ValidationReport:
    """Validate a compiled payload against the inputs it was built from."""
    report = TimelineValidator(inputs, eps_seconds).validate(payload)
    if not report.ok:
        logger.debug(f"Timeline validation found {len(report.errors)} issue(s): {report.codes}")
    return report
