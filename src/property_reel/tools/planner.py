"""Timeline planner.

Three dependent stages place every clip in absolute time:

1. Opener: logo, property image and intro video, crossfading on two tracks.
   The intro's end is where the voiceover starts (VO_START).
2. Walkthrough: footage chained across alternating tracks so that it spans
   the voiceover exactly, slowed down when a clip is too short.
3. Outro: CTA at the voiceover end (VO_END), then the closing logo.
"""

import logging
from typing import List

from ..models.inputs import CanonicalInputs, TimelineConstants
from ..models.plan import ClipPlan, OpenerPlan, OutroPlan, SegmentWindow, WalkthroughPlan
from ..models.timeline import Asset, AssetType, Transition
from ..utils.values import round_ms


logger = logging.getLogger(__name__)

MIN_SPEED = 0.5
DEFAULT_SOURCE_DURATION = 5.0


def other_track(track: int) -> int:
    """Visual track that is not ``track``."""
    return 2 if track == 1 else 1


def plan_opener(inputs: CanonicalInputs, constants: TimelineConstants) -> OpenerPlan:
    """Place logo (track 1), property image (track 2) and intro video (track 1)."""
    logo_start = 0.0
    property_start = constants.open_logo_length - constants.open_overlap
    intro_start = (property_start + constants.open_property_length) - constants.open_overlap

    intro_length = inputs.avatar_intro_video.duration
    intro_end = intro_start + intro_length

    return OpenerPlan(
        logo=ClipPlan(
            track=1,
            start=round_ms(logo_start),
            length=round_ms(constants.open_logo_length),
            asset=Asset(type=AssetType.IMAGE, src=inputs.brand_logo_url),
            transition=Transition.symmetric(),
        ),
        property=ClipPlan(
            track=2,
            start=round_ms(property_start),
            length=round_ms(constants.open_property_length),
            asset=Asset(type=AssetType.IMAGE, src=inputs.property_address_url),
            transition=Transition.symmetric(),
        ),
        intro=ClipPlan(
            track=1,
            start=round_ms(intro_start),
            length=round_ms(intro_length),
            asset=Asset(type=AssetType.VIDEO, src=inputs.avatar_intro_video.url),
            transition=Transition.symmetric(),
        ),
        intro_end=round_ms(intro_end),
        vo_start=round_ms(intro_end),
    )


def plan_walkthrough(
    inputs: CanonicalInputs,
    vo_start: float,
    segment_windows: List[SegmentWindow],
    constants: TimelineConstants
) -> WalkthroughPlan:
    """Chain footage clips across the voiceover.
    
    The first clip may begin up to one crossfade before the voiceover;
    every later clip begins one crossfade before its predecessor ends.
    Each clip runs to its window end plus half a crossfade, except the
    last, which ends exactly at VO_END. A clip longer than its source is
    slowed to fit, never below half speed; when that floor binds the clip
    is shortened instead.
    
    Args:
        inputs: Normalized inputs
        vo_start: Absolute voiceover start
        segment_windows: One window per footage item, in footage order
        constants: Timing constants
        
    Returns:
        WalkthroughPlan with clips on alternating tracks and VO_END
    """
    if len(segment_windows) != len(inputs.walkthrough_footages):
        raise ValueError(
            f"Expected {len(inputs.walkthrough_footages)} segment windows, got {len(segment_windows)}"
        )

    xfade = constants.walk_xfade
    vo_end = vo_start + inputs.audio_duration
    footages = inputs.walkthrough_footages

    clips = []
    prev_end = None

    for i, (footage, window) in enumerate(zip(footages, segment_windows)):
        abs_window_start = vo_start + window.segment_start_sec
        abs_window_end = vo_start + window.segment_end_sec

        if prev_end is None:
            start = max(vo_start - xfade, abs_window_start)
        else:
            start = prev_end - xfade
        end = abs_window_end + xfade / 2

        is_last = i == len(footages) - 1
        if is_last:
            end = vo_end

        required_length = end - start
        source_duration = footage.duration or DEFAULT_SOURCE_DURATION
        asset = Asset(type=AssetType.VIDEO, src=footage.video_url, volume=0)

        if required_length > source_duration:
            speed = source_duration / required_length
            if speed < MIN_SPEED:
                speed = MIN_SPEED
                required_length = source_duration / speed
                end = start + required_length
                logger.warning(
                    f"Footage {footage.id or i} too short for its window, "
                    f"shortened to {required_length:.3f}s at {MIN_SPEED}x"
                )
            asset.speed = round_ms(speed)

        clips.append(ClipPlan(
            id=footage.id,
            track=1 if i % 2 == 0 else 2,
            start=round_ms(start),
            length=round_ms(required_length),
            asset=asset,
            transition=Transition.in_only() if is_last else Transition.symmetric(),
        ))

        prev_end = end

    return WalkthroughPlan(
        clips=clips,
        vo_end=round_ms(vo_end),
        last_track=clips[-1].track if clips else 1,
    )


def plan_outro(
    inputs: CanonicalInputs,
    vo_end: float,
    last_walkthrough_track: int,
    constants: TimelineConstants
) -> OutroPlan:
    """Place the CTA at VO_END on the track the walkthrough did not end on,
    and the closing logo on the other track as the CTA finishes."""
    cta_start = vo_end
    cta_length = inputs.avatar_cta_video.duration

    cta_track = other_track(last_walkthrough_track)
    logo_track = other_track(cta_track)

    return OutroPlan(
        cta=ClipPlan(
            track=cta_track,
            start=round_ms(cta_start),
            length=round_ms(cta_length),
            asset=Asset(type=AssetType.VIDEO, src=inputs.avatar_cta_video.url),
        ),
        closing_logo=ClipPlan(
            track=logo_track,
            start=round_ms(cta_start + cta_length - constants.cta_to_logo_overlap),
            length=round_ms(constants.close_logo_length),
            asset=Asset(type=AssetType.IMAGE, src=inputs.brand_logo_url),
            transition=Transition.symmetric(),
        ),
        cta_start=round_ms(cta_start),
    )
