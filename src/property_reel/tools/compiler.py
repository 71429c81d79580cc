"""Timeline compiler: lays planned clips onto two visual tracks and one audio track."""

import logging
from typing import List, Optional

from ..config import Settings, settings as default_settings
from ..models.inputs import CanonicalInputs
from ..models.plan import ClipPlan, OpenerPlan, OutroPlan, WalkthroughPlan
from ..models.timeline import Asset, AssetType, Clip, EditPayload, OutputSettings, Timeline, Track


logger = logging.getLogger(__name__)


def _to_clip(plan: ClipPlan) -> Clip:
    return Clip(
        start=plan.start,
        length=plan.length,
        asset=plan.asset.model_copy(),
        transition=plan.transition.model_copy() if plan.transition else None,
    )


def compile_timeline(
    inputs: CanonicalInputs,
    opener: OpenerPlan,
    walkthrough: WalkthroughPlan,
    outro: OutroPlan,
    settings: Optional[Settings] = None
) -> EditPayload:
    """Merge opener, walkthrough and outro plans into an edit payload.
    
    Visual clips are sorted by start within each track (ties keep plan
    order). The voiceover occupies the third track from VO_START for the
    full audio duration.
    """
    settings = settings or default_settings
    visual: List[List[Clip]] = [[], []]

    plans = [opener.logo, opener.property, opener.intro]
    plans.extend(walkthrough.clips)
    plans.extend([outro.cta, outro.closing_logo])

    for plan in plans:
        if plan.track not in (1, 2):
            raise ValueError(f"Visual clip planned on track {plan.track}")
        visual[plan.track - 1].append(_to_clip(plan))

    audio = [Clip(
        start=opener.vo_start,
        length=inputs.audio_duration,
        asset=Asset(type=AssetType.AUDIO, src=inputs.walkthrough_voiceover.public_url),
    )]

    for clips in visual:
        clips.sort(key=lambda c: c.start)

    logger.debug(f"Compiled tracks: {len(visual[0])}/{len(visual[1])} visual clips, 1 audio clip")

    return EditPayload(
        timeline=Timeline(
            background=settings.timeline_background,
            tracks=[Track(clips=visual[0]), Track(clips=visual[1]), Track(clips=audio)],
        ),
        output=OutputSettings(format=settings.output_format, resolution=settings.output_resolution),
    )
