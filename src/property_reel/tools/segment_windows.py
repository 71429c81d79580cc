"""Segment window builder.

Maps each walkthrough footage item onto a span of the voiceover, using the
caller's alignment data where it is usable and an even split of the
remaining narration otherwise.
"""

import logging
from typing import Any, Dict, List, Optional

from ..models.inputs import CanonicalInputs
from ..models.plan import SegmentWindow
from ..utils.values import round_ms, to_number


logger = logging.getLogger(__name__)

DEGENERATE_ESTIMATE = 0.5


def index_alignment(alignment: Any) -> Dict[str, Dict[str, Any]]:
    """Index ``alignment.segment_windows`` by string id; later entries win."""
    by_id: Dict[str, Dict[str, Any]] = {}
    if not isinstance(alignment, dict):
        return by_id
    windows = alignment.get("segment_windows")
    if not isinstance(windows, list):
        return by_id
    for window in windows:
        if isinstance(window, dict) and isinstance(window.get("id"), str):
            by_id[window["id"]] = window
    return by_id


def build_segment_windows(
    inputs: CanonicalInputs,
    alignment: Optional[Dict[str, Any]] = None
) -> List[SegmentWindow]:
    """Build one voiceover-relative window per footage item, in footage order.
    
    A running cursor tracks the last window end. Aligned windows are used
    as given when both bounds are numbers and end >= start; otherwise the
    window starts at the cursor and takes an equal share of the voiceover
    left after it. Both bounds are clamped into [0, audio duration] and the
    end never precedes the start.
    
    Args:
        inputs: Normalized inputs
        alignment: Optional ``{"segment_windows": [{id, segment_start_sec, segment_end_sec}]}``
        
    Returns:
        Segment windows rounded to milliseconds
    """
    footages = inputs.walkthrough_footages
    audio_duration = inputs.audio_duration
    by_id = index_alignment(alignment)

    windows = []
    last_known_end = 0.0
    fallback_count = 0

    for idx, footage in enumerate(footages):
        aligned = by_id.get(footage.id) if isinstance(footage.id, str) else None

        start = to_number(aligned.get("segment_start_sec")) if aligned else None
        end = to_number(aligned.get("segment_end_sec")) if aligned else None

        if start is None or end is None or end < start:
            remaining_time = max(0.0, audio_duration - last_known_end)
            remaining_segments = len(footages) - idx
            estimate = remaining_time / remaining_segments if remaining_segments > 0 else DEGENERATE_ESTIMATE

            start = last_known_end
            end = start + estimate
            fallback_count += 1

        start = max(0.0, min(start, audio_duration))
        end = max(start, min(end, audio_duration))

        last_known_end = end

        windows.append(SegmentWindow(
            id=footage.id,
            segment_start_sec=round_ms(start),
            segment_end_sec=round_ms(end),
        ))

    if fallback_count:
        logger.info(f"{fallback_count}/{len(footages)} segment windows estimated without alignment")

    return windows
