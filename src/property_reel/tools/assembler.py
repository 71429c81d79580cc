"""Single entry point running the whole planning and validation pipeline."""

import logging
from typing import Any, Dict, Optional

from ..config import Settings, settings as default_settings
from ..models.result import AssembleResult
from ..utils.simple_logger import log_complete, log_failed, log_start, log_update
from .compiler import compile_timeline
from .normalizer import merge_constants, normalize_inputs
from .planner import plan_opener, plan_outro, plan_walkthrough
from .segment_windows import build_segment_windows
from .validator import validate_timeline


logger = logging.getLogger(__name__)


def assemble(body: Dict[str, Any], settings: Optional[Settings] = None) -> AssembleResult:
    """Plan, compile and validate a timeline for one request.
    
    Stages: normalize -> segment windows -> opener -> walkthrough ->
    outro -> compile -> validate. Each stage only consumes the return
    values of earlier ones; any fatal stage ends the run with its full
    error list.
    
    Args:
        body: ``{"inputs": ..., "alignment"?: ..., "constants"?: ...}``
        settings: Overrides the module-level settings
        
    Returns:
        AssembleResult with status 200, 400 (input errors) or 422
        (timeline invariant errors)
    """
    settings = settings or default_settings
    body = body if isinstance(body, dict) else {}
    alignment = body.get("alignment") or {}

    log_start(logger, "Assembling timeline")

    norm = normalize_inputs(body.get("inputs"))
    constants, constant_errors = None, []
    # Constants are only checked once every top-level field is present.
    if "MISSING_FIELD" not in {e.code for e in norm.errors}:
        constants, constant_errors = merge_constants(body.get("constants") or {})
    if not norm.ok or constant_errors:
        errors = norm.errors + constant_errors
        log_failed(logger, f"normalize_failed: {len(errors)} error(s) {[e.code for e in errors]}")
        return AssembleResult.input_failure(errors, norm.warnings)

    inputs = norm.inputs
    segment_windows = build_segment_windows(inputs, alignment)
    log_update(logger, f"segment_windows: {len(segment_windows)} {[w.id for w in segment_windows]}")

    opener = plan_opener(inputs, constants)
    walkthrough = plan_walkthrough(inputs, opener.vo_start, segment_windows, constants)
    outro = plan_outro(inputs, walkthrough.vo_end, walkthrough.last_track, constants)

    payload = compile_timeline(inputs, opener, walkthrough, outro, settings).to_wire()

    anchors = {
        "VO_START": opener.vo_start,
        "VO_END": walkthrough.vo_end,
        "CTA_START": outro.cta_start,
    }

    report = validate_timeline(inputs, payload, settings.validation_eps_seconds)
    if not report.ok:
        log_failed(logger, f"validate_failed: {len(report.errors)} error(s) {report.codes}")
        return AssembleResult.invariant_failure(report.errors, anchors)

    log_complete(logger, f"assemble_ok: VO_START={opener.vo_start} VO_END={walkthrough.vo_end} "
                         f"CTA_START={outro.cta_start}")

    return AssembleResult.success(payload, {
        **anchors,
        "segment_windows": [w.model_dump() for w in segment_windows],
        "warnings": [w.model_dump() for w in norm.warnings],
    })
