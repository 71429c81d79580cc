"""FastAPI transport adapter for the assemble pipeline."""

import logging
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..tools.assembler import assemble
from .request_body import normalize_body


logger = logging.getLogger(__name__)

ASSEMBLE_PATH = "/api/shotstack/assemble"
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _error_envelope(code: str, message: str) -> Dict[str, Any]:
    return {"ok": False, "errors": [{"code": code, "path": "", "message": message}]}


async def _read_body(request: Request) -> Dict[str, Any]:
    """JSON object body, or an empty dict for anything else."""
    try:
        body = await request.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def create_app() -> FastAPI:
    """Build the HTTP application."""
    app = FastAPI(
        title="Property Reel API",
        description="Plans and validates property walkthrough video timelines.",
    )

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.api_route(ASSEMBLE_PATH, methods=ALL_METHODS)
    async def assemble_endpoint(request: Request):
        """
        Accepts a nested or flat request body and returns the compiled
        timeline, or the errors that stopped it.
        """
        body = await _read_body(request) if request.method == "POST" else {}
        logger.info(f"request_start: method={request.method} body_keys={sorted(body.keys())}")

        if request.method != "POST":
            logger.info(f"rejected_method: {request.method}")
            return JSONResponse(
                status_code=405,
                content=_error_envelope("METHOD_NOT_ALLOWED", "Only POST is allowed"),
                headers={"Allow": "POST"},
            )

        try:
            result = assemble(normalize_body(body))
        except Exception as e:
            logger.exception(f"internal_error: {e}")
            return JSONResponse(
                status_code=500,
                content=_error_envelope("INTERNAL_ERROR", str(e) or "Unknown error"),
            )

        if not result.ok:
            logger.info(f"assemble_failed: status={result.status} codes={result.error_codes}")
            return JSONResponse(status_code=result.status, content=result.to_response())

        track_summary = [
            {"track": i + 1, "clipCount": len(track.get("clips", []))}
            for i, track in enumerate(result.payload["timeline"]["tracks"])
        ]
        logger.info(
            f"assemble_ok: VO_START={result.debug['VO_START']} VO_END={result.debug['VO_END']} "
            f"CTA_START={result.debug['CTA_START']} tracks={track_summary}"
        )
        return JSONResponse(status_code=200, content=result.to_response())

    return app


app = create_app()
