"""Result envelope returned by the assemble pipeline."""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

from .inputs import ValidationIssue


class AssembleResult(BaseModel):
    """Outcome of one planning + validation call.

    ``status`` is 200 on success, 400 for input errors and 422 when the
    compiled timeline fails a structural check.
    """
    ok: bool
    status: int = Field(200, description="HTTP-equivalent status")
    payload: Optional[Dict[str, Any]] = Field(None, description="Compiled edit payload (success only)")
    errors: List[ValidationIssue] = Field(default_factory=list)
    warnings: Optional[List[ValidationIssue]] = Field(None, description="Non-fatal issues from normalization")
    debug: Optional[Dict[str, Any]] = Field(None, description="Anchor times and segment windows")

    @classmethod
    def success(cls, payload: Dict[str, Any], debug: Dict[str, Any]) -> "AssembleResult":
        return cls(ok=True, status=200, payload=payload, debug=debug)

    @classmethod
    def input_failure(cls, errors: List[ValidationIssue], warnings: List[ValidationIssue]) -> "AssembleResult":
        return cls(ok=False, status=400, errors=errors, warnings=warnings)

    @classmethod
    def invariant_failure(cls, errors: List[ValidationIssue], debug: Dict[str, Any]) -> "AssembleResult":
        return cls(ok=False, status=422, errors=errors, debug=debug)

    @property
    def error_codes(self) -> List[str]:
        """Codes of all accumulated errors."""
        return [e.code for e in self.errors]

    def to_response(self) -> Dict[str, Any]:
        """JSON body for a caller; success and failure envelopes differ."""
        if self.ok:
            return {"ok": True, "payload": self.payload, "debug": self.debug}
        body: Dict[str, Any] = {
            "ok": False,
            "errors": [e.model_dump() for e in self.errors],
        }
        if self.warnings is not None:
            body["warnings"] = [w.model_dump() for w in self.warnings]
        if self.debug is not None:
            body["debug"] = self.debug
        return body
