"""HTTP interface for Property Reel."""

from .app import create_app
from .request_body import normalize_body

__all__ = ["create_app", "normalize_body"]
