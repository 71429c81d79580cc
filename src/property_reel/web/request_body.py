"""Request-shape adapter: maps the flat legacy body onto the nested shape."""

from typing import Any, Dict


def normalize_body(body: Any) -> Dict[str, Any]:
    """Return ``{inputs, alignment, constants}`` for a nested or flat body.
    
    Nested bodies (with an object ``inputs``) are returned unchanged. Flat
    bodies are mapped field by field; the voiceover URL is used for both
    ``url`` and ``public_url``, and footage entries may give ``url`` in
    place of ``video_url``.
    """
    if isinstance(body, dict) and isinstance(body.get("inputs"), dict):
        return body

    flat = body if isinstance(body, dict) else {}

    footages = flat.get("walkthrough_footages")
    if footages is None:
        # Older clients send the misspelt key.
        footages = flat.get("walthrough_footages")

    transcription = flat.get("transcription")
    if transcription is None:
        transcription = []

    return {
        "inputs": {
            "brand_logo_url": flat.get("brand_logo_url"),
            "property_address_url": flat.get("property_address_url"),
            "avatar_intro_video": {
                "url": flat.get("avatar_intro_video_url"),
                "duration": flat.get("avatar_intro_video_duration"),
            },
            "avatar_cta_video": {
                "url": flat.get("avatar_cta_video_url"),
                "duration": flat.get("avatar_cta_video_duration"),
            },
            "walkthrough_voiceover": {
                "url": flat.get("walkthrough_voiceover_url"),
                "public_url": flat.get("walkthrough_voiceover_url"),
                "audio_duration_seconds": flat.get("walkthrough_voiceover_duration"),
            },
            "walkthrough_footages": [
                _footage(f) for f in (footages if isinstance(footages, list) else [])
            ],
            "transcription": transcription,
        },
        "alignment": flat.get("alignment") if flat.get("alignment") is not None else {},
        "constants": flat.get("constants") if flat.get("constants") is not None else {},
    }


def _footage(item: Any) -> Any:
    if not isinstance(item, dict):
        return item
    video_url = item.get("video_url")
    return {**item, "video_url": video_url if video_url is not None else item.get("url")}
