"""Shared fixtures for Property Reel tests."""

import copy

import pytest

from property_reel.models import CanonicalInputs, TimelineConstants
from property_reel.tools.normalizer import normalize_inputs


INTRO_URL = "https://cdn.example.com/avatar/intro.mp4"
CTA_URL = "https://cdn.example.com/avatar/cta.mp4"
VO_URL = "https://cdn.example.com/audio/voiceover.mp3"
LOGO_URL = "https://cdn.example.com/brand/logo.png"
ADDRESS_URL = "https://cdn.example.com/listing/address.png"


def footage_url(fid):
    return f"https://cdn.example.com/footage/{fid}.mp4"


@pytest.fixture
def footage():
    """Factory for footage entries with URLs derived from their ids."""
    def _footage(fid, duration=10.0):
        return {"id": fid, "video_url": footage_url(fid), "duration": duration}
    return _footage


@pytest.fixture
def raw_inputs():
    """Raw request inputs with no footage and a 10s voiceover."""
    return {
        "brand_logo_url": LOGO_URL,
        "property_address_url": ADDRESS_URL,
        "avatar_intro_video": {"url": INTRO_URL, "duration": 2.0},
        "avatar_cta_video": {"url": CTA_URL, "duration": 4.0},
        "walkthrough_voiceover": {
            "url": VO_URL,
            "public_url": VO_URL,
            "audio_duration_seconds": 10.0,
        },
        "walkthrough_footages": [],
        "transcription": [
            {"start": 0, "end": 420, "text": "Welcome"},
            {"start": 420, "end": 900, "text": "home"},
        ],
    }


@pytest.fixture
def make_inputs(raw_inputs):
    """Build canonical inputs from the raw fixture with overrides applied."""
    def _make(footages=None, audio_duration=None, **overrides) -> CanonicalInputs:
        raw = copy.deepcopy(raw_inputs)
        if footages is not None:
            raw["walkthrough_footages"] = footages
        if audio_duration is not None:
            raw["walkthrough_voiceover"]["audio_duration_seconds"] = audio_duration
        raw.update(overrides)
        result = normalize_inputs(raw)
        assert result.ok, result.errors
        return result.inputs
    return _make


@pytest.fixture
def constants():
    """Default timing constants."""
    return TimelineConstants()
