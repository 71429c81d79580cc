"""Unit tests for input normalization and constant merging."""

import pytest

from property_reel.models import TimelineConstants
from property_reel.tools.normalizer import REQUIRED_FIELDS, merge_constants, normalize_inputs
from property_reel.utils.values import round_ms, to_number, trim_url


class TestValueHelpers:
    """Test coercion and rounding helpers."""
    
    def test_to_number(self):
        """Numbers and numeric strings coerce; everything else is rejected."""
        assert to_number(3) == 3.0
        assert to_number("2.5") == 2.5
        assert to_number(" 7 ") == 7.0
        assert to_number("abc") is None
        assert to_number(None) is None
        assert to_number(True) is None
        assert to_number(float("nan")) is None
        assert to_number("inf") is None
        assert to_number([1]) is None

    def test_to_number_rejects_integers_beyond_float_range(self):
        """Integers too large for a float are rejected instead of raising."""
        assert to_number(10 ** 400) is None
        assert to_number(-(10 ** 400)) is None
        assert to_number(10 ** 300) == 1e300

    def test_trim_url(self):
        """Whitespace and trailing commas are stripped."""
        assert trim_url("  https://x.io/a.mp4,, ") == "https://x.io/a.mp4"
        assert trim_url("https://x.io/a,b.mp4") == "https://x.io/a,b.mp4"
        assert trim_url(None) is None
    
    def test_round_ms(self):
        """Values round to three decimals."""
        assert round_ms(10 / 3) == 3.333
        assert round_ms(20 / 3) == 6.667
        assert round_ms(4.5) == 4.5

    def test_round_ms_huge_values_pass_through(self):
        """Values that overflow when scaled come back unchanged."""
        assert round_ms(1e306) == 1e306
        assert round_ms(-1e306) == -1e306


class TestNormalizer:
    """Test InputNormalizer behaviour."""
    
    def test_valid_inputs(self, raw_inputs):
        """Test normalizing well-formed inputs."""
        result = normalize_inputs(raw_inputs)
        
        assert result.ok
        assert result.errors == []
        assert result.warnings == []
        assert result.inputs.avatar_intro_video.duration == 2.0
        assert result.inputs.audio_duration == 10.0
        assert len(result.inputs.transcription) == 2
    
    def test_does_not_mutate_raw(self, raw_inputs):
        """The caller's dict is left untouched."""
        raw_inputs["brand_logo_url"] = " https://cdn.example.com/logo.png, "
        normalize_inputs(raw_inputs)
        assert raw_inputs["brand_logo_url"] == " https://cdn.example.com/logo.png, "
    
    @pytest.mark.parametrize("raw", [None, {}, "inputs", []])
    def test_missing_all_fields(self, raw):
        """Every required field is reported and nothing is produced."""
        result = normalize_inputs(raw)
        
        assert not result.ok
        assert result.inputs is None
        assert [e.code for e in result.errors] == ["MISSING_FIELD"] * len(REQUIRED_FIELDS)
        assert result.errors[0].path == "inputs.brand_logo_url"
    
    def test_missing_field_short_circuits(self, raw_inputs):
        """Missing fields stop processing before nested checks run."""
        del raw_inputs["transcription"]
        raw_inputs["avatar_intro_video"]["duration"] = "not a number"
        
        result = normalize_inputs(raw_inputs)
        
        assert [e.code for e in result.errors] == ["MISSING_FIELD"]
        assert result.errors[0].path == "inputs.transcription"
    
    def test_numeric_strings_and_trimmed_urls(self, raw_inputs):
        """Numeric strings are coerced and URLs trimmed."""
        raw_inputs["avatar_intro_video"] = {"url": "  https://cdn.example.com/intro.mp4,", "duration": "2.25"}
        raw_inputs["walkthrough_voiceover"]["audio_duration_seconds"] = "30"
        
        result = normalize_inputs(raw_inputs)
        
        assert result.ok
        assert result.inputs.avatar_intro_video.url == "https://cdn.example.com/intro.mp4"
        assert result.inputs.avatar_intro_video.duration == 2.25
        assert result.inputs.audio_duration == 30.0
    
    def test_bad_numbers_are_collected(self, raw_inputs):
        """All numeric errors are reported together."""
        raw_inputs["avatar_intro_video"]["duration"] = "soon"
        raw_inputs["avatar_cta_video"]["duration"] = True
        raw_inputs["walkthrough_voiceover"]["audio_duration_seconds"] = -1
        
        result = normalize_inputs(raw_inputs)
        
        assert not result.ok
        assert [(e.code, e.path) for e in result.errors] == [
            ("BAD_NUMBER", "inputs.avatar_intro_video.duration"),
            ("BAD_NUMBER", "inputs.avatar_cta_video.duration"),
            ("BAD_NUMBER", "inputs.walkthrough_voiceover.audio_duration_seconds"),
        ]

    def test_oversized_integer_duration(self, raw_inputs):
        """A JSON integer beyond float range is a bad number, not a crash."""
        raw_inputs["avatar_intro_video"]["duration"] = 10 ** 400

        result = normalize_inputs(raw_inputs)

        assert not result.ok
        assert [(e.code, e.path) for e in result.errors] == [
            ("BAD_NUMBER", "inputs.avatar_intro_video.duration"),
        ]

    def test_footage_ids_keep_their_type(self, raw_inputs):
        """Numeric ids are not converted to strings."""
        raw_inputs["walkthrough_footages"] = [
            {"id": 7, "video_url": "https://cdn.example.com/f7.mp4"},
            {"id": "8", "video_url": "https://cdn.example.com/f8.mp4"},
        ]

        result = normalize_inputs(raw_inputs)

        assert result.ok
        assert [f.id for f in result.inputs.walkthrough_footages] == [7, "8"]
        assert result.warnings == []

    def test_null_video_object(self, raw_inputs):
        """A null video object behaves like an empty one."""
        raw_inputs["avatar_cta_video"] = None
        
        result = normalize_inputs(raw_inputs)
        
        assert [e.path for e in result.errors] == ["inputs.avatar_cta_video.duration"]
    
    def test_non_string_url(self, raw_inputs):
        """URLs must be strings when present."""
        raw_inputs["brand_logo_url"] = 42
        
        result = normalize_inputs(raw_inputs)
        
        assert result.errors[0].code == "BAD_TYPE"
        assert result.errors[0].path == "inputs.brand_logo_url"
    
    def test_copied_public_url(self, raw_inputs):
        """A missing public URL is copied from the source URL with a warning."""
        raw_inputs["walkthrough_voiceover"] = {"url": "https://cdn.example.com/vo.mp3 ", "audio_duration_seconds": 12}
        
        result = normalize_inputs(raw_inputs)
        
        assert result.ok
        assert result.inputs.walkthrough_voiceover.public_url == "https://cdn.example.com/vo.mp3"
        assert [w.code for w in result.warnings] == ["COPIED_PUBLIC_URL"]
        assert result.warnings[0].path == "inputs.walkthrough_voiceover.public_url"
    
    def test_lists_must_be_arrays(self, raw_inputs):
        """Footage and transcription must be lists."""
        raw_inputs["walkthrough_footages"] = {"id": "a"}
        raw_inputs["transcription"] = "hello world"
        
        result = normalize_inputs(raw_inputs)
        
        assert [(e.code, e.path) for e in result.errors] == [
            ("BAD_TYPE", "inputs.walkthrough_footages"),
            ("BAD_TYPE", "inputs.transcription"),
        ]
    
    def test_footage_defaults_and_missing_id(self, raw_inputs):
        """Missing ids warn, bad durations default to five seconds."""
        raw_inputs["walkthrough_footages"] = [
            {"video_url": "https://cdn.example.com/f1.mp4 ", "duration": "n/a", "label": "Kitchen"},
            {"id": "f2", "video_url": "https://cdn.example.com/f2.mp4"},
            {"id": "f3", "video_url": "https://cdn.example.com/f3.mp4", "duration": "7.5"},
        ]
        
        result = normalize_inputs(raw_inputs)
        
        assert result.ok
        footages = result.inputs.walkthrough_footages
        assert len(footages) == 3
        assert footages[0].id is None
        assert footages[0].video_url == "https://cdn.example.com/f1.mp4"
        assert footages[0].model_extra["label"] == "Kitchen"
        assert [f.duration for f in footages] == [5.0, 5.0, 7.5]
        assert [(w.code, w.path) for w in result.warnings] == [
            ("MISSING_ID", "inputs.walkthrough_footages[0].id"),
        ]
    
    def test_footage_must_be_objects(self, raw_inputs):
        """Non-object footage entries are input errors."""
        raw_inputs["walkthrough_footages"] = ["https://cdn.example.com/f1.mp4"]
        
        result = normalize_inputs(raw_inputs)
        
        assert result.errors[0].code == "BAD_TYPE"
        assert result.errors[0].path == "inputs.walkthrough_footages[0]"
    
    def test_bad_transcription_word(self, raw_inputs):
        """Transcription words need numeric start and end."""
        raw_inputs["transcription"].append({"start": "1200", "end": None, "text": "today"})
        
        result = normalize_inputs(raw_inputs)
        
        assert not result.ok
        assert result.errors[0].code == "BAD_NUMBER"
        assert result.errors[0].path == "inputs.transcription[2]"
    
    def test_transcription_pass_through(self, raw_inputs):
        """Valid words keep their extra fields."""
        result = normalize_inputs(raw_inputs)
        
        word = result.inputs.transcription[0]
        assert word.start == 0.0
        assert word.end == 420.0
        assert word.model_extra["text"] == "Welcome"


class TestMergeConstants:
    """Test per-request constant overrides."""
    
    def test_defaults(self):
        """No overrides yields the documented defaults."""
        constants, errors = merge_constants({})
        
        assert errors == []
        assert constants == TimelineConstants()
        assert constants.open_logo_length == 1.5
        assert constants.open_property_length == 3.0
        assert constants.open_overlap == 1.0
        assert constants.walk_xfade == 1.0
        assert constants.cta_to_logo_overlap == 1.0
        assert constants.close_logo_length == 3.0
    
    def test_overrides_unknown_and_null(self):
        """Known keys override, unknown keys and nulls are ignored."""
        constants, errors = merge_constants({
            "WALK_XFADE": "0.5",
            "CLOSE_LOGO_LENGTH": 4,
            "OPEN_OVERLAP": None,
            "SOMETHING_ELSE": 99,
        })
        
        assert errors == []
        assert constants.walk_xfade == 0.5
        assert constants.close_logo_length == 4.0
        assert constants.open_overlap == 1.0
    
    def test_invalid_override(self):
        """Invalid overrides are input errors."""
        constants, errors = merge_constants({"WALK_XFADE": "fast", "OPEN_OVERLAP": -1})
        
        assert constants is None
        assert [(e.code, e.path) for e in errors] == [
            ("BAD_NUMBER", "constants.OPEN_OVERLAP"),
            ("BAD_NUMBER", "constants.WALK_XFADE"),
        ]
    
    def test_non_dict_overrides(self):
        """Anything but an object falls back to defaults."""
        constants, errors = merge_constants(["WALK_XFADE"])
        
        assert errors == []
        assert constants == TimelineConstants()
