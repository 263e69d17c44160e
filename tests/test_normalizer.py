import pytest

from schemas import GenerationOptions, VisualStyle
from vidplan.errors import InvalidInput
from vidplan.normalizer import normalize_options, with_overrides


def test_fills_defaults_for_missing_fields():
    opts = normalize_options({"topic": "  A fox in the snow  "})
    assert opts.topic == "A fox in the snow"
    assert opts.mood == "uplifting"
    assert opts.atmosphere == "soft golden-hour haze"
    assert opts.scene_count == 5


def test_blank_text_fields_fall_back_to_defaults():
    opts = normalize_options({"topic": "Fox", "mood": "   ", "tone": None, "atmosphere": ""})
    assert opts.mood == "uplifting"
    assert opts.tone == "inspiring"
    assert opts.atmosphere == "soft golden-hour haze"


def test_snake_case_keys_are_accepted():
    opts = normalize_options({"topic": "Fox", "scene_count": 2, "include_voiceover": True})
    assert opts.scene_count == 2
    assert opts.include_voiceover is True


@pytest.mark.parametrize("count, expected", [(15, 10), (0, 1), (3.6, 4), ("8", 8), ("x", 5)])
def test_scene_count_is_clamped(count, expected):
    assert normalize_options({"topic": "Fox", "sceneCount": count}).scene_count == expected


@pytest.mark.parametrize("style, expected", [
    ("SURREAL", VisualStyle.SURREAL),
    (" animated ", VisualStyle.ANIMATED),
    ("noir", VisualStyle.CINEMATIC),
    (42, VisualStyle.CINEMATIC),
    (None, VisualStyle.CINEMATIC),
])
def test_unknown_style_is_normalized(style, expected):
    assert normalize_options({"topic": "Fox", "visualStyle": style}).visual_style == expected


@pytest.mark.parametrize("topic", ["", "   ", "\n\t"])
def test_empty_topic_is_rejected(topic):
    with pytest.raises(InvalidInput) as exc_info:
        normalize_options({"topic": topic})
    assert exc_info.value.fields == ["topic"]


def test_missing_topic_is_rejected():
    with pytest.raises(InvalidInput):
        normalize_options({"mood": "calm"})


@pytest.mark.parametrize("raw", [None, "topic", ["topic"], 42])
def test_non_mapping_is_rejected(raw):
    with pytest.raises(InvalidInput):
        normalize_options(raw)


def test_malformed_fields_are_rejected():
    with pytest.raises(InvalidInput) as exc_info:
        normalize_options({"topic": 123})
    assert exc_info.value.fields == ["topic"]

    with pytest.raises(InvalidInput) as exc_info:
        normalize_options({"topic": "Fox", "mood": 5})
    assert exc_info.value.fields == ["mood"]

    with pytest.raises(InvalidInput):
        normalize_options({"topic": "Fox", "includeVoiceover": "maybe"})


def test_flags_accept_boolean_like_values():
    opts = normalize_options({"topic": "Fox", "includeVoiceover": "true", "includeThumbnail": None})
    assert opts.include_voiceover is True
    assert opts.include_thumbnail is False


def test_existing_options_pass_through():
    opts = GenerationOptions(topic="Fox", scene_count=4)
    assert normalize_options(opts) == opts


def test_with_overrides_returns_new_value():
    base = normalize_options({"topic": "Fox"})
    updated = with_overrides(base, sceneCount=12, mood="calm", include_thumbnail=True)
    assert updated.scene_count == 10
    assert updated.mood == "calm"
    assert updated.include_thumbnail is True
    # original untouched
    assert base.scene_count == 5
    assert base.mood == "uplifting"
    assert base.include_thumbnail is False


def test_with_overrides_validates():
    base = normalize_options({"topic": "Fox"})
    with pytest.raises(InvalidInput):
        with_overrides(base, topic="  ")
    with pytest.raises(InvalidInput):
        with_overrides(base, colour="red")


@pytest.mark.parametrize("count", [[3], (3,), {"n": 3}, {3}])
def test_container_scene_count_is_rejected(count):
    with pytest.raises(InvalidInput) as exc_info:
        normalize_options({"topic": "Fox", "sceneCount": count})
    assert exc_info.value.fields == ["sceneCount"]
