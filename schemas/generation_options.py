from __future__ import annotations

import math
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

MIN_SCENES = 1
MAX_SCENES = 10


class VisualStyle(str, Enum):
    CINEMATIC = "cinematic"
    REALISTIC = "realistic"
    EMOTIONAL = "emotional"
    ANIMATED = "animated"
    DOCUMENTARY = "documentary"
    SURREAL = "surreal"


# Initial state of the options form
DEFAULT_OPTIONS: dict = {
    "mood": "uplifting",
    "tone": "inspiring",
    "visual_style": VisualStyle.CINEMATIC,
    "atmosphere": "soft golden-hour haze",
    "scene_count": 5,
    "include_voiceover": False,
    "include_thumbnail": False,
}


def clamp_scene_count(value) -> int:
    """Coerce *value* to an int in [MIN_SCENES, MAX_SCENES].

    Floats round half away from zero, numeric strings are parsed, anything
    else (None, NaN, garbage) falls back to the default scene count. The
    ``GenerationOptions`` validator rejects container values before this runs.
    """
    default = DEFAULT_OPTIONS["scene_count"]
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return default
    if not isinstance(value, (int, float)) or math.isnan(value):
        return default
    if math.isinf(value):
        return MAX_SCENES if value > 0 else MIN_SCENES
    if isinstance(value, float):
        value = int(math.floor(abs(value) + 0.5)) * (1 if value >= 0 else -1)
    return max(MIN_SCENES, min(MAX_SCENES, value))


class GenerationOptions(BaseModel):
    """Normalized input for one plan. Build it via ``vidplan.normalizer``."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    topic: str = Field(..., description="What the video is about")
    mood: str = DEFAULT_OPTIONS["mood"]
    tone: str = DEFAULT_OPTIONS["tone"]
    visual_style: VisualStyle = DEFAULT_OPTIONS["visual_style"]
    atmosphere: str = DEFAULT_OPTIONS["atmosphere"]
    scene_count: int = Field(default=DEFAULT_OPTIONS["scene_count"], ge=MIN_SCENES, le=MAX_SCENES)
    include_voiceover: bool = False
    include_thumbnail: bool = False

    @field_validator("topic", mode="before")
    @classmethod
    def _strip_topic(cls, v):
        if not isinstance(v, str):
            raise ValueError("topic must be text")
        v = v.strip()
        if not v:
            raise ValueError("topic must not be empty")
        return v

    @field_validator("mood", "tone", "atmosphere", mode="before")
    @classmethod
    def _fill_text(cls, v, info):
        if v is None:
            return DEFAULT_OPTIONS[info.field_name]
        if not isinstance(v, str):
            raise ValueError(f"{info.field_name} must be text")
        return v.strip() or DEFAULT_OPTIONS[info.field_name]

    @field_validator("visual_style", mode="before")
    @classmethod
    def _match_style(cls, v):
        if isinstance(v, VisualStyle):
            return v
        if isinstance(v, str):
            key = v.strip().lower()
            for style in VisualStyle:
                if style.value == key:
                    return style
        return DEFAULT_OPTIONS["visual_style"]

    @field_validator("scene_count", mode="before")
    @classmethod
    def _clamp_scenes(cls, v):
        if isinstance(v, (list, tuple, set, dict)):
            raise ValueError("sceneCount must be a number")
        return clamp_scene_count(v)

    @field_validator("include_voiceover", "include_thumbnail", mode="before")
    @classmethod
    def _flag(cls, v):
        return False if v is None else v
