"""Pydantic response models for the VidPlan Web API."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from schemas import DEFAULT_OPTIONS, VisualStyle


class FormDefaults(BaseModel):
    """Initial state of the options form."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    topic: str = ""
    mood: str = DEFAULT_OPTIONS["mood"]
    tone: str = DEFAULT_OPTIONS["tone"]
    visual_style: VisualStyle = DEFAULT_OPTIONS["visual_style"]
    atmosphere: str = DEFAULT_OPTIONS["atmosphere"]
    scene_count: int = DEFAULT_OPTIONS["scene_count"]
    include_voiceover: bool = False
    include_thumbnail: bool = False
    visual_styles: list[VisualStyle] = list(VisualStyle)


class ErrorResponse(BaseModel):
    error: str
    category: str
    hint: str
    fields: list[str] = []
