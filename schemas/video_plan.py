from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .generation_options import VisualStyle


class _PlanModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class Scene(_PlanModel):
    index: int = Field(..., ge=1, description="1-based position in the plan")
    setting: str
    characters: str
    camera: str
    lighting: str
    key_actions: str
    atmosphere: str


class Summary(_PlanModel):
    title: str
    idea: str = Field(..., description="One-sentence restatement of the topic")
    mood: str
    tone: str
    visual_style: VisualStyle


class Extras(_PlanModel):
    voiceover_lines: Optional[Tuple[str, ...]] = Field(None, description="One narration line per scene")
    thumbnail_prompt: Optional[str] = Field(None, description="Poster / thumbnail image prompt")


class VideoPlan(_PlanModel):
    """Everything generated for one set of options."""
    summary: Summary
    scenes: Tuple[Scene, ...]
    final_prompt: str
    extras: Optional[Extras] = Field(None, description="Present only when an extra was requested")
