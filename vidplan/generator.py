"""Plan generation: normalize, summarize, synthesize scenes, compose, add extras."""
from __future__ import annotations

import logging

from schemas import GenerationOptions, VideoPlan, VisualStyle

from .composer import compose_final_prompt
from .config import JSON_INDENT
from .extras import build_extras
from .normalizer import normalize_options
from .scenes import synthesize_scenes
from .summary import build_summary

log = logging.getLogger(__name__)

SAMPLE_OPTIONS: dict = {
    "topic": "A lone cyclist racing sunrise through misty city streets",
    "mood": "energizing",
    "tone": "reflective",
    "visualStyle": VisualStyle.CINEMATIC.value,
    "atmosphere": "neon reflections on wet streets",
    "sceneCount": 6,
    "includeVoiceover": True,
    "includeThumbnail": True,
}


def sample_options() -> GenerationOptions:
    """The ready-made example behind the "Sample" button."""
    return normalize_options(SAMPLE_OPTIONS)


def generate_video_plan(raw) -> VideoPlan:
    """Map an options record to a complete, immutable VideoPlan.

    Deterministic: the same options always produce an identical plan.
    Raises ``InvalidInput`` (and produces nothing) for an empty topic or a
    malformed record.
    """
    options = normalize_options(raw)

    summary = build_summary(options)
    scenes = synthesize_scenes(options)
    final_prompt = compose_final_prompt(summary, scenes, options)
    extras = build_extras(summary, scenes, options)

    log.debug(
        "Generated plan %r: %d scenes, style=%s, extras=%s",
        summary.title, len(scenes), options.visual_style.value, extras is not None,
    )
    return VideoPlan(summary=summary, scenes=scenes, final_prompt=final_prompt, extras=extras)


def plan_to_dict(plan: VideoPlan) -> dict:
    """JSON-ready dict with camelCase keys; absent extras are omitted, not null."""
    return plan.model_dump(mode="json", by_alias=True, exclude_none=True)


def plan_to_json(plan: VideoPlan, indent: int | None = JSON_INDENT) -> str:
    return plan.model_dump_json(indent=indent, by_alias=True, exclude_none=True)
