"""Optional extras: voiceover lines and a thumbnail / poster prompt."""
from __future__ import annotations

from schemas import Extras, GenerationOptions, Scene, Summary

from .vocab import STYLE_DIRECTIVES, VOICEOVER_LEADS, pick


def voiceover_lines(scenes: tuple[Scene, ...], topic: str) -> tuple[str, ...]:
    """One narration line per scene, in scene order."""
    return tuple(
        f"{pick(VOICEOVER_LEADS, scene.index, topic, 'voiceover')} "
        f"{scene.key_actions}, amid {scene.atmosphere}."
        for scene in scenes
    )


def thumbnail_scene(scenes: tuple[Scene, ...]) -> Scene:
    """Scene with the longest atmosphere text; lowest index wins ties."""
    return min(scenes, key=lambda s: (-len(s.atmosphere), s.index))


def thumbnail_prompt(summary: Summary, scenes: tuple[Scene, ...]) -> str:
    scene = thumbnail_scene(scenes)
    style = summary.visual_style
    return (
        f"A single {style.value} poster image for \"{summary.title}\". "
        f"{scene.setting}. {scene.characters}. "
        f"Composition: {scene.camera.lower()}, {STYLE_DIRECTIVES[style]['look']}. "
        f"Lighting: {scene.lighting}. "
        f"Mood: {summary.mood}, tone: {summary.tone}, atmosphere: {scene.atmosphere}. "
        "Bold focal point, clear negative space for the title text, no watermark."
    )


def build_extras(
    summary: Summary,
    scenes: tuple[Scene, ...],
    options: GenerationOptions,
) -> Extras | None:
    """``None`` when no extra was requested, never an empty Extras."""
    if not (options.include_voiceover or options.include_thumbnail):
        return None
    return Extras(
        voiceover_lines=voiceover_lines(scenes, options.topic) if options.include_voiceover else None,
        thumbnail_prompt=thumbnail_prompt(summary, scenes) if options.include_thumbnail else None,
    )
