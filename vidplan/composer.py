"""Assemble the final natural-language video prompt from a summary and scenes.

Pure string formatting: nothing appears in the prompt that is not already in
the summary, the scenes, the options or the fixed per-style directives.
"""
from __future__ import annotations

from schemas import GenerationOptions, Scene, Summary

from .summary import indefinite_article
from .vocab import STYLE_DIRECTIVES


def _preamble(summary: Summary, options: GenerationOptions) -> list[str]:
    style = summary.visual_style.value
    return [
        f"Create {indefinite_article(style)} {style} video with "
        f"{indefinite_article(summary.mood)} {summary.mood} mood and "
        f"{indefinite_article(summary.tone)} {summary.tone} tone.",
        f"Title: {summary.title}",
        f"Concept: {summary.idea}",
        f"Visual style: {style} ({STYLE_DIRECTIVES[summary.visual_style]['look']}).",
        f"Atmosphere: {options.atmosphere}.",
    ]


def _scene_block(scene: Scene) -> list[str]:
    return [
        f"Scene {scene.index}:",
        f"- Setting: {scene.setting}",
        f"- Characters: {scene.characters}",
        f"- Camera: {scene.camera}",
        f"- Lighting: {scene.lighting}",
        f"- Key actions: {scene.key_actions}",
        f"- Atmosphere: {scene.atmosphere}",
    ]


def _closing(summary: Summary, scenes: tuple[Scene, ...], options: GenerationOptions) -> list[str]:
    style = summary.visual_style.value
    count = len(scenes)
    noun = "scene" if count == 1 else "scenes"
    return [
        f"Keep the {style} visual style consistent across all {count} {noun}, "
        f"sustaining {options.atmosphere} throughout with "
        f"{indefinite_article(summary.mood)} {summary.mood}, {summary.tone} feel.",
        STYLE_DIRECTIVES[summary.visual_style]["render"],
    ]


def compose_final_prompt(
    summary: Summary,
    scenes: tuple[Scene, ...],
    options: GenerationOptions,
) -> str:
    """Preamble, then one block per scene in index order, then the closing directive."""
    sections = ["\n".join(_preamble(summary, options))]
    for scene in sorted(scenes, key=lambda s: s.index):
        sections.append("\n".join(_scene_block(scene)))
    sections.append("\n".join(_closing(summary, scenes, options)))
    return "\n\n".join(sections)
