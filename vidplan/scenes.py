"""Scene synthesis: one Scene per requested index, varied by the vocab tables."""
from __future__ import annotations

import re

from schemas import GenerationOptions, Scene

from .vocab import (
    ATMOSPHERE_ACCENTS,
    CAMERA_MOVES,
    CHARACTER_FRAMINGS,
    CLOSING_BEATS,
    LIGHTING_SETUPS,
    MIDDLE_BEATS,
    OPENING_BEATS,
    SETTING_FRAMES,
    STYLE_DIRECTIVES,
    pick,
)

GENERIC_SUBJECT = "The implied subject of the topic"
MAX_SUBJECT_WORDS = 4

_ARTICLES = {"a", "an", "the"}
# Words that end the leading noun phrase of a topic
_BREAK_WORDS = {
    "in", "on", "at", "through", "across", "with", "from", "into", "over",
    "under", "during", "as", "while", "who", "that", "which", "and", "to",
    "for", "by", "is", "are", "was", "were", "after", "before", "near",
}
_WORD_RE = re.compile(r"[\w'-]+")


def derive_subject(topic: str) -> str:
    """Best-effort subject phrase at the start of *topic*.

    "A lone cyclist racing sunrise..." gives "A lone cyclist". Falls back to
    ``GENERIC_SUBJECT`` when no short leading noun phrase can be found.
    """
    words: list[str] = []
    for raw in topic.split():
        match = _WORD_RE.search(raw)
        if not match:
            break
        word = match.group(0)
        lower = word.lower()
        if words and (lower in _BREAK_WORDS or lower in _ARTICLES):
            break
        if words and (lower.endswith("ing") or lower.endswith("ed")):
            break
        # Third-person verb after a noun: "A scientist discovers ..."
        if len(words) >= 2 and lower.endswith("s") and not lower.endswith("ss"):
            break
        words.append(word)
        # Punctuation attached to the word ends the phrase
        if match.end() < len(raw):
            break
        if len(words) > MAX_SUBJECT_WORDS:
            return GENERIC_SUBJECT

    if not words or all(w.lower() in _ARTICLES for w in words):
        return GENERIC_SUBJECT
    subject = " ".join(words)
    return subject[0].upper() + subject[1:]


def _key_actions(index: int, total: int, topic: str) -> str:
    if index == 1:
        beat = pick(OPENING_BEATS, 1, topic, "opening")
    elif index == total:
        beat = pick(CLOSING_BEATS, 1, topic, "closing")
    else:
        beat = pick(MIDDLE_BEATS, index - 1, topic, "middle")
    return beat.format(topic=topic)


def synthesize_scenes(options: GenerationOptions) -> tuple[Scene, ...]:
    """Build ``options.scene_count`` scenes, indexed from 1.

    Same options always give the same scenes: each table is rotated by an
    offset derived from the topic, then stepped by the scene index.
    """
    topic = options.topic
    subject = derive_subject(topic)
    style_lighting = STYLE_DIRECTIVES[options.visual_style]["lighting"]
    total = options.scene_count

    scenes: list[Scene] = []
    for i in range(1, total + 1):
        scenes.append(
            Scene(
                index=i,
                setting=pick(SETTING_FRAMES, i, topic, "setting").format(
                    topic=topic, atmosphere=options.atmosphere
                ),
                characters=pick(CHARACTER_FRAMINGS, i, topic, "characters").format(subject=subject),
                camera=pick(CAMERA_MOVES, i, topic, "camera"),
                lighting=f"{pick(LIGHTING_SETUPS, i, topic, 'lighting')}, {style_lighting}",
                key_actions=_key_actions(i, total, topic),
                atmosphere=f"{options.atmosphere}, {pick(ATMOSPHERE_ACCENTS, i, topic, 'atmosphere')}",
            )
        )
    return tuple(scenes)
