"""Fixed vocabulary tables used to vary scenes deterministically.

Every rotating table holds at least ``MAX_SCENES`` distinct entries, so a plan
never repeats an entry from the same table. Placeholders (``{topic}``,
``{atmosphere}``, ``{subject}``) are filled with ``str.format``.
"""
from __future__ import annotations

import hashlib

from schemas import VisualStyle

# ---------------------------------------------------------------------------
# Per-scene rotating tables
# ---------------------------------------------------------------------------

CAMERA_MOVES: tuple[str, ...] = (
    "Wide establishing shot on a slow dolly-in",
    "Low-angle tracking shot following the subject",
    "Handheld close-up with shallow depth of field",
    "Overhead drone shot gliding across the scene",
    "Over-the-shoulder medium shot",
    "Smooth Steadicam orbit around the subject",
    "Extreme close-up on a telling detail",
    "Slow crane shot rising above the action",
    "Lateral tracking shot moving alongside the subject",
    "Locked-off wide frame holding on the moment",
)

LIGHTING_SETUPS: tuple[str, ...] = (
    "Soft key light from the side",
    "Backlit rim light outlining the subject",
    "Diffused overcast fill",
    "Hard directional light casting long shadows",
    "Warm practical lights glowing in the frame",
    "Cool ambient light with a single warm accent",
    "Dappled light breaking through the foreground",
    "High-contrast silhouette against a bright background",
    "Low-key lighting with deep pools of shadow",
    "Even, luminous wash of light",
)

SETTING_FRAMES: tuple[str, ...] = (
    "Wide establishing view where {topic} begins, wrapped in {atmosphere}",
    "Street-level perspective on {topic}, with {atmosphere} filling the space",
    "Intimate close quarters at the heart of {topic}, touched by {atmosphere}",
    "Elevated vantage point looking down on {topic}, framed by {atmosphere}",
    "Textured foreground details surrounding {topic}, under {atmosphere}",
    "Open horizon stretching beyond {topic}, bathed in {atmosphere}",
    "Narrow passage leading deeper into {topic}, thick with {atmosphere}",
    "Reflective surfaces echoing {topic}, alive with {atmosphere}",
    "Threshold moment at the edge of {topic}, shaped by {atmosphere}",
    "Quiet clearing after the rush of {topic}, settling into {atmosphere}",
)

CHARACTER_FRAMINGS: tuple[str, ...] = (
    "{subject} as the central figure",
    "{subject}, seen in partial silhouette",
    "{subject} with blurred passers-by in the background",
    "{subject} alone in the frame",
    "{subject}, small against the scale of the surroundings",
    "{subject} in sharp focus, face half-lit",
    "{subject} moving through the frame from left to right",
    "{subject}, hands and posture telling the story",
    "{subject} turning toward the camera",
    "{subject} framed by the environment around them",
)

ATMOSPHERE_ACCENTS: tuple[str, ...] = (
    "quiet and expectant",
    "building in intensity",
    "charged with anticipation and restless motion",
    "calm",
    "heightened, almost dreamlike",
    "tense",
    "open and weightless",
    "intimate and hushed, as if the world is holding its breath",
    "bright with momentum",
    "lingering and reflective",
)

# ---------------------------------------------------------------------------
# Story beats (key actions), grouped by arc position
# ---------------------------------------------------------------------------

OPENING_BEATS: tuple[str, ...] = (
    "The story opens as {topic} comes into view",
    "A first glimpse of {topic} sets the scene",
    "Everything is still before {topic} begins to stir",
    "We arrive in the middle of {topic}, curious and unsure",
)

MIDDLE_BEATS: tuple[str, ...] = (
    "Small details reveal what drives {topic}",
    "Momentum builds as {topic} gathers pace",
    "An obstacle tests the spirit of {topic}",
    "A quiet pause lets the meaning of {topic} sink in",
    "The perspective shifts to show {topic} from a new angle",
    "Tension peaks at the turning point of {topic}",
    "A surprising moment changes the direction of {topic}",
    "Motion and emotion converge in {topic}",
    "The world reacts to {topic}",
    "A decisive push carries {topic} forward",
)

CLOSING_BEATS: tuple[str, ...] = (
    "The journey resolves as {topic} reaches its final moment",
    "A lingering last look at {topic} as the light changes",
    "Everything settles, leaving the lasting image of {topic}",
    "The story comes full circle, {topic} transformed",
)

VOICEOVER_LEADS: tuple[str, ...] = (
    "It starts here.",
    "Look closer.",
    "Something is changing.",
    "Keep moving.",
    "Hold on to this moment.",
    "Now it matters.",
    "Breathe.",
    "There is no turning back.",
    "Feel the world respond.",
    "And then, at last.",
)

# ---------------------------------------------------------------------------
# Per-style directives
# ---------------------------------------------------------------------------

STYLE_DIRECTIVES: dict[VisualStyle, dict[str, str]] = {
    VisualStyle.CINEMATIC: {
        "look": "anamorphic widescreen framing, rich color grade, shallow depth of field",
        "lighting": "motivated cinematic lighting with gentle contrast",
        "render": "Render with film-like motion blur, subtle grain and a 24fps cadence.",
    },
    VisualStyle.REALISTIC: {
        "look": "true-to-life colors, natural textures, photographic detail",
        "lighting": "naturalistic available light",
        "render": "Render photorealistically with accurate physics and no stylization.",
    },
    VisualStyle.EMOTIONAL: {
        "look": "intimate framing, lingering close-ups, soft color palette",
        "lighting": "soft, warm light that flatters faces",
        "render": "Render with gentle pacing, letting each emotional beat breathe.",
    },
    VisualStyle.ANIMATED: {
        "look": "stylized animation, clean shapes, expressive character design",
        "lighting": "bold stylized lighting with clear color separation",
        "render": "Render as polished 3D animation with smooth, exaggerated motion.",
    },
    VisualStyle.DOCUMENTARY: {
        "look": "observational framing, handheld authenticity, grounded color",
        "lighting": "available light with minimal intervention",
        "render": "Render with a verite feel, natural sound cues and unforced camera work.",
    },
    VisualStyle.SURREAL: {
        "look": "dreamlike compositions, impossible geometry, shifting scale",
        "lighting": "uncanny, otherworldly light with unexpected color casts",
        "render": "Render with fluid, dream-logic transitions and a hypnotic rhythm.",
    },
}


def topic_offset(topic: str, salt: str) -> int:
    """Stable per-topic rotation offset (``hash()`` is randomized per process)."""
    digest = hashlib.sha256(f"{salt}:{topic}".encode("utf-8")).hexdigest()
    return int(digest[:8], 16)


def pick(table: tuple[str, ...], index: int, topic: str, salt: str) -> str:
    """Entry for 1-based *index*: ``(offset + index - 1) % len(table)``."""
    return table[(topic_offset(topic, salt) + index - 1) % len(table)]
