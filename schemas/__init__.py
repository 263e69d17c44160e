from .generation_options import (
    DEFAULT_OPTIONS,
    MAX_SCENES,
    MIN_SCENES,
    GenerationOptions,
    VisualStyle,
    clamp_scene_count,
)
from .video_plan import Extras, Scene, Summary, VideoPlan

__all__ = [
    "GenerationOptions", "VisualStyle", "DEFAULT_OPTIONS",
    "MIN_SCENES", "MAX_SCENES", "clamp_scene_count",
    "VideoPlan", "Scene", "Summary", "Extras",
]
