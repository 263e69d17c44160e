from .errors import InvalidInput
from .generator import generate_video_plan, plan_to_dict, plan_to_json, sample_options
from .normalizer import normalize_options, with_overrides

__all__ = [
    "generate_video_plan", "sample_options", "plan_to_dict", "plan_to_json",
    "normalize_options", "with_overrides", "InvalidInput",
]
