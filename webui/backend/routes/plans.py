"""Plan generation routes: one request, one generation call."""
from __future__ import annotations

from typing import Any

from litestar import MediaType, get, post

from vidplan.generator import generate_video_plan, plan_to_dict, sample_options
from webui.backend.models import FormDefaults


@get("/api/defaults")
async def get_defaults() -> dict:
    return FormDefaults().model_dump(mode="json", by_alias=True)


@get("/api/sample")
async def get_sample() -> dict:
    return sample_options().model_dump(mode="json", by_alias=True)


@post("/api/plans", status_code=200)
async def create_plan(data: dict[str, Any]) -> dict:
    """Generate the full plan (the "Copy JSON" payload)."""
    return plan_to_dict(generate_video_plan(data))


@post("/api/plans/prompt", status_code=200, media_type=MediaType.TEXT)
async def create_prompt(data: dict[str, Any]) -> str:
    """Generate a plan and return only its final prompt."""
    return generate_video_plan(data).final_prompt
