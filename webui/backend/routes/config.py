"""Config read route."""
from __future__ import annotations

from litestar import get

from vidplan.config import Config


@get("/api/config")
async def get_config() -> dict:
    return Config.load().to_dict()
