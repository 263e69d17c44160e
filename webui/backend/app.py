"""Litestar ASGI application for the VidPlan Web API."""
from __future__ import annotations

import logging

from litestar import Litestar, Request, Response
from litestar.config.cors import CORSConfig
from litestar.logging import LoggingConfig

from vidplan.errors import InvalidInput, error_payload
from webui.backend.models import ErrorResponse
from webui.backend.routes.config import get_config
from webui.backend.routes.plans import create_plan, create_prompt, get_defaults, get_sample

log = logging.getLogger(__name__)


def _invalid_input_handler(request: Request, exc: InvalidInput) -> Response:
    log.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    body = ErrorResponse(**error_payload(exc))
    return Response(content=body.model_dump(), status_code=400)


app = Litestar(
    route_handlers=[
        get_defaults,
        get_sample,
        create_plan,
        create_prompt,
        get_config,
    ],
    exception_handlers={InvalidInput: _invalid_input_handler},
    cors_config=CORSConfig(
        allow_origins=["http://localhost:5173", "http://127.0.0.1:5173"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    ),
    logging_config=LoggingConfig(
        loggers={
            "vidplan": {"level": "INFO", "handlers": ["queue_listener"]},
            "webui": {"level": "INFO", "handlers": ["queue_listener"]},
        }
    ),
)
