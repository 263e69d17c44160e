"""Turn a raw (possibly partial or untrusted) options record into GenerationOptions."""
from __future__ import annotations

import logging
from collections.abc import Mapping

from pydantic import ValidationError

from schemas import GenerationOptions

from .errors import InvalidInput

log = logging.getLogger(__name__)


def normalize_options(raw) -> GenerationOptions:
    """Fill defaults, clamp ``sceneCount`` and validate the topic.

    *raw* may be a ``GenerationOptions`` or a mapping keyed by either the
    camelCase form fields (``sceneCount``) or their snake_case names.

    Raises ``InvalidInput`` for an empty topic or a malformed record.
    """
    if isinstance(raw, GenerationOptions):
        raw = raw.model_dump()
    if not isinstance(raw, Mapping):
        raise InvalidInput(f"Options must be a mapping, got {type(raw).__name__}")
    if "topic" not in raw:
        raise InvalidInput("Missing topic", fields=["topic"])

    try:
        options = GenerationOptions.model_validate(dict(raw))
    except ValidationError as exc:
        fields = sorted({str(err["loc"][0]) for err in exc.errors() if err["loc"]})
        first = exc.errors()[0]
        message = first["msg"].removeprefix("Value error, ")
        raise InvalidInput(f"Invalid options: {message}", fields=fields) from exc

    if log.isEnabledFor(logging.DEBUG):
        requested = raw.get("sceneCount", raw.get("scene_count"))
        if requested is not None and requested != options.scene_count:
            log.debug("sceneCount %r normalized to %d", requested, options.scene_count)
        style = raw.get("visualStyle", raw.get("visual_style"))
        if isinstance(style, str) and style.strip().lower() != options.visual_style.value:
            log.debug("visualStyle %r fell back to %s", style, options.visual_style.value)

    return options


def with_overrides(options: GenerationOptions, **overrides) -> GenerationOptions:
    """Return a new normalized options value: *options* plus named *overrides*.

    ``options`` itself is left untouched. Override names may be snake_case or
    camelCase, and pass through the same normalization as fresh input.
    """
    merged = options.model_dump()
    for key, value in overrides.items():
        field_name = _field_name(key)
        if field_name is None:
            raise InvalidInput(f"Unknown option {key!r}", fields=[key])
        merged[field_name] = value
    return normalize_options(merged)


def _field_name(key: str) -> str | None:
    if key in GenerationOptions.model_fields:
        return key
    for name, info in GenerationOptions.model_fields.items():
        if info.alias == key:
            return name
    return None
