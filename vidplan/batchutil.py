"""Locate and read the JSON options files behind a batch run."""
from __future__ import annotations

import glob as _glob
import json
import logging
from pathlib import Path

from .errors import InvalidInput

log = logging.getLogger(__name__)


def resolve_option_paths(raw: str, sep: str = ",") -> list[Path]:
    """Expand *sep*-separated files, directories and globs into ``.json`` paths.

    A directory contributes its top-level ``*.json`` files. An entry that
    yields no options file is logged and skipped. Each file is listed once,
    in discovery order.
    """
    found: dict[Path, None] = {}
    for token in (entry.strip() for entry in raw.split(sep)):
        if not token:
            continue
        candidates: list[Path] = []
        for match in sorted(_glob.glob(str(Path(token).expanduser()))):
            path = Path(match)
            candidates.extend(sorted(path.glob("*.json")) if path.is_dir() else [path])
        hits = [p.resolve() for p in candidates if p.suffix.lower() == ".json" and p.is_file()]
        if not hits:
            log.warning("No options files at %s", token)
        found.update(dict.fromkeys(hits))
    return list(found)


def load_options_file(path: Path) -> dict:
    """Read one options record. Raises ``InvalidInput`` if it cannot be used."""
    try:
        data = json.loads(path.read_text(encoding="utf-8-sig"))
    except json.JSONDecodeError as exc:
        raise InvalidInput(f"{path.name}: not valid JSON ({exc.msg})") from exc
    except UnicodeDecodeError as exc:
        raise InvalidInput(f"{path.name}: not UTF-8 text") from exc
    except OSError as exc:
        raise InvalidInput(f"{path.name}: cannot be read ({exc.strerror or exc})") from exc
    if not isinstance(data, dict):
        raise InvalidInput(f"{path.name}: expected a JSON object, got {type(data).__name__}")
    return data
