"""Settings for the CLI and web shells."""
from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path

CONFIG_DIR = Path.home() / ".vidplan"
CONFIG_FILE = CONFIG_DIR / "config.json"
LOG_FILE = CONFIG_DIR / "vidplan.log"

# Web API
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000

# "Copy JSON" output
JSON_INDENT = 2

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class Config:
    output_dir: Path = field(default_factory=lambda: Path("plans"))
    log_level: str = "INFO"
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    @classmethod
    def load(cls) -> "Config":
        """Load config from the config file, then let env vars override it."""
        cfg = cls()

        if CONFIG_FILE.exists():
            try:
                data = json.loads(CONFIG_FILE.read_text(encoding="utf-8-sig"))
                if out := data.get("output_dir"):
                    cfg.output_dir = Path(out)
                if level := data.get("log_level"):
                    cfg.log_level = str(level)
                if host := data.get("host"):
                    cfg.host = str(host)
                if data.get("port") is not None:
                    cfg.port = int(data["port"])
            except (json.JSONDecodeError, OSError, TypeError, ValueError, AttributeError):
                pass

        if out := os.environ.get("VIDPLAN_OUTPUT_DIR", ""):
            cfg.output_dir = Path(out)
        if level := os.environ.get("VIDPLAN_LOG_LEVEL", ""):
            cfg.log_level = level
        if host := os.environ.get("VIDPLAN_HOST", ""):
            cfg.host = host
        if port := os.environ.get("VIDPLAN_PORT", ""):
            try:
                cfg.port = int(port)
            except ValueError:
                pass

        cfg.log_level = cfg.log_level.upper()
        if cfg.log_level not in _LOG_LEVELS:
            cfg.log_level = "INFO"
        return cfg

    def to_dict(self) -> dict:
        data = asdict(self)
        data["output_dir"] = str(self.output_dir)
        return data
