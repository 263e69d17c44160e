"""
VidPlan Web API launcher.

Usage:
  python webui/start.py             # Serve on the configured host/port
  python webui/start.py --dev       # Auto-reload on code changes
"""
from __future__ import annotations

import subprocess
import sys
from pathlib import Path

from vidplan.config import Config

REPO_ROOT = Path(__file__).parent.parent


def backend_command(config: Config, dev: bool = False) -> list[str]:
    cmd = [
        sys.executable, "-m", "uvicorn",
        "webui.backend.app:app",
        "--port", str(config.port),
        "--host", config.host,
        "--log-level", config.log_level.lower(),
    ]
    if dev:
        cmd.append("--reload")
    return cmd


def main() -> None:
    dev = "--dev" in sys.argv
    config = Config.load()

    print("=" * 60)
    print("  VidPlan Web API")
    print("=" * 60)
    print(f"\n► Starting backend on http://{config.host}:{config.port} …")

    backend = subprocess.Popen(backend_command(config, dev=dev), cwd=str(REPO_ROOT))
    try:
        backend.wait()
    except KeyboardInterrupt:
        print("\n⛔ Shutting down…")
    finally:
        backend.terminate()


if __name__ == "__main__":
    main()
