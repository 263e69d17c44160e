import pytest

import vidplan.config
import vidplan.main


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from ~/.vidplan and any VIDPLAN_* env vars."""
    config_dir = tmp_path / "vidplan-home"
    monkeypatch.setattr(vidplan.config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(vidplan.config, "CONFIG_FILE", config_dir / "config.json")
    monkeypatch.setattr(vidplan.main, "LOG_FILE", config_dir / "vidplan.log")
    for var in ("VIDPLAN_OUTPUT_DIR", "VIDPLAN_LOG_LEVEL", "VIDPLAN_HOST", "VIDPLAN_PORT"):
        monkeypatch.delenv(var, raising=False)
    return config_dir


@pytest.fixture
def sample_raw():
    return {
        "topic": "A lone cyclist racing sunrise through misty city streets",
        "mood": "energizing",
        "tone": "reflective",
        "visualStyle": "cinematic",
        "atmosphere": "neon reflections on wet streets",
        "sceneCount": 6,
        "includeVoiceover": True,
        "includeThumbnail": True,
    }
