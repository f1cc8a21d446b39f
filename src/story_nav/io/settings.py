"""Settings file I/O for story-nav.

Manages a JSON settings file at XDG_CONFIG_HOME/story-nav/settings.json holding
the initial shortcut and UI options for a store.

This module is a STABLE BOUNDARY.
Import as: import story_nav.io.settings
"""

import json
import os
import tempfile
from pathlib import Path

import story_nav.config


def get_config_path() -> Path:
    """Return path to settings file.

    Uses XDG_CONFIG_HOME (default ~/.config) / story-nav / settings.json.
    """
    config_home = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(config_home) / "story-nav" / "settings.json"


def load_settings() -> dict:
    """Load settings from JSON file. Returns empty dict on missing/corrupt file."""
    path = get_config_path()
    # [LAW:dataflow-not-control-flow] Always attempt read; empty dict is the "no data" value.
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (FileNotFoundError, json.JSONDecodeError, OSError):
        return {}
    return data if isinstance(data, dict) else {}


def save_settings(data: dict) -> None:
    """Atomic write of settings dict to JSON file.

    Creates parent directories if needed. Writes to temp file then renames
    to avoid partial writes on crash.
    """
    path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
            f.write("\n")
        os.replace(tmp_path, path)
    except Exception:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise


def load_config() -> "story_nav.config.StoreConfig":
    """StoreConfig seeded from the settings file; defaults for anything missing."""
    return story_nav.config.StoreConfig.from_dict(load_settings())


def save_config(config: "story_nav.config.StoreConfig") -> None:
    """Merge the config's option sections into the settings file."""
    data = load_settings()
    data.update(config.to_dict())
    save_settings(data)
