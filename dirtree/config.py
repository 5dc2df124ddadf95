"""Persistent JSON config helpers.

Stores the default listing root and the preferred color theme.
Malformed or missing config falls back to an empty mapping.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "dirtree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

logger = logging.getLogger(__name__)


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Write failures are logged and otherwise ignored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)


def load_default_root() -> Path | None:
    """Return the configured default root with ``~`` expanded, if any."""
    value = load_config().get("default_root")
    if not isinstance(value, str) or not value.strip():
        return None
    return Path(value).expanduser()


def save_default_root(path: Path) -> None:
    config = load_config()
    config["default_root"] = str(path)
    save_config(config)


def load_theme_name() -> str | None:
    value = load_config().get("theme")
    return value if isinstance(value, str) else None
