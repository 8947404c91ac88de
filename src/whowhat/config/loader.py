"""
Configuration loader for whowhat.

The tool reads an optional JSON configuration file named
``.git-whowhat.json`` located in the user's home directory. Every key is
optional; missing keys fall back to :data:`DEFAULTS`, and a missing file
simply yields the defaults.

Recognised keys:

- ``git`` (str): the Git executable used for the history query.
- ``default_range`` (str): the revision range queried when no
  positional arguments are given.

If the file exists but cannot be read, is not a JSON object, or holds a
recognised key with the wrong type, a :class:`ConfigError` is raised.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from whowhat.vcs.git_client import DEFAULT_RANGE


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


CONFIG_FILENAME = ".git-whowhat.json"

DEFAULTS: Dict[str, Any] = {
    "git": "git",
    "default_range": DEFAULT_RANGE,
}


class ConfigError(Exception):
    """Raised when the configuration file is unreadable or invalid."""

    pass


def _get_config_path() -> Path:
    """Return the location of the user configuration file."""
    return Path.home() / CONFIG_FILENAME


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """Load the configuration and return it merged over the defaults.

    Args:
        config_path: File to read. Defaults to ``~/.git-whowhat.json``.

    Returns:
        A dictionary with the keys of :data:`DEFAULTS`.

    Raises:
        ConfigError: If the file is malformed or holds invalid values.
    """
    path = config_path if config_path is not None else _get_config_path()
    config = dict(DEFAULTS)

    if not path.exists():
        logger.debug("No configuration file at %s; using defaults", path)
        return config

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Failed to read or parse configuration file: %s", exc)
        raise ConfigError(f"Invalid configuration file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file {path} must contain a JSON object")

    for key, value in data.items():
        if key not in DEFAULTS:
            logger.debug("Ignoring unknown configuration key: %s", key)
            continue
        if not isinstance(value, str) or not value.strip():
            raise ConfigError(f"'{key}' must be a non-empty string")
        config[key] = value

    logger.debug("Loaded configuration from %s: %s", path, config)
    return config
