from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from result import Err, Ok, Result

from diskcleaner.config.defaults import default_config
from diskcleaner.config.schema import AppConfig

logger = logging.getLogger(__name__)

CONFIG_PATH = Path("~/.config/diskcleaner/config.json")


def config_location(path: str | os.PathLike[str] | None = None) -> Path:
    return Path(path if path is not None else CONFIG_PATH).expanduser()


def load_config(path: str | os.PathLike[str] | None = None) -> Result[AppConfig, str]:
    """Read the JSON config at *path* (default ``~/.config/diskcleaner/config.json``).

    A missing file is not an error and yields the defaults. Everything else
    that stops the file from being used comes back as an ``Err`` message the
    CLI shows before falling back to defaults.
    """
    location = config_location(path)
    try:
        text = location.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("No config at %s, using defaults", location)
        return Ok(default_config())
    except OSError as exc:
        return Err(f"Failed reading config at {location}: {exc}.")

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        return Err(f"Failed reading config at {location}: invalid JSON ({exc}).")
    if not isinstance(payload, dict):
        return Err(f"Config at {location} must be a JSON object.")

    try:
        config = AppConfig.from_dict(payload, default_config())
    except (TypeError, ValueError) as exc:
        return Err(f"Invalid value in config at {location}: {exc}.")
    logger.debug("Loaded config from %s", location)
    return Ok(config)


def sample_config_json() -> str:
    return json.dumps(default_config().to_dict(), indent=2)
