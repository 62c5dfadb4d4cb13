"""Configuration management for tasklist."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from .core.tasks import DEFAULT_PRIORITY, Priority

logger = logging.getLogger(__name__)

TASKLIST_HOME = Path(os.environ.get("TASKLIST_HOME", Path.home() / ".tasklist"))
CONFIG_FILE = TASKLIST_HOME / "config" / "tasklist.conf"
DATA_DIR = TASKLIST_HOME / "data"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class Config:
    """tasklist configuration."""

    prefs_file: Path = field(default_factory=lambda: DATA_DIR / "prefs.json")
    default_priority: Priority = DEFAULT_PRIORITY
    sort_high_first: bool = True
    sort_on_add: bool = False
    log_level: str = "WARNING"


def _parse_bool(key: str, value: str, default: bool) -> bool:
    lowered = value.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    logger.warning(f"Invalid boolean for {key.upper()}: {value!r}")
    return default


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from unquoted values."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from tasklist.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "prefs_file":
                if value:
                    config.prefs_file = Path(value).expanduser()
            case "default_priority":
                try:
                    config.default_priority = Priority.parse(value)
                except ValueError as e:
                    logger.warning(f"Invalid DEFAULT_PRIORITY: {e}")
            case "sort_high_first":
                config.sort_high_first = _parse_bool(key, value, config.sort_high_first)
            case "sort_on_add":
                config.sort_on_add = _parse_bool(key, value, config.sort_on_add)
            case "log_level":
                if value.upper() in _LOG_LEVELS:
                    config.log_level = value.upper()
                else:
                    logger.warning(f"Invalid LOG_LEVEL: {value!r}")

    return config
