"""Configuration management for datebook."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .core.events import DEFAULT_LABEL

logger = logging.getLogger(__name__)

DATEBOOK_HOME = Path(os.environ.get("DATEBOOK_HOME", Path.home() / "datebook"))
CONFIG_FILE = DATEBOOK_HOME / "config" / "datebook.conf"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass
class Config:
    """datebook configuration."""

    default_label: str = DEFAULT_LABEL
    debug: bool = False


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from an unquoted value."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def _parse_bool(key: str, value: str, fallback: bool) -> bool:
    lowered = value.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    logger.warning(f"Ignoring invalid boolean for {key.upper()}: {value!r}")
    return fallback


def load_config(path: Path | None = None) -> Config:
    """Load configuration from datebook.conf."""
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
            case "default_label":
                config.default_label = value
            case "debug":
                config.debug = _parse_bool(key, value, config.debug)

    return config
