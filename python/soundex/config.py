"""Configuration loader for soundex.

Loads defaults from config.json at project root, with hardcoded fallbacks.
Only the project root is searched; a config.json in the caller's working
directory is ignored.
"""

import json
import logging
from pathlib import Path
from typing import Any

log = logging.getLogger(__name__)

# Hardcoded fallback defaults
FALLBACK_DEFAULTS = {
    "code_length": 4,
}

_config: dict[str, Any] | None = None


def _find_config() -> Path | None:
    """Find config.json at the project root."""
    path = Path(__file__).parent.parent.parent / "config.json"  # python/soundex -> root
    if path.exists():
        return path
    return None


def _fallback() -> dict[str, Any]:
    return {"defaults": dict(FALLBACK_DEFAULTS)}


def load() -> dict[str, Any]:
    """Load configuration from config.json or use fallbacks."""
    global _config
    if _config is not None:
        return _config

    config_path = _find_config()
    if config_path:
        try:
            with open(config_path) as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            log.warning("Ignoring unreadable config %s: %s", config_path, e)
        else:
            if isinstance(data, dict) and isinstance(data.get("defaults", {}), dict):
                log.debug("Loaded config from %s", config_path)
                _config = data
                return _config
            log.warning("Ignoring malformed config %s", config_path)

    # Fallback
    _config = _fallback()
    return _config


def reset() -> None:
    """Drop the cached configuration so the next access reloads it."""
    global _config
    _config = None


def get_default(key: str, fallback: Any = None) -> Any:
    """Get a default value from config."""
    cfg = load()
    return cfg.get("defaults", {}).get(key, fallback)


def default_code_length() -> int:
    """Get the configured code length, falling back if it is not a positive int."""
    value = get_default("code_length", FALLBACK_DEFAULTS["code_length"])
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        log.warning("Ignoring invalid code_length %r", value)
        return FALLBACK_DEFAULTS["code_length"]
    return value
