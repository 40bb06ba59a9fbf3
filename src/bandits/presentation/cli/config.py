"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Union

from bandits.services.battle_service import SUPER_POWER_CEILING

_DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

ConfigValue = Union[int, str]


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "BeverageBandits"
        return Path.home() / "BeverageBandits"
    return Path.home() / ".config" / "beverage_bandits"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def debug_enabled() -> bool:
    """Return True only when BANDITS_DEBUG is explicitly set to '1'."""
    return os.getenv("BANDITS_DEBUG") == "1"


def default_config() -> Dict[str, ConfigValue]:
    return {"max_attack_power": SUPER_POWER_CEILING, "log_level": _DEFAULT_LOG_LEVEL}


def _normalize_max_attack_power(value: object) -> int:
    if isinstance(value, int) and not isinstance(value, bool) and value >= 4:
        return value
    return SUPER_POWER_CEILING


def _normalize_log_level(value: object) -> str:
    if isinstance(value, str) and value.upper() in _LOG_LEVELS:
        return value.upper()
    return _DEFAULT_LOG_LEVEL


def _normalize(raw: Dict[str, object]) -> Dict[str, ConfigValue]:
    return {
        "max_attack_power": _normalize_max_attack_power(raw.get("max_attack_power")),
        "log_level": _normalize_log_level(raw.get("log_level")),
    }


def load_config(path: Path | None = None) -> Dict[str, ConfigValue]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return default_config()
    except (OSError, json.JSONDecodeError):
        return default_config()
    if not isinstance(raw, dict):
        return default_config()
    return _normalize(raw)


def save_config(config: Dict[str, ConfigValue], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = _normalize(dict(config))
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, _normalize_log_level(level)), format="%(levelname)s %(name)s: %(message)s")
