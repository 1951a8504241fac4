from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


CONFIG_ENV_VAR = "SAUDIBANKS_CONFIG"


def load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    return data or {}


def deep_get(d: Dict[str, Any], keys: list[str], default: Any = None) -> Any:
    cur: Any = d
    for k in keys:
        if not isinstance(cur, dict) or k not in cur:
            return default
        cur = cur[k]
    return cur


def _as_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Logging knobs only; the bank table itself is not configurable."""

    log_level: str = "WARNING"
    log_console: bool = False
    log_dir: Optional[Path] = None
    log_json: bool = False


def load_settings(path: str | Path | None = None) -> Settings:
    """
    Reads the optional YAML config:

        logging:
          level: DEBUG
          console: true
          log_dir: ./LOG
          json: true

    Path priority: argument, then SAUDIBANKS_CONFIG. A missing file yields defaults.
    """
    raw_path = path or os.environ.get(CONFIG_ENV_VAR)
    cfg = load_yaml(Path(raw_path)) if raw_path else {}
    log_dir = deep_get(cfg, ["logging", "log_dir"])
    return Settings(
        log_level=str(deep_get(cfg, ["logging", "level"], "WARNING") or "WARNING").upper(),
        log_console=_as_bool(deep_get(cfg, ["logging", "console"]), False),
        log_dir=Path(log_dir) if log_dir else None,
        log_json=_as_bool(deep_get(cfg, ["logging", "json"]), False),
    )
