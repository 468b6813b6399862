"""Configuration layer for errchain.

Goals
-----
* Centralize defaults (log level, JSON logging, cause exposure).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by ERRCHAIN_CONFIG_FILE
    3. Environment variables (ERRCHAIN_LOG_LEVEL, ERRCHAIN_LOG_JSON, ERRCHAIN_EXPOSE_CAUSE)
    4. In-code overrides passed to ``get_settings``
* Provide a single call site: ``get_settings(overrides=None)``.

External Config File (Optional)
-------------------------------
Flat mapping, JSON or YAML:

```
log_level: DEBUG
log_json: false
expose_cause: true
```

A file that exists but cannot be parsed raises a ``ChainError`` with code
``INVALID_ARGUMENT`` and operation ``config.load``.

Public API
----------
* get_settings(overrides: dict | None = None) -> Settings
* reset_config_cache() -> None
* parse_bool(value, default) -> bool
"""
from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..errors_parts.construction import new
from ..errors_parts.error_code import ErrorCode
from .defaults import (
    ENV_CONFIG_FILE,
    ENV_EXPOSE_CAUSE,
    ENV_LOG_JSON,
    ENV_LOG_LEVEL,
    ERRCHAIN_DEFAULT_EXPOSE_CAUSE,
    ERRCHAIN_DEFAULT_LOG_JSON,
    ERRCHAIN_DEFAULT_LOG_LEVEL,
)

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


@dataclass(frozen=True)
class Settings:
    """Resolved errchain settings."""

    log_level: Optional[str] = ERRCHAIN_DEFAULT_LOG_LEVEL
    log_json: bool = ERRCHAIN_DEFAULT_LOG_JSON
    expose_cause: bool = ERRCHAIN_DEFAULT_EXPOSE_CAUSE


DEFAULTS: Dict[str, Any] = {
    "log_level": ERRCHAIN_DEFAULT_LOG_LEVEL,
    "log_json": ERRCHAIN_DEFAULT_LOG_JSON,
    "expose_cause": ERRCHAIN_DEFAULT_EXPOSE_CAUSE,
}

ENV_FIELD_MAP = {
    "log_level": ENV_LOG_LEVEL,
    "log_json": ENV_LOG_JSON,
    "expose_cause": ENV_EXPOSE_CAUSE,
}

_FILE_CACHE: Optional[Dict[str, Any]] = None


def parse_bool(value: Any, default: bool = False) -> bool:
    """Interpret common truthy/falsy spellings; ``default`` for anything else."""
    if isinstance(value, bool):
        return value
    if value is None:
        return default
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    return default


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(ENV_CONFIG_FILE)
    if not path or not Path(path).is_file():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = Path(path).read_text(encoding="utf-8")
    try:
        # YAML is a superset of JSON; try the strict parser first for clearer errors
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise new(
                ErrorCode.INVALID_ARGUMENT,
                f"Config file {path} is neither valid JSON nor YAML",
                operation="config.load",
                cause=exc,
            ) from exc
    # empty file or a bare null in either syntax means "no settings"
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise new(
            ErrorCode.INVALID_ARGUMENT,
            f"Config file {path} must contain a mapping",
            operation="config.load",
        )
    _FILE_CACHE = data
    return data


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field, env_name in ENV_FIELD_MAP.items():
        val = os.getenv(env_name)
        if val is not None:
            out[field] = val
    return out


def get_settings(overrides: Optional[Dict[str, Any]] = None) -> Settings:
    """Return merged settings.

    Merge order (later wins): defaults -> external config -> env vars -> overrides
    """
    cfg: Dict[str, Any] = dict(DEFAULTS)
    cfg |= {k: v for k, v in _load_external_config().items() if k in DEFAULTS}
    cfg |= _env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if k in DEFAULTS and v is not None}

    level = cfg["log_level"]
    if level is not None:
        level = str(level).strip().upper() or None
    return Settings(
        log_level=level,
        log_json=parse_bool(cfg["log_json"], ERRCHAIN_DEFAULT_LOG_JSON),
        expose_cause=parse_bool(cfg["expose_cause"], ERRCHAIN_DEFAULT_EXPOSE_CAUSE),
    )


def reset_config_cache() -> None:
    """Forget the cached external config file (tests, config reloads)."""
    global _FILE_CACHE
    _FILE_CACHE = None


__all__ = [
    "DEFAULTS",
    "Settings",
    "get_settings",
    "parse_bool",
    "reset_config_cache",
]
