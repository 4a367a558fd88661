"""YAML/dict config loader for number-extractor.

Supports loading from a YAML file or a plain dict (for embedding in the
host application's own config).

Example YAML:

    number_extractor:
      strict_ukrainian_length: false
      ignore:
        - "+380000000000"
      log_level: INFO
      history:
        backend: sqlite          # "memory" or "sqlite"
        path: ~/.number-extractor/history.db
        limit: 30
"""

from __future__ import annotations
from pathlib import Path
from typing import Any

from .engine import Engine, EngineConfig
from .history import DEFAULT_LIMIT, History
from .history_sqlite import SqliteHistory

_BACKENDS = ("memory", "sqlite")


def load_config(data: dict[str, Any] | None) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline)."""
    data = data or {}
    # Support nested under "number_extractor" key or flat
    if "number_extractor" in data:
        data = data["number_extractor"] or {}

    history = data.get("history") or {}
    backend = history.get("backend", "memory")
    if backend not in _BACKENDS:
        raise ValueError(f"unknown history backend {backend!r}, expected one of {_BACKENDS}")
    limit = int(history.get("limit", DEFAULT_LIMIT))
    if limit < 1:
        raise ValueError(f"history limit must be positive, got {limit}")

    return {
        "strict_ukrainian_length": bool(data.get("strict_ukrainian_length", False)),
        "ignore": set(data.get("ignore") or []),
        "log_level": data.get("log_level"),
        "history_backend": backend,
        "history_path": history.get("path", "history.db"),
        "history_limit": limit,
    }


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    import yaml  # optional dependency
    with open(path, encoding="utf-8") as f:
        return load_config(yaml.safe_load(f))


def _normalized(config: dict[str, Any]) -> dict[str, Any]:
    return config if "history_backend" in config else load_config(config)


def create_engine(config: dict[str, Any]) -> Engine:
    """Create a configured engine from a config dict."""
    cfg = _normalized(config)
    return Engine(EngineConfig(
        strict_ukrainian_length=cfg["strict_ukrainian_length"],
        ignore=cfg["ignore"],
    ))


def create_history(config: dict[str, Any]) -> History | SqliteHistory:
    """Create the configured history store."""
    cfg = _normalized(config)
    if cfg["history_backend"] == "sqlite":
        return SqliteHistory(db_path=cfg["history_path"], limit=cfg["history_limit"])
    return History(limit=cfg["history_limit"])
