# src/emojikit/utils/load_config.py

"""Load the packaged JSON data tables from a <data/> directory with caching.

Every table is a JSON object; callers name the top-level keys they need and
get a ConfigParseError when one is missing. Parsed tables are cached per
(path, mtime), so an edited file is re-read on the next call.

Used by the emoji catalogue and the alias table, and by tests needing hot reload.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

# ── Public surface ────────────────────────────────────────────────────────────
DATA_DIR_ENV = "EMOJIKIT_DATA_DIR"
__all__ = [
    "DATA_DIR_ENV",
    "load_config",
    "clear_config_cache",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested data file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when a data file is not valid JSON or lacks a required key."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON is not an object."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
_CONFIG_CACHE: dict[tuple[Path, float], Mapping[str, Any]] = {}


def clear_config_cache() -> None:
    """Empty the in-memory data cache (useful for pytest/hot-reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
        log.debug("Config cache cleared.")


def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    """Compute candidate 'data' directories walking up from start."""
    start = (start or Path(__file__)).resolve()
    return [(p / "data").resolve() for p in [start, *start.parents]]


def _default_data_dir(start: Path | None = None) -> Path:
    """Return the first existing candidate directory or raise."""
    for cand in _candidate_data_dirs(start):
        if cand.is_dir():
            return cand
    raise DataDirNotFound(
        "No 'data' directory found.\n"
        "Tried:\n  " + "\n  ".join(str(p) for p in _candidate_data_dirs(start))
    )


def _env_data_dir() -> Path | None:
    v = os.environ.get(DATA_DIR_ENV)
    if v:
        return Path(os.path.expanduser(v)).resolve()
    return None


def _resolve(file: str, base_dir: Path | None) -> Path:
    # explicit > env override > discovery
    data_dir = (base_dir or _env_data_dir() or _default_data_dir()).resolve()
    file_name = file if file.endswith(".json") else f"{file}.json"
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e
    if not path.is_file():
        raise ConfigFileNotFound(f"Data file not found: {path}")
    return path


def load_config(
    file: str,
    *,
    required: Iterable[str] = (),
    base_dir: Path | None = None,
) -> Mapping[str, Any]:
    """Load <data>/<file>.json as a read-only mapping, checking `required` keys."""
    path = _resolve(os.fspath(file), base_dir)
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    with _CACHE_LOCK:
        cached = _CONFIG_CACHE.get((path, mtime))
    if cached is None:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
        except OSError as e:
            raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigTypeError(f"{path.name}: expected a JSON object, got {type(data).__name__}")
        cached = MappingProxyType(data)
        with _CACHE_LOCK:
            _CONFIG_CACHE[(path, mtime)] = cached
        log.debug("Config cache MISS → STORED: %s", path.name)
    else:
        log.debug("Config cache HIT: %s", path.name)

    missing = [k for k in required if k not in cached]
    if missing:
        raise ConfigParseError(f"{path.name}: missing required key(s) {', '.join(missing)}")
    return cached
