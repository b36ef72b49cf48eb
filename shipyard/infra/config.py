"""Application configuration and env loading."""

from __future__ import annotations

import math
import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CELL_SIZE = 44.0


@dataclass(frozen=True, slots=True)
class ShipyardSettings:
    """Immutable runtime settings sourced from environment."""

    cell_size: float = DEFAULT_CELL_SIZE
    log_level: str = "INFO"
    log_format: str = "text"
    log_file: str | None = None


def _parse_env_line(raw_line: str) -> tuple[str, str] | None:
    line = raw_line.strip()
    if not line or line.startswith("#") or "=" not in line:
        return None
    key, value = (part.strip() for part in line.split("=", 1))
    if not key:
        return None
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
        value = value[1:-1]
    return key, value


def load_env_file(path: str = ".env.app", *, override_existing: bool = True) -> None:
    """Copy KEY=VALUE pairs from ``path`` into the environment; missing files are skipped."""
    env_path = Path(path)
    if not env_path.exists():
        return
    pairs = (_parse_env_line(line) for line in env_path.read_text(encoding="utf-8").splitlines())
    for key, value in filter(None, pairs):
        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files left to right; later files win."""
    to_load = tuple(paths) if paths is not None else (".env.app", ".env.app.local")
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def _float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if math.isfinite(value) and value > 0 else default


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve log level with app-prefixed override."""
    value = os.getenv("SHIPYARD_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def load_settings() -> ShipyardSettings:
    """Load immutable settings from env vars."""
    log_file = os.getenv("SHIPYARD_LOG_FILE", "").strip()
    return ShipyardSettings(
        cell_size=_float("SHIPYARD_CELL_SIZE", DEFAULT_CELL_SIZE),
        log_level=resolve_log_level_name(),
        log_format=os.getenv("LOG_FORMAT", "text").strip().lower() or "text",
        log_file=log_file or None,
    )
