from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional

from bikeshare.config.models import (
    ApiSettings,
    AppConfig,
    AppSettings,
    LoggingSettings,
    StationSettings,
)
from bikeshare.station.docking import DEFAULT_CAPACITY, validate_capacity


logger = logging.getLogger(__name__)

_RELEASE_ORDERS = ("lifo", "fifo")


def load_dotenv_if_available(path: str = ".env") -> None:
    try:
        from dotenv import load_dotenv  # type: ignore
    except ModuleNotFoundError:
        return
    load_dotenv(path)


def _as_path(value: str, *, base_dir: Path) -> Path:
    candidate = Path(value)
    return candidate if candidate.is_absolute() else (base_dir / candidate)


def _env_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    try:
        return int(value.strip())
    except ValueError:
        logger.warning("Ignoring %s=%r (not an integer)", name, value)
        return None


def _env_release_order(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized not in _RELEASE_ORDERS:
        logger.warning("Ignoring %s=%r (expected one of %s)", name, value, ", ".join(_RELEASE_ORDERS))
        return None
    return normalized


def load_config(path: Optional[str | Path] = None, *, base_dir: Optional[Path] = None) -> AppConfig:
    """
    Load typed application config from JSON.

    - Path resolution is relative to `base_dir` (defaults to current working directory).
    - `.env` is loaded when python-dotenv is installed (dev convenience).
    - `BIKESHARE_DEFAULT_CAPACITY`, `BIKESHARE_RELEASE_ORDER` and `BIKESHARE_LOG_LEVEL`
      override the file; malformed override values are ignored.
    """

    load_dotenv_if_available()

    config_path = Path(path or os.getenv("BIKESHARE_CONFIG_PATH", "config/default.json")).resolve()
    base_dir = (base_dir or Path.cwd()).resolve()

    raw = json.loads(config_path.read_text(encoding="utf-8"))

    app_raw: Mapping[str, Any] = raw.get("app", {})
    app = AppSettings(name=str(app_raw.get("name", "BikeShare")))

    station_raw: Mapping[str, Any] = raw.get("station", {})
    default_capacity = station_raw.get("default_capacity", DEFAULT_CAPACITY)
    release_order = str(station_raw.get("release_order", "lifo")).lower()

    env_capacity = _env_int("BIKESHARE_DEFAULT_CAPACITY")
    if env_capacity is not None:
        default_capacity = env_capacity
    env_order = _env_release_order("BIKESHARE_RELEASE_ORDER")
    if env_order is not None:
        release_order = env_order

    try:
        default_capacity = validate_capacity(default_capacity)
    except ValueError:
        raise ValueError(f"station.default_capacity must be a positive integer, got {default_capacity!r}") from None
    if release_order not in _RELEASE_ORDERS:
        raise ValueError(f"Unsupported station.release_order: {release_order}")
    station = StationSettings(
        default_capacity=default_capacity,
        release_order=release_order,  # type: ignore[arg-type]
    )

    api_raw: Mapping[str, Any] = raw.get("api", {})
    api = ApiSettings(
        host=str(api_raw.get("host", "127.0.0.1")),
        port=int(api_raw.get("port", 8000)),
    )

    logging_raw: Mapping[str, Any] = raw.get("logging", {})
    file_value = logging_raw.get("file")
    log_file = None if not file_value else _as_path(str(file_value), base_dir=base_dir)
    level = os.getenv("BIKESHARE_LOG_LEVEL") or str(logging_raw.get("level", "INFO"))
    logging_settings = LoggingSettings(
        level=level,
        format=str(logging_raw.get("format", "%(asctime)s %(levelname)s %(name)s - %(message)s")),
        file=log_file,
    )

    return AppConfig(app=app, station=station, api=api, logging=logging_settings)
