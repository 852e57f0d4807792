from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from bikeshare.station.docking import DEFAULT_CAPACITY, ReleaseOrder


@dataclass(frozen=True)
class AppSettings:
    name: str = "BikeShare"


@dataclass(frozen=True)
class StationSettings:
    default_capacity: int = DEFAULT_CAPACITY
    release_order: ReleaseOrder = "lifo"


@dataclass(frozen=True)
class ApiSettings:
    host: str = "127.0.0.1"
    port: int = 8000


@dataclass(frozen=True)
class LoggingSettings:
    level: str
    format: str
    file: Optional[Path] = None


@dataclass(frozen=True)
class AppConfig:
    app: AppSettings
    station: StationSettings
    api: ApiSettings
    logging: LoggingSettings
