from __future__ import annotations

import logging
import threading
from typing import Optional

from bikeshare.config.models import AppConfig
from bikeshare.schemas.core import Bike, StationSnapshot
from bikeshare.station.docking import DockingStation
from bikeshare.station.errors import BikeDockedElsewhere


logger = logging.getLogger(__name__)


# `FleetService` sits between HTTP routes and the domain objects.
# Routes deal with status codes and response models; this class owns the in-memory registries.
class FleetService:
    def __init__(self, config: AppConfig) -> None:
        self._config = config
        self._stations: dict[str, DockingStation] = {}
        self._bikes: dict[str, Bike] = {}
        # DockingStation itself is not thread-safe; FastAPI runs sync handlers in a threadpool.
        # Reentrant because `dock` calls `location_of` while holding it.
        self._lock = threading.RLock()

    @property
    def config(self) -> AppConfig:
        return self._config

    def create_station(self, name: str, capacity: Optional[int] = None) -> DockingStation:
        with self._lock:
            if name in self._stations:
                raise ValueError(f"Station already exists: {name}")
            station = DockingStation(
                self._config.station.default_capacity if capacity is None else capacity,
                name=name,
                release_order=self._config.station.release_order,
            )
            self._stations[name] = station
        logger.info("Created station %s (capacity=%s)", name, station.capacity)
        return station

    def get_station(self, name: str) -> DockingStation:
        with self._lock:
            try:
                return self._stations[name]
            except KeyError:
                raise KeyError(f"Unknown station: {name}") from None

    def list_stations(self) -> list[DockingStation]:
        with self._lock:
            return list(self._stations.values())

    def station_snapshot(self, name: str) -> StationSnapshot:
        with self._lock:
            return self.get_station(name).snapshot()

    def station_snapshots(self) -> list[StationSnapshot]:
        with self._lock:
            return [station.snapshot() for station in self._stations.values()]

    def register_bike(self) -> Bike:
        bike = Bike()
        with self._lock:
            self._bikes[bike.bike_id] = bike
        logger.info("Registered bike %s", bike.bike_id)
        return bike

    def get_bike(self, bike_id: str) -> Bike:
        with self._lock:
            try:
                return self._bikes[bike_id]
            except KeyError:
                raise KeyError(f"Unknown bike: {bike_id}") from None

    def location_of(self, bike: Bike) -> Optional[str]:
        with self._lock:
            for station in self._stations.values():
                if bike in station:
                    return station.name
            return None

    def dock(self, station_name: str, bike_id: str) -> Bike:
        with self._lock:
            station = self.get_station(station_name)
            bike = self.get_bike(bike_id)
            current = self.location_of(bike)
            if current is not None and current != station_name:
                raise BikeDockedElsewhere(bike_id, current)
            return station.dock(bike)

    def release(self, station_name: str, bike_id: Optional[str] = None) -> Bike:
        with self._lock:
            station = self.get_station(station_name)
            bike = None if bike_id is None else self.get_bike(bike_id)
            return station.release_bike(bike)

    def report_broken(self, bike_id: str) -> Bike:
        with self._lock:
            bike = self.get_bike(bike_id)
            bike.report_broken()
        logger.info("Bike %s reported broken", bike_id)
        return bike
