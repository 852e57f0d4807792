from __future__ import annotations

import logging
from typing import Literal, Optional

from bikeshare.schemas.core import Bike, StationSnapshot
from bikeshare.station.errors import (
    BikeAlreadyDocked,
    BikeNotDocked,
    CapacityExceeded,
    NoBikesAvailable,
    NoWorkingBikesAvailable,
)


logger = logging.getLogger(__name__)


DEFAULT_CAPACITY = 20
GREETING = "Hello World!"

ReleaseOrder = Literal["lifo", "fifo"]


def validate_capacity(value: object) -> int:
    # bool is an int subclass; `True` is not a capacity.
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"capacity must be a positive integer, got {value!r}")
    return value


class DockingStation:
    """
    Bounded, ordered collection of docked bikes.

    - `dock` appends to the end; it never exceeds `capacity` and never holds the same bike twice.
    - `release_bike()` picks the newest working bike ("lifo") or the oldest one ("fifo").
      Broken bikes stay docked.
    - Failed operations raise a `DockingStationError` subclass and leave the station unchanged.

    Not safe for concurrent mutation; wrap calls in a lock when sharing a station between threads.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        *,
        name: str = "station",
        release_order: ReleaseOrder = "lifo",
    ) -> None:
        if release_order not in ("lifo", "fifo"):
            raise ValueError(f"Unsupported release_order: {release_order}")
        self._capacity = validate_capacity(capacity)
        self._name = name
        self._release_order = release_order
        self._docked: list[Bike] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def name(self) -> str:
        return self._name

    @property
    def release_order(self) -> ReleaseOrder:
        return self._release_order

    def __len__(self) -> int:
        return len(self._docked)

    def __contains__(self, bike: object) -> bool:
        return any(docked is bike for docked in self._docked)

    def __repr__(self) -> str:
        return f"DockingStation(name={self._name!r}, capacity={self._capacity}, docked={len(self._docked)})"

    def say_hello(self) -> str:
        return GREETING

    def is_full(self) -> bool:
        return len(self._docked) >= self._capacity

    def is_empty(self) -> bool:
        return not self._docked

    def show_docked_bikes(self) -> list[Bike]:
        # Copy so callers cannot bypass dock/release.
        return list(self._docked)

    def working_bikes(self) -> list[Bike]:
        return [bike for bike in self._docked if bike.working]

    def broken_bikes(self) -> list[Bike]:
        return [bike for bike in self._docked if not bike.working]

    def dock(self, bike: Bike) -> Bike:
        bike_id = bike.bike_id
        if bike in self:
            logger.warning("%s: rejected dock of bike %s (already docked)", self._name, bike_id)
            raise BikeAlreadyDocked(bike_id)
        if self.is_full():
            logger.warning("%s: rejected dock of bike %s (full, capacity=%s)", self._name, bike_id, self._capacity)
            raise CapacityExceeded(capacity=self._capacity, docked=len(self._docked))

        self._docked.append(bike)
        logger.debug("%s: docked bike %s (%s/%s)", self._name, bike_id, len(self._docked), self._capacity)
        return bike

    def release_bike(self, bike: Optional[Bike] = None) -> Bike:
        if self.is_empty():
            logger.warning("%s: rejected release (no bikes docked)", self._name)
            raise NoBikesAvailable(capacity=self._capacity)

        index = self._select_candidate() if bike is None else self._index_of(bike)
        released = self._docked.pop(index)
        logger.debug(
            "%s: released bike %s (%s/%s)", self._name, released.bike_id, len(self._docked), self._capacity
        )
        return released

    def snapshot(self) -> StationSnapshot:
        working = sum(1 for bike in self._docked if bike.working)
        return StationSnapshot(
            name=self._name,
            capacity=self._capacity,
            docked=len(self._docked),
            working=working,
            broken=len(self._docked) - working,
            bike_ids=tuple(bike.bike_id for bike in self._docked),
        )

    def _select_candidate(self) -> int:
        indices = range(len(self._docked))
        ordered = reversed(indices) if self._release_order == "lifo" else iter(indices)
        for index in ordered:
            if self._docked[index].working:
                return index
        logger.warning("%s: rejected release (all %s docked bikes are broken)", self._name, len(self._docked))
        raise NoWorkingBikesAvailable(docked=len(self._docked))

    def _index_of(self, bike: Bike) -> int:
        for index, docked in enumerate(self._docked):
            if docked is bike:
                if not docked.working:
                    logger.warning("%s: rejected release of broken bike %s", self._name, bike.bike_id)
                    raise NoWorkingBikesAvailable(docked=len(self._docked))
                return index
        logger.warning("%s: rejected release of bike %s (not docked)", self._name, bike.bike_id)
        raise BikeNotDocked(bike.bike_id)
