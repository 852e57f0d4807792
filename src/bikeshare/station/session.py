from __future__ import annotations

import logging
from typing import Callable

from bikeshare.schemas.core import Bike
from bikeshare.station.docking import DockingStation
from bikeshare.station.errors import DockingStationError


logger = logging.getLogger(__name__)


def run_session(station: DockingStation, *, extra: int = 1, broken: bool = False) -> list[str]:
    """
    Fill the station, overflow it by `extra` bikes, then drain it with one release too many.

    With `broken=True` the first bike is reported broken before docking, so the final
    releases hit the health check. Returns one line per step.
    """

    if extra < 0:
        raise ValueError(f"extra must be >= 0, got {extra}")

    transcript: list[str] = []

    def _step(label: str, action: Callable[[], object]) -> None:
        try:
            result = action()
        except DockingStationError as exc:
            line = f"{label}: rejected {exc.tag}"
        else:
            line = f"{label}: ok {result.bike_id if isinstance(result, Bike) else result}"
        logger.info(line)
        transcript.append(line)

    _step("hello", station.say_hello)

    bikes = [Bike() for _ in range(station.capacity + extra)]
    if broken and bikes:
        bikes[0].report_broken()

    for i, bike in enumerate(bikes):
        _step(f"dock #{i + 1}", lambda bike=bike: station.dock(bike))

    for i in range(station.capacity + 1):
        _step(f"release #{i + 1}", station.release_bike)

    logger.info("Final snapshot: %s", station.snapshot())
    return transcript
