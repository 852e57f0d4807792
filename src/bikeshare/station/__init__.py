__all__ = [
    "DEFAULT_CAPACITY",
    "BikeAlreadyDocked",
    "BikeDockedElsewhere",
    "BikeNotDocked",
    "CapacityExceeded",
    "DockingStation",
    "DockingStationError",
    "NoBikesAvailable",
    "NoWorkingBikesAvailable",
]

from bikeshare.station.docking import DEFAULT_CAPACITY, DockingStation
from bikeshare.station.errors import (
    BikeAlreadyDocked,
    BikeDockedElsewhere,
    BikeNotDocked,
    CapacityExceeded,
    DockingStationError,
    NoBikesAvailable,
    NoWorkingBikesAvailable,
)
