from __future__ import annotations


# Base class so callers (API routes, scripts) can catch every station rejection in one place.
class DockingStationError(RuntimeError):
    tag = "docking_station_error"

    def context(self) -> dict[str, object]:
        return {}


class CapacityExceeded(DockingStationError):
    """Raised by `dock` when the station already holds `capacity` bikes."""

    tag = "capacity_exceeded"

    def __init__(self, capacity: int, docked: int) -> None:
        super().__init__(f"Station is full: {docked} of {capacity} docks in use")
        self.capacity = capacity
        self.docked = docked

    def context(self) -> dict[str, object]:
        return {"capacity": self.capacity, "docked": self.docked}


class NoBikesAvailable(DockingStationError):
    """Raised by `release_bike` when nothing is docked."""

    tag = "no_bikes_available"

    def __init__(self, capacity: int) -> None:
        super().__init__(f"No bikes available (station capacity {capacity})")
        self.capacity = capacity

    def context(self) -> dict[str, object]:
        return {"capacity": self.capacity}


class NoWorkingBikesAvailable(DockingStationError):
    """Raised by `release_bike` when the candidate bike is broken."""

    tag = "no_working_bikes_available"

    def __init__(self, docked: int) -> None:
        super().__init__(f"No working bikes available ({docked} docked)")
        self.docked = docked

    def context(self) -> dict[str, object]:
        return {"docked": self.docked}


class BikeAlreadyDocked(DockingStationError):
    tag = "bike_already_docked"

    def __init__(self, bike_id: str) -> None:
        super().__init__(f"Bike {bike_id} is already docked here")
        self.bike_id = bike_id

    def context(self) -> dict[str, object]:
        return {"bike_id": self.bike_id}


class BikeNotDocked(DockingStationError):
    tag = "bike_not_docked"

    def __init__(self, bike_id: str) -> None:
        super().__init__(f"Bike {bike_id} is not docked here")
        self.bike_id = bike_id

    def context(self) -> dict[str, object]:
        return {"bike_id": self.bike_id}


class BikeDockedElsewhere(DockingStationError):
    """Raised by the fleet when a bike is docked at a station while it sits at another one."""

    tag = "bike_docked_elsewhere"

    def __init__(self, bike_id: str, station: str) -> None:
        super().__init__(f"Bike {bike_id} is docked at {station}")
        self.bike_id = bike_id
        self.station = station

    def context(self) -> dict[str, object]:
        return {"bike_id": self.bike_id, "station": self.station}
