from __future__ import annotations

from dataclasses import dataclass, field
from uuid import uuid4


def _new_bike_id() -> str:
    return uuid4().hex


@dataclass(eq=False)
class Bike:
    """
    A bike with a single health flag.

    Equality is identity: stations hold references, so two bikes with the same
    id are still different bikes unless they are the same object.

    Bikes always start working; `report_broken` is the only way to change that,
    and there is no way back.
    """

    bike_id: str = field(default_factory=_new_bike_id)
    _working: bool = field(default=True, init=False, repr=False)

    @property
    def working(self) -> bool:
        return self._working

    def is_working(self) -> bool:
        return self._working

    def report_broken(self) -> None:
        self._working = False


@dataclass(frozen=True)
class StationSnapshot:
    name: str
    capacity: int
    docked: int
    working: int
    broken: int
    bike_ids: tuple[str, ...]
