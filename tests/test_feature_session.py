from __future__ import annotations

import pytest

from bikeshare.station import DockingStation
from bikeshare.station.session import run_session


def test_session_overflows_then_drains() -> None:
    station = DockingStation(2)
    transcript = run_session(station, extra=1)

    assert transcript[0] == "hello: ok Hello World!"
    assert transcript[3] == "dock #3: rejected capacity_exceeded"
    assert transcript[-1] == "release #3: rejected no_bikes_available"
    assert station.is_empty()


def test_session_with_broken_bike_hits_health_check() -> None:
    station = DockingStation(2)
    transcript = run_session(station, extra=0, broken=True)

    assert transcript[-2] == "release #2: rejected no_working_bikes_available"
    assert transcript[-1] == "release #3: rejected no_working_bikes_available"
    assert len(station) == 1
    assert station.broken_bikes() == station.show_docked_bikes()


def test_session_rejects_negative_extra() -> None:
    with pytest.raises(ValueError):
        run_session(DockingStation(2), extra=-1)
