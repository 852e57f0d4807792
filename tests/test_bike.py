from __future__ import annotations

import pytest

from bikeshare.schemas.core import Bike


def test_bike_is_working_by_default() -> None:
    bike = Bike()
    assert bike.working is True
    assert bike.is_working() is True


def test_bike_can_be_reported_broken() -> None:
    bike = Bike()
    bike.report_broken()
    assert bike.working is False


def test_report_broken_is_idempotent() -> None:
    bike = Bike()
    bike.report_broken()
    bike.report_broken()
    assert bike.is_working() is False


def test_bikes_compare_by_identity() -> None:
    a = Bike(bike_id="same")
    b = Bike(bike_id="same")
    assert a != b
    assert a == a


def test_bike_ids_are_generated_and_unique() -> None:
    ids = {Bike().bike_id for _ in range(50)}
    assert len(ids) == 50


def test_broken_bike_cannot_be_repaired_by_assignment() -> None:
    bike = Bike()
    bike.report_broken()
    with pytest.raises(AttributeError):
        bike.working = True  # type: ignore[misc]
    assert bike.working is False


def test_bike_cannot_be_constructed_broken() -> None:
    with pytest.raises(TypeError):
        Bike(working=False)  # type: ignore[call-arg]
