from __future__ import annotations

# Typing helper for the optional release body.
from typing import Optional

# FastAPI primitives:
# - `APIRouter` groups endpoints so the app factory can include them cleanly.
# - `Depends` performs dependency injection per request (no global variables needed).
# - `HTTPException` converts Python errors into HTTP status codes + JSON error payloads.
# - `Request` gives access to `app.state` where we store the service object.
from fastapi import APIRouter, Depends, HTTPException, Request

from bikeshare.api.schemas import (
    AppConfigOut,
    BikeOut,
    DockIn,
    ErrorDetailOut,
    GreetingOut,
    ReleaseIn,
    StationIn,
    StationOut,
)
# Dataflow: HTTP request -> route handler -> FleetService -> DockingStation -> Pydantic model -> JSON response.
from bikeshare.api.service import FleetService
from bikeshare.schemas.core import Bike, StationSnapshot
from bikeshare.station.docking import GREETING
from bikeshare.station.errors import DockingStationError


router = APIRouter()


def get_service(request: Request) -> FleetService:
    return request.app.state.fleet_service  # type: ignore[attr-defined]


def _station_out(snap: StationSnapshot) -> StationOut:
    return StationOut(
        name=snap.name,
        capacity=snap.capacity,
        docked=snap.docked,
        working=snap.working,
        broken=snap.broken,
        bike_ids=list(snap.bike_ids),
    )


def _bike_out(service: FleetService, bike: Bike) -> BikeOut:
    return BikeOut(bike_id=bike.bike_id, working=bike.working, station=service.location_of(bike))


# Station rejections are conflicts with current state, not malformed requests.
def _conflict(exc: DockingStationError) -> HTTPException:
    detail = ErrorDetailOut(error=exc.tag, message=str(exc), context=exc.context())
    return HTTPException(status_code=409, detail=detail.model_dump())


def _not_found(exc: KeyError) -> HTTPException:
    return HTTPException(status_code=404, detail=str(exc.args[0]) if exc.args else "Not found")


@router.get("/config", response_model=AppConfigOut)
def get_config(service: FleetService = Depends(get_service)) -> AppConfigOut:
    cfg = service.config
    return AppConfigOut(
        app_name=cfg.app.name,
        station={
            "default_capacity": cfg.station.default_capacity,
            "release_order": cfg.station.release_order,
        },
    )


@router.get("/", response_model=GreetingOut)
def root(service: FleetService = Depends(get_service)) -> GreetingOut:
    return GreetingOut(message=GREETING, app_name=service.config.app.name)


@router.get("/stations", response_model=list[StationOut])
def list_stations(service: FleetService = Depends(get_service)) -> list[StationOut]:
    return [_station_out(snap) for snap in service.station_snapshots()]


@router.post("/stations", response_model=StationOut, status_code=201)
def create_station(body: StationIn, service: FleetService = Depends(get_service)) -> StationOut:
    try:
        service.create_station(body.name, capacity=body.capacity)
    except ValueError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return _station_out(service.station_snapshot(body.name))


@router.get("/stations/{name}", response_model=StationOut)
def get_station(name: str, service: FleetService = Depends(get_service)) -> StationOut:
    try:
        return _station_out(service.station_snapshot(name))
    except KeyError as exc:
        raise _not_found(exc) from exc


@router.post("/bikes", response_model=BikeOut, status_code=201)
def register_bike(service: FleetService = Depends(get_service)) -> BikeOut:
    return _bike_out(service, service.register_bike())


@router.get("/bikes/{bike_id}", response_model=BikeOut)
def get_bike(bike_id: str, service: FleetService = Depends(get_service)) -> BikeOut:
    try:
        return _bike_out(service, service.get_bike(bike_id))
    except KeyError as exc:
        raise _not_found(exc) from exc


@router.post("/bikes/{bike_id}/report_broken", response_model=BikeOut)
def report_broken(bike_id: str, service: FleetService = Depends(get_service)) -> BikeOut:
    try:
        return _bike_out(service, service.report_broken(bike_id))
    except KeyError as exc:
        raise _not_found(exc) from exc


@router.post("/stations/{name}/dock", response_model=StationOut)
def dock_bike(name: str, body: DockIn, service: FleetService = Depends(get_service)) -> StationOut:
    try:
        service.dock(name, body.bike_id)
    except KeyError as exc:
        raise _not_found(exc) from exc
    except DockingStationError as exc:
        raise _conflict(exc) from exc
    return _station_out(service.station_snapshot(name))


@router.post("/stations/{name}/release", response_model=BikeOut)
def release_bike(
    name: str,
    body: Optional[ReleaseIn] = None,
    service: FleetService = Depends(get_service),
) -> BikeOut:
    bike_id = body.bike_id if body is not None else None
    try:
        bike = service.release(name, bike_id)
    except KeyError as exc:
        raise _not_found(exc) from exc
    except DockingStationError as exc:
        raise _conflict(exc) from exc
    return _bike_out(service, bike)
