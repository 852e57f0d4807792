from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class StationConfigOut(BaseModel):
    default_capacity: int
    release_order: str


class AppConfigOut(BaseModel):
    app_name: str
    station: StationConfigOut


class GreetingOut(BaseModel):
    message: str
    app_name: str


class BikeOut(BaseModel):
    bike_id: str
    working: bool
    station: Optional[str] = None


class StationIn(BaseModel):
    name: str = Field(min_length=1)
    capacity: Optional[int] = Field(default=None, ge=1)


class StationOut(BaseModel):
    name: str
    capacity: int
    docked: int
    working: int
    broken: int
    bike_ids: list[str] = Field(default_factory=list)


class DockIn(BaseModel):
    bike_id: str


class ReleaseIn(BaseModel):
    bike_id: Optional[str] = None


class ErrorDetailOut(BaseModel):
    error: str
    message: str
    context: dict[str, object] = Field(default_factory=dict)
