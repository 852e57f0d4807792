# Use postponed evaluation of annotations so type hints stay as strings at runtime.
from __future__ import annotations

# `FastAPI` exposes the fleet as HTTP endpoints so stations can be exercised by hand (curl, /docs).
from fastapi import FastAPI

# API routes are defined in a separate module to keep the app factory small and testable.
from bikeshare.api.routes import router

# `FleetService` owns the in-memory stations and bikes for the lifetime of the app.
from bikeshare.api.service import FleetService

# `AppConfig` is the typed config model so we can avoid globals and magic strings.
from bikeshare.config.models import AppConfig

# Central logging configuration keeps output consistent across scripts and the API.
from bikeshare.utils.logging import configure_logging


# This app factory builds the FastAPI application from a typed config.
# Each call returns a fresh app with empty stations, which keeps tests independent.
def create_app(config: AppConfig) -> FastAPI:
    configure_logging(config.logging)

    app = FastAPI(title=config.app.name)

    # Store the service on `app.state` so route handlers can reach it through `Depends`.
    app.state.fleet_service = FleetService(config)

    app.include_router(router)
    return app
