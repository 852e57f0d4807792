from __future__ import annotations

import logging
from typing import Optional

from bikeshare.config.models import LoggingSettings


PACKAGE_LOGGER = "bikeshare"


def resolve_level(name: str) -> int:
    level = getattr(logging, name.strip().upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {name}")
    return level


def configure_logging(settings: LoggingSettings) -> None:
    """
    Configure root logging from settings.

    `logging.basicConfig` is a no-op once the root logger has handlers (pytest, uvicorn),
    so the package logger level is set explicitly as well.
    """

    level = resolve_level(settings.level)

    handlers: Optional[list[logging.Handler]] = None
    if settings.file is not None:
        settings.file.parent.mkdir(parents=True, exist_ok=True)
        handlers = [logging.FileHandler(settings.file, encoding="utf-8"), logging.StreamHandler()]

    logging.basicConfig(level=level, format=settings.format, handlers=handlers)
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
