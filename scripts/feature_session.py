from __future__ import annotations

import sys
from pathlib import Path

# Allow running scripts without requiring an editable install (`pip install -e .`).
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
sys.path.insert(0, str(SRC_PATH))

import argparse
import logging

from bikeshare.config.loader import load_config
from bikeshare.station import DockingStation
from bikeshare.station.session import run_session
from bikeshare.utils.logging import configure_logging


logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Replay a dock/release feature session against one station.")
    parser.add_argument("--config", default=None, help="Config JSON path.")
    parser.add_argument("--capacity", type=int, default=None, help="Station capacity (defaults to config).")
    parser.add_argument("--extra", type=int, default=1, help="Bikes to dock beyond capacity.")
    parser.add_argument("--broken", action="store_true", help="Report the first bike broken before docking.")
    args = parser.parse_args()
    if args.extra < 0:
        parser.error("--extra must be >= 0")

    config = load_config(args.config)
    configure_logging(config.logging)

    station = DockingStation(
        args.capacity if args.capacity is not None else config.station.default_capacity,
        name="feature-session",
        release_order=config.station.release_order,
    )
    transcript = run_session(station, extra=args.extra, broken=args.broken)
    rejected = sum(1 for line in transcript if ": rejected " in line)
    logger.info("Feature session done. steps=%s rejected=%s", len(transcript), rejected)


if __name__ == "__main__":
    main()
