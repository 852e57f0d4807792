from __future__ import annotations

# Allow running scripts without requiring an editable install (`pip install -e .`).
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
sys.path.insert(0, str(SRC_PATH))

import argparse
import os

# `uvicorn` serves the FastAPI app during local development.
import uvicorn

from bikeshare.api.app import create_app
from bikeshare.config.loader import load_config


def main() -> None:
    parser = argparse.ArgumentParser(description="Serve the bike share fleet API.")
    parser.add_argument("--config", default=None, help="Config JSON path.")
    args = parser.parse_args()

    config = load_config(args.config)
    app = create_app(config)

    # Env vars win over the config file so the port can be changed per shell.
    host = os.getenv("BIKESHARE_HOST", config.api.host)
    port = int(os.getenv("BIKESHARE_PORT", str(config.api.port)))

    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
