"""Run the FastAPI backend for the dispatch UI."""

from __future__ import annotations

import argparse
from pathlib import Path

import uvicorn

from src.dispatch.config import DispatchConfig, load_config
from src.ui_api.server import DEFAULT_CONFIG_PATH, create_app


def main() -> None:
    parser = argparse.ArgumentParser(description="Run delivery dispatch API server")
    parser.add_argument("--config", type=str, default=DEFAULT_CONFIG_PATH)
    parser.add_argument("--host", type=str, default=None, help="Overrides config")
    parser.add_argument("--port", type=int, default=None, help="Overrides config")
    args = parser.parse_args()

    config_path = Path(args.config)
    if config_path.exists():
        config = load_config(config_path)
        print(f"Loaded config from {config_path}")
    else:
        print(f"Config {config_path} not found, using defaults")
        config = DispatchConfig()

    host = args.host or config.server.host
    port = args.port if args.port is not None else config.server.port
    uvicorn.run(create_app(config), host=host, port=port)


if __name__ == "__main__":
    main()
