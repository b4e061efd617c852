"""
Dispatch configuration dataclasses and YAML loader.

All demo parameters live here as typed dataclasses.
Load from YAML with `load_config()` or construct directly for tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from src.dispatch.seed import DEFAULT_COURIERS, DEFAULT_ORDERS


@dataclass(frozen=True)
class EngineConfig:
    """Assignment heuristic switches."""

    relocate_on_assign: bool = True  # Snap the courier to the order destination


@dataclass(frozen=True)
class ServerConfig:
    """UI API server parameters."""

    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: tuple[str, ...] = (
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    )


@dataclass(frozen=True)
class FleetConfig:
    """Seed records the engine is built from at startup.

    Kept as raw mappings so every engine gets fresh, independently
    mutable Courier and Order objects.
    """

    couriers: tuple[dict, ...] = DEFAULT_COURIERS
    orders: tuple[dict, ...] = DEFAULT_ORDERS


@dataclass(frozen=True)
class DispatchConfig:
    """Top-level configuration aggregating all sub-configs."""

    engine: EngineConfig = field(default_factory=EngineConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    fleet: FleetConfig = field(default_factory=FleetConfig)


def load_config(path: str | Path) -> DispatchConfig:
    """Load a DispatchConfig from a YAML file.

    Args:
        path: Path to a YAML config file.

    Returns:
        Fully constructed DispatchConfig. Missing sections use defaults.
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    server_raw = dict(raw.get("server") or {})
    if "cors_origins" in server_raw:
        server_raw["cors_origins"] = tuple(server_raw["cors_origins"])

    # A section key with no body loads as None
    fleet_raw = raw.get("fleet") or {}
    couriers = fleet_raw.get("couriers")
    orders = fleet_raw.get("orders")

    return DispatchConfig(
        engine=EngineConfig(**(raw.get("engine") or {})),
        server=ServerConfig(**server_raw),
        fleet=FleetConfig(
            couriers=DEFAULT_COURIERS if couriers is None else tuple(couriers),
            orders=DEFAULT_ORDERS if orders is None else tuple(orders),
        ),
    )
