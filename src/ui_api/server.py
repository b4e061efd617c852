"""FastAPI server backing the delivery dispatch UI."""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Literal

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from src.analysis.queries import chart_data, display_orders
from src.dispatch.config import DispatchConfig, load_config
from src.dispatch.engine import AssignmentEngine
from src.dispatch.models import NoCapacityError

DEFAULT_CONFIG_PATH = "config/default_dispatch.yaml"


def _load_runtime_config(config_path: str) -> DispatchConfig:
    path = Path(config_path)
    if path.exists():
        return load_config(path)
    return DispatchConfig()


def create_app(config: DispatchConfig | None = None) -> FastAPI:
    """Build an app that owns one AssignmentEngine seeded from `config`."""

    config = config or DispatchConfig()
    engine = AssignmentEngine.from_config(config)
    # Sync routes run on a threadpool; one request touches the engine at a time.
    lock = threading.Lock()

    app = FastAPI(title="Delivery Dispatch API", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.server.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.engine = engine

    def _state() -> dict:
        state = engine.snapshot()
        state["can_assign"] = engine.has_pending
        return state

    @app.get("/api/health")
    def health() -> dict:
        """Basic readiness endpoint."""

        return {"status": "ok"}

    @app.get("/api/state")
    def get_state() -> dict:
        """Couriers, pending and assigned orders, and whether assigning is possible."""

        with lock:
            return _state()

    @app.get("/api/orders")
    def get_orders(
        q: str = "",
        mode: Literal["all", "pending", "assigned"] = "all",
    ) -> dict:
        """Orders matching the search box and status filter."""

        with lock:
            orders = display_orders(engine.pending, engine.assigned, q, mode)
            return {"orders": [o.to_dict() for o in orders]}

    @app.get("/api/chart")
    def get_chart(q: str = "") -> dict:
        """Scatter plot datasets for couriers and pending orders."""

        with lock:
            return chart_data(engine.couriers, engine.pending, q)

    @app.post("/api/assign")
    def assign() -> dict:
        """Assign the next order. 409 when every courier is full."""

        with lock:
            try:
                assignment = engine.assign_next_order()
            except NoCapacityError as exc:
                raise HTTPException(status_code=409, detail=str(exc)) from exc
            return {
                "assignment": assignment.to_dict() if assignment is not None else None,
                "state": _state(),
            }

    return app


app = create_app(_load_runtime_config(DEFAULT_CONFIG_PATH))
