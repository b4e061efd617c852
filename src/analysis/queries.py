"""
Read-side projections over dispatch state.

Search, status filtering and chart data for the UI. All functions are
stateless: they take the engine's collections and never mutate them.
"""

from __future__ import annotations

from typing import Iterable, Literal, Sequence

import numpy as np

from src.dispatch.engine import euclidean_distance
from src.dispatch.models import Courier, Order

FilterMode = Literal["all", "pending", "assigned"]
FILTER_MODES: tuple[str, ...] = ("all", "pending", "assigned")


def filter_orders(orders: Iterable[Order], query: str | None) -> list[Order]:
    """Case-insensitive substring match on order ID or customer name.

    An empty or missing query returns every order.
    """
    if not query:
        return list(orders)
    q = query.lower()
    return [o for o in orders if q in o.id.lower() or q in o.customer.lower()]


def display_orders(
    pending: Sequence[Order],
    assigned: Sequence[Order],
    query: str | None = None,
    mode: FilterMode = "all",
) -> list[Order]:
    """Orders to show for a search box value and status filter.

    Raises:
        ValueError: If `mode` is not one of FILTER_MODES.
    """
    if mode not in FILTER_MODES:
        raise ValueError(f"Unknown filter mode {mode!r}; expected one of {FILTER_MODES}")

    filtered_pending = filter_orders(pending, query)
    filtered_assigned = filter_orders(assigned, query)

    if mode == "pending":
        return filtered_pending
    if mode == "assigned":
        return filtered_assigned
    return filtered_pending + filtered_assigned


def chart_data(
    couriers: Sequence[Courier],
    pending: Sequence[Order],
    query: str | None = None,
) -> dict[str, list[dict]]:
    """Scatter plot model: courier positions and pending order destinations.

    Orders are highlighted when their ID contains the query. An empty
    query highlights every order.
    """
    q = (query or "").lower()
    return {
        "couriers": [
            {"x": c.location.x, "y": c.location.y, "label": c.name} for c in couriers
        ],
        "orders": [
            {
                "x": o.destination.x,
                "y": o.destination.y,
                "label": o.id,
                "highlighted": q in o.id.lower(),
            }
            for o in pending
        ],
    }


def distance_matrix(couriers: Sequence[Courier], orders: Sequence[Order]) -> np.ndarray:
    """Courier-to-destination distances, shape (n_couriers, n_orders)."""
    dist = np.zeros((len(couriers), len(orders)), dtype=float)
    for i, courier in enumerate(couriers):
        for j, order in enumerate(orders):
            dist[i, j] = euclidean_distance(courier.location, order.destination)
    return dist
