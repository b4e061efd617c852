"""
Assignment engine — the only owner and mutator of dispatch state.

Holds the courier fleet plus the pending and assigned order queues, and
assigns one order per call using a greedy nearest-available-courier rule:

1. Pick the pending order with the highest priority (earliest wins ties).
2. Among couriers below capacity, pick the one closest to the order's
   destination (Euclidean; earliest courier wins exact ties).
3. Move the order to the assigned queue, bump the courier's load and,
   when `relocate_on_assign` is set, move the courier to the destination.

Usage:
    config = load_config("config/default_dispatch.yaml")
    engine = AssignmentEngine.from_config(config)
    assignment = engine.assign_next_order()
    print(f"{assignment.order.id} -> {assignment.courier.id}")
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

import numpy as np

from src.dispatch.config import DispatchConfig
from src.dispatch.models import Assignment, Courier, NoCapacityError, Order, Point


def euclidean_distance(a: Point, b: Point) -> float:
    """Straight-line distance between two points."""
    return float(np.hypot(a.x - b.x, a.y - b.y))


def select_next_order(pending: Sequence[Order]) -> Order | None:
    """Highest-priority order; the first one encountered wins ties."""
    if not pending:
        return None
    # max() keeps the first maximal element, same as a stable descending sort
    return max(pending, key=lambda o: o.priority)


def nearest_courier(
    couriers: Iterable[Courier],
    destination: Point,
) -> tuple[Courier, float] | None:
    """Closest courier to `destination`.

    The first courier seeds the running best, which is then only replaced
    on a strictly smaller distance, so among equally distant couriers the
    first in iteration order wins.

    Returns:
        (courier, distance), or None if `couriers` is empty.
    """
    best_courier = None
    best_dist = float("inf")

    for courier in couriers:
        dist = euclidean_distance(courier.location, destination)
        if best_courier is None or dist < best_dist:
            best_dist = dist
            best_courier = courier

    if best_courier is None:
        return None
    return best_courier, best_dist


class AssignmentEngine:
    """In-memory dispatch state with a single mutating operation.

    Args:
        couriers: The fleet. Order of this sequence is the tie-break order.
        orders: Seed orders. Any that already carry `assigned_to` go straight
            to the assigned queue; the rest are pending in the given order.
        relocate_on_assign: Move the winning courier to the order destination.

    Raises:
        ValueError: On duplicate courier or order IDs.
    """

    def __init__(
        self,
        couriers: Iterable[Courier],
        orders: Iterable[Order],
        relocate_on_assign: bool = True,
    ) -> None:
        self.relocate_on_assign = relocate_on_assign

        self._couriers: list[Courier] = list(couriers)
        self._pending: list[Order] = []
        self._assigned: list[Order] = []

        courier_ids = [c.id for c in self._couriers]
        if len(set(courier_ids)) != len(courier_ids):
            raise ValueError(f"Duplicate courier IDs: {courier_ids}")

        seen_orders: set[str] = set()
        for order in orders:
            if order.id in seen_orders:
                raise ValueError(f"Duplicate order ID: {order.id}")
            seen_orders.add(order.id)
            if order.assigned_to is None:
                self._pending.append(order)
            else:
                self._assigned.append(order)

    @classmethod
    def from_config(cls, config: DispatchConfig) -> AssignmentEngine:
        """Build a fresh engine from the configured seed fleet."""
        return cls(
            couriers=[Courier.from_dict(c) for c in config.fleet.couriers],
            orders=[Order.from_dict(o) for o in config.fleet.orders],
            relocate_on_assign=config.engine.relocate_on_assign,
        )

    # ── Read access ──────────────────────────────────────────────

    @property
    def couriers(self) -> list[Courier]:
        return list(self._couriers)

    @property
    def pending(self) -> list[Order]:
        return list(self._pending)

    @property
    def assigned(self) -> list[Order]:
        return list(self._assigned)

    @property
    def has_pending(self) -> bool:
        return bool(self._pending)

    def all_orders(self) -> list[Order]:
        """Pending orders followed by assigned orders."""
        return self._pending + self._assigned

    def snapshot(self) -> dict[str, Any]:
        """JSON-ready copy of the full state."""
        return {
            "couriers": [c.to_dict() for c in self._couriers],
            "pending": [o.to_dict() for o in self._pending],
            "assigned": [o.to_dict() for o in self._assigned],
        }

    # ── Mutation ─────────────────────────────────────────────────

    def assign_next_order(self) -> Assignment | None:
        """Assign the most urgent pending order to the nearest available courier.

        Returns:
            The Assignment made, or None if nothing is pending.

        Raises:
            NoCapacityError: Every courier is at max load. State is untouched.
        """
        order = select_next_order(self._pending)
        if order is None:
            return None

        available = [c for c in self._couriers if c.is_available]
        best = nearest_courier(available, order.destination)
        if best is None:
            raise NoCapacityError()
        courier, distance = best

        self._pending.remove(order)
        order.assigned_to = courier.id
        self._assigned.append(order)

        courier.current_load += 1
        if self.relocate_on_assign:
            courier.location = order.destination

        return Assignment(order=order, courier=courier, distance=distance)
