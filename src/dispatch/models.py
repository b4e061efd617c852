"""
Courier and Order models, plus the dispatch error types.

Couriers and orders are plain mutable dataclasses. Only the
AssignmentEngine mutates them after construction; everything else reads
them or their `to_dict()` snapshots.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class DispatchError(Exception):
    """Base class for dispatch failures."""


class NoCapacityError(DispatchError):
    """Every courier is at maximum load."""

    def __init__(self, message: str = "All delivery persons are at maximum load!") -> None:
        super().__init__(message)


class OrderStatus(Enum):
    """Valid order status"""

    PENDING = auto()  # Waiting for a courier
    ASSIGNED = auto()  # Paired with a courier (irreversible)


@dataclass(frozen=True)
class Point:
    """A 2D coordinate on the demo map."""

    x: float
    y: float

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Point:
        return cls(x=float(data["x"]), y=float(data["y"]))

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}


@dataclass
class Courier:
    """A delivery courier.

    Attributes:
        id: Unique courier identifier (e.g., "D1").
        name: Display name.
        location: Current position.
        current_load: Orders currently carried.
        max_load: Capacity, fixed for the courier's lifetime.
    """

    id: str
    name: str
    location: Point
    current_load: int = 0
    max_load: int = 1

    def __post_init__(self) -> None:
        if self.max_load < 0:
            raise ValueError(f"Courier {self.id}: max_load must be >= 0, got {self.max_load}")
        if not 0 <= self.current_load <= self.max_load:
            raise ValueError(
                f"Courier {self.id}: current_load {self.current_load} "
                f"outside [0, {self.max_load}]"
            )

    @property
    def is_available(self) -> bool:
        """True while the courier can take another order."""
        return self.current_load < self.max_load

    @property
    def load_fraction(self) -> float:
        """Share of capacity in use (0.0 for zero-capacity couriers)."""
        if self.max_load == 0:
            return 0.0
        return self.current_load / self.max_load

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Courier:
        return cls(
            id=str(data["id"]),
            name=str(data.get("name", data["id"])),
            location=Point.from_dict(data["location"]),
            current_load=int(data.get("current_load", 0)),
            max_load=int(data["max_load"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "location": self.location.to_dict(),
            "current_load": self.current_load,
            "max_load": self.max_load,
        }


@dataclass
class Order:
    """A delivery request.

    Attributes:
        id: Unique order identifier (e.g., "O1").
        destination: Drop-off point.
        priority: Higher is more urgent (1-3 in the seed data).
        customer: Display name of the customer.
        assigned_to: Courier ID once assigned, None while pending.
    """

    id: str
    destination: Point
    priority: int
    customer: str
    assigned_to: str | None = None

    @property
    def status(self) -> OrderStatus:
        if self.assigned_to is None:
            return OrderStatus.PENDING
        return OrderStatus.ASSIGNED

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Order:
        return cls(
            id=str(data["id"]),
            destination=Point.from_dict(data["destination"]),
            priority=int(data.get("priority", 1)),
            customer=str(data.get("customer", "")),
            assigned_to=data.get("assigned_to"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "destination": self.destination.to_dict(),
            "priority": self.priority,
            "customer": self.customer,
            "assigned_to": self.assigned_to,
        }


@dataclass(frozen=True)
class Assignment:
    """Outcome of a single successful assignment.

    Attributes:
        order: The order that moved to the assigned set.
        courier: The courier that received it.
        distance: Distance from the courier's previous location to the destination.
    """

    order: Order
    courier: Courier
    distance: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "order_id": self.order.id,
            "courier_id": self.courier.id,
            "distance": self.distance,
        }
