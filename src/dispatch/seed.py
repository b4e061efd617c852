"""Built-in demo fleet: eight couriers and six pending orders."""

from __future__ import annotations

DEFAULT_COURIERS: tuple[dict, ...] = (
    {"id": "D1", "name": "John", "location": {"x": 10, "y": 20}, "current_load": 1, "max_load": 5},
    {"id": "D2", "name": "Sarah", "location": {"x": -10, "y": 30}, "current_load": 2, "max_load": 3},
    {"id": "D3", "name": "Mike", "location": {"x": 5, "y": 15}, "current_load": 3, "max_load": 8},
    {"id": "D4", "name": "Emily", "location": {"x": -5, "y": 25}, "current_load": 9, "max_load": 10},
    {"id": "D5", "name": "Alex", "location": {"x": 15, "y": 35}, "current_load": 4, "max_load": 7},
    {"id": "D6", "name": "Lisa", "location": {"x": -15, "y": 10}, "current_load": 2, "max_load": 6},
    {"id": "D7", "name": "Ryan", "location": {"x": 8, "y": -5}, "current_load": 5, "max_load": 9},
    {"id": "D8", "name": "Jessica", "location": {"x": -20, "y": 40}, "current_load": 3, "max_load": 8},
)

DEFAULT_ORDERS: tuple[dict, ...] = (
    {"id": "O1", "destination": {"x": 50, "y": 60}, "priority": 3, "customer": "Alice"},
    {"id": "O2", "destination": {"x": 30, "y": 40}, "priority": 1, "customer": "Bob"},
    {"id": "O3", "destination": {"x": 70, "y": 80}, "priority": 2, "customer": "Charlie"},
    {"id": "O4", "destination": {"x": 20, "y": 50}, "priority": 2, "customer": "David"},
    {"id": "O5", "destination": {"x": 55, "y": 45}, "priority": 3, "customer": "Eve"},
    {"id": "O6", "destination": {"x": 40, "y": 30}, "priority": 1, "customer": "Frank"},
)
