from src.dispatch.config import DispatchConfig, load_config
from src.dispatch.engine import AssignmentEngine, euclidean_distance, nearest_courier, select_next_order
from src.dispatch.models import (
    Assignment,
    Courier,
    DispatchError,
    NoCapacityError,
    Order,
    OrderStatus,
    Point,
)

__all__ = [
    "DispatchConfig",
    "load_config",
    "AssignmentEngine",
    "euclidean_distance",
    "nearest_courier",
    "select_next_order",
    "Assignment",
    "Courier",
    "DispatchError",
    "NoCapacityError",
    "Order",
    "OrderStatus",
    "Point",
]
