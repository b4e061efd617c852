"""
Tests for the assignment engine.

Tests cover:
1. Priority selection and its tie-break
2. Nearest-courier selection and its tie-break
3. Capacity limits and exhaustion
4. Courier relocation on/off
5. Pending/assigned partition across a full run of the seed fleet

Run with: pytest tests/test_engine.py -v
"""

import pytest

from src.dispatch.config import DispatchConfig, EngineConfig
from src.dispatch.engine import (
    AssignmentEngine,
    euclidean_distance,
    nearest_courier,
    select_next_order,
)
from src.dispatch.models import Courier, NoCapacityError, Order, OrderStatus, Point


def _courier(cid: str, x: float, y: float, load: int = 0, cap: int = 5) -> Courier:
    """Helper to create a Courier with minimal boilerplate."""
    return Courier(id=cid, name=f"Courier {cid}", location=Point(x, y), current_load=load, max_load=cap)


def _order(oid: str, x: float, y: float, priority: int = 1, customer: str = "Someone") -> Order:
    return Order(id=oid, destination=Point(x, y), priority=priority, customer=customer)


@pytest.fixture
def seed_engine() -> AssignmentEngine:
    """Engine built from the built-in demo fleet."""
    return AssignmentEngine.from_config(DispatchConfig())


# ── Test: helpers ─────────────────────────────────────────────────


class TestHelpers:
    def test_euclidean_distance(self):
        assert euclidean_distance(Point(0, 0), Point(3, 4)) == pytest.approx(5.0)
        assert euclidean_distance(Point(10, 20), Point(30, 40)) == pytest.approx(28.284, abs=1e-3)

    def test_select_next_order_empty(self):
        assert select_next_order([]) is None

    def test_select_next_order_tie_keeps_first(self):
        orders = [_order("A", 0, 0, 2), _order("B", 0, 0, 3), _order("C", 0, 0, 3)]
        assert select_next_order(orders).id == "B"

    def test_nearest_courier_empty(self):
        assert nearest_courier([], Point(0, 0)) is None

    def test_nearest_courier_tie_keeps_first(self):
        """Equal distances must not replace the current best."""
        couriers = [_courier("A", 0, 10), _courier("B", 10, 0), _courier("C", -10, 0)]
        courier, dist = nearest_courier(couriers, Point(0, 0))
        assert courier.id == "A"
        assert dist == pytest.approx(10.0)


# ── Test: order selection ─────────────────────────────────────────


class TestPrioritySelection:
    def test_highest_priority_first(self):
        engine = AssignmentEngine(
            couriers=[_courier("D1", 40, 30)],
            orders=[_order("O6", 40, 30, priority=1), _order("O1", 50, 60, priority=3)],
        )
        assignment = engine.assign_next_order()
        assert assignment.order.id == "O1"

    def test_priority_beats_distance(self, seed_engine):
        """O1 (priority 3) goes before O6 (priority 1) regardless of proximity."""
        first = seed_engine.assign_next_order()
        assert first.order.id == "O1"
        assert "O6" in [o.id for o in seed_engine.pending]

    def test_equal_priority_uses_insertion_order(self):
        engine = AssignmentEngine(
            couriers=[_courier("D1", 0, 0, cap=10)],
            orders=[
                _order("X", 0, 0, priority=2),
                _order("Y", 0, 0, priority=2),
                _order("Z", 0, 0, priority=1),
            ],
        )
        ids = [engine.assign_next_order().order.id for _ in range(3)]
        assert ids == ["X", "Y", "Z"]


# ── Test: courier selection ───────────────────────────────────────


class TestNearestCourier:
    def test_nearest_neighbour_example(self):
        d1 = _courier("D1", 10, 20, load=1, cap=5)
        d2 = _courier("D2", -10, 30, load=2, cap=3)
        engine = AssignmentEngine(couriers=[d1, d2], orders=[_order("O2", 30, 40)])

        assignment = engine.assign_next_order()

        assert assignment.courier is d1
        assert assignment.distance == pytest.approx(28.28, abs=0.01)
        assert assignment.order.assigned_to == "D1"
        assert d1.current_load == 2
        assert d2.current_load == 2
        assert engine.pending == []
        assert [o.id for o in engine.assigned] == ["O2"]

    def test_full_courier_skipped_even_if_nearest(self):
        near = _courier("NEAR", 0, 0, load=3, cap=3)
        far = _courier("FAR", 100, 100, load=0, cap=3)
        engine = AssignmentEngine(couriers=[near, far], orders=[_order("O", 1, 1)])

        assignment = engine.assign_next_order()

        assert assignment.courier.id == "FAR"
        assert near.current_load == 3

    def test_distance_tie_goes_to_first_courier(self):
        engine = AssignmentEngine(
            couriers=[_courier("A", 0, 10), _courier("B", 10, 0)],
            orders=[_order("O", 0, 0)],
        )
        assert engine.assign_next_order().courier.id == "A"

    def test_overflowing_distance_still_assigns(self):
        """An available courier at an infinite distance is still a candidate."""
        courier = _courier("D1", -1e308, 0, load=0, cap=5)
        engine = AssignmentEngine(couriers=[courier], orders=[_order("O1", 1e308, 0)])

        assignment = engine.assign_next_order()

        assert assignment.courier is courier
        assert assignment.distance == float("inf")
        assert courier.current_load == 1

    def test_nearest_courier_seeds_from_first(self):
        far = _courier("FAR", -1e308, 0)
        also_far = _courier("ALSO_FAR", -1e308, 1)
        courier, dist = nearest_courier([far, also_far], Point(1e308, 0))
        assert courier is far
        assert dist == float("inf")


# ── Test: capacity ────────────────────────────────────────────────


class TestCapacity:
    def test_exhaustion_raises_and_leaves_state(self):
        couriers = [_courier("D1", 0, 0, load=2, cap=2), _courier("D2", 5, 5, load=1, cap=1)]
        engine = AssignmentEngine(couriers=couriers, orders=[_order("O1", 1, 1)])
        before = engine.snapshot()

        with pytest.raises(NoCapacityError, match="maximum load"):
            engine.assign_next_order()

        assert engine.snapshot() == before

    def test_load_never_exceeds_capacity(self):
        couriers = [_courier("D1", 0, 0, load=0, cap=1), _courier("D2", 50, 50, load=0, cap=2)]
        orders = [_order(f"O{i}", i, i) for i in range(5)]
        engine = AssignmentEngine(couriers=couriers, orders=orders)

        for _ in range(3):
            engine.assign_next_order()
            for c in engine.couriers:
                assert 0 <= c.current_load <= c.max_load

        with pytest.raises(NoCapacityError):
            engine.assign_next_order()
        assert len(engine.pending) == 2
        assert len(engine.assigned) == 3

    def test_invalid_courier_load_rejected(self):
        with pytest.raises(ValueError):
            _courier("BAD", 0, 0, load=4, cap=3)
        with pytest.raises(ValueError):
            _courier("BAD", 0, 0, load=-1, cap=3)


# ── Test: empty queue ─────────────────────────────────────────────


class TestEmptyQueue:
    def test_no_pending_is_noop(self):
        engine = AssignmentEngine(couriers=[_courier("D1", 0, 0)], orders=[])
        before = engine.snapshot()

        assert engine.assign_next_order() is None
        assert engine.snapshot() == before
        assert not engine.has_pending

    def test_no_pending_with_full_fleet_is_noop(self):
        """An empty queue short-circuits before the capacity check."""
        engine = AssignmentEngine(couriers=[_courier("D1", 0, 0, load=1, cap=1)], orders=[])
        assert engine.assign_next_order() is None


# ── Test: relocation ──────────────────────────────────────────────


class TestRelocation:
    def test_relocate_moves_courier(self):
        courier = _courier("D1", 0, 0)
        engine = AssignmentEngine(couriers=[courier], orders=[_order("O1", 7, 9)])
        engine.assign_next_order()
        assert courier.location == Point(7, 9)

    def test_no_relocate_keeps_location(self):
        courier = _courier("D1", 0, 0)
        engine = AssignmentEngine(
            couriers=[courier], orders=[_order("O1", 7, 9)], relocate_on_assign=False
        )
        engine.assign_next_order()
        assert courier.location == Point(0, 0)
        assert courier.current_load == 1

    @pytest.mark.parametrize("relocate, expected", [(True, "B"), (False, "A")])
    def test_relocation_changes_next_choice(self, relocate, expected):
        """B takes O1 at (50, 0); only a relocated B is then nearer O2 than A."""
        engine = AssignmentEngine(
            couriers=[_courier("A", 0, 0), _courier("B", 60, 0)],
            orders=[_order("O1", 50, 0, priority=2), _order("O2", 26, 0, priority=1)],
            relocate_on_assign=relocate,
        )
        assert engine.assign_next_order().courier.id == "B"
        assert engine.assign_next_order().courier.id == expected


# ── Test: full seed run ───────────────────────────────────────────


class TestSeedFleet:
    def test_full_run_with_relocation(self, seed_engine):
        pairs = []
        while seed_engine.has_pending:
            a = seed_engine.assign_next_order()
            pairs.append((a.order.id, a.courier.id))

        assert pairs == [
            ("O1", "D5"),
            ("O5", "D5"),
            ("O3", "D5"),
            ("O4", "D1"),
            ("O2", "D1"),
            ("O6", "D1"),
        ]
        loads = {c.id: c.current_load for c in seed_engine.couriers}
        assert loads["D5"] == 7
        assert loads["D1"] == 4

    def test_first_two_without_relocation(self):
        config = DispatchConfig(engine=EngineConfig(relocate_on_assign=False))
        engine = AssignmentEngine.from_config(config)

        assert engine.assign_next_order().courier.id == "D5"
        second = engine.assign_next_order()
        assert (second.order.id, second.courier.id) == ("O5", "D5")
        d5 = next(c for c in engine.couriers if c.id == "D5")
        assert d5.location == Point(15, 35)

    def test_partition_invariant(self, seed_engine):
        all_ids = {o.id for o in seed_engine.all_orders()}
        while seed_engine.has_pending:
            seed_engine.assign_next_order()
            pending_ids = {o.id for o in seed_engine.pending}
            assigned_ids = {o.id for o in seed_engine.assigned}
            assert pending_ids.isdisjoint(assigned_ids)
            assert pending_ids | assigned_ids == all_ids

        assert all(o.status == OrderStatus.ASSIGNED for o in seed_engine.assigned)

    def test_engines_do_not_share_state(self):
        config = DispatchConfig()
        first = AssignmentEngine.from_config(config)
        second = AssignmentEngine.from_config(config)
        first.assign_next_order()
        assert len(second.pending) == 6
        d5 = next(c for c in second.couriers if c.id == "D5")
        assert d5.current_load == 4
        assert d5.location == Point(15, 35)


# ── Test: construction ────────────────────────────────────────────


class TestConstruction:
    def test_duplicate_courier_ids_rejected(self):
        with pytest.raises(ValueError, match="Duplicate courier"):
            AssignmentEngine(couriers=[_courier("D1", 0, 0), _courier("D1", 1, 1)], orders=[])

    def test_duplicate_order_ids_rejected(self):
        with pytest.raises(ValueError, match="Duplicate order"):
            AssignmentEngine(couriers=[], orders=[_order("O1", 0, 0), _order("O1", 1, 1)])

    def test_preassigned_orders_go_to_assigned(self):
        done = _order("O1", 0, 0)
        done.assigned_to = "D1"
        engine = AssignmentEngine(couriers=[_courier("D1", 0, 0)], orders=[done, _order("O2", 1, 1)])
        assert [o.id for o in engine.assigned] == ["O1"]
        assert [o.id for o in engine.pending] == ["O2"]

    def test_collections_are_copies(self, seed_engine):
        seed_engine.pending.clear()
        seed_engine.couriers.clear()
        assert len(seed_engine.pending) == 6
        assert len(seed_engine.couriers) == 8
