"""
Quick-run script for the delivery dispatch demo.

Usage:
    python run_dispatch.py                          # assign every pending order
    python run_dispatch.py --steps 2                # assign two orders
    python run_dispatch.py --no-relocate            # couriers stay where they are
    python run_dispatch.py --distances              # print courier/order distances first
    python run_dispatch.py --config config/default_dispatch.yaml

Prints each assignment and the final fleet table to stdout.
"""

import argparse
from pathlib import Path

from src.dispatch.config import load_config, DispatchConfig, EngineConfig
from src.dispatch.engine import AssignmentEngine
from src.dispatch.models import NoCapacityError
from src.analysis.queries import distance_matrix


def print_distances(engine: AssignmentEngine) -> None:
    """Print the courier x pending-order distance table."""
    couriers = engine.couriers
    pending = engine.pending
    dist = distance_matrix(couriers, pending)

    print(f"\n{'Courier':<10}" + "".join(f"{o.id:>8}" for o in pending))
    for i, courier in enumerate(couriers):
        print(f"{courier.id:<10}" + "".join(f"{d:>8.1f}" for d in dist[i]))


def main():
    """Main function that runs if the file is run directly."""

    parser = argparse.ArgumentParser(description="Run delivery dispatch demo")
    parser.add_argument(
        "--config",
        type=str,
        default="config/default_dispatch.yaml",
        help="Path to dispatch config YAML",
    )
    parser.add_argument(
        "--steps", type=int, default=None, help="Number of orders to assign (default: all)"
    )
    parser.add_argument(
        "--no-relocate",
        action="store_true",
        help="Keep couriers at their location after assignment (overrides config)",
    )
    parser.add_argument("--distances", action="store_true", help="Print distance table first")
    args = parser.parse_args()

    # Load config
    config_path = Path(args.config)
    if config_path.exists():
        config = load_config(config_path)
        print(f"Loaded config from {config_path}")
    else:
        print(f"Config {config_path} not found, using defaults")
        config = DispatchConfig()

    # Apply CLI overrides
    if args.no_relocate:
        config = DispatchConfig(
            engine=EngineConfig(relocate_on_assign=False),
            server=config.server,
            fleet=config.fleet,
        )

    engine = AssignmentEngine.from_config(config)
    print(
        f"Starting dispatch: {len(engine.couriers)} couriers, "
        f"{len(engine.pending)} pending orders, "
        f"relocate={'on' if engine.relocate_on_assign else 'off'}"
    )

    if args.distances:
        print_distances(engine)

    # Run
    steps = args.steps if args.steps is not None else len(engine.pending)
    print()
    for step in range(1, steps + 1):
        try:
            assignment = engine.assign_next_order()
        except NoCapacityError as exc:
            print(f"  Step {step}: {exc}")
            break
        if assignment is None:
            print(f"  Step {step}: no pending orders")
            break
        print(
            f"  Step {step}: {assignment.order.id} (priority {assignment.order.priority}, "
            f"{assignment.order.customer}) -> {assignment.courier.id} "
            f"{assignment.courier.name} [{assignment.distance:.2f}]"
        )

    # Print fleet breakdown
    print(f"\n{'=' * 60}")
    print("Courier Fleet Summary:")
    print(f"{'=' * 60}")
    print(f"{'ID':<6} {'Name':<10} {'Load':>7} {'Util%':>6} {'Location':>16}")
    print(f"{'-' * 6} {'-' * 10} {'-' * 7} {'-' * 6} {'-' * 16}")
    for courier in engine.couriers:
        load = f"{courier.current_load}/{courier.max_load}"
        location = f"({courier.location.x:g}, {courier.location.y:g})"
        print(
            f"{courier.id:<6} {courier.name:<10} {load:>7} "
            f"{courier.load_fraction * 100:>5.1f}% {location:>16}"
        )

    print(f"\nPending:  {', '.join(o.id for o in engine.pending) or '-'}")
    print(f"Assigned: {', '.join(f'{o.id}->{o.assigned_to}' for o in engine.assigned) or '-'}")


if __name__ == "__main__":
    main()
