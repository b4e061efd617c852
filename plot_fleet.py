"""
Generate delivery map diagrams.

Plots couriers and pending order destinations, optionally after assigning
some orders first. Outputs a PNG file to the current directory.

Usage:
    python plot_fleet.py                          # Default config
    python plot_fleet.py --config path/to/config.yaml
    python plot_fleet.py --output my_map.png
    python plot_fleet.py --query O1               # Highlight matching orders
    python plot_fleet.py --assign 3               # Plot after three assignments
"""

import argparse
from pathlib import Path

from src.dispatch.config import load_config, DispatchConfig
from src.dispatch.engine import AssignmentEngine
from src.dispatch.models import NoCapacityError
from src.analysis.visualizations import plot_fleet


def main():
    """Main function"""

    parser = argparse.ArgumentParser(
        description="Generate delivery map diagrams",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to dispatch YAML config (default: config/default_dispatch.yaml)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default="delivery_map.png",
        help="Output PNG filename (default: delivery_map.png)",
    )
    parser.add_argument("--title", "-t", type=str, default=None, help="Custom plot title")
    parser.add_argument(
        "--query", "-q", type=str, default="", help="Highlight orders whose ID contains this"
    )
    parser.add_argument(
        "--assign", type=int, default=0, help="Assign this many orders before plotting"
    )
    parser.add_argument(
        "--dpi",
        type=int,
        default=150,
        help="Output image resolution (default: 150)",
    )
    args = parser.parse_args()

    # ── Load config ──────────────────────────────────────────────
    config_path = args.config
    if config_path is None:
        default_path = Path(__file__).parent / "config" / "default_dispatch.yaml"
        if default_path.exists():
            config_path = str(default_path)

    if config_path:
        print(f"Loading config from: {config_path}")
        config = load_config(config_path)
    else:
        print("Using default config (no YAML found)")
        config = DispatchConfig()

    # ── Build engine, optionally advance it ──────────────────────
    engine = AssignmentEngine.from_config(config)
    for _ in range(args.assign):
        try:
            assignment = engine.assign_next_order()
        except NoCapacityError as e:
            print(f"\n⚠️  {e}")
            break
        if assignment is None:
            break
        print(f"  {assignment.order.id} → {assignment.courier.id} ({assignment.distance:.1f})")

    # ── Generate map ─────────────────────────────────────────────
    title = args.title or (
        f"Delivery Map — {len(engine.couriers)} Couriers, {len(engine.pending)} Pending Orders"
    )
    fig = plot_fleet(engine.couriers, engine.pending, query=args.query, title=title)
    output_path = Path(args.output)
    fig.savefig(output_path, dpi=args.dpi, bbox_inches="tight")
    print(f"\n📊 Map saved: {output_path}")

    print("\nDone.")


if __name__ == "__main__":
    main()
