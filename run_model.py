#!/usr/bin/env python3
"""
Run the policy space coalition model and print the ranking.

Usage:
    python run_model.py                       # Built-in parties, default step
    python run_model.py --step 0.05           # Finer grid
    python run_model.py --parties file.csv    # Parties from CSV (id,lr,conlib,seats)
    python run_model.py --workers 4           # Shard the grid scan
    python run_model.py --all                 # Include non-majority covering sets
    python run_model.py --export              # Write coalitions.csv and HTML charts
"""

import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

import polars as pl

from policy_space import CoalitionAggregator, CoalitionModel, PartyTable, PivotCalculator, ReportService
from policy_space.errors import ValidationError
from policy_space.models import GridSpec
from policy_space.services import ModelResult
from settings import GRID_BOUNDS, GRID_STEP, OUTPUT_DIR, PARTIES_PATH, WORKERS
from settings.logging import setup_logging
from web import charts

logger = setup_logging(to_file=True)


def _option(args: list[str], name: str, cast, default):
    """Value following `name` in args, or default."""
    if name not in args:
        return default
    i = args.index(name)
    if i + 1 >= len(args):
        print(__doc__)
        sys.exit(1)
    return cast(args[i + 1])


def print_report(result: ModelResult, show_all: bool = False):
    """Print pivot, ranking and narrative."""
    rows = result.buckets if show_all else result.ranking

    print("\n" + "=" * 60)
    print("POLICY SPACE COALITIONS")
    print("=" * 60)
    print(f"\nSeats: {result.table.total_seats}  Majority: {result.threshold}")
    print(f"Pivot: ({result.pivot.x:.2f}, {result.pivot.y:.2f})  "
          f"pivot parties: {result.pivot_parties['lr']} / {result.pivot_parties['conlib']}")
    print(f"Grid: {result.sample.num_x} x {result.sample.num_y} points, step {result.sample.grid.step}")

    print("\nRadii:")
    for p in result.parties:
        print(f"  {p.id:<10} ({p.lr:5.1f}, {p.conlib:5.1f})  seats {p.seats:>4}  radius {p.radius:6.2f}")

    print("\nCoalitions:" if not show_all else "\nCovering sets:")
    if not rows:
        print("  (none)")
    for i, b in enumerate(rows, 1):
        flag = "" if b.majority else "  (minority)"
        print(f"  {i:>3}. {b.label:<40} {b.percent:6.2f}%{flag}")

    print("\n" + result.report)
    print("=" * 60 + "\n")


def export(result: ModelResult, out_dir: Path):
    """Write the coalition table and charts."""
    out_dir.mkdir(parents=True, exist_ok=True)

    table = CoalitionAggregator.to_frame(result.buckets).with_columns(pl.col("parties").list.join("+"))
    table.write_csv(out_dir / "coalitions.csv")

    parties = [p.to_dict() for p in result.parties]
    frame = result.sample.frame
    grid = {
        "x": frame["x"].to_list(),
        "y": frame["y"].to_list(),
        "seats": frame["seats"].to_list(),
        "majority": frame["majority"].to_list(),
    }
    ranking = [{"label": b.label, "percent": b.percent} for b in result.ranking]

    charts.positions_chart(parties, (result.pivot.x, result.pivot.y), "Indifference circles").write_html(
        out_dir / "positions.html"
    )
    charts.majority_chart(grid, "Majority-held points").write_html(out_dir / "majority.html")
    charts.coalition_chart(ranking, title="Majority coalitions by area share").write_html(out_dir / "coalitions.html")
    logger.info("Exported coalition table and charts to {}", out_dir)


def main():
    args = sys.argv[1:]

    if "-h" in args or "--help" in args:
        print(__doc__)
        return

    step = _option(args, "--step", float, GRID_STEP)
    workers = _option(args, "--workers", int, WORKERS)
    path = _option(args, "--parties", str, PARTIES_PATH)

    try:
        table = PartyTable.from_csv(path) if path else PartyTable.default()
        grid = GridSpec(*GRID_BOUNDS, step=step) if GRID_BOUNDS else None

        model = CoalitionModel(
            pivot_calculator=PivotCalculator(),
            aggregator=CoalitionAggregator(),
            report=ReportService(),
        )
        result = model.run(table, grid=grid, step=step, workers=workers)
    except ValidationError as e:
        logger.error("Invalid input ({}): {}", e.field, e.message)
        sys.exit(2)

    print_report(result, show_all="--all" in args)

    if "--export" in args:
        export(result, OUTPUT_DIR)


if __name__ == "__main__":
    main()
