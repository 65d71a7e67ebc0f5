"""Entrypoint for computing the lowest total risk through a grid file."""

from __future__ import annotations

import argparse
from pathlib import Path
import sys
from typing import List, Optional, Tuple

import yaml

from risk_path.src.core.errors import (
    IndexOutOfRangeError,
    InvalidParameterError,
    MalformedInputError,
)
from risk_path.src.core.expander import expand_grid
from risk_path.src.core.grid import Grid
from risk_path.src.data.grid_loader import load_grid
from risk_path.src.evaluation.report import SolveReport, Stopwatch, format_report
from risk_path.src.graph.adjacency import AdjacencyGraph
from risk_path.src.search.dijkstra import INFINITY, shortest_path
from risk_path.src.utils import config_loader
from risk_path.src.utils.logger import get_logger


def solve_and_report(
    grid: Grid, label: str, show_timing: bool = True
) -> Tuple[SolveReport, List[int]]:
    """Solve ``grid`` corner to corner and print the report lines."""
    graph = AdjacencyGraph.build(grid)
    source = graph.source_vertex()
    target = graph.target_vertex()
    with Stopwatch() as watch:
        distances = shortest_path(graph, source, target)
    report = SolveReport(
        label=label,
        source=source,
        target=target,
        vertex_count=graph.vertex_count(),
        total_risk=distances[target],
        elapsed_ms=watch.elapsed_ms,
        reachable=distances[target] != INFINITY,
    )
    for line in format_report(report, show_timing=show_timing):
        print(line)
    return report, distances


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find the lowest total risk through a grid")
    parser.add_argument("grid_file", type=Path, help="Text file with one row of digits per line")
    parser.add_argument("--tiles", type=int, default=None, help="Tile count for the expanded grid")
    parser.add_argument(
        "--skip-expanded", action="store_true", help="Only solve the grid as given"
    )
    parser.add_argument("--config", type=Path, default=None, help="YAML or JSON config file")
    parser.add_argument("--plot", type=Path, default=None, help="Save a distance heatmap here")
    parser.add_argument("--log-file", type=str, default=None, help="Also write logs to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = config_loader.load_solver_config(args.config)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        print(f"[ERROR] Failed to load config: {exc}", file=sys.stderr)
        return 1
    logger = get_logger(
        "risk_path", file_path=args.log_file or config.get("log_file"), level=config["log_level"]
    )
    show_timing = config["show_timing"]
    tile_count = args.tiles if args.tiles is not None else config["tile_count"]

    try:
        grid = load_grid(args.grid_file)
        logger.info("loaded %s with shape %s", args.grid_file, grid.shape())

        print("Part one:")
        _, distances = solve_and_report(grid, "Original grid", show_timing)

        solved = grid
        if not args.skip_expanded:
            print()
            print("Part two (expanded grid):")
            with Stopwatch() as watch:
                # expanded once, kept for the solve and the optional plot
                expanded = expand_grid(grid, tile_count)
            if show_timing:
                print(f"Expansion took {watch.elapsed_ms:.3f}ms.")
            _, distances = solve_and_report(
                expanded, f"Expanded grid ({tile_count}x{tile_count} tiles)", show_timing
            )
            solved = expanded
    except (OSError, MalformedInputError, InvalidParameterError, IndexOutOfRangeError) as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1

    if args.plot is not None:
        from risk_path.src.data.visualization import plot_distance_field

        plot_distance_field(solved, distances, path=args.plot, unreached=INFINITY, close=True)
        logger.info("distance heatmap written to %s", args.plot)
    return 0


if __name__ == "__main__":
    sys.exit(main())
