"""Benchmark command: time impact-intersection queries on synthetic graphs."""

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table

from impactgraph.benchmark.runner import (
    DEFAULT_CASES,
    BenchmarkCase,
    run_benchmark,
    write_report,
)

logger = logging.getLogger("impactgraph.cli.benchmark")


def benchmark_command(args, console: Optional[Console] = None) -> int:
    """Execute benchmark command.

    Args:
        args: Parsed command-line arguments.
        console: Output console (defaults to stdout).

    Returns:
        int: Exit code.
    """
    console = console or Console()
    try:
        cases = [BenchmarkCase.parse(case) for case in args.case or []]
    except ValueError as e:
        logger.error("%s", e)
        return 1

    try:
        results = run_benchmark(cases or DEFAULT_CASES, seed=args.seed)
    except ValueError as e:
        logger.error("Benchmark failed: %s", e)
        return 1

    table = Table(title="Impact intersection benchmark")
    columns = ("Nodes", "Edges", "Paths A", "Paths B", "Intersects", "Build (s)", "Query (s)")
    for column in columns:
        table.add_column(column, justify="right")
    for result in results:
        case = result.case
        table.add_row(
            str(case.node_count),
            str(case.edge_count),
            str(case.path_count_a),
            str(case.path_count_b),
            str(result.has_impact_intersection),
            f"{result.build_seconds:.4f}",
            f"{result.query_seconds:.4f}",
        )
    console.print(table)

    if args.output:
        try:
            write_report(results, Path(args.output))
        except OSError as e:
            logger.error("Cannot write benchmark report: %s", e)
            return 1

    return 0
