"""CLI command to validate an impact-graph configuration.

Checks referential integrity of ``dependentProjects`` and reports
dependency cycles between projects. When requested, cycles fail the
process so that CI pipelines can enforce an acyclic project graph.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from impactgraph.cli.common import COMMAND_ERRORS
from impactgraph.graph.impact_graph import ProjectImpactGraph
from impactgraph.runtime.config_loader import (
    DEFAULT_CONFIG_FILENAME,
    load_impact_graph_config,
    validate_references,
)

logger = logging.getLogger("impactgraph.cli.check")


def check_command(args, console: Optional[Console] = None) -> int:
    """Execute configuration check command.

    Args:
        args: Parsed command-line arguments.
        console: Output console (defaults to stdout).

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    console = console or Console()
    config_path = Path(getattr(args, "config", None) or DEFAULT_CONFIG_FILENAME)
    limit_arg = getattr(args, "limit", None)
    fail_on_cycle = getattr(args, "fail_on_cycle", False)

    try:
        config = load_impact_graph_config(config_path, validate=False)
    except COMMAND_ERRORS as e:
        logger.error("Cannot load configuration %s: %s", config_path, e)
        return 1

    dangling = validate_references(config)
    if dangling:
        table = Table(title=f"Undefined dependent projects ({len(dangling)})")
        table.add_column("Project")
        table.add_column("Missing dependent")
        for project_id, dependent in dangling:
            table.add_row(project_id, dependent)
        console.print(table)
        logger.error("Configuration check failed: dangling dependent references")
        return 1

    graph = ProjectImpactGraph(config)

    # Interpret limit: <= 0 means "no limit".
    limit: int | None
    if isinstance(limit_arg, int) and limit_arg > 0:
        limit = limit_arg
    else:
        limit = None

    cycles: List[List[str]] = graph.expander.find_cycles(limit=limit)

    summary = Table(title=f"Impact graph: {config_path}")
    summary.add_column("Metric")
    summary.add_column("Value", justify="right")
    summary.add_row("Projects", str(len(config.projects)))
    summary.add_row("Impact edges", str(graph.expander.graph.number_of_edges()))
    summary.add_row("Excluded globs", str(len(graph.classifier.excluded_globs)))
    summary.add_row("Cycles", str(len(cycles)))
    console.print(summary)

    if not cycles:
        logger.info("Impact graph has no dependency cycles")
        return 0

    logger.warning("Detected %d cycle(s) in impact graph", len(cycles))
    for idx, cycle in enumerate(cycles, start=1):
        # Present a closed loop for readability: A -> B -> C -> A
        pretty_cycle = cycle + [cycle[0]]
        console.print(f"Cycle {idx}: {' -> '.join(pretty_cycle)}", markup=False)

    if fail_on_cycle:
        logger.error("Configuration check failed: dependency cycles detected")
        return 1

    return 0
