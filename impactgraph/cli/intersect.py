"""Intersect command: decide whether two changesets are independent.

Exit codes make the command usable directly as a CI gate:

* 0 - impact closures are disjoint, the jobs may run independently
* 1 - the changesets may impact overlapping projects
* 2 - the query could not be answered
"""

import json
import logging
from typing import Optional

from rich.console import Console

from impactgraph.cli.common import COMMAND_ERRORS, collect_paths, load_graph

logger = logging.getLogger("impactgraph.cli.intersect")

EXIT_INDEPENDENT = 0
EXIT_INTERSECTING = 1
EXIT_ERROR = 2


def intersect_command(args, console: Optional[Console] = None) -> int:
    """Execute intersect command.

    Args:
        args: Parsed command-line arguments.
        console: Output console (defaults to stdout).

    Returns:
        int: Exit code.
    """
    console = console or Console()
    try:
        graph = load_graph(args.config)
        paths_a = collect_paths(args.a, getattr(args, "a_file", None))
        paths_b = collect_paths(args.b, getattr(args, "b_file", None))
        intersects = graph.has_impact_intersection(paths_a, paths_b)
    except COMMAND_ERRORS as e:
        logger.error("Intersection check failed: %s", e)
        return EXIT_ERROR

    if getattr(args, "json", False):
        console.print_json(json.dumps({"has_impact_intersection": intersects}))
    elif intersects:
        console.print("[yellow]Changesets may impact overlapping projects[/yellow]")
    else:
        console.print("[green]Changesets are independent[/green]")

    return EXIT_INTERSECTING if intersects else EXIT_INDEPENDENT
