"""Impact command: expand projects into their impact closure."""

import json
import logging
from typing import Optional

from rich.console import Console

from impactgraph.cli.common import COMMAND_ERRORS, load_graph

logger = logging.getLogger("impactgraph.cli.impact")


def impact_command(args, console: Optional[Console] = None) -> int:
    """Execute impact command.

    Args:
        args: Parsed command-line arguments.
        console: Output console (defaults to stdout).

    Returns:
        int: Exit code.
    """
    console = console or Console()
    try:
        graph = load_graph(args.config)
        impact = graph.get_project_impact_by_project_names(args.projects)
    except COMMAND_ERRORS as e:
        logger.error("Impact expansion failed: %s", e)
        return 1

    if getattr(args, "json", False):
        console.print_json(json.dumps({"impact": sorted(impact)}))
        return 0

    console.print(f"[bold]Impacted projects ({len(impact)}):[/bold]")
    for project in sorted(impact):
        console.print(f"  {project}", markup=False)
    return 0
