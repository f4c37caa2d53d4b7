"""Lookup command: classify changed paths into owning projects."""

import json
import logging
from typing import Optional

from rich.console import Console

from impactgraph.cli.common import COMMAND_ERRORS, collect_paths, load_graph

logger = logging.getLogger("impactgraph.cli.lookup")


def lookup_command(args, console: Optional[Console] = None) -> int:
    """Execute lookup command.

    Args:
        args: Parsed command-line arguments.
        console: Output console (defaults to stdout).

    Returns:
        int: Exit code.
    """
    console = console or Console()
    try:
        graph = load_graph(args.config)
        paths = collect_paths(args.paths, getattr(args, "paths_file", None))
        projects, unmatched = graph.look_up_project_names_by_path_list(paths)
    except COMMAND_ERRORS as e:
        logger.error("Lookup failed: %s", e)
        return 1

    if getattr(args, "json", False):
        console.print_json(
            json.dumps({"projects": sorted(projects), "unmatched": unmatched})
        )
        return 0

    console.print(f"[bold]Projects ({len(projects)}):[/bold]")
    for project in sorted(projects):
        console.print(f"  {project}", markup=False)
    console.print(f"[bold]Unmatched paths ({len(unmatched)}):[/bold]")
    for path in unmatched:
        console.print(f"  {path}", markup=False)
    return 0
