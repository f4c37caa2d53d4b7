"""Helpers shared by CLI commands."""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from impactgraph.errors import ImpactGraphError
from impactgraph.graph.impact_graph import ProjectImpactGraph
from impactgraph.runtime.config_loader import DEFAULT_CONFIG_FILENAME

logger = logging.getLogger("impactgraph.cli.common")

# Errors a command reports and turns into an exit code
COMMAND_ERRORS = (ImpactGraphError, OSError, ValueError)


def load_graph(config_arg: Optional[str]) -> ProjectImpactGraph:
    """Build the impact graph from the ``config`` CLI argument.

    Defaults to ``project-impact-graph.yaml`` in the working directory.
    """
    config_path = Path(config_arg or DEFAULT_CONFIG_FILENAME).expanduser()
    logger.debug("Using impact-graph configuration: %s", config_path)
    return ProjectImpactGraph.from_file(config_path)


def read_path_file(path: str) -> List[str]:
    """Read changed paths, one per line, skipping blank lines."""
    text = Path(path).expanduser().read_text(encoding="utf-8")
    return [line.strip() for line in text.splitlines() if line.strip()]


def collect_paths(
    inline: Optional[Iterable[str]], path_file: Optional[str]
) -> List[str]:
    """Combine paths given on the command line with those from a file."""
    paths = list(inline or [])
    if path_file:
        paths.extend(read_path_file(path_file))
    return paths
