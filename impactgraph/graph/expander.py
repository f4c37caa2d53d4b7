"""Transitive impact expansion over the project dependency graph.

Edges point in the "impacted-by" direction: ``A -> C`` means C depends on
A, so a change to A impacts C. The graph is built once from the
configuration and frozen; expansion keeps its own visited set and never
touches the configuration.
"""

import logging
from collections import deque
from typing import Deque, Iterable, List, Optional, Set, Tuple

import networkx as nx

from impactgraph.config.schema import ImpactGraphConfig
from impactgraph.errors import DanglingDependencyError, ProjectNotFoundError

logger = logging.getLogger("impactgraph.graph.expander")


def find_dangling_dependents(config: ImpactGraphConfig) -> List[Tuple[str, str]]:
    """Return ``(project_id, dependent_id)`` pairs naming unknown projects."""
    return [
        (project_id, dependent)
        for project_id, project in config.iter_projects()
        for dependent in project.dependent_projects
        if dependent not in config.projects
    ]


def build_impact_digraph(config: ImpactGraphConfig) -> nx.DiGraph:
    """Build a frozen DiGraph of projects with project -> dependent edges.

    Raises:
        DanglingDependencyError: If any dependent reference does not resolve.
    """
    dangling = find_dangling_dependents(config)
    if dangling:
        raise DanglingDependencyError(dangling)

    graph = nx.DiGraph()
    graph.add_nodes_from(config.projects)
    for project_id, project in config.iter_projects():
        for dependent in project.dependent_projects:
            graph.add_edge(project_id, dependent)
    return nx.freeze(graph)


class ImpactExpander:
    """Computes impact closures: seeds plus everything depending on them."""

    def __init__(self, config: ImpactGraphConfig) -> None:
        """Initialize expander.

        Args:
            config: Impact-graph configuration (not modified).

        Raises:
            DanglingDependencyError: If the configuration references
                undefined dependent projects.
        """
        self._graph = build_impact_digraph(config)
        logger.debug(
            "ImpactExpander initialized: %d projects, %d impact edges",
            self._graph.number_of_nodes(),
            self._graph.number_of_edges(),
        )

    @property
    def graph(self) -> nx.DiGraph:
        """Frozen project graph (project -> dependent)."""
        return self._graph

    def expand(self, seed_project_ids: Optional[Iterable[str]]) -> Set[str]:
        """Expand seed projects into their full impact closure.

        Breadth-first traversal: each project is enqueued at most once,
        guarded by membership in the result set, so cycles and self-loops
        terminate.

        Args:
            seed_project_ids: Directly touched projects. None is treated as
                an empty set.

        Returns:
            Set of impacted project identifiers, including the seeds.

        Raises:
            ProjectNotFoundError: If a seed is not a configured project.
            TypeError: If the seeds are a single string rather than a
                collection of identifiers.
        """
        if isinstance(seed_project_ids, str):
            raise TypeError(
                "Expected a collection of project identifiers, got a single "
                f"string: {seed_project_ids!r}"
            )
        impact: Set[str] = set()
        queue: Deque[str] = deque()
        for project_id in seed_project_ids or ():
            if project_id not in self._graph:
                raise ProjectNotFoundError(project_id)
            if project_id not in impact:
                impact.add(project_id)
                queue.append(project_id)

        while queue:
            current = queue.popleft()
            for dependent in self._graph.successors(current):
                if dependent not in impact:
                    impact.add(dependent)
                    queue.append(dependent)

        logger.debug("Expanded impact closure to %d project(s)", len(impact))
        return impact

    def find_cycles(self, limit: Optional[int] = None) -> List[List[str]]:
        """Enumerate dependency cycles, ignoring self-loops.

        Args:
            limit: Maximum number of cycles to return; None or <= 0 for all.

        Returns:
            List of cycles, each a list of project identifiers.
        """
        cycles: List[List[str]] = []
        max_cycles = limit if limit and limit > 0 else None
        for cycle in nx.simple_cycles(self._graph):
            if len(cycle) < 2:
                continue
            cycles.append([str(node) for node in cycle])
            if max_cycles and len(cycles) >= max_cycles:
                break
        return cycles
