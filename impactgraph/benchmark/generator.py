"""Synthetic impact-graph generation for performance testing.

Generates random dependency DAGs that resemble a monorepo, turns them into
impact-graph configurations and produces changed-path lists to query them.
"""

import logging
import random
from typing import List, Optional

import networkx as nx

from impactgraph.config.schema import ImpactGraphConfig, ProjectConfig

logger = logging.getLogger("impactgraph.benchmark.generator")

GLOBAL_EXCLUDED_GLOBS = ("OWNERS", "build.sh", "bootstrap.sh", "common/autoinstallers")

# Attempts to find a fresh target before giving up on a random edge source
MAX_EDGE_RETRIES = 3


def project_name(node_id: int) -> str:
    return f"project_{node_id}"


def project_folder(node_id: int) -> str:
    return f"projects/folder_{node_id}"


def generate_dag(
    node_count: int, edge_count: int, rng: Optional[random.Random] = None
) -> nx.DiGraph:
    """Return a random DAG modelling a monorepo's dependency relations.

    Node ids are ``0 .. node_count - 1``. An edge ``u -> v`` means v depends
    on u (the impacted-by direction). The graph starts as a chain
    ``0 -> 1 -> ... -> n-1`` so every node is connected; the remaining edges
    always point from a lower id to a higher id, which keeps it acyclic.

    Args:
        node_count: Number of projects.
        edge_count: Number of dependency relations, chain included.
        rng: Random source; a fresh unseeded one when omitted.

    Raises:
        ValueError: If the edge count cannot connect all nodes or exceeds
            the number of possible edges.
    """
    if edge_count < node_count - 1:
        raise ValueError("Edges are not enough to connect all nodes")
    if edge_count > node_count * (node_count - 1) // 2:
        raise ValueError("Too many edges")
    rng = rng or random.Random()

    dag = nx.DiGraph()
    dag.add_nodes_from(range(node_count))
    nx.add_path(dag, range(node_count))

    remaining = edge_count - max(node_count - 1, 0)
    while remaining > 0:
        dependent = rng.randrange(node_count)
        if dependent == 0:
            continue
        dependency = rng.randrange(dependent)
        tries = 0
        while dag.has_edge(dependency, dependent) and tries < MAX_EDGE_RETRIES:
            dependency = rng.randrange(dependent)
            tries += 1
        if dag.has_edge(dependency, dependent):
            continue
        dag.add_edge(dependency, dependent)
        remaining -= 1

    logger.debug(
        "Generated DAG: %d nodes, %d edges",
        dag.number_of_nodes(),
        dag.number_of_edges(),
    )
    return dag


def build_config(dag: nx.DiGraph) -> ImpactGraphConfig:
    """Turn a generated DAG into an impact-graph configuration."""
    projects = {}
    for node_id in dag.nodes:
        dependents = [project_name(node_id)]
        dependents.extend(project_name(succ) for succ in dag.successors(node_id))
        projects[project_name(node_id)] = ProjectConfig(
            included_globs=(project_folder(node_id),),
            excluded_globs=(f"{project_folder(node_id)}/README.md",),
            dependent_projects=tuple(dependents),
        )
    return ImpactGraphConfig(
        global_excluded_globs=GLOBAL_EXCLUDED_GLOBS,
        projects=projects,
    )


def generate_paths(path_count: int) -> List[str]:
    """Return ``path_count`` changed paths, one per project folder."""
    return [
        f"{project_folder(node_id)}/index.ts"
        for node_id in range(path_count - 1, -1, -1)
    ]
