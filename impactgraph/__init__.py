"""Impactgraph - monorepo change impact analysis.

Decides whether two sets of changed paths can affect overlapping projects
of a monorepo, so that CI jobs for them may safely run independently.
"""

from impactgraph.config import ImpactGraphConfig, ProjectConfig
from impactgraph.errors import (
    ConfigurationError,
    DanglingDependencyError,
    ImpactGraphError,
    ProjectNotFoundError,
)
from impactgraph.graph import (
    ClassificationResult,
    ImpactExpander,
    PathClassifier,
    ProjectImpactGraph,
)
from impactgraph.runtime import load_impact_graph_config

__all__ = [
    "ClassificationResult",
    "ConfigurationError",
    "DanglingDependencyError",
    "ImpactExpander",
    "ImpactGraphConfig",
    "ImpactGraphError",
    "PathClassifier",
    "ProjectConfig",
    "ProjectImpactGraph",
    "ProjectNotFoundError",
    "load_impact_graph_config",
]
