"""Public graph API surface."""

from impactgraph.graph.classifier import (
    ClassificationResult,
    PathClassifier,
    glob_depth,
    glob_specificity,
)
from impactgraph.graph.expander import (
    ImpactExpander,
    build_impact_digraph,
    find_dangling_dependents,
)
from impactgraph.graph.impact_graph import ProjectImpactGraph

__all__ = [
    "ClassificationResult",
    "ImpactExpander",
    "PathClassifier",
    "ProjectImpactGraph",
    "build_impact_digraph",
    "find_dangling_dependents",
    "glob_depth",
    "glob_specificity",
]
