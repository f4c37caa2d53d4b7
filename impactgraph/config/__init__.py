"""Configuration schema for impactgraph."""

from .schema import ImpactGraphConfig, ProjectConfig

__all__ = [
    "ImpactGraphConfig",
    "ProjectConfig",
]
