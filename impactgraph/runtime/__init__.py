"""Configuration loading for impactgraph."""

from impactgraph.runtime.config_loader import (
    DEFAULT_CONFIG_FILENAME,
    dump_impact_graph_config,
    load_impact_graph_config,
    validate_references,
)

__all__ = [
    "DEFAULT_CONFIG_FILENAME",
    "dump_impact_graph_config",
    "load_impact_graph_config",
    "validate_references",
]
