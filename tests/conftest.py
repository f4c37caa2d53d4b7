"""Shared fixtures for impactgraph tests."""

from pathlib import Path

import pytest

from impactgraph.graph import ProjectImpactGraph

FIXTURES = Path(__file__).parent / "fixtures"
SAMPLE_CONFIG = FIXTURES / "project-impact-graph.yaml"


@pytest.fixture
def sample_config_path() -> Path:
    """Path of the sample ``project-impact-graph.yaml``."""
    return SAMPLE_CONFIG


@pytest.fixture
def sample_graph() -> ProjectImpactGraph:
    """Impact graph built from the sample configuration."""
    return ProjectImpactGraph.from_file(SAMPLE_CONFIG)
