"""Tests for transitive impact expansion."""

import itertools

import networkx as nx
import pytest

from impactgraph.config.schema import ImpactGraphConfig
from impactgraph.errors import DanglingDependencyError, ProjectNotFoundError
from impactgraph.graph.expander import (
    ImpactExpander,
    build_impact_digraph,
    find_dangling_dependents,
)


def _config(dependents) -> ImpactGraphConfig:
    """Build a configuration from ``{project: [dependent, ...]}``."""
    return ImpactGraphConfig.from_dict(
        {
            "projects": {
                name: {
                    "includedGlobs": [f"projects/{name}"],
                    "dependentProjects": list(deps),
                }
                for name, deps in dependents.items()
            }
        }
    )


def test_expand_follows_dependents() -> None:
    """A change to A impacts C, which depends on it."""
    expander = ImpactExpander(_config({"A": ["A", "C"], "C": ["C"]}))

    assert expander.expand({"A"}) == {"A", "C"}
    assert expander.expand({"C"}) == {"C"}


def test_expand_is_transitive() -> None:
    expander = ImpactExpander(
        _config({"A": ["A", "B"], "B": ["B", "C"], "C": ["C", "D"], "D": ["D"]})
    )

    assert expander.expand({"A"}) == {"A", "B", "C", "D"}
    assert expander.expand({"C"}) == {"C", "D"}


def test_expand_terminates_on_cycles() -> None:
    expander = ImpactExpander(
        _config({"A": ["A", "B"], "B": ["B", "C"], "C": ["C", "A"], "D": ["D"]})
    )

    assert expander.expand({"B"}) == {"A", "B", "C"}


def test_seeds_are_included_without_self_loop() -> None:
    expander = ImpactExpander(_config({"A": ["B"], "B": []}))

    assert expander.expand({"A"}) == {"A", "B"}


def test_empty_and_none_seeds_expand_to_nothing() -> None:
    expander = ImpactExpander(_config({"A": ["A"]}))

    assert expander.expand(set()) == set()
    assert expander.expand(None) == set()


def test_unknown_seed_fails_fast() -> None:
    expander = ImpactExpander(_config({"A": ["A"]}))

    with pytest.raises(ProjectNotFoundError) as exc_info:
        expander.expand({"A", "missing"})

    assert exc_info.value.project_id == "missing"
    assert "missing" in str(exc_info.value)


def test_dangling_dependent_is_rejected_at_construction() -> None:
    config = _config({"A": ["A", "ghost"], "B": ["B", "phantom"]})

    assert find_dangling_dependents(config) == [("A", "ghost"), ("B", "phantom")]
    with pytest.raises(DanglingDependencyError) as exc_info:
        ImpactExpander(config)

    assert exc_info.value.dangling == [("A", "ghost"), ("B", "phantom")]
    assert "A -> ghost" in str(exc_info.value)


def test_expand_does_not_mutate_configuration() -> None:
    config = _config({"A": ["A", "B"], "B": ["B"]})
    before = config.model_dump()
    expander = ImpactExpander(config)

    expander.expand({"A"})
    expander.expand({"A", "B"})

    assert config.model_dump() == before
    assert expander.expand({"A"}) == {"A", "B"}


def test_impact_digraph_is_frozen() -> None:
    graph = build_impact_digraph(_config({"A": ["A", "B"], "B": ["B"]}))

    assert graph.has_edge("A", "B")
    with pytest.raises(nx.NetworkXError):
        graph.add_edge("B", "A")


def test_find_cycles_ignores_self_loops() -> None:
    expander = ImpactExpander(
        _config({"A": ["A", "B"], "B": ["B", "A"], "C": ["C"]})
    )

    cycles = expander.find_cycles()

    assert len(cycles) == 1
    assert sorted(cycles[0]) == ["A", "B"]


def test_find_cycles_respects_limit() -> None:
    expander = ImpactExpander(
        _config({"A": ["B"], "B": ["A"], "C": ["D"], "D": ["C"]})
    )

    assert len(expander.find_cycles(limit=1)) == 1
    assert len(expander.find_cycles(limit=0)) == 2


def test_expand_properties_hold_for_every_subset() -> None:
    """Self-inclusion, monotonicity and idempotence over a small DAG."""
    dependents = {
        "A": ["A", "B", "C"],
        "B": ["B", "D"],
        "C": ["C", "D"],
        "D": ["D"],
        "E": ["E", "A"],
    }
    expander = ImpactExpander(_config(dependents))
    projects = sorted(dependents)

    for project in projects:
        assert project in expander.expand({project})

    subsets = [
        set(combo)
        for size in range(len(projects) + 1)
        for combo in itertools.combinations(projects, size)
    ]
    for s1, s2 in itertools.combinations(subsets[:12], 2):
        assert expander.expand(s1 | s2) >= expander.expand(s1) | expander.expand(s2)
    for subset in subsets:
        closure = expander.expand(subset)
        assert expander.expand(closure) == closure


def test_single_string_seed_is_rejected() -> None:
    expander = ImpactExpander(_config({"A": ["A"]}))

    with pytest.raises(TypeError):
        expander.expand("A")
