"""Tests for the ProjectImpactGraph facade and the intersection oracle."""

import pytest

from impactgraph.config.schema import ImpactGraphConfig, ProjectConfig
from impactgraph.errors import DanglingDependencyError, ProjectNotFoundError
from impactgraph.graph import ProjectImpactGraph

MOCK_PATH_LIST = [
    "OWNERS",
    "build.sh",
    "bootstrap.sh",
    "common/autoinstallers/temp",
    "projects/folder_A/index.ts",
    "projects/folder_A/README.md",
    "projects/folder_B/sub_module/package.json",
]
# Paths outside every project and not covered by globalExcludedGlobs
PATHS_OUTSIDE_PROJECTS = ["rush.json", "pnpm-lock.yaml"]


def _two_project_graph() -> ProjectImpactGraph:
    return ProjectImpactGraph(
        ImpactGraphConfig.from_dict(
            {
                "projects": {
                    "A": {"includedGlobs": ["projects/a"], "dependentProjects": ["A"]},
                    "B": {"includedGlobs": ["projects/b"], "dependentProjects": ["B"]},
                }
            }
        )
    )


def test_get_project_by_project_name(sample_graph: ProjectImpactGraph) -> None:
    project = sample_graph.get_project_by_project_name("A")

    assert project.included_globs == ("projects/folder_A",)
    assert project.excluded_globs == ("projects/folder_A/README.md",)
    assert "A" in project.dependent_projects


def test_get_project_by_unknown_name_raises(sample_graph: ProjectImpactGraph) -> None:
    with pytest.raises(ProjectNotFoundError):
        sample_graph.get_project_by_project_name("Z")
    # Also usable where a KeyError is expected
    with pytest.raises(KeyError):
        sample_graph.get_project_by_project_name("Z")


def test_look_up_project_names_by_path_list(sample_graph: ProjectImpactGraph) -> None:
    """Excluded paths vanish; the nested sub-project wins over its parent."""
    project_names, unmatched = sample_graph.look_up_project_names_by_path_list(
        MOCK_PATH_LIST
    )

    assert project_names == {"A", "B_subProject"}
    assert unmatched == []


def test_get_project_impact_by_project_names(sample_graph: ProjectImpactGraph) -> None:
    impact = sample_graph.get_project_impact_by_project_names(["A", "B"])

    assert impact == {"A", "B", "E", "G", "H", "F", "M"}


def test_get_project_impact_by_path_list(sample_graph: ProjectImpactGraph) -> None:
    impact, unmatched = sample_graph.get_project_impact_by_path_list(
        ["projects/folder_B/sub_module/x", "unknown/file"]
    )

    assert impact == {"B_subProject", "B", "H", "M"}
    assert unmatched == ["unknown/file"]


def test_paths_outside_projects_force_intersection(
    sample_graph: ProjectImpactGraph,
) -> None:
    assert sample_graph.has_impact_intersection(MOCK_PATH_LIST, PATHS_OUTSIDE_PROJECTS)


def test_shared_dependent_means_intersection(sample_graph: ProjectImpactGraph) -> None:
    """A and C are both depended on by G."""
    assert sample_graph.has_impact_intersection(
        ["projects/folder_A/index.ts"], ["projects/folder_C/index.ts"]
    )


def test_disjoint_closures_do_not_intersect(sample_graph: ProjectImpactGraph) -> None:
    assert not sample_graph.has_impact_intersection(
        ["projects/folder_E/index.ts"], ["projects/folder_K/index.ts"]
    )


def test_transitive_dependent_means_intersection(
    sample_graph: ProjectImpactGraph,
) -> None:
    """A change to A reaches F through E."""
    assert sample_graph.has_impact_intersection(
        ["projects/folder_A/index.ts"], ["projects/folder_F/index.ts"]
    )


def test_independent_projects_do_not_intersect() -> None:
    graph = _two_project_graph()

    assert not graph.has_impact_intersection(["projects/a/f"], ["projects/b/f"])


def test_unmatched_path_intersects_with_anything() -> None:
    graph = _two_project_graph()

    for other in ([], ["projects/b/f"], ["projects/a/f"], None):
        assert graph.has_impact_intersection(["random/unowned/file"], other)
        assert graph.has_impact_intersection(other, ["random/unowned/file"])


def test_empty_path_lists_do_not_intersect() -> None:
    graph = _two_project_graph()

    assert not graph.has_impact_intersection([], [])
    assert not graph.has_impact_intersection(None, None)
    assert not graph.has_impact_intersection([], ["projects/a/f"])


def test_only_excluded_paths_behave_like_empty_list(
    sample_graph: ProjectImpactGraph,
) -> None:
    assert not sample_graph.has_impact_intersection(
        ["OWNERS", "projects/folder_A/README.md"], ["projects/folder_A/index.ts"]
    )


def test_intersection_is_symmetric(sample_graph: ProjectImpactGraph) -> None:
    path_lists = [
        [],
        ["projects/folder_A/index.ts"],
        ["projects/folder_C/index.ts"],
        ["projects/folder_E/index.ts"],
        ["projects/folder_K/index.ts"],
        ["rush.json"],
        MOCK_PATH_LIST,
    ]
    for first in path_lists:
        for second in path_lists:
            assert sample_graph.has_impact_intersection(
                first, second
            ) == sample_graph.has_impact_intersection(second, first)


def test_dangling_dependency_rejected_by_graph() -> None:
    config = ImpactGraphConfig.from_dict(
        {"projects": {"A": {"includedGlobs": ["a"], "dependentProjects": ["A", "X"]}}}
    )

    with pytest.raises(DanglingDependencyError):
        ProjectImpactGraph(config)


def test_from_file_matches_direct_construction(sample_config_path) -> None:
    graph = ProjectImpactGraph.from_file(str(sample_config_path))

    assert set(graph.config.projects) == {
        "A", "B", "B_subProject", "C", "E", "F", "G", "H", "K", "M",
    }
    assert graph.classifier.excluded_globs == (
        "OWNERS",
        "build.sh",
        "bootstrap.sh",
        "common/autoinstallers",
        "projects/folder_A/README.md",
    )


def test_lookup_ignores_later_changes_to_config_projects() -> None:
    """Lookups agree with classification after the caller edits the dict."""
    graph = _two_project_graph()
    original = graph.get_project_by_project_name("A")

    graph.config.projects["A"] = ProjectConfig(included_globs=["elsewhere"])
    graph.config.projects.pop("B")

    assert graph.get_project_by_project_name("A") == original
    assert graph.get_project_by_project_name("B").included_globs == ("projects/b",)
    assert graph.look_up_project_names_by_path_list(["projects/b/f"]) == ({"B"}, [])


def test_nested_project_listed_first_drives_intersection() -> None:
    """Y (a/b) owns a/b/file even when listed before its ancestor X (a/)."""
    graph = ProjectImpactGraph(
        ImpactGraphConfig.from_dict(
            {
                "projects": {
                    "Y": {"includedGlobs": ["a/b"], "dependentProjects": ["Y", "Z"]},
                    "X": {"includedGlobs": ["a/"], "dependentProjects": ["X"]},
                    "Z": {"includedGlobs": ["z/"], "dependentProjects": ["Z"]},
                }
            }
        )
    )

    assert graph.has_impact_intersection(["a/b/file"], ["z/file"])
    assert not graph.has_impact_intersection(["a/c/file"], ["z/file"])
