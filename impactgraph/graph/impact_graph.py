"""Project impact graph facade.

Combines path classification and impact expansion to decide whether two
changesets can affect overlapping projects.
"""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Set, Tuple, Union

from impactgraph.config.schema import ImpactGraphConfig, ProjectConfig
from impactgraph.errors import ProjectNotFoundError
from impactgraph.graph.classifier import ClassificationResult, PathClassifier
from impactgraph.graph.expander import ImpactExpander

logger = logging.getLogger("impactgraph.graph.impact_graph")


class ProjectImpactGraph:
    """Stores an impact-graph configuration and answers impact queries.

    The configuration is treated as immutable. Everything derived from it
    (exclusion union, glob table, project graph) is computed in
    ``__init__``, so every query is a pure computation and instances can be
    shared between threads. Project lookups read a snapshot taken at
    construction; later changes to ``config.projects`` are not seen.
    """

    def __init__(self, config: ImpactGraphConfig) -> None:
        """Initialize impact graph.

        Args:
            config: Parsed impact-graph configuration.

        Raises:
            DanglingDependencyError: If a dependent reference does not
                resolve to a defined project.
        """
        self._config = config
        # Snapshot: the frozen model still holds a mutable projects dict
        self._projects: Mapping[str, ProjectConfig] = MappingProxyType(
            dict(config.projects)
        )
        self._classifier = PathClassifier(config)
        self._expander = ImpactExpander(config)
        logger.info(
            "ProjectImpactGraph initialized with %d project(s)",
            len(config.projects),
        )

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "ProjectImpactGraph":
        """Load ``project-impact-graph.yaml`` (or JSON/TOML) and build a graph."""
        # Imported here: the loader lives in runtime and depends on this package
        from impactgraph.runtime.config_loader import load_impact_graph_config

        return cls(load_impact_graph_config(Path(path)))

    @property
    def config(self) -> ImpactGraphConfig:
        """The configuration this graph was built from."""
        return self._config

    @property
    def classifier(self) -> PathClassifier:
        return self._classifier

    @property
    def expander(self) -> ImpactExpander:
        return self._expander

    def get_project_by_project_name(self, project_name: str) -> ProjectConfig:
        """Return the configuration of one project.

        Raises:
            ProjectNotFoundError: If the project is not configured.
        """
        try:
            return self._projects[project_name]
        except KeyError:
            raise ProjectNotFoundError(project_name) from None

    def look_up_project_names_by_path_list(
        self, path_list: Optional[Iterable[str]]
    ) -> ClassificationResult:
        """Classify changed paths.

        Returns:
            ``(project_names, unmatched_paths)``.
        """
        return self._classifier.classify(path_list)

    def get_project_impact_by_project_names(
        self, project_names: Optional[Iterable[str]]
    ) -> Set[str]:
        """Return the impact closure of the given projects."""
        return self._expander.expand(project_names)

    def get_project_impact_by_path_list(
        self, path_list: Optional[Iterable[str]]
    ) -> Tuple[Set[str], List[str]]:
        """Classify paths and expand the owning projects in one step.

        Returns:
            ``(impacted_project_names, unmatched_paths)``.
        """
        project_names, unmatched = self._classifier.classify(path_list)
        return self._expander.expand(project_names), unmatched

    def has_impact_intersection(
        self,
        path_list1: Optional[Iterable[str]],
        path_list2: Optional[Iterable[str]],
    ) -> bool:
        """Determine whether two changesets may impact overlapping projects.

        Any unmatched path on either side makes the answer True, since its
        impact cannot be bounded.

        Args:
            path_list1: Paths changed by the first changeset.
            path_list2: Paths changed by the second changeset.

        Returns:
            True unless both changesets are fully classified and their
            impact closures are disjoint.
        """
        project_names1, unmatched1 = self._classifier.classify(path_list1)
        project_names2, unmatched2 = self._classifier.classify(path_list2)
        if unmatched1 or unmatched2:
            logger.debug(
                "Unmatched paths present (%d, %d); assuming intersection",
                len(unmatched1),
                len(unmatched2),
            )
            return True

        impact1 = self._expander.expand(project_names1)
        impact2 = self._expander.expand(project_names2)
        intersection = impact1 & impact2
        if intersection:
            logger.debug("Impact closures share %d project(s)", len(intersection))
            return True
        return False
