"""Exception hierarchy for impactgraph.

Configuration problems are surfaced to the caller as descriptive failures.
An unclassifiable path is not an error: it is reported through the
classifier's ``unmatched`` result instead.
"""

from typing import Iterable, List, Tuple


class ImpactGraphError(Exception):
    """Base class for all impactgraph errors."""

    pass


class ConfigurationError(ImpactGraphError):
    """The impact-graph configuration cannot be used.

    Raised when a configuration source is malformed, fails schema
    validation, or violates referential integrity.
    """

    pass


class DanglingDependencyError(ConfigurationError):
    """A ``dependentProjects`` entry names a project that does not exist.

    Attributes:
        dangling: ``(project_id, missing_dependent_id)`` pairs, one per
            dangling edge.
    """

    def __init__(self, dangling: Iterable[Tuple[str, str]]) -> None:
        self.dangling: List[Tuple[str, str]] = sorted(dangling)
        details = ", ".join(f"{src} -> {dst}" for src, dst in self.dangling)
        super().__init__(
            f"{len(self.dangling)} dependent project reference(s) do not "
            f"resolve to a defined project: {details}"
        )


class ProjectNotFoundError(ImpactGraphError, KeyError):
    """A project identifier is absent from the configuration."""

    def __init__(self, project_id: str) -> None:
        self.project_id = project_id
        super().__init__(f"Project not found in impact graph: {project_id!r}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])
