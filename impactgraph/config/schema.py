"""Configuration schema for the project impact graph using Pydantic.

The on-disk schema (``project-impact-graph.yaml``) uses camelCase keys::

    globalExcludedGlobs:
      - OWNERS
    projects:
      A:
        includedGlobs: [projects/folder_A]
        excludedGlobs: [projects/folder_A/README.md]
        dependentProjects: [A, C]

Models accept both the camelCase keys and the snake_case field names, and
are frozen: the engine treats a configuration as a read-only value.
"""

from typing import Any, Dict, Iterator, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

_MODEL_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


def _unique_globs(values: Tuple[str, ...], field_name: str) -> Tuple[str, ...]:
    """Drop duplicates while keeping first-seen order; reject empty prefixes."""
    seen = set()
    result: List[str] = []
    for value in values:
        if not value:
            # An empty prefix would match every path in the repository
            raise ValueError(f"{field_name} must not contain empty globs")
        if value not in seen:
            seen.add(value)
            result.append(value)
    return tuple(result)


class ProjectConfig(BaseModel):
    """Glob sets and impact edges of a single project.

    Attributes:
        included_globs: Path prefixes that mark a path as belonging to this
            project.
        excluded_globs: Path prefixes excluded from classification by any
            project, not just this one.
        dependent_projects: Identifiers of the projects that depend on this
            project, i.e. the projects impacted when it changes. By
            convention this includes the project's own identifier.
    """

    model_config = _MODEL_CONFIG

    included_globs: Tuple[str, ...] = ()
    excluded_globs: Tuple[str, ...] = ()
    dependent_projects: Tuple[str, ...] = ()

    @field_validator("included_globs", "excluded_globs")
    @classmethod
    def validate_globs(
        cls, v: Tuple[str, ...], info: ValidationInfo
    ) -> Tuple[str, ...]:
        """Deduplicate globs and reject empty entries."""
        return _unique_globs(v, info.field_name)

    @field_validator("dependent_projects")
    @classmethod
    def validate_dependents(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """Deduplicate dependent project identifiers."""
        return tuple(dict.fromkeys(v))


class ImpactGraphConfig(BaseModel):
    """Top-level impact-graph configuration.

    Attributes:
        global_excluded_globs: Path prefixes excluded for every project.
        projects: Mapping of project identifier to its configuration.
    """

    model_config = _MODEL_CONFIG

    global_excluded_globs: Tuple[str, ...] = ()
    projects: Dict[str, ProjectConfig] = Field(default_factory=dict)

    @field_validator("global_excluded_globs")
    @classmethod
    def validate_global_globs(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """Deduplicate global globs and reject empty entries."""
        return _unique_globs(v, "global_excluded_globs")

    @field_validator("projects")
    @classmethod
    def validate_project_ids(
        cls, v: Dict[str, ProjectConfig]
    ) -> Dict[str, ProjectConfig]:
        """Validate that project identifiers are non-empty strings."""
        for project_id in v:
            if not project_id or not project_id.strip():
                raise ValueError("Project identifiers must be non-empty strings")
        return v

    def iter_projects(self) -> Iterator[Tuple[str, ProjectConfig]]:
        """Iterate over ``(project_id, ProjectConfig)`` pairs."""
        return iter(self.projects.items())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ImpactGraphConfig":
        """Create configuration from a camelCase or snake_case mapping.

        Raises:
            ValidationError: If configuration is invalid.
        """
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to the camelCase on-disk schema."""
        data = self.model_dump(by_alias=True)
        data["globalExcludedGlobs"] = list(data["globalExcludedGlobs"])
        for project in data["projects"].values():
            for key, value in project.items():
                project[key] = list(value)
        return data
