"""Helpers for loading the impact-graph configuration from YAML/JSON/TOML.

This module provides a single entry point `load_impact_graph_config`
that accepts various configuration sources:

* ImpactGraphConfig -> returned as is (after integrity checks)
* dict -> ImpactGraphConfig.from_dict
* Path / path-like string -> load .yaml/.yml/.json/.toml from filesystem
* Inline YAML/JSON/TOML strings

Referential integrity is checked here, before the configuration reaches
the engine.
"""

from __future__ import annotations

import json
import logging
import re
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml
from pydantic import ValidationError

from impactgraph.config.schema import ImpactGraphConfig
from impactgraph.errors import ConfigurationError, DanglingDependencyError
from impactgraph.graph.expander import find_dangling_dependents

logger = logging.getLogger("impactgraph.runtime.config_loader")

ConfigSource = Union[str, Path, Dict[str, Any], ImpactGraphConfig]

DEFAULT_CONFIG_FILENAME = "project-impact-graph.yaml"

_SUFFIX_FORMATS = {
    ".yaml": "yaml",
    ".yml": "yaml",
    ".json": "json",
    ".toml": "toml",
    ".tml": "toml",
}

_TOML_TABLE_RE = re.compile(r"^\s*\[[\w.\"'-]+\]\s*$", re.MULTILINE)


def _sniff_format(text: str) -> str:
    """Guess the configuration format of inline text."""
    stripped = text.lstrip()
    if stripped.startswith("{"):
        return "json"
    if _TOML_TABLE_RE.search(text):
        return "toml"
    return "yaml"


def _parse_text(text: str, fmt: str) -> Any:
    """Parse configuration text in the given format."""
    try:
        if fmt == "json":
            return json.loads(text)
        if fmt == "toml":
            return tomllib.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to parse {fmt} configuration: {e}") from e


def _is_file(path: Path) -> bool:
    """Return whether ``path`` names an existing file.

    Inline configuration text can be longer than the OS allows for a path
    name, in which case the stat call fails with ENAMETOOLONG.
    """
    try:
        return path.is_file()
    except OSError:
        return False


def _read_source(source: Union[str, Path]) -> Tuple[str, str]:
    """Return ``(text, format)`` for a file path or an inline string."""
    if isinstance(source, str) and "\n" not in source:
        candidate: Optional[Path] = Path(source)
    elif isinstance(source, Path):
        candidate = source
    else:
        candidate = None

    if candidate is not None and _is_file(candidate):
        try:
            text = candidate.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read configuration file {candidate}: {e}"
            ) from e
        fmt = _SUFFIX_FORMATS.get(candidate.suffix.lower()) or _sniff_format(text)
        logger.info("Loading configuration from file: %s (fmt=%s)", candidate, fmt)
        return text, fmt

    if candidate is not None and (
        isinstance(source, Path) or candidate.suffix.lower() in _SUFFIX_FORMATS
    ):
        raise ConfigurationError(f"Configuration file not found: {candidate}")

    text = str(source)
    fmt = _sniff_format(text)
    logger.info("Loading configuration from inline %s string", fmt)
    return text, fmt


def validate_references(config: ImpactGraphConfig) -> List[Tuple[str, str]]:
    """Check referential integrity of ``dependentProjects``.

    Also warns about projects that omit themselves from their dependents,
    which breaks the self-loop convention but is otherwise harmless.

    Returns:
        Dangling ``(project_id, dependent_id)`` pairs; empty when valid.
    """
    for project_id, project in config.iter_projects():
        if project_id not in project.dependent_projects:
            logger.warning(
                "Project %s does not list itself in dependentProjects", project_id
            )
    dangling = find_dangling_dependents(config)
    for project_id, dependent in dangling:
        logger.error(
            "Project %s lists undefined dependent project %s", project_id, dependent
        )
    return dangling


def load_impact_graph_config(
    source: ConfigSource, validate: bool = True
) -> ImpactGraphConfig:
    """Load ImpactGraphConfig from various configuration sources.

    Args:
        source: One of:
            * ImpactGraphConfig: used as is
            * dict: treated as already-parsed configuration mapping
            * str/Path: either a filesystem path to a .yaml/.json/.toml
              file, or an inline YAML/JSON/TOML string (auto-detected)
        validate: Whether to reject dangling dependent references.

    Returns:
        ImpactGraphConfig instance.

    Raises:
        ConfigurationError: If the source cannot be read or parsed, or
            does not match the schema.
        DanglingDependencyError: If ``validate`` is set and a dependent
            reference does not resolve.
    """
    if isinstance(source, ImpactGraphConfig):
        config = source
    else:
        if isinstance(source, dict):
            logger.debug("Loading ImpactGraphConfig from provided dict")
            data: Any = source
        elif isinstance(source, (str, Path)):
            text, fmt = _read_source(source)
            data = _parse_text(text, fmt)
        else:
            raise TypeError(f"Unsupported config source type: {type(source)!r}")

        if not isinstance(data, dict):
            raise ConfigurationError("Top-level configuration must be a mapping")

        try:
            config = ImpactGraphConfig.from_dict(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid impact-graph configuration: {e}") from e

    if validate:
        dangling = validate_references(config)
        if dangling:
            raise DanglingDependencyError(dangling)

    logger.debug("Loaded configuration with %d project(s)", len(config.projects))
    return config


def dump_impact_graph_config(config: ImpactGraphConfig) -> str:
    """Render a configuration in the camelCase YAML schema."""
    return yaml.safe_dump(config.to_dict(), sort_keys=False)


__all__ = [
    "DEFAULT_CONFIG_FILENAME",
    "dump_impact_graph_config",
    "load_impact_graph_config",
    "validate_references",
]
