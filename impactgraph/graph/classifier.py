"""Changed-path classification into owning projects."""

import logging
from typing import Iterable, List, NamedTuple, Optional, Set, Tuple

from impactgraph.config.schema import ImpactGraphConfig

logger = logging.getLogger("impactgraph.graph.classifier")


class ClassificationResult(NamedTuple):
    """Outcome of classifying a list of changed paths.

    Attributes:
        matched: Identifiers of the projects owning at least one path.
        unmatched: Paths that are neither excluded nor owned by any project.
    """

    matched: Set[str]
    unmatched: List[str]


def glob_depth(glob: str) -> int:
    """Return the number of non-empty ``/``-separated segments of a glob.

    A trailing slash does not add a segment: ``a/`` and ``a`` both have
    depth 1, ``a/b`` has depth 2.
    """
    return len([segment for segment in glob.split("/") if segment])


def glob_specificity(glob: str) -> Tuple[int, int]:
    """Sort key ranking more deeply nested globs first, then longer ones."""
    return glob_depth(glob), len(glob)


class PathClassifier:
    """Maps changed paths to the single project that owns each of them.

    Exclusion globs are applied first: a path starting with any global or
    project-level excluded glob is dropped and is neither matched nor
    unmatched. Surviving paths go to the project whose matching included
    glob is the most deeply nested.

    All lookup tables are built once in ``__init__``; ``classify`` does not
    mutate the instance and may be called from several threads.
    """

    def __init__(self, config: ImpactGraphConfig) -> None:
        """Initialize classifier.

        Args:
            config: Impact-graph configuration (not modified).
        """
        self._excluded_globs = self._integrate_excluded_globs(config)
        self._included_globs: Tuple[Tuple[str, str, Tuple[int, int]], ...] = tuple(
            (glob, project_id, glob_specificity(glob))
            for project_id, project in config.iter_projects()
            for glob in project.included_globs
        )
        logger.debug(
            "PathClassifier initialized: %d included globs, %d excluded globs",
            len(self._included_globs),
            len(self._excluded_globs),
        )

    @staticmethod
    def _integrate_excluded_globs(config: ImpactGraphConfig) -> Tuple[str, ...]:
        """Union of global and per-project excluded globs, first-seen order."""
        globs = list(config.global_excluded_globs)
        for _project_id, project in config.iter_projects():
            globs.extend(project.excluded_globs)
        return tuple(dict.fromkeys(globs))

    @property
    def excluded_globs(self) -> Tuple[str, ...]:
        """Effective exclusion globs."""
        return self._excluded_globs

    def is_excluded(self, path: str) -> bool:
        """Return whether ``path`` starts with any effective exclusion glob."""
        return path.startswith(self._excluded_globs)

    def owner_of(self, path: str) -> Optional[str]:
        """Return the project owning ``path``, ignoring exclusions.

        Among all matching included globs the deepest one wins, then the
        longest. Only identical specificity falls back to the glob scanned
        last.

        Returns:
            Owning project identifier, or None when no included glob matches.
        """
        owner: Optional[str] = None
        best: Tuple[int, int] = (0, 0)
        for glob, project_id, specificity in self._included_globs:
            if path.startswith(glob) and specificity >= best:
                owner = project_id
                best = specificity
        return owner

    def classify(self, paths: Optional[Iterable[str]]) -> ClassificationResult:
        """Classify changed paths into owning projects.

        Args:
            paths: Changed paths. None is treated as an empty list.

        Returns:
            ClassificationResult with the matched project identifiers and
            the unmatched paths. Excluded paths appear in neither.

        Raises:
            TypeError: If ``paths`` is a single string rather than a
                collection of paths.
        """
        if isinstance(paths, str):
            raise TypeError(
                f"Expected a collection of paths, got a single string: {paths!r}"
            )
        matched: Set[str] = set()
        unmatched: List[str] = []
        excluded = 0

        for path in paths or ():
            if self.is_excluded(path):
                excluded += 1
                continue
            owner = self.owner_of(path)
            if owner is None:
                unmatched.append(path)
            else:
                matched.add(owner)

        logger.debug(
            "Classified paths: %d project(s), %d unmatched, %d excluded",
            len(matched),
            len(unmatched),
            excluded,
        )
        return ClassificationResult(matched, unmatched)
