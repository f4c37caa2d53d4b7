"""Performance harness for impact-intersection queries."""

import json
import logging
import random
import time
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from impactgraph.benchmark.generator import build_config, generate_dag, generate_paths
from impactgraph.graph.impact_graph import ProjectImpactGraph

logger = logging.getLogger("impactgraph.benchmark.runner")


@dataclass(frozen=True)
class BenchmarkCase:
    """Size parameters of one benchmark run."""

    node_count: int
    edge_count: int
    path_count_a: int
    path_count_b: int

    @classmethod
    def parse(cls, text: str) -> "BenchmarkCase":
        """Parse ``NODES:EDGES:PATHS_A:PATHS_B``.

        Raises:
            ValueError: If the text is malformed.
        """
        parts = text.split(":")
        if len(parts) != 4:
            raise ValueError(
                f"Invalid benchmark case {text!r}; expected NODES:EDGES:PATHS_A:PATHS_B"
            )
        node_count, edge_count, path_count_a, path_count_b = (int(p) for p in parts)
        if min(node_count, path_count_a, path_count_b) < 0:
            raise ValueError(f"Invalid benchmark case {text!r}; counts must be >= 0")
        return cls(node_count, edge_count, path_count_a, path_count_b)


@dataclass
class BenchmarkResult:
    """Outcome of one benchmark run.

    Attributes:
        case: The case that was run.
        has_impact_intersection: Verdict of the intersection query.
        build_seconds: Time spent constructing the impact graph.
        query_seconds: Time spent in ``has_impact_intersection``.
    """

    case: BenchmarkCase
    has_impact_intersection: bool
    build_seconds: float
    query_seconds: float

    @property
    def total_seconds(self) -> float:
        return self.build_seconds + self.query_seconds

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for the JSON report."""
        data: Dict[str, Any] = asdict(self.case)
        data.update(
            {
                "has_impact_intersection": self.has_impact_intersection,
                "build_seconds": round(self.build_seconds, 6),
                "query_seconds": round(self.query_seconds, 6),
                "total_seconds": round(self.total_seconds, 6),
            }
        )
        return data


DEFAULT_CASES = tuple(
    BenchmarkCase(nodes, edges, paths, paths)
    for nodes, edges in ((1000, 5000), (2000, 10000), (3000, 100000))
    for paths in (1, 10, 100, 1000)
)


def run_case(case: BenchmarkCase, rng: random.Random) -> BenchmarkResult:
    """Generate a configuration for ``case`` and time one query against it."""
    config = build_config(generate_dag(case.node_count, case.edge_count, rng))
    paths_a = generate_paths(case.path_count_a)
    paths_b = generate_paths(case.path_count_b)

    start = time.perf_counter()
    graph = ProjectImpactGraph(config)
    built = time.perf_counter()
    verdict = graph.has_impact_intersection(paths_a, paths_b)
    done = time.perf_counter()

    result = BenchmarkResult(case, verdict, built - start, done - built)
    logger.info(
        "Benchmark %dN/%dE paths=%d/%d: intersection=%s in %.4fs",
        case.node_count,
        case.edge_count,
        case.path_count_a,
        case.path_count_b,
        verdict,
        result.total_seconds,
    )
    return result


def run_benchmark(
    cases: Sequence[BenchmarkCase] = DEFAULT_CASES, seed: Optional[int] = None
) -> List[BenchmarkResult]:
    """Run every case with a shared random source.

    Args:
        cases: Cases to run, in order.
        seed: Seed for graph generation; unseeded when None.
    """
    rng = random.Random(seed)
    return [run_case(case, rng) for case in cases]


def write_report(results: Sequence[BenchmarkResult], path: Path) -> None:
    """Write results as a JSON report."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps([result.to_dict() for result in results], indent=2),
        encoding="utf-8",
    )
    logger.info("Benchmark report written to %s", path)
