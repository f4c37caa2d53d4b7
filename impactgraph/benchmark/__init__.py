"""Synthetic graph generation and performance harness."""

from impactgraph.benchmark.generator import build_config, generate_dag, generate_paths
from impactgraph.benchmark.runner import (
    DEFAULT_CASES,
    BenchmarkCase,
    BenchmarkResult,
    run_benchmark,
    write_report,
)

__all__ = [
    "DEFAULT_CASES",
    "BenchmarkCase",
    "BenchmarkResult",
    "build_config",
    "generate_dag",
    "generate_paths",
    "run_benchmark",
    "write_report",
]
