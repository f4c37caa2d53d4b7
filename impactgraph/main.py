"""Main CLI entry point for impactgraph.

Provides commands: lookup, impact, intersect, check, benchmark
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from impactgraph.cli.benchmark import benchmark_command
from impactgraph.cli.check import check_command
from impactgraph.cli.impact import impact_command
from impactgraph.cli.intersect import intersect_command
from impactgraph.cli.lookup import lookup_command

logger = logging.getLogger("impactgraph.cli")


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbose: Enable verbose logging.
        console: Rich Console instance for log output (defaults to stderr).
    """
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )

    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=[handler],
    )


def _add_config_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-c",
        "--config",
        help=(
            "Impact-graph configuration file (YAML, JSON or TOML). "
            "Defaults to project-impact-graph.yaml in the current directory."
        ),
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="impactgraph",
        description="Impactgraph - monorepo change impact analysis",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Lookup command
    lookup_parser = subparsers.add_parser(
        "lookup",
        help="Classify changed paths into owning projects",
    )
    _add_config_argument(lookup_parser)
    lookup_parser.add_argument("paths", nargs="*", help="Changed paths")
    lookup_parser.add_argument(
        "--paths-file",
        help="File listing changed paths, one per line (e.g. git diff --name-only)",
    )
    lookup_parser.add_argument("--json", action="store_true", help="Print JSON")

    # Impact command
    impact_parser = subparsers.add_parser(
        "impact",
        help="Compute the impact closure of projects",
    )
    _add_config_argument(impact_parser)
    impact_parser.add_argument("projects", nargs="+", help="Project identifiers")
    impact_parser.add_argument("--json", action="store_true", help="Print JSON")

    # Intersect command
    intersect_parser = subparsers.add_parser(
        "intersect",
        help=(
            "Check whether two changesets may impact overlapping projects "
            "(exit 0: independent, 1: intersecting, 2: error)"
        ),
    )
    _add_config_argument(intersect_parser)
    intersect_parser.add_argument(
        "-a", "--a", nargs="*", default=[], help="Paths changed by changeset A"
    )
    intersect_parser.add_argument(
        "-b", "--b", nargs="*", default=[], help="Paths changed by changeset B"
    )
    intersect_parser.add_argument(
        "--a-file", help="File listing paths of changeset A, one per line"
    )
    intersect_parser.add_argument(
        "--b-file", help="File listing paths of changeset B, one per line"
    )
    intersect_parser.add_argument("--json", action="store_true", help="Print JSON")

    # Check command
    check_parser = subparsers.add_parser(
        "check",
        help="Validate the configuration and report dependency cycles",
    )
    _add_config_argument(check_parser)
    check_parser.add_argument(
        "--limit",
        type=int,
        default=20,
        help=(
            "Maximum number of cycles to report (default: 20). "
            "Use <=0 for no limit (may be expensive on large graphs)."
        ),
    )
    check_parser.add_argument(
        "--fail-on-cycle",
        action="store_true",
        help="Exit with non-zero status when dependency cycles are found.",
    )

    # Benchmark command
    benchmark_parser = subparsers.add_parser(
        "benchmark",
        help="Time intersection queries on synthetic impact graphs",
    )
    benchmark_parser.add_argument(
        "--case",
        action="append",
        metavar="NODES:EDGES:PATHS_A:PATHS_B",
        help="Benchmark case; repeatable. Defaults to the built-in case matrix.",
    )
    benchmark_parser.add_argument(
        "--seed", type=int, help="Random seed for graph generation"
    )
    benchmark_parser.add_argument(
        "-o", "--output", help="Write the JSON report to this file"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.command == "lookup":
        return lookup_command(args)
    elif args.command == "impact":
        return impact_command(args)
    elif args.command == "intersect":
        return intersect_command(args)
    elif args.command == "check":
        return check_command(args)
    elif args.command == "benchmark":
        return benchmark_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
