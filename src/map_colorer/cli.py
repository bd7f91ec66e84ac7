"""
Command-line entry point.

    map-colorer [options] PATH [PATH ...]

Writes PATH.svg next to every input and prints a summary table. The exit
status is 0 only when every map was colored and rendered.
"""

import argparse
import cProfile
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.table import Table

from .core.constants import LOG_FORMAT, MAX_COLORS, read_config_file
from .runner import run
from .types import ColoringConfig, MapOutcome, MapReport

logger = logging.getLogger(__name__)

OUTCOME_STYLES = {
    MapOutcome.COLORED: "green",
    MapOutcome.UNCOLORABLE: "yellow",
    MapOutcome.BUDGET_EXHAUSTED: "yellow",
    MapOutcome.LOAD_ERROR: "red",
    MapOutcome.RENDER_ERROR: "red",
    MapOutcome.INTERNAL_ERROR: "bold red",
}


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=f"Color rectangular maps with at most {MAX_COLORS} colors and render them as SVG"
    )
    parser.add_argument("paths", nargs="+", help="Region source files")
    parser.add_argument("--config", "-c", help="TOML configuration file")
    parser.add_argument(
        "--node-limit",
        type=int,
        help="Maximum backtracking assignments per map (default: unbounded)",
    )
    parser.add_argument(
        "--processes",
        action="store_true",
        help="Use a process pool instead of threads",
    )
    parser.add_argument("--workers", "-w", type=int, help="Number of parallel workers")
    parser.add_argument("--suffix", help="Output suffix appended to each input path")
    parser.add_argument("--profile", metavar="FILE", help="Write cProfile stats to FILE")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--quiet", "-q", action="store_true", help="Only log errors")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> ColoringConfig:
    """
    Merge the config file (if any) with command-line overrides.

    Raises:
        OSError: If the config file cannot be read
        pydantic.ValidationError: If a setting is invalid
    """
    settings = read_config_file(args.config) if args.config else {}

    if args.node_limit is not None:
        settings["node_limit"] = args.node_limit
    if args.processes:
        settings["executor"] = "process"
    if args.workers is not None:
        settings["max_workers"] = args.workers
    if args.suffix is not None:
        settings["output_suffix"] = args.suffix
    if args.verbose:
        settings["log_level"] = "DEBUG"
    elif args.quiet:
        settings["log_level"] = "ERROR"

    return ColoringConfig(**settings)


def display_reports(reports: List[MapReport], console: Console) -> None:
    table = Table(title="Map coloring")
    table.add_column("Map")
    table.add_column("Outcome")
    table.add_column("Method")
    table.add_column("Regions", justify="right")
    table.add_column("Colors", justify="right")
    table.add_column("Output")

    for report in reports:
        style = OUTCOME_STYLES[report.outcome]
        result = report.result
        table.add_row(
            report.path,
            f"[{style}]{report.outcome.value}[/{style}]",
            result.method.value if result and result.method else "-",
            str(len(result.regions)) if result else "-",
            str(result.colors_used) if result and not result.failed else "-",
            report.output_path or "-",
        )

    console.print(table)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_arguments(argv)
    console = Console(stderr=True)

    try:
        config = build_config(args)
    except (OSError, ValueError, PydanticValidationError) as e:
        console.print(f"[bold red]Invalid configuration: {e}[/bold red]")
        return 2

    logging.basicConfig(level=getattr(logging, config.log_level), format=LOG_FORMAT)

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        try:
            reports = run(args.paths, config)
        finally:
            profiler.disable()
            profiler.dump_stats(args.profile)
            logger.info(f"Profile written to {args.profile}")
    else:
        reports = run(args.paths, config)

    if not args.quiet:
        display_reports(reports, console)

    return 0 if all(report.ok for report in reports) else 1


if __name__ == "__main__":
    sys.exit(main())
