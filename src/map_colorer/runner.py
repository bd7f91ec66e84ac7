"""
Parallel processing of independent map inputs.

Each input path is loaded, colored and rendered by its own task. Tasks share
no state; a failure in one map is recorded in that map's report and never
affects the others. All tasks are awaited before run_maps() returns.
"""

import asyncio
import logging
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from typing import List, Optional, Sequence

from .core.error_handling import LoadError, RenderError, format_error
from .core.orchestrator import ColoringOrchestrator
from .loader import load_map
from .svg import write_svg
from .types import ColoringConfig, ColoringStatus, MapOutcome, MapReport

logger = logging.getLogger(__name__)

_OUTCOMES = {
    ColoringStatus.SUCCESS: MapOutcome.COLORED,
    ColoringStatus.UNCOLORABLE: MapOutcome.UNCOLORABLE,
    ColoringStatus.BUDGET_EXHAUSTED: MapOutcome.BUDGET_EXHAUSTED,
}


def process_map_file(path: str, config: Optional[ColoringConfig] = None) -> MapReport:
    """
    Load, color and render a single map.

    Load and render errors are caught and reported; the SVG is written for
    uncolorable maps too, using the sentinel color.

    Args:
        path: Path to the region source
        config: Coloring configuration

    Returns:
        MapReport for this input
    """
    config = config or ColoringConfig()

    try:
        region_map = load_map(path)
    except LoadError as e:
        logger.error(f"Failed to load {path}: {e.message}")
        return MapReport(path=path, outcome=MapOutcome.LOAD_ERROR, error=format_error(e))

    region_map.compute_neighbors()
    result = ColoringOrchestrator(node_limit=config.node_limit).run(region_map, label=path)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"{path}:\n{region_map.describe()}")

    output_path = path + config.output_suffix
    try:
        write_svg(result, output_path)
    except RenderError as e:
        logger.error(f"Failed to render {path}: {e.message}")
        return MapReport(
            path=path,
            outcome=MapOutcome.RENDER_ERROR,
            result=result,
            error=format_error(e),
        )

    return MapReport(
        path=path,
        outcome=_OUTCOMES[result.status],
        output_path=output_path,
        result=result,
    )


def _make_executor(config: ColoringConfig) -> Executor:
    if config.executor == "process":
        return ProcessPoolExecutor(max_workers=config.max_workers)
    return ThreadPoolExecutor(max_workers=config.max_workers)


async def run_maps(paths: Sequence[str], config: Optional[ColoringConfig] = None) -> List[MapReport]:
    """
    Process every input path in parallel and wait for all of them.

    Args:
        paths: Region source paths
        config: Coloring configuration shared by all tasks

    Returns:
        One MapReport per path, in input order
    """
    config = config or ColoringConfig()
    if not paths:
        return []

    loop = asyncio.get_running_loop()
    with _make_executor(config) as executor:
        tasks = [
            loop.run_in_executor(executor, process_map_file, str(path), config)
            for path in paths
        ]
        outcomes = await asyncio.gather(*tasks, return_exceptions=True)

    reports = []
    for path, outcome in zip(paths, outcomes):
        if isinstance(outcome, Exception):
            logger.error(f"Unexpected error processing {path}: {outcome}", exc_info=outcome)
            outcome = MapReport(
                path=str(path),
                outcome=MapOutcome.INTERNAL_ERROR,
                error=format_error(outcome),
            )
        reports.append(outcome)

    colored = sum(1 for r in reports if r.ok)
    logger.info(f"Processed {len(reports)} map(s): {colored} colored")
    return reports


def run(paths: Sequence[str], config: Optional[ColoringConfig] = None) -> List[MapReport]:
    """Synchronous wrapper around run_maps()."""
    return asyncio.run(run_maps(paths, config))
