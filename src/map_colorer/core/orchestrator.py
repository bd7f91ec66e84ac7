"""
Coloring orchestrator.

Runs the DSATUR heuristic first. If the heuristic overflows the color budget,
its partial coloring is discarded (all colors reset to 0) and the exact
backtracking colorer is run on the clean map. The outcome is either a
complete coloring or a definitive "uncolorable" verdict; an optional node
budget on the exact search adds a third, inconclusive outcome.
"""

import logging
import time
from enum import Enum
from typing import Optional

from ..types import ColoringMethod, ColoringResult, ColoringStatus, RegionColoring
from .backtracking import BacktrackingColorer
from .constants import MAX_COLORS
from .dsatur import DSaturColorer
from .error_handling import SearchBudgetExceeded
from .region_graph import RegionMap

logger = logging.getLogger(__name__)


class ColoringState(str, Enum):
    UNSTARTED = "unstarted"
    HEURISTIC_ATTEMPTED = "heuristic_attempted"
    EXACT_ATTEMPTED = "exact_attempted"
    SUCCESS = "success"
    DEFINITIVELY_FAILED = "definitively_failed"
    BUDGET_EXHAUSTED = "budget_exhausted"


class ColoringOrchestrator:
    """Drives the heuristic and, on overflow, the exact colorer over one map."""

    def __init__(
        self,
        max_colors: int = MAX_COLORS,
        node_limit: Optional[int] = None,
    ):
        self.heuristic = DSaturColorer(max_colors)
        self.exact = BacktrackingColorer(max_colors, node_limit=node_limit)
        self.state = ColoringState.UNSTARTED
        self.method: Optional[ColoringMethod] = None
        self.heuristic_failed = False

    def run(self, region_map: RegionMap, label: str = "map") -> ColoringResult:
        """
        Color a map in place.

        Args:
            region_map: The map to color; adjacency is built if missing
            label: Name used in log messages (usually the input path)

        Returns:
            ColoringResult describing the final assignment
        """
        start = time.time()
        self.state = ColoringState.UNSTARTED
        self.method = None
        self.heuristic_failed = False

        if not region_map.neighbors_computed:
            region_map.compute_neighbors()
        region_map.reset_colors()

        success = self.heuristic.color(region_map)
        self.state = ColoringState.HEURISTIC_ATTEMPTED

        if success:
            self.state = ColoringState.SUCCESS
            self.method = ColoringMethod.DSATUR
        else:
            self.heuristic_failed = True
            logger.info(
                f"DSATUR exceeded {self.heuristic.max_colors} colors on {label}, "
                f"falling back to backtracking"
            )
            region_map.reset_colors()
            try:
                success = self.exact.color(region_map)
            except SearchBudgetExceeded as e:
                self.state = ColoringState.BUDGET_EXHAUSTED
                logger.warning(f"Backtracking gave up on {label}: {e.message}")
            else:
                self.state = ColoringState.EXACT_ATTEMPTED
                if success:
                    self.state = ColoringState.SUCCESS
                    self.method = ColoringMethod.BACKTRACKING
                else:
                    self.state = ColoringState.DEFINITIVELY_FAILED
                    logger.warning(
                        f"Map {label} needs more than {self.exact.max_colors} colors"
                    )

        return ColoringResult(
            status=self._status(),
            method=self.method,
            regions=[
                RegionColoring(name=r.name, bounds=tuple(r.rect), color=r.color)
                for r in region_map
            ],
            solve_time=time.time() - start,
            heuristic_failed=self.heuristic_failed,
        )

    def _status(self) -> ColoringStatus:
        if self.state == ColoringState.SUCCESS:
            return ColoringStatus.SUCCESS
        if self.state == ColoringState.BUDGET_EXHAUSTED:
            return ColoringStatus.BUDGET_EXHAUSTED
        return ColoringStatus.UNCOLORABLE


def color_map(region_map: RegionMap, node_limit: Optional[int] = None, label: str = "map") -> ColoringResult:
    """Color ``region_map`` with the default orchestrator."""
    return ColoringOrchestrator(node_limit=node_limit).run(region_map, label=label)
