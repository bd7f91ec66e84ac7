"""
Exact colorer based on depth-first backtracking.

Regions are visited strictly in input order and colors are tried in ascending
order, so the coloring found is always the lexicographically smallest valid
one. The search is written with an explicit cursor rather than recursion:
each region's current color doubles as the "next color to try" when the
search backs up to it, which keeps the stack depth independent of the map
size.
"""

import logging
import time
from typing import Optional

from .base_colorer import Colorer
from .constants import MAX_COLORS, UNCOLORED
from .error_handling import SearchBudgetExceeded
from .region_graph import RegionMap

logger = logging.getLogger(__name__)


class BacktrackingColorer(Colorer):
    """
    Complete search for a coloring within the color budget.

    Returns False only after every branch has been exhausted, which proves
    the map cannot be colored with ``max_colors`` colors.
    """

    name = "backtracking"

    def __init__(self, max_colors: int = MAX_COLORS, node_limit: Optional[int] = None):
        """
        Args:
            max_colors: Size of the color budget
            node_limit: Maximum number of tentative assignments, None for unbounded
        """
        super().__init__()
        self.max_colors = max_colors
        self.node_limit = node_limit
        self.nodes = 0

    def color(self, region_map: RegionMap) -> bool:
        start = time.time()
        self.nodes = 0
        count = len(region_map)
        index = 0

        try:
            while 0 <= index < count:
                region = region_map[index]
                used = region_map.neighbor_colors(index)

                # Resume after the color tried last time we were here
                candidate = region.color + 1
                while candidate <= self.max_colors and candidate in used:
                    candidate += 1

                if candidate <= self.max_colors:
                    self._count_node(region_map)
                    region.color = candidate
                    index += 1
                else:
                    region.color = UNCOLORED
                    index -= 1
        finally:
            self.last_color_time = time.time() - start

        success = index == count
        logger.debug(
            f"Backtracking {'succeeded' if success else 'exhausted'} "
            f"after {self.nodes} assignments"
        )
        return success

    def _count_node(self, region_map: RegionMap) -> None:
        self.nodes += 1
        if self.node_limit is not None and self.nodes > self.node_limit:
            region_map.reset_colors()
            raise SearchBudgetExceeded(
                "Backtracking search exceeded its node limit",
                context={"node_limit": self.node_limit, "regions": len(region_map)},
            )
