"""
Saturation-degree (DSATUR) heuristic colorer.

Regions are colored one at a time. The next region is the one whose colored
neighbors show the most distinct colors; ties go to the region with the fewest
neighbors, then to the earliest region in input order. Each region receives
the lowest positive color not used by its neighbors.

The heuristic never backs up. If a region needs a color above the budget the
color is still recorded, the run is marked as failed and coloring continues
so that the whole map ends with a concrete assignment.
"""

import collections
import logging
import time
from typing import List

from .base_colorer import Colorer
from .constants import MAX_COLORS
from .region_graph import RegionMap

logger = logging.getLogger(__name__)


class DSaturColorer(Colorer):
    """DSATUR with a lowest-degree-first tie-break."""

    name = "dsatur"

    def __init__(self, max_colors: int = MAX_COLORS):
        super().__init__()
        self.max_colors = max_colors
        self.order: List[str] = []

    def color(self, region_map: RegionMap) -> bool:
        start = time.time()
        self.order = []
        success = True

        # Colors currently seen among each region's neighbors
        constraint = collections.defaultdict(set)
        pending = list(range(len(region_map)))

        while pending:
            current = min(
                pending,
                key=lambda i: (
                    -len(constraint[i]),
                    region_map.degree(i),
                    i,
                ),
            )
            pending.remove(current)

            forbidden = constraint[current]
            color = 1
            while color in forbidden:
                color += 1

            region = region_map[current]
            region.color = color
            self.order.append(region.name)

            if color > self.max_colors:
                success = False
                logger.debug(
                    f"Region {region.name} needs color {color} "
                    f"(budget {self.max_colors})"
                )

            for other in region.neighbors:
                constraint[other].add(color)

        self.last_color_time = time.time() - start
        logger.debug(f"DSATUR order: {self.order}")
        return success
