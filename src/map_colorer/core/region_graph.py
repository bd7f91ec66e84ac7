"""
Region graph data model.

A RegionMap owns an ordered list of regions. Neighbor links are stored as
indices into that list, so a region never owns the regions it points to.
Input order is preserved and is used for deterministic tie-breaking by the
colorers.
"""

import logging
from typing import Dict, Iterator, List, Optional, Set, Tuple

from .constants import MAX_COLORS, UNCOLORED
from .error_handling import AdjacencyError
from .geometry import Rect, are_adjacent

logger = logging.getLogger(__name__)


class Region:
    """A named rectangle with a mutable color and neighbor indices."""

    __slots__ = ("name", "rect", "color", "neighbors")

    def __init__(self, name: str, rect: Rect, color: int = UNCOLORED):
        self.name = name
        self.rect = Rect(*rect)
        self.color = color
        self.neighbors: List[int] = []

    def __repr__(self) -> str:
        return f"Region({self.name!r}, {tuple(self.rect)!r}, color={self.color})"


class RegionMap:
    """
    Ordered collection of regions plus their adjacency.

    Adjacency is built once with compute_neighbors(); regions cannot be added
    afterwards. Colors are the only state mutated by the colorers and can be
    cleared with reset_colors().
    """

    def __init__(self, regions: Optional[List[Region]] = None):
        self.regions: List[Region] = []
        self._index: Dict[str, int] = {}
        self.neighbors_computed = False
        for region in regions or []:
            self._append(region)

    def _append(self, region: Region) -> None:
        if self.neighbors_computed:
            raise AdjacencyError(
                "Cannot add regions after adjacency has been computed",
                context={"region": region.name},
            )
        if region.name in self._index:
            raise ValueError(f"Duplicate region name: {region.name}")
        self._index[region.name] = len(self.regions)
        self.regions.append(region)

    def add_region(self, name: str, rect: Rect) -> Region:
        region = Region(name, rect)
        self._append(region)
        return region

    def __len__(self) -> int:
        return len(self.regions)

    def __iter__(self) -> Iterator[Region]:
        return iter(self.regions)

    def __getitem__(self, index: int) -> Region:
        return self.regions[index]

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def index_of(self, name: str) -> int:
        return self._index[name]

    def get(self, name: str) -> Region:
        return self.regions[self._index[name]]

    # Adjacency

    def compute_neighbors(self) -> None:
        """
        Build the neighbor relation from rectangle overlap.

        Every unordered pair is compared once and each region is appended to
        the other's neighbor list, so lists come out in input order.

        Raises:
            AdjacencyError: If neighbor lists are already populated
        """
        if self.neighbors_computed or any(r.neighbors for r in self.regions):
            raise AdjacencyError(
                "Neighbor lists are already populated; call clear_neighbors() first"
            )

        count = len(self.regions)
        edges = 0
        for i in range(count):
            first = self.regions[i]
            for j in range(i + 1, count):
                second = self.regions[j]
                if are_adjacent(first.rect, second.rect):
                    first.neighbors.append(j)
                    second.neighbors.append(i)
                    edges += 1

        self.neighbors_computed = True
        logger.debug(f"Computed adjacency: {count} regions, {edges} edges")

    def clear_neighbors(self) -> None:
        for region in self.regions:
            region.neighbors = []
        self.neighbors_computed = False

    def edges(self) -> List[Tuple[int, int]]:
        """Unordered neighbor pairs (i < j)."""
        return [
            (i, j)
            for i, region in enumerate(self.regions)
            for j in region.neighbors
            if i < j
        ]

    def degree(self, index: int) -> int:
        return len(self.regions[index].neighbors)

    # Colors

    def reset_colors(self) -> None:
        for region in self.regions:
            region.color = UNCOLORED

    def colors(self) -> List[int]:
        return [region.color for region in self.regions]

    def neighbor_colors(self, index: int) -> Set[int]:
        """Distinct non-zero colors among the neighbors of a region."""
        return {
            self.regions[n].color
            for n in self.regions[index].neighbors
            if self.regions[n].color != UNCOLORED
        }

    def saturation(self, index: int) -> int:
        return len(self.neighbor_colors(index))

    def conflicts(self) -> List[Tuple[str, str]]:
        """Neighbor pairs that share a non-zero color."""
        clashes = []
        for i, j in self.edges():
            color = self.regions[i].color
            if color != UNCOLORED and color == self.regions[j].color:
                clashes.append((self.regions[i].name, self.regions[j].name))
        return clashes

    def is_complete_coloring(self) -> bool:
        if any(not 1 <= r.color <= MAX_COLORS for r in self.regions):
            return False
        return not self.conflicts()

    def describe(self) -> str:
        """One line per region: name, neighbor names and current color."""
        lines = []
        for region in self.regions:
            names = "".join(f"{self.regions[n].name}, " for n in region.neighbors)
            lines.append(f"{region.name}: neighbors = {names} color = {region.color}")
        return "\n".join(lines) + ("\n" if lines else "")
