from abc import ABC, abstractmethod
from typing import Optional

from .region_graph import RegionMap


class Colorer(ABC):
    """
    Abstract base class for colorers.
    This class defines the interface that all coloring strategies must follow.
    """

    name = "colorer"

    def __init__(self):
        """
        Initialize a new colorer.
        """
        self.last_color_time: Optional[float] = None

    @abstractmethod
    def color(self, region_map: RegionMap) -> bool:
        """
        Assign colors to every region of the map in place.

        Args:
            region_map: A map whose adjacency is built and whose colors are all 0

        Returns:
            True if the map ends with a valid coloring within the color budget
        """
        pass
