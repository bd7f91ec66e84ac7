"""
Map Colorer core - adjacency, region graph and colorers.
"""

from .geometry import Rect, overlap, are_adjacent
from .region_graph import Region, RegionMap
from .base_colorer import Colorer
from .dsatur import DSaturColorer
from .backtracking import BacktrackingColorer

__all__ = [
    "Rect",
    "overlap",
    "are_adjacent",
    "Region",
    "RegionMap",
    "Colorer",
    "DSaturColorer",
    "BacktrackingColorer",
]
