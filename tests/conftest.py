"""
Pytest configuration and shared fixtures.
"""
import pytest
import os
import sys

# Ensure the src directory is in the path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from map_colorer.core.geometry import Rect
from map_colorer.core.region_graph import RegionMap


def build_map(rects, compute=True):
    """Build a RegionMap from a list of (name, (xmin, ymin, xmax, ymax))."""
    region_map = RegionMap()
    for name, bounds in rects:
        region_map.add_region(name, Rect(*bounds))
    if compute:
        region_map.compute_neighbors()
    return region_map


def clique_rects(count):
    """``count`` rectangles that all overlap each other with positive area."""
    return [(f"R{i}", (i, i, 10 + i, 10 + i)) for i in range(count)]


@pytest.fixture
def triangle_map():
    """Three mutually overlapping rectangles."""
    return build_map(clique_rects(3))


@pytest.fixture
def k5_map():
    """Five mutually overlapping rectangles (needs five colors)."""
    return build_map(clique_rects(5))


@pytest.fixture
def disjoint_map():
    return build_map([("A", (0, 0, 10, 10)), ("B", (20, 20, 30, 30))])


@pytest.fixture
def grid_map():
    """A 3x3 grid of cells that overlap their horizontal and vertical neighbors."""
    rects = []
    for row in range(3):
        for col in range(3):
            x, y = col * 10, row * 10
            rects.append((f"c{row}{col}", (x, y, x + 12, y + 12)))
    return build_map(rects)
