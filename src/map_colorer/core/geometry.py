"""
Rectangle geometry used to derive region adjacency.
"""

from typing import NamedTuple


class Rect(NamedTuple):
    """Axis-aligned rectangle with integer bounds."""

    xmin: int
    ymin: int
    xmax: int
    ymax: int

    @property
    def width(self) -> int:
        return self.xmax - self.xmin

    @property
    def height(self) -> int:
        return self.ymax - self.ymin


def axis_inset(low_a: int, high_a: int, low_b: int, high_b: int) -> int:
    """Length of the 1-D intersection of two intervals; negative when disjoint."""
    return min(high_a, high_b) - max(low_a, low_b)


def overlap(first: Rect, second: Rect) -> int:
    """
    Overlap score of two rectangles.

    The score is the sum of the X and Y insets when the rectangles share a
    positive area, and 0 otherwise. Rectangles touching along an edge or at a
    corner have an inset of exactly 0 on one axis and score 0.

    Args:
        first: First rectangle
        second: Second rectangle

    Returns:
        Non-negative overlap score
    """
    inset_x = axis_inset(first.xmin, first.xmax, second.xmin, second.xmax)
    inset_y = axis_inset(first.ymin, first.ymax, second.ymin, second.ymax)
    if inset_x > 0 and inset_y > 0:
        return inset_x + inset_y
    return 0


def are_adjacent(first: Rect, second: Rect) -> bool:
    return overlap(first, second) > 0


def bounding_box(rects) -> Rect:
    """Smallest rectangle containing every rectangle in ``rects`` (zero rect if empty)."""
    rects = list(rects)
    if not rects:
        return Rect(0, 0, 0, 0)
    return Rect(
        min(r.xmin for r in rects),
        min(r.ymin for r in rects),
        max(r.xmax for r in rects),
        max(r.ymax for r in rects),
    )
