"""
Validation helpers for region records, colorings and tool arguments.
"""

import logging
from typing import Any, Container, Dict, List, Optional

from .constants import MAX_COLORS, UNCOLORED
from .geometry import Rect
from .region_graph import RegionMap

logger = logging.getLogger(__name__)

# Maximum size of a region source accepted through the tool server
MAX_SOURCE_LENGTH = 1_000_000


class ValidationError(Exception):
    """Base exception for validation errors."""

    pass


def validate_region_name(name: Any, existing: Optional[Container[str]] = None) -> None:
    """
    Validate a region name.

    Args:
        name: The name to validate
        existing: Optional container of names already present in the map

    Raises:
        ValidationError: If the name is empty or already used
    """
    if not isinstance(name, str) or not name:
        msg = f"Region name must be a non-empty string, got {name!r}"
        logger.error(msg)
        raise ValidationError(msg)

    if existing is not None and name in existing:
        msg = f"Duplicate region name: {name}"
        logger.error(msg)
        raise ValidationError(msg)


def validate_rect(rect: Rect) -> None:
    """
    Validate rectangle bounds.

    Raises:
        ValidationError: If xmin > xmax or ymin > ymax
    """
    if rect.xmin > rect.xmax:
        msg = f"xmin ({rect.xmin}) is greater than xmax ({rect.xmax})"
        logger.error(msg)
        raise ValidationError(msg)
    if rect.ymin > rect.ymax:
        msg = f"ymin ({rect.ymin}) is greater than ymax ({rect.ymax})"
        logger.error(msg)
        raise ValidationError(msg)


def validate_source(content: Any) -> None:
    """
    Validate region source text received from a client.

    Raises:
        ValidationError: If the content is not a string or is too large
    """
    if not isinstance(content, str):
        msg = f"Region source must be a string, got {type(content).__name__}"
        logger.error(msg)
        raise ValidationError(msg)

    if len(content) > MAX_SOURCE_LENGTH:
        msg = (
            f"Region source exceeds maximum length of {MAX_SOURCE_LENGTH} characters "
            f"(got {len(content)} characters)"
        )
        logger.error(msg)
        raise ValidationError(msg)


def validate_node_limit(node_limit: Any) -> None:
    """
    Validate a backtracking node limit (None means unbounded).

    Raises:
        ValidationError: If the limit is not a positive integer
    """
    if node_limit is None:
        return
    if isinstance(node_limit, bool) or not isinstance(node_limit, int):
        msg = f"Node limit must be an integer, got {type(node_limit).__name__}"
        logger.error(msg)
        raise ValidationError(msg)
    if node_limit < 1:
        msg = f"Node limit must be a positive integer, got {node_limit}"
        logger.error(msg)
        raise ValidationError(msg)


def validate_coloring(region_map: RegionMap, max_colors: int = MAX_COLORS) -> List[str]:
    """
    Check a finished coloring.

    Args:
        region_map: A map with adjacency built
        max_colors: Size of the color budget

    Returns:
        List of problems (empty if the coloring is complete and proper)
    """
    errors = []
    for region in region_map:
        if region.color == UNCOLORED:
            errors.append(f"Region {region.name} is uncolored")
        elif not 1 <= region.color <= max_colors:
            errors.append(f"Region {region.name} has out-of-range color {region.color}")

    for first, second in region_map.conflicts():
        errors.append(f"Neighbors {first} and {second} share a color")

    return errors


def get_standardized_response(
    success: bool, message: str, error: Optional[str] = None, **kwargs
) -> Dict[str, Any]:
    """
    Create a standardized response dictionary.

    Args:
        success: Whether the operation was successful
        message: A message describing the result
        error: An optional error message
        **kwargs: Additional keyword arguments to include in the response

    Returns:
        A dictionary with standardized response fields
    """
    response = {"message": message, "success": success}

    if error:
        response["error"] = error

    response.update(kwargs)

    return response
