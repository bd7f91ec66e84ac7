"""
SVG rendering of a colored map.
"""

import logging
from pathlib import Path
from typing import Mapping, Optional, Union
from xml.sax.saxutils import escape, quoteattr

from .core.constants import PALETTE, SENTINEL_COLOR
from .core.error_handling import RenderError
from .core.geometry import Rect, bounding_box
from .types import ColoringResult

logger = logging.getLogger(__name__)

SVG_HEADER = (
    '<svg version="1.1" viewBox="{x} {y} {width} {height}" '
    'width="{width}" height="{height}" xmlns="http://www.w3.org/2000/svg">'
)


def fill_for(color: int, failed: bool = False, palette: Mapping[int, str] = PALETTE) -> str:
    """Palette entry for a color index, or the sentinel for failed maps and unknown indices."""
    if failed:
        return palette[SENTINEL_COLOR]
    return palette.get(color, palette[SENTINEL_COLOR])


def render_svg(result: ColoringResult, palette: Mapping[int, str] = PALETTE) -> str:
    """
    Render a coloring result as an SVG document.

    Every region is drawn as a black-stroked rectangle filled with its palette
    color and labelled with its name. When the map has no valid coloring
    every region uses the sentinel color.

    Args:
        result: Output of the coloring orchestrator
        palette: Mapping from color index to SVG fill

    Returns:
        The SVG document text
    """
    box = bounding_box(Rect(*r.bounds) for r in result.regions)
    lines = [
        SVG_HEADER.format(x=box.xmin, y=box.ymin, width=box.width, height=box.height)
    ]

    for region in result.regions:
        rect = Rect(*region.bounds)
        fill = fill_for(region.color, result.failed, palette)
        lines.append(
            f'<rect x="{rect.xmin}" y="{rect.ymin}" width="{rect.width}" '
            f'height="{rect.height}" fill={quoteattr(fill)} stroke="black" />'
        )
        lines.append(
            f'<text x="{rect.xmin + 1}" y="{rect.ymin + 10}">{escape(region.name)}</text>'
        )

    lines.append("</svg>")
    return "\n".join(lines) + "\n"


def write_svg(
    result: ColoringResult,
    path: Union[str, Path],
    palette: Optional[Mapping[int, str]] = None,
) -> Path:
    """
    Render and write an SVG file.

    Raises:
        RenderError: If the file cannot be written
    """
    path = Path(path)
    svg = render_svg(result, palette or PALETTE)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(svg)
    except OSError as e:
        raise RenderError(
            f"Cannot write SVG output: {e.strerror or e}",
            original_error=e,
            context={"output": str(path)},
        ) from e
    logger.debug(f"Wrote {path}")
    return path
