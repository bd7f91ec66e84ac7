"""
Map Colorer - four-color rectangular maps and render them as SVG.
"""

# Define the version
__version__ = "1.0.0"

# Import core components
from .core.geometry import Rect, overlap
from .core.region_graph import Region, RegionMap
from .core.dsatur import DSaturColorer
from .core.backtracking import BacktrackingColorer
from .core.orchestrator import ColoringOrchestrator, ColoringState, color_map

# Import I/O collaborators
from .loader import load_map, parse_regions
from .svg import render_svg, write_svg
from .types import ColoringConfig, ColoringResult, ColoringStatus

__all__ = [
    "Rect",
    "overlap",
    "Region",
    "RegionMap",
    "DSaturColorer",
    "BacktrackingColorer",
    "ColoringOrchestrator",
    "ColoringState",
    "color_map",
    "load_map",
    "parse_regions",
    "render_svg",
    "write_svg",
    "ColoringConfig",
    "ColoringResult",
    "ColoringStatus",
    "__version__",
]
