import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Optional, Union

try:
    import tomllib
except ImportError:
    import tomli as tomllib

logger = logging.getLogger(__name__)

# Color budget
MAX_COLORS = 4
UNCOLORED = 0

# Palette index used when a map has no valid coloring or a color is out of range
SENTINEL_COLOR = -1

# Index -> SVG fill. Read-only.
PALETTE = MappingProxyType(
    {
        SENTINEL_COLOR: "magenta",
        UNCOLORED: "#e9ecef",  # light grey
        1: "green",
        2: "yellow",
        3: "orange",
        4: "red",
    }
)

# Output file suffix appended to each input path
OUTPUT_SUFFIX = ".svg"

# Backtracking node budget (None = unbounded)
NODE_LIMIT: Optional[int] = None

# Parallel runner
EXECUTOR_KINDS = ("thread", "process")
DEFAULT_EXECUTOR = "thread"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Table read from a TOML config file
CONFIG_TABLE = "map-colorer"


def read_config_file(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read the map-colorer table from a TOML file.

    Both a dedicated config file with a top-level ``[map-colorer]`` table and a
    ``pyproject.toml`` with ``[tool.map-colorer]`` are accepted.

    Args:
        path: Path to the TOML file

    Returns:
        The raw settings dictionary (empty if the file has no map-colorer table)

    Raises:
        OSError: If the file cannot be read
        tomllib.TOMLDecodeError: If the file is not valid TOML
    """
    with open(path, "rb") as f:
        data = tomllib.load(f)

    if CONFIG_TABLE in data:
        settings = data[CONFIG_TABLE]
    else:
        settings = data.get("tool", {}).get(CONFIG_TABLE, {})

    logger.debug(f"Read {len(settings)} setting(s) from {path}")
    return dict(settings)
