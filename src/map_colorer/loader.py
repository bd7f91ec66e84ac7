"""
Region source loader.

A region source is a sequence of lines ``name xmin ymin xmax ymax``. Fields
are separated by whitespace and blank lines are skipped. Any malformed record
makes the whole source fail with LoadError.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, Tuple, Union

from .core.error_handling import LoadError, load_error_handler
from .core.geometry import Rect
from .core.region_graph import RegionMap
from .core.validation import ValidationError, validate_rect, validate_region_name

logger = logging.getLogger(__name__)

# Optional sign and ASCII digits; int() alone also accepts "1_0"
_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_bound(word: str) -> int:
    if not _INTEGER.fullmatch(word):
        raise ValueError(f"invalid literal for int() with base 10: {word!r}")
    return int(word)


@load_error_handler
def parse_record(line: str, *, source: str = "<string>", line_number: int = 0) -> Tuple[str, Rect]:
    """
    Parse one region record.

    Args:
        line: A non-blank source line
        source: Name of the source, for error context
        line_number: 1-based line number, for error context

    Returns:
        (name, rect) tuple

    Raises:
        LoadError: If fields are missing, bounds are not integers or the
            rectangle is inverted
    """
    words = line.split()
    name = words[0]
    rect = Rect(*(_parse_bound(words[i]) for i in range(1, 5)))
    try:
        validate_rect(rect)
    except ValidationError as e:
        raise LoadError(
            str(e), original_error=e, context={"source": source, "line": line_number}
        ) from e
    return name, rect


def parse_regions(lines: Union[str, Iterable[str]], source: str = "<string>") -> RegionMap:
    """
    Build a RegionMap from region source text.

    Args:
        lines: Source text or an iterable of lines
        source: Name of the source, for error context

    Returns:
        RegionMap in input order, adjacency not yet computed

    Raises:
        LoadError: On the first malformed record or duplicate name
    """
    if isinstance(lines, str):
        lines = lines.splitlines()

    region_map = RegionMap()
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        name, rect = parse_record(line, source=source, line_number=line_number)
        try:
            validate_region_name(name, region_map)
        except ValidationError as e:
            raise LoadError(
                str(e), original_error=e, context={"source": source, "line": line_number}
            ) from e
        region_map.add_region(name, rect)

    logger.debug(f"Loaded {len(region_map)} regions from {source}")
    return region_map


def load_map(path: Union[str, Path]) -> RegionMap:
    """
    Load a region source file.

    Raises:
        LoadError: If the file cannot be read or contains a malformed record
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise LoadError(
            f"Cannot read region source: {e.strerror or e}",
            original_error=e,
            context={"source": str(path)},
        ) from e
    except UnicodeDecodeError as e:
        raise LoadError(
            f"Region source is not valid UTF-8 (byte offset {e.start})",
            original_error=e,
            context={"source": str(path)},
        ) from e
    return parse_regions(text, source=str(path))
