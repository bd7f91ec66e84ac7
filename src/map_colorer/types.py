from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from .core.constants import DEFAULT_EXECUTOR, EXECUTOR_KINDS, MAX_COLORS, OUTPUT_SUFFIX
from .core.error_handling import SearchBudgetExceeded, UncolorableMapError


class ToolNames(str, Enum):
    COLOR_MAP = "color_map"
    GET_PALETTE = "get_palette"


class ColoringStatus(str, Enum):
    SUCCESS = "success"
    UNCOLORABLE = "uncolorable"
    BUDGET_EXHAUSTED = "budget_exhausted"


class ColoringMethod(str, Enum):
    DSATUR = "dsatur"
    BACKTRACKING = "backtracking"


class MapOutcome(str, Enum):
    COLORED = "colored"
    UNCOLORABLE = "uncolorable"
    BUDGET_EXHAUSTED = "budget_exhausted"
    LOAD_ERROR = "load_error"
    RENDER_ERROR = "render_error"
    INTERNAL_ERROR = "internal_error"


class RegionColoring(BaseModel):
    name: str
    bounds: Tuple[int, int, int, int]
    color: int


class ColoringResult(BaseModel):
    status: ColoringStatus
    method: Optional[ColoringMethod] = None
    regions: List[RegionColoring] = Field(default_factory=list)
    solve_time: Optional[float] = None
    heuristic_failed: bool = False

    @property
    def failed(self) -> bool:
        """True when the map has no valid coloring to show."""
        return self.status != ColoringStatus.SUCCESS

    @property
    def colors_used(self) -> int:
        return len({r.color for r in self.regions if r.color > 0})

    def color_of(self, name: str) -> int:
        for region in self.regions:
            if region.name == name:
                return region.color
        raise KeyError(name)

    def raise_for_status(self) -> None:
        if self.status == ColoringStatus.UNCOLORABLE:
            raise UncolorableMapError(
                f"Map needs more than {MAX_COLORS} colors",
                context={"regions": len(self.regions)},
            )
        if self.status == ColoringStatus.BUDGET_EXHAUSTED:
            raise SearchBudgetExceeded(
                "No verdict reached within the search budget",
                context={"regions": len(self.regions)},
            )


class ColoringConfig(BaseModel):
    node_limit: Optional[int] = None
    output_suffix: str = OUTPUT_SUFFIX
    executor: str = DEFAULT_EXECUTOR
    max_workers: Optional[int] = None
    log_level: str = "INFO"

    @field_validator("node_limit", "max_workers")
    @classmethod
    def _positive(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 1:
            raise ValueError("must be a positive integer")
        return value

    @field_validator("executor")
    @classmethod
    def _known_executor(cls, value: str) -> str:
        if value not in EXECUTOR_KINDS:
            raise ValueError(f"must be one of: {', '.join(EXECUTOR_KINDS)}")
        return value

    @field_validator("output_suffix")
    @classmethod
    def _non_empty_suffix(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {value}")
        return level


class MapReport(BaseModel):
    path: str
    outcome: MapOutcome
    output_path: Optional[str] = None
    result: Optional[ColoringResult] = None
    error: Optional[Dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        return self.outcome == MapOutcome.COLORED
