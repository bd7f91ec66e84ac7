"""
Error handling for map coloring.

This module defines the exception hierarchy used across the package:
- Load errors for malformed region sources (fatal for one map only)
- Adjacency errors for misuse of the region graph
- Search budget and uncolorable errors reported by the exact colorer
- Render errors raised while writing SVG output

It also provides a decorator that translates low-level parsing exceptions into
LoadError with line context attached.
"""

import functools
import logging
from typing import Any, Callable, Dict, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Friendly messages for the parse failures we expect while reading records
EXCEPTION_MESSAGES = {
    "ValueError": {
        "invalid literal for int()": "Rectangle bounds must be integers",
    },
    "IndexError": {
        "list index out of range": "Expected 'name xmin ymin xmax ymax'",
    },
}


class MapColorerError(Exception):
    """Base class for map coloring errors, with optional context."""

    def __init__(
        self,
        message: str,
        original_error: Optional[Exception] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize the error with enhanced context.

        Args:
            message: User-friendly error message
            original_error: The original exception that was caught
            context: Additional context about the error (e.g., source, line number)
        """
        self.message = message
        self.original_error = original_error
        self.context = context or {}

        enhanced_message = message
        if self.context:
            enhanced_message += "\n\nContext:"
            for key, value in self.context.items():
                enhanced_message += f"\n- {key}: {value}"

        if original_error:
            error_type = type(original_error).__name__
            enhanced_message += f"\n\nOriginal error ({error_type}): {original_error}"

        super().__init__(enhanced_message)


class LoadError(MapColorerError):
    """A region source could not be parsed."""


class AdjacencyError(MapColorerError):
    """The region graph was used in a way that would corrupt neighbor lists."""


class SearchBudgetExceeded(MapColorerError):
    """The exact colorer hit its node limit before reaching a verdict."""


class UncolorableMapError(MapColorerError):
    """The map provably needs more than four colors."""


class RenderError(MapColorerError):
    """SVG output could not be written."""


def load_error_handler(func: Callable[..., T]) -> Callable[..., T]:
    """
    Decorator translating record parse failures into LoadError.

    The wrapped function must accept ``source`` and ``line_number`` keyword
    arguments; they are attached to the error context.

    Args:
        func: The parsing function to wrap

    Returns:
        Wrapped function raising LoadError on malformed input
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        try:
            return func(*args, **kwargs)
        except LoadError:
            raise
        except (ValueError, IndexError) as e:
            error_type = type(e).__name__
            error_msg = str(e)

            friendly_message = None
            for pattern, message in EXCEPTION_MESSAGES.get(error_type, {}).items():
                if pattern in error_msg:
                    friendly_message = message
                    break
            if not friendly_message:
                friendly_message = f"Malformed region record: {error_msg}"

            context = {
                "source": kwargs.get("source", "<unknown>"),
                "line": kwargs.get("line_number", "?"),
            }
            logger.debug(f"{func.__name__} failed: {error_type}: {error_msg}")
            raise LoadError(friendly_message, original_error=e, context=context) from e

    return wrapper


def format_error(error: Exception) -> Dict[str, Any]:
    """
    Format an error for inclusion in a report or tool response.

    Args:
        error: The exception to format

    Returns:
        Dictionary with error information
    """
    if isinstance(error, MapColorerError):
        result = {
            "error_type": type(error).__name__,
            "error_message": error.message,
        }
        if error.context:
            result["error_context"] = {k: str(v) for k, v in error.context.items()}
        return result

    return {
        "error_type": type(error).__name__,
        "error_message": str(error),
    }
