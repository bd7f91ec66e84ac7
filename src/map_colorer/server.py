import asyncio
import json
import logging
import sys
from importlib.metadata import version
from typing import Any, Dict, List

import mcp.server.stdio
import mcp.types as types
from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions

from .core.constants import LOG_FORMAT, MAX_COLORS, PALETTE
from .core.error_handling import LoadError, format_error
from .core.orchestrator import ColoringOrchestrator
from .core.validation import (
    ValidationError,
    get_standardized_response,
    validate_node_limit,
    validate_source,
)
from .loader import parse_regions
from .svg import render_svg
from .types import ColoringStatus, ToolNames

logger = logging.getLogger(__name__)

try:
    version_str = version("map-colorer")
except Exception:
    version_str = "0.0.0"


def color_map_tool(arguments: Dict[str, Any]) -> Dict[str, Any]:
    """
    Handle a color_map tool call.

    Args:
        arguments: Tool arguments with ``regions`` (source text) and optional
            ``render`` (bool) and ``node_limit`` (int)

    Returns:
        A standardized response with the coloring result, and the SVG
        document when rendering was requested
    """
    if "regions" not in arguments:
        return get_standardized_response(
            False, "Tool execution failed", error="Missing required parameter 'regions'"
        )

    try:
        validate_source(arguments["regions"])
        validate_node_limit(arguments.get("node_limit"))
        region_map = parse_regions(arguments["regions"], source="<tool>")
    except ValidationError as e:
        return get_standardized_response(False, "Invalid arguments", error=str(e))
    except LoadError as e:
        return get_standardized_response(
            False, "Invalid region source", error=e.message, details=format_error(e)
        )

    orchestrator = ColoringOrchestrator(node_limit=arguments.get("node_limit"))
    result = orchestrator.run(region_map, label="<tool>")

    if result.failed:
        message = f"Map needs more than {MAX_COLORS} colors"
        if result.status == ColoringStatus.BUDGET_EXHAUSTED:
            message = "No verdict reached within the node limit"
    else:
        message = f"Map colored by {result.method.value} with {result.colors_used} color(s)"

    response = get_standardized_response(
        not result.failed, message, result=result.model_dump(mode="json")
    )
    if arguments.get("render"):
        response["svg"] = render_svg(result)
    return response


def palette_tool() -> Dict[str, Any]:
    return get_standardized_response(
        True, "Palette", palette={str(k): v for k, v in PALETTE.items()}
    )


async def serve() -> None:
    server = Server("map-colorer")

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [
            types.Tool(
                name=ToolNames.COLOR_MAP.value,
                description=(
                    f"Color a map of rectangles with at most {MAX_COLORS} colors so that "
                    "overlapping rectangles differ. Required parameter: 'regions', one "
                    "'name xmin ymin xmax ymax' record per line."
                ),
                inputSchema={
                    "type": "object",
                    "properties": {
                        "regions": {"type": "string"},
                        "render": {
                            "type": "boolean",
                            "description": "Include an SVG rendering of the map",
                        },
                        "node_limit": {
                            "type": "integer",
                            "description": "Maximum backtracking assignments",
                        },
                    },
                    "required": ["regions"],
                },
            ),
            types.Tool(
                name=ToolNames.GET_PALETTE.value,
                description="Fetch the mapping from color index to SVG fill.",
                inputSchema={"type": "object", "properties": {}},
            ),
        ]

    @server.call_tool()
    async def handle_call_tool(name: str, arguments: dict) -> List[types.TextContent]:
        match name:
            case ToolNames.COLOR_MAP.value:
                response = await asyncio.to_thread(color_map_tool, arguments or {})
            case ToolNames.GET_PALETTE.value:
                response = palette_tool()
            case _:
                response = get_standardized_response(
                    False, "Tool execution failed", error=f"Unknown tool: {name}"
                )
        return [types.TextContent(type="text", text=json.dumps(response))]

    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        try:
            await server.run(
                read_stream,
                write_stream,
                InitializationOptions(
                    server_name="map-colorer",
                    server_version=version_str,
                    capabilities=server.get_capabilities(
                        notification_options=NotificationOptions(),
                        experimental_capabilities={},
                    ),
                ),
            )
        except asyncio.CancelledError:
            logger.info("MCP server operation cancelled, shutting down gracefully")
            raise


def main() -> int:
    import argparse

    parser = argparse.ArgumentParser(description="Map Colorer MCP server")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    # stdout carries the protocol, so logs go to stderr
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
    logger.info(f"Starting map-colorer server {version_str}")

    asyncio.run(serve())
    return 0


if __name__ == "__main__":
    sys.exit(main())
