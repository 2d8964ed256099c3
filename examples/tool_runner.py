"""
Lightweight MCP tool runner for chuk-mcp-maps.

Runs tools directly without MCP transport — useful for testing and demos.
Requires GOOGLE_MAPS_API_KEY in the environment.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any

from chuk_mcp_maps.async_server import register_all_tools
from chuk_mcp_maps.core.google_maps import GoogleMapsClient, load_api_key
from chuk_mcp_maps.core.maps import GoogleMaps


class _MiniMCP:
    """Minimal MCP-like interface for capturing tool registrations."""

    def __init__(self):
        self._tools: dict[str, Any] = {}

    def tool(self):
        def decorator(fn):
            self._tools[fn.__name__] = fn
            return fn

        return decorator

    def get_tool(self, name: str):
        return self._tools[name]


class ToolRunner:
    """Run maps MCP tools directly without transport."""

    def __init__(self):
        self._mcp = _MiniMCP()
        self.maps = GoogleMaps(GoogleMapsClient(api_key=load_api_key()))
        register_all_tools(self._mcp, self.maps)

    @property
    def tool_names(self) -> list[str]:
        return list(self._mcp._tools.keys())

    async def run(self, tool_name: str, **kwargs) -> dict:
        """Run a tool and return parsed JSON result."""
        fn = self._mcp.get_tool(tool_name)
        raw = await fn(**kwargs)
        return json.loads(raw)

    async def run_text(self, tool_name: str, **kwargs) -> str:
        """Run a tool and return text output."""
        fn = self._mcp.get_tool(tool_name)
        return await fn(output_mode="text", **kwargs)


def _banner(title: str) -> None:
    print("=" * 60)
    print(title)
    print("=" * 60)


async def main():
    """Demo: exercise every maps tool."""
    runner = ToolRunner()

    print(f"Available tools ({len(runner.tool_names)}): {runner.tool_names}\n")

    _banner("1. maps_geocode — Address to coordinates")
    result = await runner.run("maps_geocode", address="1600 Amphitheatre Parkway, Mountain View")
    print(f"  {result}")
    place_id = result.get("place_id")
    print()

    _banner("2. maps_reverse_geocode — Coordinates to address")
    print(await runner.run_text("maps_reverse_geocode", latitude=48.8584, longitude=2.2945))
    print()

    _banner("3. maps_search_places — Text search near a point")
    print(
        await runner.run_text(
            "maps_search_places",
            query="coffee",
            latitude=37.7749,
            longitude=-122.4194,
            radius=1000,
        )
    )
    print()

    if place_id:
        _banner("4. maps_place_details — Details for a place_id")
        print(await runner.run_text("maps_place_details", place_id=place_id))
        print()

    _banner("5. maps_distance_matrix — Travel times")
    print(
        await runner.run_text(
            "maps_distance_matrix",
            origins=["Boulder, CO", "Denver, CO"],
            destinations=["Colorado Springs, CO"],
            mode="driving",
        )
    )
    print()

    _banner("6. maps_directions — Step-by-step route")
    print(
        await runner.run_text(
            "maps_directions",
            origin="Union Square, SF",
            destination="Ferry Building, SF",
            mode="walking",
        )
    )
    print()

    _banner("7. maps_elevation — Elevation of points")
    print(
        await runner.run_text(
            "maps_elevation",
            locations=[
                {"latitude": 39.7392, "longitude": -104.9903},
                {"latitude": 36.5785, "longitude": -118.2923},
            ],
        )
    )
    print()

    _banner("8. maps_capabilities — Full capabilities")
    result = await runner.run("maps_capabilities")
    print(f"  tools: {result['tool_count']}")
    print(f"  guidance: {result['llm_guidance'][:80]}...")
    print()

    await runner.maps.close()


if __name__ == "__main__":
    asyncio.run(main())
