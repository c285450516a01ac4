"""MCP server for bedwars-level.

Exposes the level calculation as MCP tools so an assistant can look up
BedWars levels mid-conversation.
Run via: python3 -m bedwars_level.mcp_server
"""
from __future__ import annotations

import json
import logging
from typing import Any

from mcp.server.fastmcp import FastMCP

from bedwars_level.colorize import HighLevelInfo, colorize_high_level
from bedwars_level.config import get_display_options
from bedwars_level.errors import BedwarsLevelError
from bedwars_level.levels import compute_level

logger = logging.getLogger(__name__)

mcp = FastMCP(name="bedwars-level")


def _describe(data: Any, display_brackets: bool | None, display_icon: bool | None) -> dict[str, Any]:
    defaults = get_display_options()
    if display_brackets is None:
        display_brackets = defaults["display_brackets"]
    if display_icon is None:
        display_icon = defaults["display_icon"]
    try:
        info = compute_level(data)
        rendered = colorize_high_level(
            info, display_brackets=display_brackets, display_icon=display_icon,
        )
    except BedwarsLevelError as exc:
        logger.debug("Level lookup failed: %s", exc)
        return {"error": str(exc)}
    result = info.to_dict()
    result["icon"] = rendered.icon
    result["display"] = "".join(str(c.value) for c in rendered.colours)
    result["colours"] = [{"value": c.value, "hex": c.hex} for c in rendered.colours]
    if isinstance(rendered, HighLevelInfo):
        result["highLevel"] = rendered.to_dict()
    return result


@mcp.tool()
def get_level(
    experience: float,
    display_brackets: bool | None = None,
    display_icon: bool | None = None,
) -> dict[str, Any]:
    """Get BedWars level, prestige name and colored level for an experience value."""
    return _describe(experience, display_brackets, display_icon)


@mcp.tool()
def get_player_level(
    player_json: str,
    display_brackets: bool | None = None,
    display_icon: bool | None = None,
) -> dict[str, Any]:
    """Get BedWars level for a player JSON payload as returned by the Hypixel API."""
    try:
        payload = json.loads(player_json)
    except json.JSONDecodeError as exc:
        return {"error": f"Invalid player JSON: {exc}"}
    if not isinstance(payload, dict):
        return {"error": "Player JSON must be an object."}
    return _describe(payload, display_brackets, display_icon)


def main() -> None:
    mcp.run()


if __name__ == "__main__":
    main()
