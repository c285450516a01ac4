"""Minecraft chat colors and their display hex values."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from bedwars_level.errors import UnknownColorError


class MinecraftFormatting(str, Enum):
    BLACK = "§0"
    DARK_BLUE = "§1"
    DARK_GREEN = "§2"
    DARK_AQUA = "§3"
    DARK_RED = "§4"
    DARK_PURPLE = "§5"
    GOLD = "§6"
    GRAY = "§7"
    DARK_GRAY = "§8"
    BLUE = "§9"
    GREEN = "§a"
    AQUA = "§b"
    RED = "§c"
    LIGHT_PURPLE = "§d"
    YELLOW = "§e"
    WHITE = "§f"


MINECRAFT_COLOR_HEX: Mapping[MinecraftFormatting, str] = MappingProxyType({
    MinecraftFormatting.BLACK: "#000000",
    MinecraftFormatting.DARK_BLUE: "#0000AA",
    MinecraftFormatting.DARK_GREEN: "#00AA00",
    MinecraftFormatting.DARK_AQUA: "#00AAAA",
    MinecraftFormatting.DARK_RED: "#AA0000",
    MinecraftFormatting.DARK_PURPLE: "#AA00AA",
    MinecraftFormatting.GOLD: "#FFAA00",
    MinecraftFormatting.GRAY: "#AAAAAA",
    MinecraftFormatting.DARK_GRAY: "#555555",
    MinecraftFormatting.BLUE: "#5555FF",
    MinecraftFormatting.GREEN: "#55FF55",
    MinecraftFormatting.AQUA: "#55FFFF",
    MinecraftFormatting.RED: "#FF5555",
    MinecraftFormatting.LIGHT_PURPLE: "#FF55FF",
    MinecraftFormatting.YELLOW: "#FFFF55",
    MinecraftFormatting.WHITE: "#FFFFFF",
})


def _to_formatting(color: MinecraftFormatting | str) -> MinecraftFormatting:
    if isinstance(color, MinecraftFormatting):
        return color
    try:
        return MinecraftFormatting(color)
    except ValueError:
        pass
    try:
        return MinecraftFormatting[str(color).upper()]
    except KeyError:
        raise UnknownColorError(f"Unknown Minecraft color: {color!r}") from None


def color_hex(color: MinecraftFormatting | str) -> str:
    """Return the display hex for a color member, its '§x' code, or its name.

    Raises UnknownColorError if the color is not registered.
    """
    formatting = _to_formatting(color)
    try:
        return MINECRAFT_COLOR_HEX[formatting]
    except KeyError:
        raise UnknownColorError(f"No hex value registered for {formatting.name}") from None
