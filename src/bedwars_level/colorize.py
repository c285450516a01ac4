"""Colored rendering of BedWars levels.

Levels below 1000 render in their prestige color as a single value. From 1000
up every digit gets its own color from the matching prestige band. Both can
carry brackets and the prestige icon.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from bedwars_level.errors import RenderError
from bedwars_level.formatting import color_hex
from bedwars_level.levels import LevelInfo
from bedwars_level.prestiges import DIGIT_COLOR_COUNT, select_band

HIGH_LEVEL = 1000

ICON_STAR = "✫"
ICON_CIRCLED_STAR = "✪"
ICON_FLOWER = "❀"


@dataclass(frozen=True)
class ColoredValue:
    value: int | str
    hex: str


@dataclass(frozen=True)
class HighLevelDisplay:
    """Single-color rendering for levels below 1000."""

    icon: str
    prestige_name: str
    colours: tuple[ColoredValue, ...]


@dataclass(frozen=True)
class HighLevelInfo:
    """Per-digit rendering for levels 1000 and up."""

    level: int
    prestige: int
    prestige_name: str
    icon: str
    colours: tuple[ColoredValue, ...]
    level_in_current_prestige: int

    @property
    def prestige_color_hex(self) -> tuple[str, ...]:
        return tuple(c.hex for c in self.colours)

    def to_dict(self) -> dict[str, Any]:
        return {
            "level": self.level,
            "prestige": self.prestige,
            "prestigeName": self.prestige_name,
            "icon": self.icon,
            "prestigeColor": [{"value": c.value, "hex": c.hex} for c in self.colours],
            "prestigeColorHex": list(self.prestige_color_hex),
            "levelInCurrentPrestige": self.level_in_current_prestige,
        }


def icon_for_level(level: int) -> str:
    if level >= 2100:
        return ICON_FLOWER
    if level >= 1100:
        return ICON_CIRCLED_STAR
    return ICON_STAR


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _colorize_low_level(
    info: LevelInfo, icon: str, display_brackets: bool, display_icon: bool
) -> HighLevelDisplay:
    hex_value = info.prestige_color_hex
    colours: list[ColoredValue] = []
    if display_brackets:
        colours.append(ColoredValue("[", hex_value))
    colours.append(ColoredValue(info.level, hex_value))
    if display_icon:
        colours.append(ColoredValue(icon, hex_value))
    if display_brackets:
        colours.append(ColoredValue("]", hex_value))
    return HighLevelDisplay(icon=icon, prestige_name="", colours=tuple(colours))


def colorize_high_level(
    info: LevelInfo,
    *,
    display_brackets: bool = False,
    display_icon: bool = False,
) -> HighLevelDisplay | HighLevelInfo:
    """Render a level as a sequence of (value, hex) pairs.

    Returns a HighLevelDisplay for levels below 1000 and a HighLevelInfo
    otherwise. Raises RenderError if the level has more digits than a band
    has colors.
    """
    level = info.level
    icon = icon_for_level(level)

    if level < HIGH_LEVEL:
        return _colorize_low_level(info, icon, display_brackets, display_icon)

    digits = [int(ch) for ch in str(level)]
    if len(digits) > DIGIT_COLOR_COUNT:
        raise RenderError(
            f"Level {level} has {len(digits)} digits; prestige bands color at most {DIGIT_COLOR_COUNT}."
        )
    band = select_band(level)

    colours: list[ColoredValue] = []
    if display_brackets:
        colours.append(ColoredValue("[", color_hex(band.bracket_colors.beginning)))
    for digit, color in zip(digits, band.digit_colors):
        colours.append(ColoredValue(digit, color_hex(color)))
    if display_icon:
        # Icon takes the color of the last digit
        colours.append(ColoredValue(icon, colours[-1].hex))
    if display_brackets:
        colours.append(ColoredValue("]", color_hex(band.bracket_colors.end)))

    return HighLevelInfo(
        level=level,
        prestige=_round_half_up(level / 1000) * 10,
        prestige_name=band.name,
        icon=icon,
        colours=tuple(colours),
        level_in_current_prestige=info.level_in_current_prestige,
    )
