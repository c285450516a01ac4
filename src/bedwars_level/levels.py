"""BedWars level and prestige calculation. Pure functions, no side effects."""

from __future__ import annotations

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from bedwars_level.formatting import MinecraftFormatting, color_hex
from bedwars_level.player import ExperienceSource, PlayerRecord, extract_experience

EASY_LEVELS = 4
EXP_PER_LEVEL = 5000
EXP_PER_PRESTIGE = 96 * EXP_PER_LEVEL + 7000
LEVELS_PER_PRESTIGE = 100
MAX_PRESTIGE = 10

PRESTIGES: Mapping[int, tuple[str, MinecraftFormatting]] = MappingProxyType({
    0: ("None", MinecraftFormatting.GRAY),
    1: ("Iron", MinecraftFormatting.WHITE),
    2: ("Gold", MinecraftFormatting.GOLD),
    3: ("Diamond", MinecraftFormatting.AQUA),
    4: ("Emerald", MinecraftFormatting.DARK_GREEN),
    5: ("Sapphire", MinecraftFormatting.DARK_AQUA),
    6: ("Ruby", MinecraftFormatting.DARK_RED),
    7: ("Crystal", MinecraftFormatting.LIGHT_PURPLE),
    8: ("Opal", MinecraftFormatting.BLUE),
    9: ("Amethyst", MinecraftFormatting.DARK_PURPLE),
    10: ("Rainbow", MinecraftFormatting.WHITE),
})


@dataclass(frozen=True)
class LevelInfo:
    level: int
    prestige: int
    prestige_name: str
    prestige_color: MinecraftFormatting
    prestige_color_hex: str
    level_in_current_prestige: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "level": self.level,
            "prestige": self.prestige,
            "prestigeName": self.prestige_name,
            "prestigeColor": self.prestige_color.value,
            "prestigeColorHex": self.prestige_color_hex,
            "levelInCurrentPrestige": self.level_in_current_prestige,
        }


def easy_level_cost(index: int) -> int:
    """Experience cost of the index-th level of a prestige. 1..4 -> 500, 1000, 2000, 3500."""
    relative = index % LEVELS_PER_PRESTIGE
    return 500 + sum(k * 500 for k in range(relative))


def level_from_exp(exp: float) -> int:
    """Given total experience, return the BedWars level."""
    prestiges = math.floor(exp / EXP_PER_PRESTIGE)
    level = prestiges * LEVELS_PER_PRESTIGE
    remaining = exp - prestiges * EXP_PER_PRESTIGE

    for i in range(1, EASY_LEVELS + 1):
        cost = easy_level_cost(i)
        if remaining < cost:
            break
        level += 1
        remaining -= cost

    return level + math.floor(remaining / EXP_PER_LEVEL)


def prestige_from_level(level: int) -> int:
    """Prestige index for a level, capped at MAX_PRESTIGE."""
    return min(level // LEVELS_PER_PRESTIGE, MAX_PRESTIGE)


def prestige_name_and_color(prestige: int) -> tuple[str, MinecraftFormatting]:
    return PRESTIGES.get(prestige, PRESTIGES[0])


def level_progress(exp: float) -> tuple[int, int]:
    """Return (exp_into_current_level, exp_cost_of_next_level).

    The first EASY_LEVELS levels after every prestige boundary are cheaper,
    so the cost depends on where in the prestige the level sits.
    """
    exp = extract_experience(exp)
    remaining = exp - math.floor(exp / EXP_PER_PRESTIGE) * EXP_PER_PRESTIGE
    for i in range(1, EASY_LEVELS + 1):
        cost = easy_level_cost(i)
        if remaining < cost:
            return (math.floor(remaining), cost)
        remaining -= cost
    return (math.floor(remaining % EXP_PER_LEVEL), EXP_PER_LEVEL)


def compute_level(data: ExperienceSource | Mapping[str, Any] | float | int) -> LevelInfo:
    """Calculate the BedWars level and prestige of a player.

    `data` is a raw experience value, an ExperienceSource, or a player
    payload from the API. Raises InvalidInputError when no usable experience
    can be found.
    """
    if isinstance(data, Mapping):
        data = PlayerRecord.from_api(data)
    exp = extract_experience(data)

    level = level_from_exp(exp)
    prestige = prestige_from_level(level)
    name, color = prestige_name_and_color(prestige)

    return LevelInfo(
        level=level,
        prestige=prestige,
        prestige_name=name,
        prestige_color=color,
        prestige_color_hex=color_hex(color),
        level_in_current_prestige=level - prestige * LEVELS_PER_PRESTIGE,
    )
